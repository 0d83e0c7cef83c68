"""Main Click application root."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from spendcube.core.config import Config, get_core_config, set_core_config
from spendcube.core.records import SpendRecord
from spendcube.service.runtime import PipelineRuntime
from spendcube.skills import DEFAULT_REGISTRY, SkillDetector

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to settings.toml",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """SpendCube CLI - skill detection and checkpoint tooling."""
    ctx.ensure_object(dict)
    set_core_config(Config.load(config_path))
    cfg = get_core_config()

    level = logging.DEBUG if verbose or cfg.debug else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")
    logging.getLogger("psycopg").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@cli.command("detect-skills")
@click.argument("records_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--scores", is_flag=True, help="Include accumulated scores")
def detect_skills(records_file: Path, scores: bool):
    """Print the skills selected for a JSON array of spend records."""
    try:
        raw = json.loads(records_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {records_file}: {e}") from e
    if not isinstance(raw, list):
        raise click.ClickException("Records file must contain a JSON array")

    records = [SpendRecord.model_validate(item) for item in raw]
    detector = SkillDetector(DEFAULT_REGISTRY)
    selected = detector.detect(records)
    score_map = detector.score(records) if scores else {}

    out = []
    for skill in selected:
        item = {"id": skill.id, "name": skill.name, "segments": list(skill.segments)}
        if scores:
            item["score"] = score_map.get(skill.id, 0.0)
        out.append(item)
    click.echo(json.dumps(out, indent=2))


@cli.command("segments")
def segments():
    """List every UNSPSC segment covered by a skill."""
    for seg in DEFAULT_REGISTRY.all_covered_segments():
        names = ", ".join(s.id for s in DEFAULT_REGISTRY.by_segments([seg]))
        click.echo(f"{seg}\t{names}")


@cli.command("checkpoint-health")
def checkpoint_health():
    """Probe the configured checkpoint backend (exit 1 when unhealthy)."""

    async def _probe():
        async with PipelineRuntime.create(get_core_config()) as runtime:
            return await runtime.checkpoints.health()

    result = asyncio.run(_probe())
    click.echo(json.dumps(result.to_dict()))
    if not result.healthy:
        sys.exit(1)
