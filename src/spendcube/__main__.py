"""SpendCube CLI entry point.

    python -m spendcube detect-skills records.json
"""

from spendcube.cli import cli

if __name__ == "__main__":
    cli()
