"""SpendCube pipeline core: skill-scoped taxonomy context, progress streaming, checkpoints."""

__version__ = "0.1.0"
