"""regret-log: a quiet CLI to record and review regrets."""

__version__ = "0.1.0"
