"""Service module exports."""

from . import export_csv, import_csv, payoff, registry, strategies

__all__ = [
    "export_csv",
    "import_csv",
    "payoff",
    "registry",
    "strategies",
]
