"""Presentation CLI exports."""
from .stats_command import StatsCommand, build_parser, run

__all__ = [
    "StatsCommand",
    "build_parser",
    "run",
]
