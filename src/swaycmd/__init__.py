"""swaycmd: typed builder for sway IPC and config commands."""

from __future__ import annotations

from swaycmd.domain.command import CommandList, RawCommand, TargetedCommand, normalize_whitespace
from swaycmd.domain.criteria import CriteriaGroup
from swaycmd.domain.values import FOCUSED

__version__ = "0.1.0"

__all__ = [
    "FOCUSED",
    "CommandList",
    "CriteriaGroup",
    "RawCommand",
    "TargetedCommand",
    "__version__",
    "normalize_whitespace",
]
