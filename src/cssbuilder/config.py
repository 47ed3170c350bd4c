from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    descendant_alias: str = "_"  # stands in for the " " combinator on the command line
    kind_separator: str = ":"
    log_level: str = "WARNING"
