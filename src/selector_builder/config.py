from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    strict_order: bool = True  # reject parts appended out of canonical order
