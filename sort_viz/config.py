"""Configuration dataclass for the sorting demos."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SortDemoConfig:
    algorithm: str = "bubble"
    step_interval_ms: int = 300
    speed: float = 1.0
    min_value: int = 1
    max_value: int = 40
    max_items: int = 24
