"""Configuration dataclasses for a salesreport run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from salesreport.reporting.config import DisplayConfig


@dataclass(slots=True)
class RunConfig:
    """Aggregate configuration for one CLI invocation."""

    log_level: str = "INFO"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    definition: Dict[str, Any] = field(default_factory=dict)
