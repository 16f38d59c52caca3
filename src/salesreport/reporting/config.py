"""Reporting configuration models."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DATE_FORMAT = "%d/%m/%Y"
OUTPUT_FORMATS = ("text", "json")


@dataclass(slots=True)
class DisplayConfig:
    """Configuration for how a built report is printed."""

    date_format: str = DEFAULT_DATE_FORMAT
    output_format: str = "text"
