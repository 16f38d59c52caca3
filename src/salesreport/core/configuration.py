"""Configuration loading utilities for salesreport runs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from salesreport.core.config import RunConfig
from salesreport.reporting.config import DEFAULT_DATE_FORMAT, OUTPUT_FORMATS, DisplayConfig
from salesreport.settings import env_default

# argparse destinations copied straight into the report definition
_DEFINITION_FLAGS = (
    "preset",
    "title",
    "format",
    "start_date",
    "end_date",
    "columns",
    "filters",
    "header",
    "footer",
    "chart",
    "group_by",
    "sort_by",
    "page_size",
    "totals",
    "page_numbers",
)


def _load_yaml_config(path: Optional[Path]) -> Dict[str, Any]:
    """
    - Opens and safely parses a YAML file into a Python dictionary.
    - Returns an empty dict if the file is missing.
    - Raises ``ValueError`` when the document root is not a mapping.
    """
    if path and path.exists():
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
        if not isinstance(payload, dict):
            raise ValueError(f"Invalid YAML config structure at {path}")
        return payload
    return {}


def build_run_config(args: argparse.Namespace) -> RunConfig:
    # Load the YAML configuration and overlay CLI overrides.
    config_path = Path(args.config) if getattr(args, "config", None) else None
    yaml_payload = _load_yaml_config(config_path)

    # Logging: CLI flag, then YAML, then SALESREPORT_LOG_LEVEL.
    log_level = getattr(args, "log_level", None) or yaml_payload.get("log_level")
    if not log_level:
        log_level = env_default("SALESREPORT_LOG_LEVEL", "INFO")

    # Display Configuration
    display_section = yaml_payload.get("display") or {}
    display_cfg = DisplayConfig(
        date_format=str(display_section.get("date_format", DEFAULT_DATE_FORMAT)),
        output_format=str(display_section.get("output_format", "text")),
    )
    if getattr(args, "date_format", None):
        display_cfg.date_format = args.date_format
    if getattr(args, "output_format", None):
        display_cfg.output_format = args.output_format
    if display_cfg.output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {display_cfg.output_format}")

    # Report Definition
    report_section = yaml_payload.get("report") or {}
    if not isinstance(report_section, dict):
        raise ValueError(f"Invalid 'report' section in {config_path}")
    definition = dict(report_section)
    for key in _DEFINITION_FLAGS:
        value = getattr(args, key, None)
        if value is not None:
            definition[key] = value
    if getattr(args, "landscape", False):
        definition["orientation"] = "Landscape"

    return RunConfig(log_level=str(log_level).upper(), display=display_cfg, definition=definition)
