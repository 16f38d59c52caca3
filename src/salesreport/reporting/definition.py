"""Turn report definition mappings (usually loaded from YAML) into builders."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Mapping

from jsonschema import ValidationError, validate

from salesreport.reporting.builder import SalesReportBuilder
from salesreport.reporting.errors import DefinitionError
from salesreport.reporting.presets import get_preset

logger = logging.getLogger(__name__)

_TEXT = {"type": "string"}
_TEXT_LIST = {"type": "array", "items": {"type": "string"}}

DEFINITION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "preset": _TEXT,
        "title": {"type": ["string", "null"]},
        "format": _TEXT,
        "start_date": _TEXT,
        "end_date": _TEXT,
        "columns": _TEXT_LIST,
        "filters": _TEXT_LIST,
        "header": _TEXT,
        "footer": _TEXT,
        "chart": _TEXT,
        "group_by": _TEXT,
        "sort_by": _TEXT,
        "totals": {"const": True},
        "summary": {"const": True},
        "orientation": {"enum": ["Portrait", "Landscape"]},
        "page_size": _TEXT,
        "page_numbers": {"const": True},
        "logo": _TEXT,
        "watermark": _TEXT,
    },
    "required": ["title", "start_date", "end_date"],
    "anyOf": [{"required": ["preset"]}, {"required": ["format"]}],
    "additionalProperties": False,
}


def _stringify_dates(payload: Mapping[str, Any]) -> Dict[str, Any]:
    # YAML turns unquoted 2024-01-31 into a date; the schema expects text.
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in payload.items()
    }


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising :class:`DefinitionError` on failure."""

    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise DefinitionError(f"Invalid date {value!r}. Use YYYY-MM-DD.") from exc


def validate_definition(payload: Any) -> Dict[str, Any]:
    """Check ``payload`` against :data:`DEFINITION_SCHEMA` and return a normalised copy."""

    if not isinstance(payload, Mapping):
        raise DefinitionError("Report definition must be a mapping")
    normalised = _stringify_dates(payload)
    try:
        validate(instance=normalised, schema=DEFINITION_SCHEMA)
    except ValidationError as exc:
        location = ".".join(str(part) for part in exc.absolute_path)
        where = f" at {location!r}" if location else ""
        raise DefinitionError(f"Invalid report definition{where}: {exc.message}") from exc
    if "preset" in normalised and "format" in normalised:
        raise DefinitionError("'format' cannot be combined with 'preset'; the preset fixes the format")
    return normalised


def builder_from_definition(payload: Any) -> SalesReportBuilder:
    """Replay a validated definition onto a new :class:`SalesReportBuilder`.

    The returned builder has not been built, so the usual build checks still
    apply to whatever the definition describes.
    """

    definition = validate_definition(payload)
    title = definition["title"]
    start_date = parse_date(definition["start_date"])
    end_date = parse_date(definition["end_date"])

    if "preset" in definition:
        try:
            factory = get_preset(definition["preset"])
        except KeyError as exc:
            raise DefinitionError(exc.args[0]) from exc
        builder = factory(title, start_date, end_date)
    else:
        builder = SalesReportBuilder(title, definition["format"], start_date, end_date)

    for column in definition.get("columns", []):
        builder.add_column(column)
    for expression in definition.get("filters", []):
        builder.add_filter(expression)
    if "header" in definition:
        builder.with_header(definition["header"])
    if "footer" in definition:
        builder.with_footer(definition["footer"])
    if "chart" in definition:
        builder.with_chart(definition["chart"])
    if "group_by" in definition:
        builder.group_by_field(definition["group_by"])
    if "sort_by" in definition:
        builder.sort_by_field(definition["sort_by"])
    if definition.get("totals"):
        builder.with_totals()
    if definition.get("summary"):
        builder.with_summary()
    if definition.get("orientation") == "Landscape":
        builder.landscape()
    elif definition.get("orientation") == "Portrait":
        builder.portrait()
    if "page_size" in definition:
        builder.with_page_size(definition["page_size"])
    if definition.get("page_numbers"):
        builder.with_page_numbers()
    if "logo" in definition:
        builder.with_logo(definition["logo"])
    if "watermark" in definition:
        builder.with_watermark(definition["watermark"])

    logger.debug("Loaded report definition for %r", title)
    return builder


__all__ = ["DEFINITION_SCHEMA", "builder_from_definition", "parse_date", "validate_definition"]
