"""
1. Parses the command line arguments with `argparse`.
2. Builds a `RunConfig` via `build_run_config`, merging CLI overrides with an optional `config.yaml`.
3. Turns the merged report definition into a `SalesReportBuilder` and builds it.
4. Prints the report as text lines or as a JSON document.

Build and definition errors are reported on stderr with exit code 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from salesreport.core.configuration import build_run_config
from salesreport.demo import run_demo
from salesreport.reporting.config import OUTPUT_FORMATS
from salesreport.reporting.definition import builder_from_definition
from salesreport.reporting.errors import DefinitionError, ReportBuildError
from salesreport.reporting.presets import PRESETS
from salesreport.utils.logging import structured_log

EXIT_OK = 0
EXIT_INVALID = 2


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build and print a sales report configuration")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"), help="Path to configuration YAML")
    parser.add_argument("--demo", action="store_true", help="Print the two demonstration reports and exit")
    parser.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Start from a named preset")
    parser.add_argument("--title", default=None)
    parser.add_argument("--format", default=None, help="Output format label, e.g. PDF")
    parser.add_argument("--start-date", default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end-date", default=None, help="End date (YYYY-MM-DD)")
    parser.add_argument("--column", dest="columns", action="append", default=None, help="Column name; repeatable")
    parser.add_argument("--filter", dest="filters", action="append", default=None, help="Filter expression; repeatable")
    parser.add_argument("--header", default=None, help="Header text")
    parser.add_argument("--footer", default=None, help="Footer text")
    parser.add_argument("--chart", default=None, help="Chart type, e.g. Bar or Pie")
    parser.add_argument("--group-by", default=None)
    parser.add_argument("--sort-by", default=None)
    parser.add_argument("--page-size", default=None)
    parser.add_argument("--totals", action="store_true", default=None, help="Include totals")
    parser.add_argument("--page-numbers", action="store_true", default=None, help="Include page numbers")
    parser.add_argument("--landscape", action="store_true", help="Use landscape orientation")
    parser.add_argument("--output-format", choices=OUTPUT_FORMATS, default=None)
    parser.add_argument("--date-format", default=None, help="strftime pattern for the period line")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    run_config = build_run_config(args)

    # Initialize logging: Ensures a consistent log format and level.
    logging.basicConfig(
        level=getattr(logging, run_config.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.demo:
        run_demo()
        return EXIT_OK

    try:
        report = builder_from_definition(run_config.definition).build()
    except (DefinitionError, ReportBuildError) as exc:
        structured_log(
            logging.ERROR,
            event="report_build_failed",
            code=getattr(exc, "code", "invalid_definition"),
            message=str(exc),
        )
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID

    if run_config.display.output_format == "json":
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        report.generate(date_format=run_config.display.date_format)

    structured_log(logging.INFO, event="report_generated", title=report.title, output=run_config.display.output_format)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
