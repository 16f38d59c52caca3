"""Fluent builder for :class:`SalesReport` objects."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from salesreport.reporting.errors import (
    InvalidDateRangeError,
    MissingColumnsError,
    MissingTitleError,
)
from salesreport.reporting.report import _BUILD_TOKEN, SalesReport
from salesreport.utils.logging import structured_log
from salesreport.utils.text import is_blank


class SalesReportBuilder:
    """Accumulate report settings through chained calls and validate on build.

    The constructor stores the required values as given. Nothing is checked
    until :meth:`build`, which can be called again after fixing the state that
    made a previous call fail.
    """

    def __init__(self, title: Optional[str], format: str, start_date: date, end_date: date) -> None:
        self.title = title
        self.format = format
        self.start_date = start_date
        self.end_date = end_date

        self.include_header = False
        self.header_text: Optional[str] = None
        self.include_footer = False
        self.footer_text: Optional[str] = None
        self.include_charts = False
        self.chart_type: Optional[str] = None
        self.include_summary = False
        self.columns: List[str] = []
        self.filters: List[str] = []
        self.sort_by: Optional[str] = None
        self.group_by: Optional[str] = None
        self.include_totals = False
        self.orientation = "Portrait"
        self.page_size = "A4"
        self.include_page_numbers = False
        self.company_logo: Optional[str] = None
        self.watermark: Optional[str] = None

    def add_column(self, name: str) -> "SalesReportBuilder":
        self.columns.append(name)
        return self

    def add_filter(self, expression: str) -> "SalesReportBuilder":
        self.filters.append(expression)
        return self

    def with_header(self, text: str) -> "SalesReportBuilder":
        self.include_header = True
        self.header_text = text
        return self

    def with_footer(self, text: str) -> "SalesReportBuilder":
        self.include_footer = True
        self.footer_text = text
        return self

    def with_chart(self, chart_type: str) -> "SalesReportBuilder":
        """Enable charts. ``chart_type`` is free text ("Bar", "Pie", ...)."""

        self.include_charts = True
        self.chart_type = chart_type
        return self

    def group_by_field(self, field: str) -> "SalesReportBuilder":
        """Group rows by ``field``; it does not have to be one of the columns."""

        self.group_by = field
        return self

    def sort_by_field(self, field: str) -> "SalesReportBuilder":
        self.sort_by = field
        return self

    def with_summary(self) -> "SalesReportBuilder":
        self.include_summary = True
        return self

    def with_totals(self) -> "SalesReportBuilder":
        self.include_totals = True
        return self

    def landscape(self) -> "SalesReportBuilder":
        self.orientation = "Landscape"
        return self

    def portrait(self) -> "SalesReportBuilder":
        self.orientation = "Portrait"
        return self

    def with_page_size(self, size: str) -> "SalesReportBuilder":
        self.page_size = size
        return self

    def with_page_numbers(self) -> "SalesReportBuilder":
        self.include_page_numbers = True
        return self

    def with_logo(self, reference: str) -> "SalesReportBuilder":
        self.company_logo = reference
        return self

    def with_watermark(self, text: str) -> "SalesReportBuilder":
        self.watermark = text
        return self

    def build(self) -> SalesReport:
        """Validate the current state and return a new :class:`SalesReport`.

        Checks run in a fixed order and the first failure is raised:

        1. :class:`MissingTitleError` if the title is ``None`` or blank.
        2. :class:`InvalidDateRangeError` if the start date is after the end date.
        3. :class:`MissingColumnsError` if no column was added.
        """

        if is_blank(self.title):
            raise MissingTitleError()
        if self.start_date > self.end_date:
            raise InvalidDateRangeError()
        if not self.columns:
            raise MissingColumnsError()

        report = SalesReport(
            title=self.title,
            format=self.format,
            start_date=self.start_date,
            end_date=self.end_date,
            columns=tuple(self.columns),
            filters=tuple(self.filters),
            include_header=self.include_header,
            header_text=self.header_text,
            include_footer=self.include_footer,
            footer_text=self.footer_text,
            include_charts=self.include_charts,
            chart_type=self.chart_type,
            include_summary=self.include_summary,
            sort_by=self.sort_by,
            group_by=self.group_by,
            include_totals=self.include_totals,
            orientation=self.orientation,
            page_size=self.page_size,
            include_page_numbers=self.include_page_numbers,
            company_logo=self.company_logo,
            watermark=self.watermark,
            _token=_BUILD_TOKEN,
        )
        structured_log(logging.DEBUG, event="report_built", title=report.title, columns=len(report.columns))
        return report


__all__ = ["SalesReportBuilder"]
