"""Tests for SalesReportBuilder validation and construction."""

import dataclasses
import json
import logging
from datetime import date

import pytest

from salesreport.reporting.builder import SalesReportBuilder
from salesreport.reporting.errors import (
    InvalidDateRangeError,
    MissingColumnsError,
    MissingTitleError,
    ReportBuildError,
)
from salesreport.reporting.report import SalesReport

JAN_1 = date(2024, 1, 1)
JAN_31 = date(2024, 1, 31)


def _builder(title="Vendas Mensais", start=JAN_1, end=JAN_31) -> SalesReportBuilder:
    return SalesReportBuilder(title, "PDF", start, end)


def test_full_chain_builds_expected_report():
    report = (
        _builder()
        .add_column("Produto")
        .add_column("Quantidade")
        .add_column("Valor")
        .add_filter("Status=Ativo")
        .with_header("Relatório de Vendas")
        .with_footer("Confidencial")
        .with_chart("Bar")
        .group_by_field("Categoria")
        .with_totals()
        .landscape()
        .with_page_numbers()
        .build()
    )

    assert report.orientation == "Landscape"
    assert report.include_page_numbers is True
    assert report.columns == ("Produto", "Quantidade", "Valor")
    assert report.filters == ("Status=Ativo",)
    assert report.include_header and report.header_text == "Relatório de Vendas"
    assert report.include_footer and report.footer_text == "Confidencial"
    assert report.include_charts and report.chart_type == "Bar"
    assert report.group_by == "Categoria"
    assert report.include_totals is True
    assert report.page_size == "A4"


def test_defaults_when_only_required_fields_and_one_column():
    report = _builder().add_column("Produto").build()

    assert report.title == "Vendas Mensais"
    assert report.format == "PDF"
    assert report.start_date == JAN_1
    assert report.end_date == JAN_31
    assert report.filters == ()
    assert report.include_header is False
    assert report.header_text is None
    assert report.include_footer is False
    assert report.include_charts is False
    assert report.chart_type is None
    assert report.include_summary is False
    assert report.sort_by is None
    assert report.group_by is None
    assert report.include_totals is False
    assert report.orientation == "Portrait"
    assert report.page_size == "A4"
    assert report.include_page_numbers is False
    assert report.company_logo is None
    assert report.watermark is None


def test_setters_return_same_builder():
    builder = _builder()
    chained = [
        builder.add_column("A"),
        builder.add_filter("x=1"),
        builder.with_header("h"),
        builder.with_footer("f"),
        builder.with_chart("Pie"),
        builder.group_by_field("g"),
        builder.sort_by_field("s"),
        builder.with_summary(),
        builder.with_totals(),
        builder.landscape(),
        builder.portrait(),
        builder.with_page_size("Letter"),
        builder.with_page_numbers(),
        builder.with_logo("logo.png"),
        builder.with_watermark("Rascunho"),
    ]
    assert all(result is builder for result in chained)


def test_later_setter_calls_override_earlier_ones():
    report = (
        _builder()
        .add_column("Produto")
        .with_header("first")
        .with_header("second")
        .with_chart("Bar")
        .with_chart("Pie")
        .group_by_field("Categoria")
        .group_by_field("Regiao")
        .landscape()
        .portrait()
        .with_page_size("Letter")
        .with_logo("a.png")
        .with_logo("b.png")
        .with_watermark("Rascunho")
        .sort_by_field("Valor")
        .build()
    )

    assert report.header_text == "second"
    assert report.chart_type == "Pie"
    assert report.group_by == "Regiao"
    assert report.orientation == "Portrait"
    assert report.page_size == "Letter"
    assert report.company_logo == "b.png"
    assert report.watermark == "Rascunho"
    assert report.sort_by == "Valor"


def test_flag_setters_are_idempotent():
    once = _builder().add_column("A").with_totals().landscape().with_page_numbers().with_summary().build()
    twice = (
        _builder()
        .add_column("A")
        .with_totals()
        .with_totals()
        .landscape()
        .landscape()
        .with_page_numbers()
        .with_page_numbers()
        .with_summary()
        .with_summary()
        .build()
    )
    assert once == twice


@pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
def test_blank_title_fails(title):
    with pytest.raises(MissingTitleError):
        _builder(title=title).add_column("X").build()


def test_empty_title_scenario():
    with pytest.raises(MissingTitleError) as excinfo:
        SalesReportBuilder("", "PDF", JAN_1, JAN_31).add_column("X").build()
    assert excinfo.value.code == "missing_title"


def test_start_after_end_fails():
    with pytest.raises(InvalidDateRangeError):
        _builder(start=date(2024, 2, 1), end=JAN_31).add_column("X").build()


def test_start_equal_to_end_succeeds():
    report = _builder(start=JAN_31, end=JAN_31).add_column("X").build()
    assert report.start_date == report.end_date


def test_missing_columns_fails_even_with_other_options():
    builder = (
        _builder()
        .add_filter("Status=Ativo")
        .with_header("h")
        .with_footer("f")
        .with_chart("Bar")
        .with_totals()
        .landscape()
    )
    with pytest.raises(MissingColumnsError):
        builder.build()


def test_checks_run_in_order():
    # All three problems at once: the title check wins.
    with pytest.raises(MissingTitleError):
        _builder(title=" ", start=JAN_31, end=JAN_1).build()
    # Valid title, bad dates and no columns: the date check wins.
    with pytest.raises(InvalidDateRangeError):
        _builder(start=JAN_31, end=JAN_1).build()


def test_errors_share_a_value_error_base():
    for error in (MissingTitleError(), InvalidDateRangeError(), MissingColumnsError()):
        assert isinstance(error, ReportBuildError)
        assert isinstance(error, ValueError)
    codes = {MissingTitleError.code, InvalidDateRangeError.code, MissingColumnsError.code}
    assert len(codes) == 3


def test_builder_is_reusable_after_failure():
    builder = _builder()
    with pytest.raises(MissingColumnsError):
        builder.build()

    report = builder.add_column("Produto").build()
    assert report.columns == ("Produto",)


def test_successive_builds_are_equal_but_independent():
    builder = _builder().add_column("Produto").add_filter("Status=Ativo")

    first = builder.build()
    second = builder.build()

    assert first == second
    assert first is not second

    builder.add_column("Valor").add_filter("Regiao=Sul")
    third = builder.build()

    assert first.columns == ("Produto",)
    assert first.filters == ("Status=Ativo",)
    assert third.columns == ("Produto", "Valor")
    assert builder.columns == ["Produto", "Valor"]


def test_report_is_frozen():
    report = _builder().add_column("Produto").build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        report.title = "Outro"
    with pytest.raises(AttributeError):
        report.columns.append("Valor")


def test_report_cannot_be_constructed_directly():
    with pytest.raises(TypeError):
        SalesReport(
            title="Vendas",
            format="PDF",
            start_date=JAN_1,
            end_date=JAN_31,
            columns=("Produto",),
        )


def test_group_by_and_chart_type_are_not_restricted():
    report = _builder().add_column("Produto").group_by_field("NaoExiste").with_chart("Radar").build()

    assert report.group_by == "NaoExiste"
    assert report.chart_type == "Radar"


@pytest.mark.parametrize(
    "changes",
    [
        {"title": ""},
        {"columns": ()},
        {"start_date": date(2025, 1, 1)},
        {"title": "Vendas Anuais"},
    ],
)
def test_replace_cannot_copy_a_report_past_the_builder(changes):
    report = _builder().add_column("Produto").build()

    with pytest.raises(TypeError):
        dataclasses.replace(report, **changes)


def test_build_emits_report_built_event(caplog):
    caplog.set_level(logging.DEBUG)

    _builder().add_column("Produto").add_column("Valor").build()

    events = [json.loads(record.getMessage()) for record in caplog.records if record.getMessage().startswith("{")]
    assert {"event": "report_built", "title": "Vendas Mensais", "columns": 2} in events
