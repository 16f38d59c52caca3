"""The two demonstration reports: a fully chained builder and a preset."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, List

from salesreport.reporting.builder import SalesReportBuilder
from salesreport.reporting.presets import default_sales
from salesreport.reporting.report import SalesReport


def demo_reports() -> List[SalesReport]:
    monthly = (
        SalesReportBuilder("Vendas Mensais", "PDF", date(2024, 1, 1), date(2024, 1, 31))
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

    yearly = (
        default_sales("Vendas Anuais", date(2024, 1, 1), date(2024, 12, 31))
        .with_chart("Pie")
        .landscape()
        .build()
    )
    return [monthly, yearly]


def run_demo(write: Callable[[str], Any] = print) -> None:
    write("=== Sistema de Relatórios (Builder Pattern) ===")
    for report in demo_reports():
        write("")
        report.generate(write)
