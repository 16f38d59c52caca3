"""Named factories returning pre-populated report builders."""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict

from salesreport.reporting.builder import SalesReportBuilder
from salesreport.utils.text import normalise_whitespace

PresetFactory = Callable[[str, date, date], SalesReportBuilder]


def default_sales(title: str, start_date: date, end_date: date) -> SalesReportBuilder:
    """PDF report with product, quantity and value columns, header, footer and totals."""

    return (
        SalesReportBuilder(title, "PDF", start_date, end_date)
        .add_column("Produto")
        .add_column("Quantidade")
        .add_column("Valor")
        .with_header("Relatório de Vendas")
        .with_footer("Confidencial")
        .with_totals()
    )


PRESETS: Dict[str, PresetFactory] = {
    "default_sales": default_sales,
}


def get_preset(name: str) -> PresetFactory:
    """Look up a preset by name (case and spacing are ignored)."""

    key = normalise_whitespace(name).lower().replace(" ", "_")
    try:
        return PRESETS[key]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; expected one of: {', '.join(sorted(PRESETS))}") from None


__all__ = ["PRESETS", "default_sales", "get_preset"]
