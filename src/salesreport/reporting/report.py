"""Immutable sales report produced by :class:`SalesReportBuilder`."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, fields
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple

from salesreport.reporting.config import DEFAULT_DATE_FORMAT

# Only the builder holds a reference to this token.
_BUILD_TOKEN = object()


@dataclass(frozen=True, slots=True)
class SalesReport:
    """Validated snapshot of a report configuration.

    Instances are created by :meth:`SalesReportBuilder.build`; constructing one
    directly, or through ``dataclasses.replace``, raises ``TypeError``. Columns
    and filters are stored as tuples so nothing handed out by the report can
    reach back into builder storage.
    """

    title: str
    format: str
    start_date: date
    end_date: date
    columns: Tuple[str, ...]
    filters: Tuple[str, ...] = ()
    include_header: bool = False
    header_text: Optional[str] = None
    include_footer: bool = False
    footer_text: Optional[str] = None
    include_charts: bool = False
    chart_type: Optional[str] = None
    include_summary: bool = False
    sort_by: Optional[str] = None
    group_by: Optional[str] = None
    include_totals: bool = False
    orientation: str = "Portrait"
    page_size: str = "A4"
    include_page_numbers: bool = False
    company_logo: Optional[str] = None
    watermark: Optional[str] = None
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        if _token is not _BUILD_TOKEN:
            raise TypeError("SalesReport instances must be created with SalesReportBuilder.build()")

    def lines(self, date_format: str = DEFAULT_DATE_FORMAT) -> Tuple[str, ...]:
        """Return the human-readable summary, one entry per output line."""

        rendered: List[str] = [
            f"=== Gerando Relatório: {self.title} ===",
            f"Formato: {self.format}",
            f"Período: {self.start_date.strftime(date_format)} a {self.end_date.strftime(date_format)}",
        ]
        if self.include_header:
            rendered.append(f"Cabeçalho: {self.header_text}")

        rendered.append(f"Colunas: {', '.join(self.columns)}")

        if self.filters:
            rendered.append(f"Filtros: {', '.join(self.filters)}")
        if self.group_by:
            rendered.append(f"Agrupado por: {self.group_by}")
        if self.include_charts:
            rendered.append(f"Gráfico: {self.chart_type}")
        if self.include_totals:
            rendered.append("Inclui totais")
        if self.include_footer:
            rendered.append(f"Rodapé: {self.footer_text}")

        rendered.append("Relatório gerado com sucesso!")
        return tuple(rendered)

    def generate(
        self,
        write: Callable[[str], Any] = print,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        """Write the summary lines through ``write`` (``print`` by default)."""

        for line in self.lines(date_format):
            write(line)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping of every public field."""

        payload: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            payload[item.name] = value
        return payload


__all__ = ["SalesReport"]
