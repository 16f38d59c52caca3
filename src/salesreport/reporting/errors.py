"""Exceptions raised while building sales reports."""

from __future__ import annotations


class ReportBuildError(ValueError):
    """Base exception for a report that failed build-time validation."""

    code = "report_build_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingTitleError(ReportBuildError):
    """The title is missing, empty, or only whitespace."""

    code = "missing_title"

    def __init__(self, message: str = "Título é obrigatório.") -> None:
        super().__init__(message)


class InvalidDateRangeError(ReportBuildError):
    """The start date falls after the end date."""

    code = "invalid_date_range"

    def __init__(self, message: str = "Data inicial não pode ser maior que a final.") -> None:
        super().__init__(message)


class MissingColumnsError(ReportBuildError):
    """No column was added before building."""

    code = "missing_columns"

    def __init__(self, message: str = "O relatório deve ter pelo menos uma coluna.") -> None:
        super().__init__(message)


class DefinitionError(ValueError):
    """A report definition mapping does not have the expected shape."""


__all__ = [
    "DefinitionError",
    "InvalidDateRangeError",
    "MissingColumnsError",
    "MissingTitleError",
    "ReportBuildError",
]
