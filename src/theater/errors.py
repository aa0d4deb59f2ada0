"""Structured error taxonomy for statement generation failures."""

from __future__ import annotations

from typing import Any


class TheaterError(Exception):
    """Base class for all theater domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str, actionable: bool = True):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        self.actionable = actionable
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class UnknownPlayIdError(TheaterError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__("UNKNOWN_PLAY_ID", "CATALOG", f"Unknown play id: {play_id!r}")


class UnknownGenreError(TheaterError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre: Any):
        self.genre = genre
        label = getattr(genre, "value", genre)
        super().__init__("UNKNOWN_GENRE", "PRICING", f"unknown type: {label}")


class CatalogFormatError(TheaterError):
    def __init__(self, explanation: str, actionable: bool = True):
        super().__init__("CATALOG_FORMAT", "INPUT", explanation, actionable)


class InvoiceFormatError(TheaterError):
    def __init__(self, explanation: str, actionable: bool = True):
        super().__init__("INVOICE_FORMAT", "INPUT", explanation, actionable)
