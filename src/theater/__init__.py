"""Billing statements for theatrical performance invoices."""

__version__ = "0.1.0"

from .errors import TheaterError, UnknownGenreError, UnknownPlayIdError
from .statement import StatementPrinter, build_statement, format_usd, generate
from .types import Genre, Invoice, Performance, Play, PlayCatalog

__all__ = [
    "Genre",
    "Invoice",
    "Performance",
    "Play",
    "PlayCatalog",
    "StatementPrinter",
    "TheaterError",
    "UnknownGenreError",
    "UnknownPlayIdError",
    "__version__",
    "build_statement",
    "format_usd",
    "generate",
]
