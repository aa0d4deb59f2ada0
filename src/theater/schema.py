"""Strict schema validation for play catalog and invoice JSON documents."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List

from .errors import CatalogFormatError, InvoiceFormatError, UnknownGenreError
from .types import Genre, Invoice, Performance, Play, PlayCatalog

logger = logging.getLogger(__name__)

__all__ = ["load_catalog", "load_invoices", "parse_catalog", "parse_invoice", "parse_invoices"]


def _require_str(value: Any, field_name: str, error_cls: type) -> str:
    if not isinstance(value, str):
        actual = type(value).__name__
        raise error_cls(f"Invalid field '{field_name}': expected str, got {actual}")
    if not value.strip():
        raise error_cls(f"Invalid field '{field_name}': must be non-empty string")
    return value


def parse_catalog(document: Any) -> PlayCatalog:
    """Build a catalog from ``{"<playID>": {"name": ..., "type": ...}}``.

    Unknown genre labels are kept verbatim; only pricing a performance of
    such a play raises :class:`UnknownGenreError`.
    """

    if not isinstance(document, dict):
        raise CatalogFormatError("Play catalog must be a JSON object")

    plays = {}
    for play_id, entry in document.items():
        if not isinstance(entry, dict):
            actual = type(entry).__name__
            raise CatalogFormatError(f"Play '{play_id}': expected object, got {actual}")
        for field_name in ("name", "type"):
            if field_name not in entry:
                raise CatalogFormatError(f"Play '{play_id}' missing required field '{field_name}'")
        name = _require_str(entry["name"], f"{play_id}.name", CatalogFormatError)
        label = _require_str(entry["type"], f"{play_id}.type", CatalogFormatError)
        try:
            genre: Genre | str = Genre.from_label(label)
        except UnknownGenreError:
            logger.debug("Play %s has unpriced genre %r", play_id, label)
            genre = label
        plays[play_id] = Play(name=name, genre=genre)
    return PlayCatalog(plays)


def _parse_performance(entry: Any, index: int) -> Performance:
    if not isinstance(entry, dict):
        actual = type(entry).__name__
        raise InvoiceFormatError(f"Performance #{index}: expected object, got {actual}")
    for field_name in ("playID", "audience"):
        if field_name not in entry:
            raise InvoiceFormatError(f"Performance #{index} missing required field '{field_name}'")
    play_id = _require_str(entry["playID"], f"performances[{index}].playID", InvoiceFormatError)
    try:
        return Performance(play_id=play_id, audience=entry["audience"])
    except ValueError as exc:
        raise InvoiceFormatError(f"Performance #{index}: {exc}") from exc


def parse_invoice(document: Any) -> Invoice:
    if not isinstance(document, dict):
        raise InvoiceFormatError("Invoice must be a JSON object")
    for field_name in ("customer", "performances"):
        if field_name not in document:
            raise InvoiceFormatError(f"Invoice missing required field '{field_name}'")
    customer = _require_str(document["customer"], "customer", InvoiceFormatError)
    performances = document["performances"]
    if not isinstance(performances, list):
        actual = type(performances).__name__
        raise InvoiceFormatError(f"Invalid field 'performances': expected list, got {actual}")
    return Invoice(
        customer=customer,
        performances=tuple(_parse_performance(entry, index) for index, entry in enumerate(performances)),
    )


def parse_invoices(document: Any) -> List[Invoice]:
    """Accept either a single invoice object or a list of them."""
    if isinstance(document, list):
        return [parse_invoice(entry) for entry in document]
    return [parse_invoice(document)]


def _read_json(path: str | os.PathLike[str], error_cls: type) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise error_cls(f"Malformed JSON in {os.fspath(path)}: {exc}") from exc
    except OSError as exc:
        raise error_cls(f"Cannot read {os.fspath(path)}: {exc.strerror or exc}") from exc


def load_catalog(path: str | os.PathLike[str]) -> PlayCatalog:
    catalog = parse_catalog(_read_json(path, CatalogFormatError))
    logger.debug("Loaded %d plays from %s", len(catalog), os.fspath(path))
    return catalog


def load_invoices(path: str | os.PathLike[str]) -> List[Invoice]:
    invoices = parse_invoices(_read_json(path, InvoiceFormatError))
    logger.debug("Loaded %d invoices from %s", len(invoices), os.fspath(path))
    return invoices

