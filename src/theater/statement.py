"""Statement generation: resolve plays, price performances, render the report.

``build_statement`` produces a render-independent :class:`StatementData`;
``render_plain_text`` turns it into the customer-facing text. All money stays
in integer cents until it is formatted.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List

from .config import PricingConfig, get_config
from .pricing import performance_amount, performance_credits
from .types import Genre, Invoice, PlayCatalog

logger = logging.getLogger(__name__)

__all__ = [
    "StatementData",
    "StatementLine",
    "StatementPrinter",
    "build_statement",
    "format_usd",
    "generate",
    "render_plain_text",
]

CENTS_PER_DOLLAR = 100


def format_usd(amount: int) -> str:
    """Render cents as a US dollar string, e.g. ``173000 -> "$1,730.00"``."""
    sign = "-" if amount < 0 else ""
    dollars, cents = divmod(abs(amount), CENTS_PER_DOLLAR)
    return f"{sign}${dollars:,}.{cents:02d}"


@dataclass(frozen=True)
class StatementLine:
    play_name: str
    genre: Genre
    audience: int
    amount: int
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    """Computed statement for one invoice.

    Invariant:
    - ``total_amount`` and ``total_volume_credits`` are the exact integer sums of
      the per-line values.
    """

    customer: str
    lines: tuple[StatementLine, ...]

    @property
    def total_amount(self) -> int:
        return sum(line.amount for line in self.lines)

    @property
    def total_volume_credits(self) -> int:
        return sum(line.volume_credits for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer": self.customer,
            "lines": [
                {
                    "play": line.play_name,
                    "genre": line.genre.value,
                    "audience": line.audience,
                    "amount": line.amount,
                    "formatted_amount": format_usd(line.amount),
                    "volume_credits": line.volume_credits,
                }
                for line in self.lines
            ],
            "total_amount": self.total_amount,
            "formatted_total_amount": format_usd(self.total_amount),
            "total_volume_credits": self.total_volume_credits,
        }


def build_statement(invoice: Invoice, catalog: PlayCatalog, config: PricingConfig | None = None) -> StatementData:
    """Resolve and price every performance of ``invoice`` in order.

    Raises:
        UnknownPlayIdError: if a performance references a play not in ``catalog``.
        UnknownGenreError: if a referenced play has an unpriced genre.
    """
    effective = config or get_config()
    lines: List[StatementLine] = []
    for performance in invoice.performances:
        play = catalog.lookup(performance.play_id)
        lines.append(
            StatementLine(
                play_name=play.name,
                genre=play.genre,
                audience=performance.audience,
                amount=performance_amount(performance, play, effective),
                volume_credits=performance_credits(performance, play, effective),
            )
        )
    data = StatementData(customer=invoice.customer, lines=tuple(lines))
    logger.debug(
        "Built statement for %s: %d performances, total=%d, credits=%d",
        invoice.customer,
        len(lines),
        data.total_amount,
        data.total_volume_credits,
    )
    return data


def render_plain_text(data: StatementData) -> str:
    rows = [f"Statement for {data.customer}"]
    for line in data.lines:
        rows.append(f"  {line.play_name}: {format_usd(line.amount)} ({line.audience} seats)")
    rows.append(f"Amount owed is {format_usd(data.total_amount)}")
    rows.append(f"You earned {data.total_volume_credits} credits")
    return "".join(row + os.linesep for row in rows)


def generate(invoice: Invoice, catalog: PlayCatalog, config: PricingConfig | None = None) -> str:
    """Return the formatted text statement for ``invoice``."""
    return render_plain_text(build_statement(invoice, catalog, config))


class StatementPrinter:
    """Statement generator bound to one invoice and play catalog."""

    def __init__(self, invoice: Invoice, catalog: PlayCatalog, config: PricingConfig | None = None):
        self.invoice = invoice
        self.catalog = catalog
        self.config = config

    def data(self) -> StatementData:
        return build_statement(self.invoice, self.catalog, self.config)

    def statement(self) -> str:
        return render_plain_text(self.data())
