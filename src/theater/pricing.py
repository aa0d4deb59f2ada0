"""Genre-specific price and volume credit rules for a single performance."""

from __future__ import annotations

from .config import PricingConfig
from .errors import UnknownGenreError
from .types import Genre, Performance, Play


def amount_for(audience: int, genre: Genre, config: PricingConfig) -> int:
    """Price in cents of one performance of ``genre`` seen by ``audience`` people.

    Raises:
        UnknownGenreError: if ``genre`` has no pricing rule.
    """
    if genre is Genre.TRAGEDY:
        result = config.tragedy_base_amount
        if audience > config.tragedy_audience_threshold:
            result += config.tragedy_over_base_capacity_per_person * (
                audience - config.tragedy_audience_threshold
            )
    elif genre is Genre.COMEDY:
        result = config.comedy_base_amount
        if audience > config.comedy_audience_threshold:
            result += config.comedy_over_base_capacity_amount + config.comedy_over_base_capacity_per_person * (
                audience - config.comedy_audience_threshold
            )
        # applies to every comedy, not only over-capacity ones
        result += config.comedy_amount_per_audience * audience
    else:
        raise UnknownGenreError(genre)
    return result


def volume_credits_for(audience: int, genre: Genre, config: PricingConfig) -> int:
    """Loyalty credits earned by one performance.

    Raises:
        UnknownGenreError: if ``genre`` has no credit rule.
    """
    result = max(audience - config.base_volume_credit_threshold, 0)
    if genre is Genre.COMEDY:
        result += audience // config.comedy_extra_volume_factor
    elif genre is not Genre.TRAGEDY:
        raise UnknownGenreError(genre)
    return result


def performance_amount(performance: Performance, play: Play, config: PricingConfig) -> int:
    return amount_for(performance.audience, play.genre, config)


def performance_credits(performance: Performance, play: Play, config: PricingConfig) -> int:
    return volume_credits_for(performance.audience, play.genre, config)
