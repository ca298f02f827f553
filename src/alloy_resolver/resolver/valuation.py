"""
Market Value Projection.

Values pure gold at an externally supplied price. An absent or
non-positive price means "not configured" and is reported as None,
never as a value of zero.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from alloy_resolver.domain.entities import Holding, PortfolioValuation
from alloy_resolver.domain.value_objects import karat_to_purity
from alloy_resolver.resolver.alloying import PreconditionViolated

logger = logging.getLogger(__name__)


def price_configured(price_per_gram: Optional[float]) -> bool:
    """Check a price is present and positive."""
    return price_per_gram is not None and price_per_gram > 0


def project_value(
    pure_gold_mass_grams: float,
    price_per_gram: Optional[float],
) -> Optional[float]:
    """
    Project the market value of pure gold.

    Args:
        pure_gold_mass_grams: Pure (24K) gold content
        price_per_gram: Price of pure gold, None when not configured

    Returns:
        None when the price is unavailable, 0.0 when there is no gold,
        otherwise mass * price
    """
    if not price_configured(price_per_gram):
        return None
    if pure_gold_mass_grams <= 0:
        return 0.0
    return pure_gold_mass_grams * price_per_gram


def value_portfolio(
    holdings: List[Holding],
    projected_price_per_gram: float,
    current_price_per_gram: Optional[float] = None,
) -> PortfolioValuation:
    """
    Value several holdings at a single projected price.

    Pure gold content is aggregated as sum(mass * karat / 24) before the
    price is applied. With a current price the percentage change between
    the current and projected values is reported too.

    Raises:
        PreconditionViolated: If the projected price is not positive
    """
    if not price_configured(projected_price_per_gram):
        raise PreconditionViolated(
            f"projected price must be > 0, got {projected_price_per_gram}",
            field="projected_price",
        )

    pure_gold = sum(h.mass_grams * karat_to_purity(h.karat) for h in holdings)
    projected_value = pure_gold * projected_price_per_gram

    current_value: Optional[float] = None
    percent_change: Optional[float] = None
    if price_configured(current_price_per_gram):
        current_value = pure_gold * current_price_per_gram
        if current_value > 0:
            percent_change = (projected_value - current_value) / current_value * 100.0

    logger.debug(
        f"Portfolio of {len(holdings)} holdings: {pure_gold:.4f}g pure gold, "
        f"projected={projected_value:.2f}"
    )

    return PortfolioValuation(
        holdings_count=len(holdings),
        pure_gold_mass_grams=pure_gold,
        projected_price_per_gram=projected_price_per_gram,
        projected_value=projected_value,
        current_price_per_gram=current_price_per_gram if current_value is not None else None,
        current_value=current_value,
        percent_change=percent_change,
    )
