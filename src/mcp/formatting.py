"""Plain-text renderings of Gamma market payloads returned by the tools."""

from __future__ import annotations

from ..polymarket.models import Market
from ..polymarket.utils import format_number, format_usd

MARKET_NOT_FOUND = "Market not found. Please check the market ID or slug."
NO_MARKETS_FOUND = "No markets found with the specified criteria."
NO_PRICE_DATA = "No price data available for this market."


def format_market_info(market: Market) -> str:
    if market.outcomes is not None:
        prices = market.outcomeprices or {}
        outcome_prices = ", ".join(
            f"{outcome}: ${_info_price(prices.get(outcome))}"
            for outcome in market.outcomes
        )
    else:
        outcome_prices = "N/A"

    return "\n".join([
        f"Title: {market.display_title('N/A')}",
        f"Category: {market.category or 'N/A'}",
        f"Status: {market.status}",
        f"End Date: {market.end_date_iso or 'N/A'}",
        f"Volume: {format_usd(market.volume)}",
        f"Liquidity: {format_usd(market.liquidity)}",
        f"Outcome Prices: {outcome_prices}",
        f"Description: {market.description or 'No description available'}",
    ])


def _info_price(price: float | None) -> str:
    # zero and missing both read as "N/A"
    return format_number(price) if price else "N/A"


def format_market_list(markets: list[Market]) -> str:
    result = f"Found {len(markets)} markets:\n\n"
    for index, market in enumerate(markets, start=1):
        result += (
            f"{index}. {market.display_title('Untitled Market')}\n"
            f"   ID: {market.display_id}\n"
            f"   Status: {market.status}\n"
            f"   Volume: {format_usd(market.volume)}\n"
            f"   End Date: {market.end_date_iso or 'N/A'}\n"
            "---\n"
        )
    return result


def format_market_prices(market: Market) -> str:
    result = f"Market: {market.display_title('Unknown Market')}\n\n"

    if market.outcomes is not None and market.outcomeprices is not None:
        result += "Current Prices:\n"
        for outcome in market.outcomes:
            result += _price_line(outcome, market.outcomeprices.get(outcome, 0.0))
    elif market.tokens is not None:
        result += "Current Prices:\n"
        for token in market.tokens:
            result += _price_line(token.outcome, token.price)
    else:
        result += NO_PRICE_DATA

    return result


def _price_line(outcome: str, price: float) -> str:
    return f"{outcome}: ${price:.4f} ({price * 100:.1f}%)\n"
