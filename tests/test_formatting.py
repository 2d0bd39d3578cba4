from src.mcp.formatting import (
    NO_PRICE_DATA,
    format_market_info,
    format_market_list,
    format_market_prices,
)
from src.polymarket.models import Market


def test_market_info_full_report():
    market = Market.model_validate({
        "question": "Will BTC hit 100k?",
        "category": "Crypto",
        "closed": True,
        "end_date_iso": "2024-12-31",
        "volume": 1234567.5,
        "liquidity": 50000,
        "outcomes": ["Yes", "No"],
        "outcomeprices": {"Yes": 0.6, "No": 0.4},
        "description": "Resolves on Coinbase close.",
    })

    assert format_market_info(market) == (
        "Title: Will BTC hit 100k?\n"
        "Category: Crypto\n"
        "Status: Closed\n"
        "End Date: 2024-12-31\n"
        "Volume: $1,234,567.5\n"
        "Liquidity: $50,000\n"
        "Outcome Prices: Yes: $0.6, No: $0.4\n"
        "Description: Resolves on Coinbase close."
    )


def test_market_info_placeholders():
    text = format_market_info(Market.model_validate({"outcomes": ["Yes"]}))

    assert "Title: N/A" in text
    assert "Category: N/A" in text
    assert "Status: Open" in text
    assert "End Date: N/A" in text
    assert "Volume: $0" in text
    assert "Liquidity: $0" in text
    assert "Outcome Prices: Yes: $N/A" in text
    assert text.endswith("Description: No description available")


def test_market_info_without_outcomes():
    text = format_market_info(Market.model_validate({"title": "T"}))

    assert "Title: T" in text
    assert "Outcome Prices: N/A" in text


def test_market_list_numbered_entries():
    markets = [
        Market.model_validate({"question": "A?", "condition_id": "0x1", "volume": 1500, "end_date_iso": "2025-01-01"}),
        Market.model_validate({"id": 7, "closed": True}),
    ]

    assert format_market_list(markets) == (
        "Found 2 markets:\n\n"
        "1. A?\n"
        "   ID: 0x1\n"
        "   Status: Open\n"
        "   Volume: $1,500\n"
        "   End Date: 2025-01-01\n"
        "---\n"
        "2. Untitled Market\n"
        "   ID: 7\n"
        "   Status: Closed\n"
        "   Volume: $0\n"
        "   End Date: N/A\n"
        "---\n"
    )


def test_prices_from_outcomeprices():
    market = Market.model_validate({
        "question": "Q",
        "outcomes": ["Yes", "No"],
        "outcomeprices": {"Yes": 0.6, "No": 0.4},
    })

    assert format_market_prices(market) == (
        "Market: Q\n\n"
        "Current Prices:\n"
        "Yes: $0.6000 (60.0%)\n"
        "No: $0.4000 (40.0%)\n"
    )


def test_prices_missing_outcome_defaults_to_zero():
    market = Market.model_validate({
        "outcomes": ["Yes", "No"],
        "outcomeprices": {"Yes": 0.55},
    })

    text = format_market_prices(market)

    assert text.startswith("Market: Unknown Market\n\n")
    assert "Yes: $0.5500 (55.0%)\n" in text
    assert "No: $0.0000 (0.0%)\n" in text


def test_prices_from_tokens():
    market = Market.model_validate({
        "title": "T",
        "tokens": [{"outcome": "Up", "price": 0.123}, {"outcome": "Down", "price": 0.877}],
    })

    assert format_market_prices(market) == (
        "Market: T\n\n"
        "Current Prices:\n"
        "Up: $0.1230 (12.3%)\n"
        "Down: $0.8770 (87.7%)\n"
    )


def test_prices_without_data():
    text = format_market_prices(Market.model_validate({"question": "Q", "outcomes": ["Yes"]}))

    assert text == "Market: Q\n\n" + NO_PRICE_DATA


def test_prices_with_empty_outcomes_prints_bare_header():
    market = Market.model_validate({"question": "Q", "outcomes": [], "outcomeprices": {}})

    assert format_market_prices(market) == "Market: Q\n\nCurrent Prices:\n"


def test_prices_with_empty_token_list_prints_bare_header():
    market = Market.model_validate({"question": "Q", "tokens": []})

    assert format_market_prices(market) == "Market: Q\n\nCurrent Prices:\n"


def test_market_info_with_empty_outcomes():
    text = format_market_info(Market.model_validate({"question": "Q", "outcomes": []}))

    assert "\nOutcome Prices: \n" in text
