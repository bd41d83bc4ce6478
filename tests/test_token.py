from decimal import Decimal

import pytest

from currency_swap.errors import CurrencySwapError
from currency_swap.token import PLACEHOLDER_ICON_URL, Token, icon_url_for, same_currency


def test_token_normalises_price():
    token = Token("ETH", 1645.5, "eth.svg")

    assert token.price == Decimal("1645.5")
    assert token.display_price() == "1645.500000"


def test_token_rejects_non_positive_price():
    with pytest.raises(CurrencySwapError) as excinfo:
        Token("LUNA", Decimal("0"), "luna.svg")
    assert excinfo.value.code == "VALIDATION_ERROR"


def test_token_rejects_empty_currency():
    with pytest.raises(CurrencySwapError):
        Token("", Decimal("1"), "x.svg")


def test_token_is_immutable():
    token = Token("ETH", Decimal("1"), "eth.svg")

    with pytest.raises(AttributeError):
        token.price = Decimal("2")  # type: ignore[misc]


def test_icon_url_for():
    assert icon_url_for("SWTH", base_url="https://icons.example/") == "https://icons.example/SWTH.svg"
    assert PLACEHOLDER_ICON_URL.startswith("https://placehold.co/")


def test_same_currency():
    eth = Token("ETH", Decimal("1"), "a.svg")
    other_eth = Token("ETH", Decimal("2"), "b.svg")

    assert same_currency(eth, other_eth)
    assert not same_currency(eth, None)
