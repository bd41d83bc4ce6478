from __future__ import annotations

from decimal import Decimal

import requests

from currency_swap.balances import WalletBalance
from currency_swap.client import FETCH_FAILED_MESSAGE, CurrencySwap, CurrencySwapOptions

PRICES = [
    {"currency": "BLUR", "date": "2023-08-29T07:10:40.000Z", "price": 0.20811525423728813},
    {"currency": "ETH", "date": "2023-08-29T07:10:52.000Z", "price": 1645.9337373737374},
    {"currency": "USDC", "date": "2023-08-29T07:10:30.000Z", "price": 0.989832},
    {"currency": "USDC", "date": "2023-08-29T07:10:40.000Z", "price": 1},
    {"currency": "ATOM", "date": "2023-08-29T07:10:50.000Z", "price": 7.186657333333334},
    {"currency": "LUNA", "date": "2023-08-29T07:10:40.000Z", "price": 0},
]


class RecordingHttpClient:
    def __init__(self, response=None, error=None) -> None:
        self.calls = []
        self._response = response
        self._error = error

    def send_get_request(self, url, params=None):
        self.calls.append((url, params))
        if self._error is not None:
            raise self._error
        return self._response


def _options(**overrides):
    return CurrencySwapOptions(prices_url="https://prices.example/prices.json", **overrides)


def test_load_builds_catalog_and_selects_defaults():
    http_client = RecordingHttpClient(PRICES)
    client = CurrencySwap(_options(), http_client=http_client)

    tokens = client.load()

    assert http_client.calls == [("https://prices.example/prices.json", None)]
    assert [token.currency for token in tokens] == ["ATOM", "BLUR", "ETH", "USDC"]
    assert client.tokens[3].price == Decimal("1")
    assert client.form.state.from_token.currency == "ETH"
    assert client.form.state.to_token.currency == "USDC"
    assert client.fetch_error == ""


def test_load_fetches_only_once():
    http_client = RecordingHttpClient(PRICES)
    client = CurrencySwap(_options(), http_client=http_client)

    client.load()
    client.load()

    assert len(http_client.calls) == 1


def test_missing_default_token_is_left_empty():
    http_client = RecordingHttpClient([{"currency": "ETH", "price": 1645.9}])
    client = CurrencySwap(_options(), http_client=http_client)

    client.load()

    assert client.form.state.from_token.currency == "ETH"
    assert client.form.state.to_token is None


def test_http_failure_sets_banner_without_raising():
    def requestor(url, kwargs):
        response = requests.Response()
        response.status_code = 503
        response._content = b"unavailable"
        return response

    client = CurrencySwap(_options(http_requestor=requestor))

    assert client.load() == []
    assert client.fetch_error == FETCH_FAILED_MESSAGE
    assert client.loaded
    assert client.form.state.from_token is None


def test_transport_error_sets_banner():
    def requestor(url, kwargs):
        raise requests.ConnectionError("connection refused")

    client = CurrencySwap(_options(http_requestor=requestor))

    assert client.load() == []
    assert client.fetch_error == FETCH_FAILED_MESSAGE


def test_unexpected_payload_sets_banner():
    client = CurrencySwap(_options(), http_client=RecordingHttpClient({"error": "nope"}))

    client.load()

    assert client.fetch_error == FETCH_FAILED_MESSAGE


def test_requestor_receives_get_with_timeout():
    seen = []

    def requestor(url, kwargs):
        seen.append((url, dict(kwargs)))
        response = requests.Response()
        response.status_code = 200
        response._content = b'[{"currency": "USDC", "price": 1}]'
        return response

    client = CurrencySwap(_options(http_requestor=requestor))

    assert [token.currency for token in client.load()] == ["USDC"]
    url, kwargs = seen[0]
    assert url == "https://prices.example/prices.json"
    assert kwargs["method"] == "GET"
    assert kwargs["timeout"] == 30


def test_quote_and_balance_through_client():
    client = CurrencySwap(_options(available_balance=Decimal("1")), http_client=RecordingHttpClient(PRICES))
    client.load()

    client.form.change_from_amount("1")
    assert client.form.state.to_amount == Decimal("1645.933737")

    client.form.change_from_amount("1.5")
    assert client.form.error_message == "Insufficient ETH balance"


def test_wallet_rows_use_catalog_prices_and_priorities():
    client = CurrencySwap(
        _options(blockchain_priorities={"Osmosis": 100, "Ethereum": 50}),
        http_client=RecordingHttpClient(PRICES),
    )
    client.load()

    rows = client.wallet_rows(
        [
            WalletBalance("ETH", Decimal("2"), "Ethereum"),
            WalletBalance("FOO", Decimal("1"), "Unknown"),
            WalletBalance("OSMO", Decimal("0"), "Osmosis"),
            WalletBalance("ATOM", Decimal("3"), "Osmosis"),
        ]
    )

    assert [row.currency for row in rows] == ["ATOM", "ETH"]
    assert rows[1].formatted_usd_value == "3291.87"
    assert rows[1].formatted_amount == "2.000000"
