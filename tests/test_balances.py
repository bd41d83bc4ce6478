from decimal import Decimal

from currency_swap.balances import (
    UNSUPPORTED_PRIORITY,
    PriorityTable,
    WalletBalance,
    format_balances,
    select_balances,
)


def _balance(currency, amount, blockchain):
    return WalletBalance(currency, Decimal(str(amount)), blockchain)


def test_select_filters_unsupported_and_non_positive():
    balances = [
        _balance("ETH", 2, "Ethereum"),
        _balance("FOO", 1, "Unknown"),
        _balance("OSMO", 0, "Osmosis"),
    ]
    table = PriorityTable({"Osmosis": 100, "Ethereum": 50})

    result = select_balances(balances, table)

    assert [balance.currency for balance in result] == ["ETH"]


def test_select_orders_by_priority_descending():
    balances = [
        _balance("ZIL", 5, "Zilliqa"),
        _balance("OSMO", 1, "Osmosis"),
        _balance("ARB", 3, "Arbitrum"),
        _balance("ETH", 2, "Ethereum"),
    ]

    result = select_balances(balances, PriorityTable())

    assert [balance.currency for balance in result] == ["OSMO", "ETH", "ARB", "ZIL"]


def test_select_keeps_input_order_for_equal_priorities():
    balances = [
        _balance("NEO", 1, "Neo"),
        _balance("ZIL", 2, "Zilliqa"),
        _balance("GAS", 3, "Neo"),
    ]

    result = select_balances(balances, PriorityTable())

    assert [balance.currency for balance in result] == ["NEO", "ZIL", "GAS"]


def test_select_accepts_plain_callables():
    balances = [_balance("ETH", 1, "Ethereum"), _balance("SOL", 1, "Solana")]

    def priority_of(blockchain):
        return 10 if blockchain == "Solana" else UNSUPPORTED_PRIORITY

    assert [balance.currency for balance in select_balances(balances, priority_of)] == ["SOL"]


def test_priority_table_defaults():
    table = PriorityTable()

    assert table("Osmosis") == 100
    assert table("Neo") == 20
    assert table("Bitcoin") == UNSUPPORTED_PRIORITY
    assert not table.is_supported("Bitcoin")


def test_format_balances_preserves_order_and_rounds():
    balances = [_balance("ETH", "1.23456789", "Ethereum"), _balance("MISSING", 2, "Osmosis")]

    rows = format_balances(balances, {"ETH": Decimal("1645.93")})

    assert [row.currency for row in rows] == ["ETH", "MISSING"]
    assert rows[0].formatted_amount == "1.234568"
    assert rows[0].usd_value == Decimal("1645.93") * Decimal("1.23456789")
    assert rows[0].formatted_usd_value == "2032.01"
    assert rows[1].usd_value == Decimal(0)
    assert rows[1].formatted_usd_value == "0.00"


def test_format_balances_handles_huge_amounts():
    rows = format_balances([_balance("ETH", "1e50", "Ethereum")], {"ETH": 1645.93})

    assert rows[0].formatted_amount == "1" + "0" * 50 + ".000000"
    assert rows[0].usd_value == Decimal("1.64593E+53")
    assert rows[0].formatted_usd_value == "164593" + "0" * 48 + ".00"


def test_format_balances_ignores_unusable_prices():
    rows = format_balances([_balance("ETH", 2, "Ethereum")], {"ETH": "n/a"})

    assert rows[0].usd_value == Decimal(0)
