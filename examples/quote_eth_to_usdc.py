"""Example quoting from ETH to USDC using the live price feed."""
from currency_swap import CurrencySwap


def main() -> None:
    client = CurrencySwap()
    client.load()
    if client.fetch_error:
        print(client.fetch_error)
        return

    form = client.form
    if form.state.from_token is None or form.state.to_token is None:
        print("Default pair is not available in the price feed")
        return
    form.change_from_amount("1.5")

    print("Pair:", form.state.from_token.currency, "->", form.state.to_token.currency)
    print("Exchange rate:", form.exchange_rate)
    print("Estimated output:", form.state.to_amount)
    print("Button:", form.button_label)
    client.close()


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
