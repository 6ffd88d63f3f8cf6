from __future__ import annotations


class Currency:
    """Represents an ISO-4217 currency with code, precision, and display metadata.

    Attributes:
        code (str): Currency code (e.g., "BRL", "USD").
        precision (int): Number of fraction digits (0-18), also called `fractionSize`.
        symbol (str): Display grapheme (e.g., "R$"). Defaults to the code.
        name (str): Full currency name. Defaults to the code.
    """

    def __init__(self, code: str, precision: int, symbol: str | None = None, name: str | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "BRL", "USD").
            precision (int): Number of fraction digits (0-18).
            symbol (str | None): Display grapheme. If None, the code is used.
            name (str | None): Full currency name. If None, the code is used.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # bool is an int subclass and must not pass as a precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if symbol is not None and (not isinstance(symbol, str) or not symbol.strip()):
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._symbol = symbol.strip() if symbol is not None else self._code
        self._name = name.strip() if name is not None else self._code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the currency precision."""
        return self._precision

    @property
    def symbol(self) -> str:
        """Get the display grapheme."""
        return self._symbol

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.symbol}', '{self.name}')"


def currency_code_of(currency: Currency | str) -> str:
    """Return the normalized code of $currency, given either as `Currency` or as a code string."""
    if isinstance(currency, Currency):
        return currency.code
    if not isinstance(currency, str):
        raise TypeError(f"$currency must be a Currency or a str, but provided value is: {currency}")
    return currency.upper().strip()
