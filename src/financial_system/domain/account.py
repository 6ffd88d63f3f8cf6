from __future__ import annotations

from financial_system.domain.monetary.currency import Currency
from financial_system.domain.monetary.money import Money


class Account:
    """Holds the balance of exactly one currency for one owner.

    Account is a value: it is never changed in place. Ledger operations return
    a new Account carrying the new balance (see `with_balance`).

    Attributes:
        id: External identifier of the account.
        owner: Display name of the account holder.
        currency: The only currency this account may hold.
        balance: Current funds, always in $currency and never negative.
    """

    # region Init

    def __init__(self, account_id: object, owner: str, currency: Currency, balance: Money | None = None) -> None:
        """Create an Account.

        Args:
            account_id: Externally assigned identifier.
            owner: Display name, opaque to the ledger.
            currency: Currency of the account.
            balance: Initial balance. If None, start with zero in $currency.

        Raises:
            TypeError: If $currency is not a `Currency` or $balance is not `Money`.
            ValueError: If $balance is denominated in another currency.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if balance is None:
            balance = Money.zero(currency)
        elif not isinstance(balance, Money):
            raise TypeError(f"$balance must be a Money instance, but provided value is: {balance}")

        # Raise: balance must always be in the account currency
        if balance.currency != currency:
            raise ValueError(f"Cannot init `Account` because $balance currency ({balance.currency}) differs from $currency ({currency})")

        self._id = account_id
        self._owner = owner
        self._currency = currency
        self._balance = balance

    # endregion

    # region Main

    def with_balance(self, balance: Money) -> Account:
        """Return a copy of this account holding $balance."""
        return self.__class__(self._id, self._owner, self._currency, balance)

    # endregion

    # region Properties

    @property
    def id(self) -> object:
        return self._id

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def balance(self) -> Money:
        return self._balance

    # endregion

    # region Magic

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        return (self.id, self.owner, self.currency, self.balance) == (other.id, other.owner, other.currency, other.balance)

    def __hash__(self) -> int:
        return hash((self.id, self.owner, self.currency, self.balance))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, owner={self.owner!r}, balance={self.balance})"

    # endregion
