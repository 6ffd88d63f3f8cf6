__version__ = "0.1.0"

from financial_system.domain.account import Account
from financial_system.domain.monetary.currency import Currency
from financial_system.domain.monetary.money import DivisionResult, Money
from financial_system.errors import FinancialSystemError
from financial_system.system import FinancialSystem

__all__ = ["Account", "Currency", "DivisionResult", "FinancialSystem", "FinancialSystemError", "Money"]
