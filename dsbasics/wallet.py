"""A wallet holding 500-won coins and 1000-won bills."""

from __future__ import annotations

COIN_VALUE = 500
BILL_VALUE = 1000


class InsufficientFundsError(ValueError):
    """Raised when more coins or bills are taken than the wallet holds."""


class Wallet:
    """Counts of 500-won coins and 1000-won bills."""

    def __init__(self) -> None:
        self.coins = 0
        self.bills = 0

    def __repr__(self) -> str:
        return f"Wallet(coins={self.coins}, bills={self.bills})"

    def put_coins(self, count: int) -> int:
        """Add coins and return the new coin count."""
        self.coins += count
        return self.coins

    def take_coins(self, count: int) -> int:
        """Remove coins and return the new coin count."""
        if self.coins < count:
            raise InsufficientFundsError(
                f"not enough coins to take {count} (have {self.coins})"
            )
        self.coins -= count
        return self.coins

    def put_bills(self, count: int) -> int:
        """Add bills and return the new bill count."""
        self.bills += count
        return self.bills

    def take_bills(self, count: int) -> int:
        """Remove bills and return the new bill count."""
        if self.bills < count:
            raise InsufficientFundsError(
                f"not enough bills to take {count} (have {self.bills})"
            )
        self.bills -= count
        return self.bills

    def balance(self) -> int:
        """Total value held, in won."""
        return self.coins * COIN_VALUE + self.bills * BILL_VALUE