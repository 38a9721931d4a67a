"""A wallet holding Bitcoin."""


class Bitcoin(int):
    """An amount of Bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self) -> None:
        super().__init__("cannot withdraw, insufficient funds")


class Wallet:
    """Holds a Bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    @property
    def balance(self) -> Bitcoin:
        """The current balance."""
        return self._balance

    def deposit(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        self._balance = Bitcoin(self._balance + amount)

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` from the balance, if there is enough."""
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)