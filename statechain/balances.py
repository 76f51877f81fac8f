"""The balances pallet: account balances and transfers."""

from __future__ import annotations

from collections.abc import Hashable

from statechain.support import DispatchError, Pallet, dispatchable

MAX_BALANCE = 2**128 - 1


def _check_amount(amount: int) -> None:
    if not 0 <= amount <= MAX_BALANCE:
        raise ValueError(f"balance out of range: {amount}")


class BalancesPallet(Pallet):
    """Tracks the balance of every account."""

    def __init__(self) -> None:
        self._balances: dict[Hashable, int] = {}

    def __repr__(self) -> str:
        return f"BalancesPallet(balances={dict(sorted(self._balances.items()))})"

    def set_balance(self, who: Hashable, amount: int) -> None:
        """Set the balance of ``who`` to ``amount``."""
        _check_amount(amount)
        self._balances[who] = amount

    def balance(self, who: Hashable) -> int:
        """The balance of ``who``; zero for unknown accounts."""
        return self._balances.get(who, 0)

    @dispatchable
    def transfer(self, caller: Hashable, to: Hashable, amount: int) -> None:
        """Move ``amount`` from ``caller`` to ``to``.

        Raises :class:`DispatchError` on insufficient funds or overflow.
        """
        _check_amount(amount)
        caller_balance = self.balance(caller)
        to_balance = self.balance(to)

        new_caller_balance = caller_balance - amount
        if new_caller_balance < 0:
            raise DispatchError("Not enough funds.")
        new_to_balance = to_balance + amount
        if new_to_balance > MAX_BALANCE:
            raise DispatchError("Overflow")

        self._balances[caller] = new_caller_balance
        self._balances[to] = new_to_balance