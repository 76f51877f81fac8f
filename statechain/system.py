"""The system pallet: block number and per-account nonces."""

from __future__ import annotations

from collections.abc import Hashable

MAX_BLOCK_NUMBER = 2**32 - 1
MAX_NONCE = 2**32 - 1


class SystemPallet:
    """Low-level chain state: the current block number and account nonces."""

    def __init__(self) -> None:
        self._block_number = 0
        self._nonces: dict[Hashable, int] = {}

    def __repr__(self) -> str:
        return (
            f"SystemPallet(block_number={self._block_number}, "
            f"nonce={dict(sorted(self._nonces.items()))})"
        )

    def block_number(self) -> int:
        """The current block number."""
        return self._block_number

    def inc_block_number(self) -> None:
        """Advance the block number by one."""
        if self._block_number >= MAX_BLOCK_NUMBER:
            raise OverflowError("block number overflow")
        self._block_number += 1

    def inc_nonce(self, who: Hashable) -> None:
        """Increase the transaction count of ``who`` by one."""
        current = self._nonces.get(who, 0)
        if current >= MAX_NONCE:
            raise OverflowError("nonce overflow")
        self._nonces[who] = current + 1

    def nonce(self, who: Hashable) -> int:
        """The nonce of ``who``; zero for unseen accounts."""
        return self._nonces.get(who, 0)