"""The proof-of-existence pallet: accounts claim ownership of content."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from statechain.support import DispatchError, Pallet, dispatchable


class ProofOfExistencePallet(Pallet):
    """Maps each claimed piece of content to the account that owns it."""

    def __init__(self) -> None:
        self._claims: dict[Hashable, Any] = {}

    def __repr__(self) -> str:
        return f"ProofOfExistencePallet(claims={dict(sorted(self._claims.items()))})"

    def get_claim(self, claim: Hashable) -> Any | None:
        """The owner of ``claim``, or ``None`` if unclaimed."""
        return self._claims.get(claim)

    @dispatchable
    def create_claim(self, caller: Any, claim: Hashable) -> None:
        """Claim ``claim`` for ``caller`` if nobody owns it yet."""
        if claim in self._claims:
            raise DispatchError("this content is already claimed")
        self._claims[claim] = caller

    @dispatchable
    def revoke_claim(self, caller: Any, claim: Hashable) -> None:
        """Release ``claim``; only its owner may do so."""
        if claim not in self._claims:
            raise DispatchError("claim does not exist")
        if self._claims[claim] != caller:
            raise DispatchError("this content is owned by someone else")
        del self._claims[claim]