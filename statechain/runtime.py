"""The runtime: the set of pallets that make up the chain, and block execution."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from statechain.balances import BalancesPallet
from statechain.proof_of_existence import ProofOfExistencePallet
from statechain.support import Block, Call, DispatchError, Extrinsic, Header, Pallet
from statechain.system import SystemPallet

# Pallets reachable through dispatch, in declaration order; system is never callable.
_CALLABLE_PALLETS = ("balances", "proof_of_existence")


@dataclass(frozen=True)
class RuntimeCall:
    """A call addressed to one of the runtime's callable pallets."""

    pallet: str
    call: Call


class Runtime:
    """Holds every pallet and executes blocks of extrinsics against them."""

    def __init__(self) -> None:
        self.system = SystemPallet()
        self.balances = BalancesPallet()
        self.proof_of_existence = ProofOfExistencePallet()

    def __repr__(self) -> str:
        return (
            "Runtime(\n"
            f"    system={self.system!r},\n"
            f"    balances={self.balances!r},\n"
            f"    proof_of_existence={self.proof_of_existence!r},\n"
            ")"
        )

    def _pallet(self, name: str) -> Pallet:
        if name not in _CALLABLE_PALLETS:
            raise DispatchError(f"unknown pallet: {name}")
        pallet: Pallet = getattr(self, name)
        return pallet

    def dispatch(self, caller: Hashable, runtime_call: RuntimeCall) -> None:
        """Route ``runtime_call`` to its pallet on behalf of ``caller``.

        Raises :class:`DispatchError` if the pallet or call is unknown or the
        call is rejected.
        """
        self._pallet(runtime_call.pallet).dispatch(caller, runtime_call.call)

    def execute_block(self, block: Block[Header, Extrinsic[RuntimeCall]]) -> None:
        """Advance the block number and apply every extrinsic in ``block``.

        Raises :class:`DispatchError` if the block number is not the expected
        one. A failing extrinsic is reported on stderr and does not stop the
        block; the caller's nonce is still increased.
        """
        self.system.inc_block_number()
        if block.header.block_number != self.system.block_number():
            raise DispatchError("block number does not match what is expected")
        for index, extrinsic in enumerate(block.extrinsics):
            self.system.inc_nonce(extrinsic.caller)
            try:
                self.dispatch(extrinsic.caller, extrinsic.call)
            except DispatchError as error:
                print(
                    "Extrinsic Error\n"
                    f"\tBlock Number: {block.header.block_number}\n"
                    f"\tExtrinsic Number: {index}\n"
                    f"\tError: {error}",
                    file=sys.stderr,
                )


def _transfer(caller: str, to: str, amount: int) -> Extrinsic[RuntimeCall]:
    return Extrinsic(
        caller, RuntimeCall("balances", Call("transfer", {"to": to, "amount": amount}))
    )


def _claim(caller: str, action: str, claim: str) -> Extrinsic[RuntimeCall]:
    return Extrinsic(
        caller, RuntimeCall("proof_of_existence", Call(action, {"claim": claim}))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run a short demonstration chain and print the final state."""
    del argv
    runtime = Runtime()
    alice, bob, charlie = "alice", "bob", "charlie"
    runtime.balances.set_balance(alice, 100)

    blocks = [
        Block(
            Header(1),
            [_transfer(alice, bob, 30), _transfer(alice, charlie, 20)],
        ),
        Block(
            Header(2),
            [
                _claim(alice, "create_claim", "Hello, world!"),
                _claim(bob, "create_claim", "Hello, world!"),
            ],
        ),
        Block(
            Header(3),
            [
                _claim(alice, "revoke_claim", "Hello, world!"),
                _claim(bob, "create_claim", "Hello, world!"),
            ],
        ),
    ]
    for block in blocks:
        runtime.execute_block(block)
    print(f"Runtime state {runtime!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())