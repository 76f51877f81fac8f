# statechain

A small blockchain state machine. A `Runtime` holds a set of pallets and applies
blocks of extrinsics to them one after another. The pallets are:

- **system** (`statechain.system.SystemPallet`): the current block number and a nonce for each account.
- **balances** (`statechain.balances.BalancesPallet`): account balances and transfers between accounts.
- **proof_of_existence** (`statechain.proof_of_existence.ProofOfExistencePallet`): accounts claim pieces of content. Each piece of content has at most one owner.

## Installing

```
pip install .
```

To install the test dependencies too:

```
pip install ".[test]"
```

## Running the demo

```
statechain
```

This command takes no options. It builds a runtime and gives `alice` a balance of 100. It then runs three blocks:

1. `alice` transfers 30 to `bob` and 20 to `charlie`.
2. `alice` claims `"Hello, world!"`. `bob` tries to claim the same content, and that attempt fails.
3. `alice` revokes her claim, and `bob` then claims the content.

Failed extrinsics are reported on standard error and do not stop the block.
At the end the command prints the state of the runtime.

## Using the library

```python
from statechain.balances import BalancesPallet
from statechain.proof_of_existence import ProofOfExistencePallet
from statechain.support import DispatchError

balances = BalancesPallet()
balances.set_balance("alice", 100)
balances.transfer("alice", "bob", 30)
assert balances.balance("bob") == 30

try:
    balances.transfer("alice", "bob", 500)
except DispatchError as err:
    print(err)  # Not enough funds.

poe = ProofOfExistencePallet()
poe.create_claim("alice", "Hello, world!")
assert poe.get_claim("Hello, world!") == "alice"
```

Balances are whole numbers from 0 to 2**128 - 1. `set_balance` and `transfer`
raise `ValueError` for an amount outside that range. A transfer that would push
the receiver past the limit raises `DispatchError("Overflow")`.

`ProofOfExistencePallet.revoke_claim` raises `DispatchError` in two cases:
when the claim does not exist, and when the caller does not own it.

`SystemPallet` keeps the block number and the nonces as 32-bit counters.
`inc_block_number` and `inc_nonce` raise `OverflowError` past that limit.
`nonce(who)` returns 0 for an account that has not been seen.

### Blocks and dispatch

A `Block` carries a `Header` with its block number and a list of `Extrinsic`s.
Each extrinsic names a caller and a `RuntimeCall`. The `RuntimeCall` says which
pallet to call (`"balances"` or `"proof_of_existence"`) and which `Call` to make on it:

```python
from statechain.runtime import Runtime, RuntimeCall
from statechain.support import Block, Call, Extrinsic, Header

runtime = Runtime()
runtime.balances.set_balance("alice", 100)

block = Block(
    header=Header(block_number=1),
    extrinsics=[
        Extrinsic(
            caller="alice",
            call=RuntimeCall("balances", Call("transfer", {"to": "bob", "amount": 30})),
        ),
    ],
)
runtime.execute_block(block)
```

`Runtime.dispatch(caller, runtime_call)` runs a single call. It raises
`DispatchError` in three cases:

- the pallet is unknown or is not callable (the system pallet never is);
- the call name is unknown;
- the call itself is rejected.

### Block execution rules

`Runtime.execute_block` follows these rules:

- It first advances the system block number.
- It raises `DispatchError` if the header's block number does not match the new block number.
- For each extrinsic, it increments the caller's nonce, then dispatches the call. This happens whether or not the call succeeds.
- A `DispatchError` from an extrinsic is printed to standard error with the block and extrinsic numbers, and execution moves on to the next extrinsic.

### Writing pallets

Subclass `statechain.support.Pallet` and mark methods with `@dispatchable` to
make them callable through `Pallet.dispatch(caller, call)`. A dispatchable method
must meet these rules, and `dispatchable` raises `TypeError` otherwise:

- Its first argument after `self` is the caller, named `caller` or `_caller`.
- Its remaining arguments are named; `*args` and `**kwargs` are not allowed.

`Pallet.call_names()` lists the dispatchable methods in definition order.

## What it does not do

All state lives in memory for the life of a `Runtime` object. Nothing is stored
to disk. There are no block hashes, no signatures, no networking and no consensus.
The `statechain` command only runs the fixed demonstration above.