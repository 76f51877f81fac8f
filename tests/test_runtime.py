import pytest

from statechain.runtime import Runtime, RuntimeCall, main
from statechain.support import Block, Call, DispatchError, Extrinsic, Header

CLAIM = "Hello, world!"


def transfer(caller, to, amount):
    return Extrinsic(
        caller, RuntimeCall("balances", Call("transfer", {"to": to, "amount": amount}))
    )


def claim(caller, action, content):
    return Extrinsic(
        caller, RuntimeCall("proof_of_existence", Call(action, {"claim": content}))
    )


@pytest.fixture
def runtime():
    rt = Runtime()
    rt.balances.set_balance("alice", 100)
    return rt


def test_new_runtime_starts_empty():
    rt = Runtime()
    assert rt.system.block_number() == 0
    assert rt.balances.balance("alice") == 0
    assert rt.proof_of_existence.get_claim(CLAIM) is None


def test_dispatch_routes_to_balances(runtime):
    runtime.dispatch("alice", RuntimeCall("balances", Call("transfer", {"to": "bob", "amount": 30})))
    assert runtime.balances.balance("bob") == 30
    assert runtime.balances.balance("alice") + runtime.balances.balance("bob") == 100


def test_dispatch_does_not_touch_nonce(runtime):
    runtime.dispatch("alice", RuntimeCall("proof_of_existence", Call("create_claim", {"claim": CLAIM})))
    assert runtime.proof_of_existence.get_claim(CLAIM) == "alice"
    assert runtime.system.nonce("alice") == 0


def test_dispatch_error_propagates(runtime):
    with pytest.raises(DispatchError, match="Not enough funds."):
        runtime.dispatch(
            "alice", RuntimeCall("balances", Call("transfer", {"to": "bob", "amount": 200}))
        )


@pytest.mark.parametrize("pallet", ["system", "nope"])
def test_dispatch_unknown_pallet(runtime, pallet):
    with pytest.raises(DispatchError):
        runtime.dispatch("alice", RuntimeCall(pallet, Call("inc_block_number")))


def test_dispatch_unknown_call(runtime):
    with pytest.raises(DispatchError):
        runtime.dispatch("alice", RuntimeCall("balances", Call("set_balance", {"amount": 5})))
    assert runtime.balances.balance("alice") == 100


def test_execute_block_applies_transfers(runtime):
    runtime.execute_block(
        Block(Header(1), [transfer("alice", "bob", 30), transfer("alice", "charlie", 20)])
    )
    assert runtime.system.block_number() == 1
    assert runtime.balances.balance("bob") == 30
    assert runtime.balances.balance("charlie") == 20
    total = sum(runtime.balances.balance(who) for who in ("alice", "bob", "charlie"))
    assert total == 100
    assert runtime.system.nonce("alice") == 2


def test_execute_block_wrong_number(runtime):
    with pytest.raises(DispatchError, match="block number does not match what is expected"):
        runtime.execute_block(Block(Header(5), [transfer("alice", "bob", 30)]))
    assert runtime.balances.balance("bob") == 0
    assert runtime.system.nonce("alice") == 0


def test_failed_extrinsic_is_reported_and_block_continues(runtime, capsys):
    runtime.execute_block(
        Block(
            Header(1),
            [claim("alice", "create_claim", CLAIM), claim("bob", "create_claim", CLAIM)],
        )
    )
    err = capsys.readouterr().err
    assert "Extrinsic Error" in err
    assert "\tBlock Number: 1\n" in err
    assert "\tExtrinsic Number: 1\n" in err
    assert "\tError: this content is already claimed" in err
    assert runtime.proof_of_existence.get_claim(CLAIM) == "alice"
    assert runtime.system.nonce("bob") == 1


def test_demo_sequence(runtime, capsys):
    blocks = [
        Block(Header(1), [transfer("alice", "bob", 30), transfer("alice", "charlie", 20)]),
        Block(Header(2), [claim("alice", "create_claim", CLAIM), claim("bob", "create_claim", CLAIM)]),
        Block(Header(3), [claim("alice", "revoke_claim", CLAIM), claim("bob", "create_claim", CLAIM)]),
    ]
    for block in blocks:
        runtime.execute_block(block)
    assert runtime.system.block_number() == 3
    assert runtime.proof_of_existence.get_claim(CLAIM) == "bob"
    assert runtime.system.nonce("bob") == 2
    assert capsys.readouterr().err.count("Extrinsic Error") == 1


def test_main_prints_state(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Runtime state Runtime(")
    assert "'Hello, world!': 'bob'" in captured.out
    assert "this content is already claimed" in captured.err