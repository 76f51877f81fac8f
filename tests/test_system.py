import pytest

from statechain.system import MAX_BLOCK_NUMBER, SystemPallet


def test_init_system():
    system = SystemPallet()
    system.inc_block_number()
    system.inc_nonce("alice")
    assert system.block_number() == 1
    assert system.nonce("alice") == 1
    assert system.nonce("bob") == 0


def test_starts_at_zero():
    system = SystemPallet()
    assert system.block_number() == 0
    assert system.nonce("alice") == 0


def test_nonces_are_per_account():
    system = SystemPallet()
    for _ in range(3):
        system.inc_nonce("alice")
    system.inc_nonce("bob")
    assert system.nonce("alice") == 3
    assert system.nonce("bob") == 1


def test_block_number_counts_increments():
    system = SystemPallet()
    for _ in range(5):
        system.inc_block_number()
    assert system.block_number() == 5


def test_block_number_overflow():
    system = SystemPallet()
    system._block_number = MAX_BLOCK_NUMBER
    with pytest.raises(OverflowError):
        system.inc_block_number()
    assert system.block_number() == MAX_BLOCK_NUMBER