"""A minimal blockchain state machine: a runtime of system, balances and proof-of-existence pallets."""

__version__ = "0.1.0"