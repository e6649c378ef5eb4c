"""petledger — animal inventory and lending ledger."""

__version__ = "0.1.0"
