"""Domain layer — animal types, eligibility rules, and ledger errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
