"""Capability-gated player, fighter and missile ledger."""

__version__ = "0.1.0"
