"""Vessel P&L ledger service package."""
