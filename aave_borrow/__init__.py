"""Deposit, borrow and repay against an Aave V2 lending pool."""

__version__ = "0.1.0"
