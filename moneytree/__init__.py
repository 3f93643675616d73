"""Operator scripts for MoneytreeToken and its Uniswap V2 pair."""

__version__ = "0.1.0"
