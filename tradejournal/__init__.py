"""
TradeJournal - Personal Trading Journal

A self-hosted Python journal for recording trading accounts and
individual trades in a local SQLite file, with aggregate
performance statistics per account.
"""

__version__ = "0.1.0"
