"""Singly linked lists and bounded sequential lists, with interactive shells."""

__version__ = "0.1.0"
__all__ = ["chain_table", "linear_table", "chain_app", "linear_app"]