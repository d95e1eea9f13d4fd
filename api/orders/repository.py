"""
Order SQL.
"""

from __future__ import annotations

from core.pipeline import Route

LIST_ORDERS = Route(name="list_orders", query="SELECT * FROM orders")
