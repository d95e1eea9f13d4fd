"""
Customers persistence (read-only).
"""

from __future__ import annotations

from core.pipeline import Route

LIST_CUSTOMERS = Route(name="list_customers", query="SELECT * FROM customer")
