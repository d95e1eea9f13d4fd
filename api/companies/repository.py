"""
Company listing. The sample schema names this table `company` (singular).
"""

from __future__ import annotations

from core.pipeline import Route

LIST_COMPANIES = Route(name="list_companies", query="SELECT * FROM company")
