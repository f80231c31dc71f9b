"""Configuration for the expense sandbox.

Values are plain module-level constants; a few can be overridden through
environment variables so the console runner and the dashboard agree on them.
"""

from __future__ import annotations

import os
from decimal import Decimal

# Currency suffix appended to every formatted amount
CURRENCY = os.getenv("EXPENSES_CURRENCY", "SEK")

# Budget used by the monadic composition demo
DEFAULT_BUDGET = Decimal(os.getenv("EXPENSES_DEFAULT_BUDGET", "500"))

TAX_RATE = Decimal("0.1")

# "Expensive" lookup in the option demo and the filter in the pipeline demo
EXPENSIVE_THRESHOLD = Decimal("100")
PIPELINE_THRESHOLD = Decimal("20")

# Remaining budget below this is reported as close to the limit
CLOSE_TO_LIMIT = Decimal("100")

VALID_CATEGORIES = ("Food", "Transport", "Entertainment", "Shopping")
DEFAULT_CATEGORY_COLOR = "#000000"

LOG_LEVEL_ENV = "EXPENSES_LOG_LEVEL"
