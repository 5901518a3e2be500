"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

AMOUNT_QUANTUM = Decimal("0.01")
DEFAULT_FETCH_WORKERS = 3
DEFAULT_METRIC_LABEL = "Units"
HOURS_METRIC_LABEL = "Hours"
DEFAULT_CURRENCY_SYMBOL = "$"
SYSTEM_SENDER_ID = "SYSTEM"
SUMMARY_PROJECT_ID = "SUMMARY_BILLING"
SUMMARY_PROJECT_NAME = "Period Summary"
