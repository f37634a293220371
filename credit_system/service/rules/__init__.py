"""
Validation Rules for the Credit System
"""

from .settings import RuleSettings, rule_settings
from .installment import (
    date_within_next_three_months,
    installment_window_limit,
    is_future_date,
    is_valid_installment_count,
    is_within_installment_window,
)
from .tax_id import is_valid_tax_id, normalize_tax_id

__all__ = [
    # Settings
    "RuleSettings",
    "rule_settings",
    # Installments
    "date_within_next_three_months",
    "installment_window_limit",
    "is_future_date",
    "is_valid_installment_count",
    "is_within_installment_window",
    # Tax ID
    "is_valid_tax_id",
    "normalize_tax_id",
]
