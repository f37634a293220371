"""
Installment Rules for the Credit System.

A credit's first installment must fall inside the installment window:
strictly after today and no later than today plus a fixed number of
calendar months. Month arithmetic follows relativedelta, so
Nov 30 + 3 months is Feb 28 (or 29).
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from .settings import RuleSettings, rule_settings


def installment_window_limit(
    today: Optional[date] = None,
    settings: RuleSettings = rule_settings,
) -> date:
    """Return the last date on which a first installment may fall."""
    today = today or date.today()
    return today + relativedelta(months=settings.installment_window_months)


def date_within_next_three_months(
    value: Optional[date],
    today: Optional[date] = None,
    settings: RuleSettings = rule_settings,
) -> bool:
    """
    Check that a date is not after the end of the installment window.

    A missing date is valid here; presence is checked elsewhere.

    Args:
        value: The proposed first installment date
        today: Reference date, defaults to date.today()
        settings: Rule settings (uses defaults if not provided)

    Returns:
        True if value is None or value <= today + window
    """
    if value is None:
        return True

    return not value > installment_window_limit(today, settings)


def is_future_date(value: Optional[date], today: Optional[date] = None) -> bool:
    """Check that a date is strictly after today. None is valid."""
    if value is None:
        return True

    return value > (today or date.today())


def is_within_installment_window(
    value: Optional[date],
    today: Optional[date] = None,
    settings: RuleSettings = rule_settings,
) -> bool:
    """
    Check the full installment window: strictly future and not too far out.

    Args:
        value: The proposed first installment date
        today: Reference date, defaults to date.today()
        settings: Rule settings (uses defaults if not provided)

    Returns:
        True if value is None or falls inside (today, today + window]
    """
    today = today or date.today()
    return is_future_date(value, today) and date_within_next_three_months(
        value, today, settings
    )


def is_valid_installment_count(
    count: Optional[int],
    settings: RuleSettings = rule_settings,
) -> bool:
    """Check that an installment count lies within the configured bounds."""
    if count is None:
        return False

    return settings.min_installments <= count <= settings.max_installments
