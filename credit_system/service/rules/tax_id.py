"""
Tax ID Rules for the Credit System.

Customers are identified by a Brazilian CPF: eleven digits, the last
two being mod-11 check digits over the first nine and ten.
"""

import re
from typing import Optional

CPF_LENGTH = 11

_PUNCTUATION = re.compile(r"[.\-\s]")


def normalize_tax_id(value: str) -> str:
    """Strip the dots, dashes and spaces of a formatted CPF."""
    return _PUNCTUATION.sub("", value)


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_tax_id(value: Optional[str]) -> bool:
    """
    Validate a CPF number.

    Accepts both "28475934625" and "284.759.346-25". Sequences of a
    single repeated digit pass the checksum but are not issued, so
    they are rejected.

    Args:
        value: The CPF to validate

    Returns:
        True if the CPF is well formed and both check digits match
    """
    if not value:
        return False

    digits = normalize_tax_id(value)

    if len(digits) != CPF_LENGTH or not digits.isdigit():
        return False

    if len(set(digits)) == 1:
        return False

    first = _check_digit(digits[:9])
    second = _check_digit(digits[:10])

    return digits[9] == str(first) and digits[10] == str(second)
