"""
Roman numerals for dial hour labels
"""

ROMAN_NUMERALS = (
    'I', 'II', 'III', 'IV', 'V', 'VI',
    'VII', 'VIII', 'IX', 'X', 'XI', 'XII',
)


def roman_numeral_for_hour(hour24: int) -> str:
    """
    Roman numeral for a 24-hour clock hour, in 12-hour form.

    Args:
        hour24: Hour of day; any integer, wrapped modulo 12

    Returns:
        One of 'I'..'XII' (midnight and noon are 'XII')
    """
    hour12 = ((hour24 % 12) + 12) % 12 or 12
    return ROMAN_NUMERALS[hour12 - 1]
