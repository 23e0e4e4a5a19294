"""
Вспомогательные примитивы: строковые утилиты, статистика и диапазоны Unicode.
"""

from .string_utils import (
    count_capitals,
    count_consecutive_occurs,
    is_capitalized,
    lcp_array,
    longest_repeated_strings,
    suffix_array,
    unique_char_counts,
    unique_chars,
)
from .stats import mean, ratio_neg_if_empty, ratio_zero_if_empty, sample_variance
from .unicode_ranges import (
    UNICODE_RANGES,
    RangeCount,
    UnicodeRange,
    locale_keys,
    range_for_char,
    unicode_counts,
)

__all__ = [
    'count_capitals',
    'count_consecutive_occurs',
    'is_capitalized',
    'lcp_array',
    'longest_repeated_strings',
    'suffix_array',
    'unique_char_counts',
    'unique_chars',
    'mean',
    'ratio_neg_if_empty',
    'ratio_zero_if_empty',
    'sample_variance',
    'UNICODE_RANGES',
    'RangeCount',
    'UnicodeRange',
    'locale_keys',
    'range_for_char',
    'unicode_counts',
]
