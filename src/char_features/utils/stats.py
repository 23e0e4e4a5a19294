"""
Статистические помощники для признаков (отношения с «сторожевыми» значениями, дисперсия).
"""

from typing import Sequence

import numpy as np


def ratio_neg_if_empty(count: float, total: float) -> float:
    """count / total или -1, если total == 0."""
    if total == 0:
        return -1
    return count / total


def ratio_zero_if_empty(count: float, total: float) -> float:
    """count / total или 0, если total == 0."""
    if total == 0:
        return 0
    return count / total


def sample_variance(values: Sequence[float]) -> float:
    """Несмещённая выборочная дисперсия (делитель n - 1). Требует минимум два значения."""
    return float(np.var(np.asarray(values, dtype=float), ddof=1))


def mean(values: Sequence[float]) -> float:
    return float(np.mean(np.asarray(values, dtype=float)))
