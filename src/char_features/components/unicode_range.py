"""
Компонент признаков диапазонов Unicode.

Определяет, какие диапазоны Unicode преобладают в тексте (без пробелов)
и насколько равномерно символы распределены между диапазонами.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..interfaces.feature_extractor import FeatureExtractorInterface, FeatureMeta, FeatureSlot
from ..utils.stats import ratio_zero_if_empty, sample_variance
from ..utils.unicode_ranges import RangeCount, locale_keys, unicode_counts

logger = logging.getLogger(__name__)

# Метка для ранга, которому не нашлось диапазона
NONE_LABEL = 'none'

WHITESPACE_PATTERN = re.compile(r'\s+')


@dataclass(frozen=True)
class RangeRank:
    """Диапазон на заданном ранге и доля его символов."""
    name: str
    ratio: float


@dataclass(frozen=True)
class UnicodeRangeResult:
    ranks: Tuple[RangeRank, ...]
    variance: float
    text_length: int


def range_variance(counts: Sequence[RangeCount], total: int) -> float:
    """
    Дисперсия счётчиков диапазонов с добавленным «остатком».

    Остаток — символы, не попавшие ни в один диапазон. Если значений
    меньше двух, возвращается 0.
    """
    values = [c.count for c in counts]
    values.append(total - sum(values))
    if len(values) <= 1:
        return 0
    return sample_variance(values)


class UnicodeRangeFeatures(FeatureExtractorInterface[UnicodeRangeResult]):
    """
    Признаки диапазонов Unicode:

    * unicode-range-name-N — имя диапазона на N-м месте по числу символов
    * unicode-range-ratio-N — доля символов этого диапазона
    * unicode-variance — дисперсия счётчиков по диапазонам
    """

    name = 'unicode'
    input_kind = 'text'

    def __init__(self, nth_best: int = 3):
        """
        Инициализирует модуль.

        Args:
            nth_best: Сколько лучших диапазонов выдавать (ранги 0..nth_best-1)
        """
        if nth_best < 1:
            raise ValueError(f"nth_best должно быть >= 1, получено {nth_best}")
        self.nth_best = nth_best
        super().__init__()

    @staticmethod
    def range_domain() -> Tuple[str, ...]:
        """Домен категориальных признаков: все диапазоны и метка 'none'."""
        return locale_keys() + (NONE_LABEL,)

    def analyze(self, text: str) -> UnicodeRangeResult:
        text = WHITESPACE_PATTERN.sub('', text)
        length = len(text)
        counts = unicode_counts(text, best_match=True)
        ranked = sorted(counts, key=lambda c: c.count, reverse=True)
        logger.debug(f"Диапазоны Unicode: {[(c.name, c.count) for c in ranked]}")

        ranks = []
        for index in range(self.nth_best):
            if index < len(ranked):
                found = ranked[index]
                ranks.append(RangeRank(found.name, ratio_zero_if_empty(found.count, length)))
            else:
                ranks.append(RangeRank(NONE_LABEL, 0))

        return UnicodeRangeResult(
            ranks=tuple(ranks),
            variance=range_variance(counts, length),
            text_length=length,
        )

    def _build_slots(self) -> List[FeatureSlot]:
        domain = self.range_domain()
        slots: List[FeatureSlot] = []
        for index in range(self.nth_best):
            slots.append(FeatureSlot(
                FeatureMeta.categorical(f'unicode-range-name-{index}', domain),
                lambda r, i=index: r.ranks[i].name,
            ))
            slots.append(FeatureSlot(
                FeatureMeta.numeric(f'unicode-range-ratio-{index}'),
                lambda r, i=index: r.ranks[i].ratio,
            ))
        slots.append(FeatureSlot(FeatureMeta.numeric('unicode-variance'), lambda r: r.variance))
        return slots
