"""
Компонент признаков распределения символов.

Отвечает за сводную статистику частот символов в тексте.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..interfaces.feature_extractor import FeatureExtractorInterface, FeatureMeta, FeatureSlot
from ..utils.stats import mean, ratio_neg_if_empty, sample_variance
from ..utils.string_utils import unique_char_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharDistributionResult:
    """Статистика частот символов."""
    unique: int
    unique_ratio: float
    count: int
    variance: float
    mean: float


class CharDistributionFeatures(FeatureExtractorInterface[CharDistributionResult]):
    """
    Признаки распределения символов:

    * char-dist-unique — число уникальных символов
    * char-dist-unique-ratio — отношение уникальных символов к длине текста
    * char-dist-count — длина текста
    * char-dist-variance — дисперсия частот символов
    * char-dist-mean — среднее частот символов
    """

    name = 'char_distribution'
    input_kind = 'text'

    def analyze(self, text: str) -> CharDistributionResult:
        counts = list(unique_char_counts(text).values())
        length = len(text)
        unique = len(counts)
        logger.debug(f"Распределение символов: {unique} уникальных из {length}")
        return CharDistributionResult(
            unique=unique,
            unique_ratio=ratio_neg_if_empty(unique, length),
            count=length,
            variance=-1 if unique <= 1 else sample_variance(counts),
            mean=-1 if length == 0 else mean(counts),
        )

    def _build_slots(self) -> List[FeatureSlot]:
        return [
            FeatureSlot(FeatureMeta.numeric('char-dist-unique'), lambda r: r.unique),
            FeatureSlot(FeatureMeta.numeric('char-dist-unique-ratio'), lambda r: r.unique_ratio),
            FeatureSlot(FeatureMeta.numeric('char-dist-variance'), lambda r: r.variance),
            FeatureSlot(FeatureMeta.numeric('char-dist-mean'), lambda r: r.mean),
            FeatureSlot(FeatureMeta.numeric('char-dist-count'), lambda r: r.count),
        ]
