"""
Компонент признаков пунктуации.

Считает знаки препинания естественного языка и прочие нелатинские
(не буквенно-цифровые) символы латинской раскладки.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List

from ..interfaces.feature_extractor import FeatureExtractorInterface, FeatureMeta, FeatureSlot
from ..utils.stats import ratio_neg_if_empty

logger = logging.getLogger(__name__)

# Пунктуация предложений в нескольких языках с латинским письмом
PUNCTUATION: FrozenSet[str] = frozenset(".!¿?,:;")

# Латинская раскладка без букв и цифр
LATIN_NON_ALPHA_NUMERIC: FrozenSet[str] = PUNCTUATION | frozenset("~@#$%^&*(){}[]<>|\\/-+_")


@dataclass(frozen=True)
class PunctuationResult:
    """Счётчики пунктуации и их доли от длины текста (-1 для пустого текста)."""
    punctuation_count: int
    punctuation_ratio: float
    latin_non_alpha_numeric_count: int
    latin_non_alpha_numeric_ratio: float
    question_count: int
    question_ratio: float
    exclamation_count: int
    exclamation_ratio: float


class PunctuationFeatures(FeatureExtractorInterface[PunctuationResult]):
    """
    Признаки пунктуации.

    Восклицательные знаки выдаются под ключами explanation-count/-ratio:
    эти имена ожидают уже обученные на признаках модели.
    """

    name = 'punctuation'
    input_kind = 'text'

    def analyze(self, text: str) -> PunctuationResult:
        punc = latin_nan = question = exclamation = 0
        for char in text:
            if char in PUNCTUATION:
                punc += 1
            if char in LATIN_NON_ALPHA_NUMERIC:
                latin_nan += 1
            if char == '?':
                question += 1
            elif char == '!':
                exclamation += 1

        length = len(text)
        logger.debug(f"Пунктуация: {punc} знаков на {length} символов")
        return PunctuationResult(
            punctuation_count=punc,
            punctuation_ratio=ratio_neg_if_empty(punc, length),
            latin_non_alpha_numeric_count=latin_nan,
            latin_non_alpha_numeric_ratio=ratio_neg_if_empty(latin_nan, length),
            question_count=question,
            question_ratio=ratio_neg_if_empty(question, length),
            exclamation_count=exclamation,
            exclamation_ratio=ratio_neg_if_empty(exclamation, length),
        )

    def _build_slots(self) -> List[FeatureSlot]:
        return [
            FeatureSlot(FeatureMeta.numeric('punctuation-count'), lambda r: r.punctuation_count),
            FeatureSlot(FeatureMeta.numeric('punctuation-ratio'), lambda r: r.punctuation_ratio),
            FeatureSlot(FeatureMeta.numeric('question-count'), lambda r: r.question_count),
            FeatureSlot(FeatureMeta.numeric('question-ratio'), lambda r: r.question_ratio),
            FeatureSlot(FeatureMeta.numeric('explanation-count'), lambda r: r.exclamation_count),
            FeatureSlot(FeatureMeta.numeric('explanation-ratio'), lambda r: r.exclamation_ratio),
            FeatureSlot(FeatureMeta.numeric('latin-non-alpha-numeric-count'),
                        lambda r: r.latin_non_alpha_numeric_count),
            FeatureSlot(FeatureMeta.numeric('latin-non-alpha-numeric-ratio'),
                        lambda r: r.latin_non_alpha_numeric_ratio),
        ]
