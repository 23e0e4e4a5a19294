"""
Компонент признаков заглавных букв по последовательности токенов.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

from ..interfaces.feature_extractor import FeatureExtractorInterface, FeatureMeta, FeatureSlot
from ..utils.stats import ratio_zero_if_empty
from ..utils.string_utils import count_capitals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapitalizationResult:
    """Счётчики заглавных букв; доли равны 0 при отсутствии токенов."""
    first_char_count: int
    first_char_ratio: float
    capitalized_count: int
    capitalized_ratio: float
    all_caps_count: int
    all_caps_ratio: float
    utterance: bool


def token_text(token: Any) -> str:
    """Текст токена: атрибут ``text`` или сама строка."""
    if isinstance(token, str):
        return token
    return token.text


class CapitalizationFeatures(FeatureExtractorInterface[CapitalizationResult]):
    """
    Признаки заглавных букв:

    * caps-first-char-count/-ratio — токены с заглавной первой буквой (`Yes`, `YEs`, `YES`)
    * caps-capitalized-count/-ratio — токены с заглавной буквы (`Yes`, а также `YES`)
    * caps-all-count/-ratio — токены целиком заглавными (`YES`)
    * cap-utterance — первый символ первого токена заглавный
    """

    name = 'capitalization'
    input_kind = 'tokens'

    def analyze(self, tokens: Sequence[Any]) -> CapitalizationResult:
        texts = [token_text(token) for token in tokens]
        logger.debug(f"Заглавные буквы для токенов: {texts!r}")
        first_char, capitalized, all_caps = count_capitals(texts)
        total = len(texts)
        return CapitalizationResult(
            first_char_count=first_char,
            first_char_ratio=ratio_zero_if_empty(first_char, total),
            capitalized_count=capitalized,
            capitalized_ratio=ratio_zero_if_empty(capitalized, total),
            all_caps_count=all_caps,
            all_caps_ratio=ratio_zero_if_empty(all_caps, total),
            utterance=bool(texts and texts[0] and texts[0][0].isupper()),
        )

    def _build_slots(self) -> List[FeatureSlot]:
        return [
            FeatureSlot(FeatureMeta.numeric('caps-first-char-count'), lambda r: r.first_char_count),
            FeatureSlot(FeatureMeta.numeric('caps-first-char-ratio'), lambda r: r.first_char_ratio),
            FeatureSlot(FeatureMeta.numeric('caps-capitalized-count'), lambda r: r.capitalized_count),
            FeatureSlot(FeatureMeta.numeric('caps-capitalized-ratio'), lambda r: r.capitalized_ratio),
            FeatureSlot(FeatureMeta.numeric('caps-all-count'), lambda r: r.all_caps_count),
            FeatureSlot(FeatureMeta.numeric('caps-all-ratio'), lambda r: r.all_caps_ratio),
            FeatureSlot(FeatureMeta.boolean('cap-utterance'), lambda r: r.utterance),
        ]
