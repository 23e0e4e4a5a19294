"""
Компонент признаков повторяющихся подстрок.

Описывает самую длинную повторяющуюся подстроку текста и для каждого
числа уникальных символов от 1 до N сообщает, сколько раз подряд
повторяется строка с таким числом уникальных символов и какова её длина.

Пример для N = 3 и текста ``"abcabc aabb"``::

    lrs-len 3, lrs-unique-chars 3            # 'abc'
    lrs-occurs-1 2, lrs-length-1 1           # 'a' в 'aa'
    lrs-occurs-2 1, lrs-length-2 2           # 'ab'
    lrs-occurs-3 2, lrs-length-3 3           # 'abcabc'
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ..interfaces.feature_extractor import FeatureExtractorInterface, FeatureMeta, FeatureSlot
from ..utils.stats import ratio_neg_if_empty
from ..utils.string_utils import count_consecutive_occurs, longest_repeated_strings, unique_chars

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r'\s+')


@dataclass(frozen=True)
class RepeatedString:
    """Повторяющаяся подстрока и её характеристики."""
    text: str
    length: int
    occurs: int
    unique: int


# Запись-заглушка, когда повторов нет
NO_REPEAT = RepeatedString(text="", length=-1, occurs=-1, unique=-1)


@dataclass(frozen=True)
class RepeatBucket:
    """Повтор с заданным числом уникальных символов (-1 во всех полях — не найден)."""
    unique_chars: int
    occurs: int
    occurs_ratio: float
    length: int

    @classmethod
    def missing(cls, unique_chars: int) -> "RepeatBucket":
        return cls(unique_chars=unique_chars, occurs=-1, occurs_ratio=-1, length=-1)


@dataclass(frozen=True)
class RepeatingStringResult:
    """Результат анализа повторов."""
    longest: RepeatedString
    buckets: Tuple[RepeatBucket, ...]
    text_length: int


def collapse_whitespace(text: str) -> str:
    """Схлопывает последовательности пробельных символов в один пробел."""
    return WHITESPACE_PATTERN.sub(' ', text)


def _bucket_field(index: int, field: str) -> Callable[[RepeatingStringResult], float]:
    return lambda result: getattr(result.buckets[index], field)


class RepeatingStringFeatures(FeatureExtractorInterface[RepeatingStringResult]):
    """Признаки самой длинной повторяющейся подстроки."""

    name = 'repeating'
    input_kind = 'text'

    def __init__(self, unique_char_repeats: int = 7):
        """
        Инициализирует модуль.

        Args:
            unique_char_repeats: Число корзин N (уникальных символов 1..N)
        """
        if unique_char_repeats < 1:
            raise ValueError(f"unique_char_repeats должно быть >= 1, получено {unique_char_repeats}")
        self.unique_char_repeats = unique_char_repeats
        super().__init__()

    def repeated_strings(self, text: str) -> List[RepeatedString]:
        """Кандидаты-повторы с длиной, числом подряд идущих копий и уникальных символов."""
        return [
            RepeatedString(
                text=rs,
                length=len(rs),
                occurs=count_consecutive_occurs(rs, text),
                unique=len(unique_chars(rs)),
            )
            for rs in longest_repeated_strings(text)
        ]

    @staticmethod
    def sort_by_occurs(reps: Sequence[RepeatedString]) -> List[RepeatedString]:
        """Шаг 1: устойчивая сортировка по убыванию числа повторов."""
        return sorted(reps, key=lambda rep: rep.occurs, reverse=True)

    @staticmethod
    def select_longest(reps_by_occurs: Sequence[RepeatedString]) -> RepeatedString:
        """Шаг 2: устойчивая сортировка результата шага 1 по убыванию длины, берётся первый.

        При равной длине выигрывает запись, стоявшая выше после шага 1.
        """
        return sorted(reps_by_occurs, key=lambda rep: rep.length, reverse=True)[0]

    @staticmethod
    def select_bucket(reps_by_occurs: Sequence[RepeatedString], unique: int, text_length: int) -> RepeatBucket:
        """Первый (в порядке шага 1) повтор ровно с ``unique`` уникальными символами."""
        for rep in reps_by_occurs:
            if rep.unique == unique:
                return RepeatBucket(
                    unique_chars=unique,
                    occurs=rep.occurs,
                    occurs_ratio=ratio_neg_if_empty(rep.occurs, text_length),
                    length=rep.length,
                )
        return RepeatBucket.missing(unique)

    def analyze(self, text: str) -> RepeatingStringResult:
        text = collapse_whitespace(text)
        reps = self.repeated_strings(text) or [NO_REPEAT]
        logger.debug(f"Повторов найдено: {len(reps)} (длина текста {len(text)})")

        by_occurs = self.sort_by_occurs(reps)
        longest = self.select_longest(by_occurs)
        buckets = tuple(
            self.select_bucket(by_occurs, unique, len(text))
            for unique in range(1, self.unique_char_repeats + 1)
        )
        return RepeatingStringResult(longest=longest, buckets=buckets, text_length=len(text))

    def _build_slots(self) -> List[FeatureSlot]:
        slots: List[FeatureSlot] = [
            FeatureSlot(FeatureMeta.numeric('lrs-len'), lambda r: r.longest.length),
            FeatureSlot(FeatureMeta.numeric('lrs-unique-chars'), lambda r: r.longest.unique),
        ]
        for index, unique in enumerate(range(1, self.unique_char_repeats + 1)):
            slots.extend([
                FeatureSlot(FeatureMeta.numeric(f'lrs-occurs-{unique}'), _bucket_field(index, 'occurs')),
                FeatureSlot(FeatureMeta.numeric(f'lrs-occurs-ratio-{unique}'), _bucket_field(index, 'occurs_ratio')),
                FeatureSlot(FeatureMeta.numeric(f'lrs-length-{unique}'), _bucket_field(index, 'length')),
            ])
        return slots
