"""
Сборка вектора признаков из нескольких модулей.

Явный шаг объединения: метаданные всех модулей склеиваются в порядке
модулей, совпадающие имена признаков считаются ошибкой. Для набора
документов строится pandas.DataFrame с колонками в порядке схемы.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..interfaces.feature_extractor import (
    FeatureExtractorInterface,
    FeatureMeta,
    FeatureType,
    FeatureValue,
    Token,
)
from .capitalization import CapitalizationFeatures
from .char_distribution import CharDistributionFeatures
from .punctuation import PunctuationFeatures
from .repeating import RepeatingStringFeatures
from .unicode_range import UnicodeRangeFeatures

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r'\S+')


class FeatureCollisionError(ValueError):
    """Два модуля объявляют признак с одним и тем же именем."""


@dataclass(frozen=True)
class Document:
    """Входные данные для всех модулей: текст и его токены."""
    text: str
    tokens: Tuple[Any, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "Document":
        """Документ с токенами, разделёнными пробелами (не лингвистическая токенизация)."""
        tokens = tuple(Token(m.group(), m.start(), m.end()) for m in TOKEN_PATTERN.finditer(text))
        return cls(text=text, tokens=tokens)


@dataclass(frozen=True)
class FeatureVector:
    """Упорядоченный вектор признаков со схемой."""
    metas: Tuple[FeatureMeta, ...]
    values: Tuple[FeatureValue, ...]

    @property
    def names(self) -> List[str]:
        return [meta.name for meta in self.metas]

    def to_dict(self) -> Dict[str, FeatureValue]:
        return dict(zip(self.names, self.values))

    def __len__(self) -> int:
        return len(self.values)


class FeatureVectorAssembler:
    """Объединяет модули признаков в один вектор."""

    def __init__(self, extractors: Sequence[FeatureExtractorInterface]):
        """
        Args:
            extractors: Модули признаков в порядке следования в векторе

        Raises:
            FeatureCollisionError: если имена признаков двух модулей совпадают
        """
        self.extractors: Tuple[FeatureExtractorInterface, ...] = tuple(extractors)
        self._metas: Tuple[FeatureMeta, ...] = self._collect_metas()

    def _collect_metas(self) -> Tuple[FeatureMeta, ...]:
        owners: Dict[str, str] = {}
        metas: List[FeatureMeta] = []
        for extractor in self.extractors:
            for meta in extractor.describe():
                if meta.name in owners:
                    raise FeatureCollisionError(
                        f"Признак '{meta.name}' объявлен модулями '{owners[meta.name]}' и '{extractor.name}'"
                    )
                owners[meta.name] = extractor.name
                metas.append(meta)
        return tuple(metas)

    def describe(self) -> List[FeatureMeta]:
        """Схема итогового вектора."""
        return list(self._metas)

    @staticmethod
    def _input_for(extractor: FeatureExtractorInterface, document: Document) -> Any:
        return document.tokens if extractor.input_kind == 'tokens' else document.text

    def compute(self, document: Document) -> Dict[str, FeatureValue]:
        """Карта признаков документа от всех модулей."""
        features: Dict[str, FeatureValue] = {}
        for extractor in self.extractors:
            features.update(extractor.compute(self._input_for(extractor, document)))
        return features

    def assemble(self, document: Document) -> FeatureVector:
        """Вектор признаков документа в порядке схемы."""
        features = self.compute(document)
        return FeatureVector(
            metas=self._metas,
            values=tuple(features[meta.name] for meta in self._metas),
        )

    def assemble_frame(self, documents: Iterable[Document]) -> pd.DataFrame:
        """
        Таблица признаков: строка на документ, колонки в порядке схемы.

        Категориальные признаки получают тип pandas.Categorical с объявленным
        доменом, булевы — bool.
        """
        names = [meta.name for meta in self._metas]
        rows = [self.assemble(document).values for document in documents]
        frame = pd.DataFrame(rows, columns=names)
        for meta in self._metas:
            if meta.type is FeatureType.CATEGORICAL:
                frame[meta.name] = pd.Categorical(frame[meta.name], categories=list(meta.domain or ()))
            elif meta.type is FeatureType.BOOLEAN:
                frame[meta.name] = frame[meta.name].astype(bool)
        logger.info(f"Собрана таблица признаков: {len(frame)} документов x {len(names)} признаков")
        return frame


EXTRACTOR_FACTORIES: Dict[str, Callable[[int, int], FeatureExtractorInterface]] = {
    'repeating': lambda repeats, nth_best: RepeatingStringFeatures(unique_char_repeats=repeats),
    'char_distribution': lambda repeats, nth_best: CharDistributionFeatures(),
    'punctuation': lambda repeats, nth_best: PunctuationFeatures(),
    'unicode': lambda repeats, nth_best: UnicodeRangeFeatures(nth_best=nth_best),
    'capitalization': lambda repeats, nth_best: CapitalizationFeatures(),
}


def build_default_assembler(
    cfg=None,
    unique_char_repeats: Optional[int] = None,
    nth_best: Optional[int] = None,
    modules: Optional[Sequence[str]] = None,
) -> FeatureVectorAssembler:
    """
    Создаёт сборщик из модулей, указанных в конфигурации.

    Args:
        cfg: Конфигурация (по умолчанию глобальная)
        unique_char_repeats: Переопределение числа корзин модуля повторов
        nth_best: Переопределение числа рангов модуля Unicode
        modules: Переопределение списка модулей

    Raises:
        ValueError: если указан неизвестный модуль
    """
    if cfg is None:
        from ..config import config as cfg

    repeats = unique_char_repeats if unique_char_repeats is not None else cfg.get_unique_char_repeats()
    best = nth_best if nth_best is not None else cfg.get_nth_best_unicodes()
    names = list(modules) if modules is not None else cfg.get_enabled_modules()

    unknown = [name for name in names if name not in EXTRACTOR_FACTORIES]
    if unknown:
        raise ValueError(f"Неизвестные модули признаков: {unknown}")

    extractors = [EXTRACTOR_FACTORIES[name](repeats, best) for name in names]
    logger.debug(f"Сборщик признаков: модули={names}, unique_char_repeats={repeats}, nth_best={best}")
    return FeatureVectorAssembler(extractors)
