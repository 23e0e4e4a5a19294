"""
Модули признаков символьного уровня.

Каждый модуль отвечает за одну группу признаков:
- RepeatingStringFeatures - повторяющиеся подстроки
- CharDistributionFeatures - распределение частот символов
- PunctuationFeatures - пунктуация
- UnicodeRangeFeatures - диапазоны Unicode
- CapitalizationFeatures - заглавные буквы в токенах
- FeatureVectorAssembler - сборка итогового вектора
- FeatureExporter - экспорт результатов
"""

from .repeating import RepeatingStringFeatures, RepeatingStringResult, RepeatedString, RepeatBucket
from .char_distribution import CharDistributionFeatures, CharDistributionResult
from .punctuation import PunctuationFeatures, PunctuationResult
from .unicode_range import UnicodeRangeFeatures, UnicodeRangeResult, RangeRank, NONE_LABEL
from .capitalization import CapitalizationFeatures, CapitalizationResult
from .assembler import (
    Document,
    FeatureCollisionError,
    FeatureVector,
    FeatureVectorAssembler,
    build_default_assembler,
)
from .exporter import FeatureExporter

__all__ = [
    'RepeatingStringFeatures',
    'RepeatingStringResult',
    'RepeatedString',
    'RepeatBucket',
    'CharDistributionFeatures',
    'CharDistributionResult',
    'PunctuationFeatures',
    'PunctuationResult',
    'UnicodeRangeFeatures',
    'UnicodeRangeResult',
    'RangeRank',
    'NONE_LABEL',
    'CapitalizationFeatures',
    'CapitalizationResult',
    'Document',
    'FeatureCollisionError',
    'FeatureVector',
    'FeatureVectorAssembler',
    'build_default_assembler',
    'FeatureExporter',
]
