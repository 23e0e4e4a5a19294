"""
char_features - признаки символьного уровня для текстов

Этот модуль предоставляет:
- Признаки повторяющихся подстрок
- Распределение частот символов
- Плотность пунктуации
- Состав текста по диапазонам Unicode
- Признаки заглавных букв в токенах
- Сборку вектора признаков со схемой и экспорт таблиц
"""

__version__ = "0.1.0"

from .interfaces import FeatureMeta, FeatureType, Token
from .components import (
    CapitalizationFeatures,
    CharDistributionFeatures,
    Document,
    FeatureCollisionError,
    FeatureExporter,
    FeatureVector,
    FeatureVectorAssembler,
    PunctuationFeatures,
    RepeatingStringFeatures,
    UnicodeRangeFeatures,
    build_default_assembler,
)
from . import cli

__all__ = [
    "FeatureMeta",
    "FeatureType",
    "Token",
    "CapitalizationFeatures",
    "CharDistributionFeatures",
    "Document",
    "FeatureCollisionError",
    "FeatureExporter",
    "FeatureVector",
    "FeatureVectorAssembler",
    "PunctuationFeatures",
    "RepeatingStringFeatures",
    "UnicodeRangeFeatures",
    "build_default_assembler",
    "cli",
]
