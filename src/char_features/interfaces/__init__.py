"""
Интерфейсы для модулей извлечения признаков.

Определяет типы метаданных и абстрактный базовый класс для всех модулей,
обеспечивая единообразный API (compute/describe).
"""

from .feature_extractor import (
    FeatureExtractorInterface,
    FeatureMeta,
    FeatureSlot,
    FeatureType,
    FeatureValue,
    Token,
)

__all__ = [
    'FeatureExtractorInterface',
    'FeatureMeta',
    'FeatureSlot',
    'FeatureType',
    'FeatureValue',
    'Token',
]
