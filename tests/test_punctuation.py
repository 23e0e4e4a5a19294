"""
Тесты для модуля пунктуации.
"""

import pytest

from char_features.components.punctuation import (
    LATIN_NON_ALPHA_NUMERIC,
    PUNCTUATION,
    PunctuationFeatures,
)


class TestPunctuationFeatures:

    def setup_method(self):
        self.module = PunctuationFeatures()

    def test_describe_has_eight_numeric_keys(self):
        metas = self.module.describe()
        assert len(metas) == 8
        assert {m.type.value for m in metas} == {'numeric'}

    def test_character_classes(self):
        assert PUNCTUATION <= LATIN_NON_ALPHA_NUMERIC
        assert '¿' in PUNCTUATION
        assert '#' in LATIN_NON_ALPHA_NUMERIC and '#' not in PUNCTUATION

    def test_no_punctuation(self):
        """Тест: без пунктуации счётчик 0, доля 0 (не -1)."""
        features = self.module.compute("Hello world")
        assert features['punctuation-count'] == 0
        assert features['punctuation-ratio'] == 0

    def test_empty_text(self):
        features = self.module.compute("")
        for key in ('punctuation', 'question', 'explanation', 'latin-non-alpha-numeric'):
            assert features[f'{key}-count'] == 0
            assert features[f'{key}-ratio'] == -1

    def test_counts(self):
        text = "¿Qué? ¡Sí! #tag"
        features = self.module.compute(text)
        assert features['punctuation-count'] == 3
        assert features['punctuation-ratio'] == pytest.approx(3 / 15)
        assert features['question-count'] == 1
        assert features['explanation-count'] == 1
        assert features['latin-non-alpha-numeric-count'] == 4
        assert features['latin-non-alpha-numeric-ratio'] == pytest.approx(4 / 15)

    def test_keys_match_describe(self):
        assert list(self.module.compute("a, b; c!")) == self.module.feature_names()

    def test_exclamation_keys_keep_downstream_names(self):
        """Тест: восклицательные знаки выдаются под ключами explanation-*."""
        features = self.module.compute("a!")
        assert features['explanation-count'] == 1
        assert features['explanation-ratio'] == pytest.approx(0.5)
        assert 'exclamation-count' not in features
