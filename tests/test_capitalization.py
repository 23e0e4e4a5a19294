"""
Тесты для модуля заглавных букв.
"""

import pytest

from char_features.components.capitalization import CapitalizationFeatures, token_text
from char_features.interfaces import FeatureType, Token


class TestCapitalizationFeatures:

    def setup_method(self):
        self.module = CapitalizationFeatures()

    def test_input_kind(self):
        assert self.module.input_kind == 'tokens'

    def test_describe(self):
        metas = self.module.describe()
        assert len(metas) == 7
        assert metas[-1].name == 'cap-utterance'
        assert metas[-1].type is FeatureType.BOOLEAN

    def test_counts(self, tokens_factory):
        """Тест: Yes / NO / maybe."""
        features = self.module.compute(tokens_factory("Yes", "NO", "maybe"))
        assert features['caps-first-char-count'] == 2
        assert features['caps-first-char-ratio'] == pytest.approx(2 / 3)
        assert features['caps-capitalized-count'] == 2
        assert features['caps-capitalized-ratio'] == pytest.approx(2 / 3)
        assert features['caps-all-count'] == 1
        assert features['caps-all-ratio'] == pytest.approx(1 / 3)
        assert features['cap-utterance'] is True

    def test_mixed_case_token(self):
        """Тест: 'YEs' начинается с заглавной, но не считается capitalized."""
        features = self.module.compute(["YEs"])
        assert features['caps-first-char-count'] == 1
        assert features['caps-capitalized-count'] == 0
        assert features['caps-all-count'] == 0

    def test_empty_tokens(self):
        features = self.module.compute([])
        assert features['caps-first-char-count'] == 0
        assert features['caps-first-char-ratio'] == 0
        assert features['caps-all-ratio'] == 0
        assert features['cap-utterance'] is False

    def test_utterance_lowercase_start(self, tokens_factory):
        assert self.module.compute(tokens_factory("hello", "World"))['cap-utterance'] is False

    def test_token_text_accepts_strings_and_objects(self):
        assert token_text("abc") == "abc"
        assert token_text(Token("Hola", 0, 4)) == "Hola"

    def test_keys_match_describe(self, tokens_factory):
        assert list(self.module.compute(tokens_factory("A", "b"))) == self.module.feature_names()
