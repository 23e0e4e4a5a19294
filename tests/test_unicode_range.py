"""
Тесты для модуля диапазонов Unicode.
"""

import pytest

from char_features.components.unicode_range import (
    NONE_LABEL,
    UnicodeRangeFeatures,
    range_variance,
)
from char_features.interfaces import FeatureType
from char_features.utils.unicode_ranges import RangeCount, locale_keys


class TestUnicodeRangeDescribe:

    def test_key_layout(self):
        metas = UnicodeRangeFeatures(nth_best=2).describe()
        assert [m.name for m in metas] == [
            'unicode-range-name-0', 'unicode-range-ratio-0',
            'unicode-range-name-1', 'unicode-range-ratio-1',
            'unicode-variance',
        ]

    def test_categorical_domain(self):
        """Тест: домен содержит все диапазоны и метку 'none'."""
        meta = UnicodeRangeFeatures(nth_best=1).describe()[0]
        assert meta.type is FeatureType.CATEGORICAL
        assert meta.domain[-1] == NONE_LABEL
        assert set(locale_keys()) < set(meta.domain)

    @pytest.mark.parametrize("n", [1, 3, 5])
    def test_key_count(self, n):
        assert len(UnicodeRangeFeatures(nth_best=n).describe()) == 2 * n + 1

    def test_invalid_parameter(self):
        with pytest.raises(ValueError):
            UnicodeRangeFeatures(nth_best=0)


class TestUnicodeRangeCompute:

    def setup_method(self):
        self.module = UnicodeRangeFeatures(nth_best=3)

    def test_plain_ascii(self):
        """Тест: один диапазон, остальные ранги 'none'."""
        features = self.module.compute("hello world")
        assert features['unicode-range-name-0'] == 'basic-latin'
        assert features['unicode-range-ratio-0'] == pytest.approx(1.0)
        assert features['unicode-range-name-1'] == NONE_LABEL
        assert features['unicode-range-ratio-1'] == 0
        assert features['unicode-range-name-2'] == NONE_LABEL
        assert features['unicode-variance'] == pytest.approx(50.0)

    def test_empty_text(self):
        features = self.module.compute("")
        assert features['unicode-range-name-0'] == NONE_LABEL
        assert features['unicode-range-ratio-0'] == 0
        assert features['unicode-variance'] == 0

    def test_two_scripts(self):
        features = self.module.compute("abc пр")
        assert features['unicode-range-name-0'] == 'basic-latin'
        assert features['unicode-range-ratio-0'] == pytest.approx(0.6)
        assert features['unicode-range-name-1'] == 'cyrillic'
        assert features['unicode-range-ratio-1'] == pytest.approx(0.4)

    def test_narrowest_range_wins(self, sample_texts):
        """Тест: иероглифы относятся к узкому блоку, а не к общему 'cjk'."""
        features = self.module.compute(sample_texts["mixed"])
        assert features['unicode-range-name-0'] == 'basic-latin'
        assert features['unicode-range-ratio-0'] == pytest.approx(12 / 17)
        assert features['unicode-range-name-1'] == 'cyrillic'
        assert features['unicode-range-ratio-1'] == pytest.approx(3 / 17)
        assert features['unicode-range-name-2'] == 'cjk-unified-ideographs'
        assert features['unicode-range-ratio-2'] == pytest.approx(2 / 17)

    def test_unmatched_chars_go_to_remainder(self):
        features = UnicodeRangeFeatures(nth_best=1).compute("ab🚀")
        assert features['unicode-range-ratio-0'] == pytest.approx(2 / 3)
        assert features['unicode-variance'] == pytest.approx(0.5)

    def test_keys_match_describe(self, sample_texts):
        for text in sample_texts.values():
            assert list(self.module.compute(text)) == self.module.feature_names()


class TestRangeVariance:

    def test_single_value(self):
        assert range_variance([], 0) == 0

    def test_with_remainder(self):
        counts = [RangeCount('basic-latin', 3), RangeCount('cyrillic', 1)]
        # значения [3, 1, 0]
        assert range_variance(counts, 4) == pytest.approx(7 / 3)
