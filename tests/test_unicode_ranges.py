"""
Тесты для таблицы диапазонов Unicode.
"""

from char_features.utils.unicode_ranges import (
    UNICODE_RANGES,
    RangeCount,
    locale_keys,
    range_for_char,
    ranges_for_char,
    unicode_counts,
)


def test_locale_keys_are_unique():
    keys = locale_keys()
    assert len(keys) == len(UNICODE_RANGES)
    assert len(set(keys)) == len(keys)
    assert "basic-latin" in keys
    assert "cyrillic" in keys


def test_best_match_picks_narrowest_range():
    """Тест: символ относится к самому узкому из содержащих его диапазонов."""
    assert [r.name for r in ranges_for_char("中")] == ["cjk-unified-ideographs", "cjk"]
    assert range_for_char("a").name == "basic-latin"
    assert range_for_char("é").name == "latin-1-supplement"
    assert range_for_char("я").name == "cyrillic"
    assert range_for_char("中").name == "cjk-unified-ideographs"


def test_char_outside_all_ranges():
    assert range_for_char("\U0001F680") is None


def test_unicode_counts_best_match():
    assert unicode_counts("abя") == [RangeCount("basic-latin", 2), RangeCount("cyrillic", 1)]
    assert unicode_counts("") == []


def test_unicode_counts_all_matches():
    """Тест: без best_match символ учитывается во всех диапазонах."""
    assert unicode_counts("a中", best_match=False) == [
        RangeCount("basic-latin", 1),
        RangeCount("cjk-unified-ideographs", 1),
        RangeCount("cjk", 1),
    ]


def test_broad_cjk_range_wins_outside_blocks():
    """Тест: радикал CJK (U+2E80) не входит в узкие блоки и относится к 'cjk'."""
    assert range_for_char("⺀").name == "cjk"


def test_every_range_can_be_best_match():
    """Тест: у каждого диапазона есть символ, для которого он самый узкий."""
    for unicode_range in UNICODE_RANGES:
        assert any(
            range_for_char(chr(code)) == unicode_range
            for code in range(unicode_range.start, unicode_range.end + 1)
        ), unicode_range.name
