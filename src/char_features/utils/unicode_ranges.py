"""
Таблица диапазонов Unicode и классификация символов по ним.

Имена диапазонов — блоки Unicode в kebab-case, плюс обобщённый
диапазон 'cjk', перекрывающий блоки.
При классификации «по лучшему совпадению» символ относится к самому узкому
диапазону, который его содержит.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple


class UnicodeRange(NamedTuple):
    """Именованный диапазон кодовых точек (границы включительно)."""
    name: str
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def contains(self, char: str) -> bool:
        return self.start <= ord(char) <= self.end


@dataclass(frozen=True)
class RangeCount:
    """Количество символов текста, отнесённых к диапазону."""
    name: str
    count: int


UNICODE_RANGES: Tuple[UnicodeRange, ...] = (
    UnicodeRange('basic-latin', 0x0000, 0x007F),
    UnicodeRange('latin-1-supplement', 0x0080, 0x00FF),
    UnicodeRange('latin-extended-a', 0x0100, 0x017F),
    UnicodeRange('latin-extended-b', 0x0180, 0x024F),
    UnicodeRange('ipa-extensions', 0x0250, 0x02AF),
    UnicodeRange('combining-diacritical-marks', 0x0300, 0x036F),
    UnicodeRange('greek', 0x0370, 0x03FF),
    UnicodeRange('cyrillic', 0x0400, 0x04FF),
    UnicodeRange('armenian', 0x0530, 0x058F),
    UnicodeRange('hebrew', 0x0590, 0x05FF),
    UnicodeRange('arabic', 0x0600, 0x06FF),
    UnicodeRange('devanagari', 0x0900, 0x097F),
    UnicodeRange('bengali', 0x0980, 0x09FF),
    UnicodeRange('tamil', 0x0B80, 0x0BFF),
    UnicodeRange('thai', 0x0E00, 0x0E7F),
    UnicodeRange('georgian', 0x10A0, 0x10FF),
    UnicodeRange('hangul-jamo', 0x1100, 0x11FF),
    UnicodeRange('latin-extended-additional', 0x1E00, 0x1EFF),
    UnicodeRange('greek-extended', 0x1F00, 0x1FFF),
    UnicodeRange('general-punctuation', 0x2000, 0x206F),
    UnicodeRange('currency-symbols', 0x20A0, 0x20CF),
    UnicodeRange('letterlike-symbols', 0x2100, 0x214F),
    UnicodeRange('arrows', 0x2190, 0x21FF),
    UnicodeRange('mathematical-operators', 0x2200, 0x22FF),
    UnicodeRange('box-drawing', 0x2500, 0x257F),
    UnicodeRange('cjk-symbols-and-punctuation', 0x3000, 0x303F),
    UnicodeRange('hiragana', 0x3040, 0x309F),
    UnicodeRange('katakana', 0x30A0, 0x30FF),
    UnicodeRange('cjk-unified-ideographs', 0x4E00, 0x9FFF),
    UnicodeRange('hangul-syllables', 0xAC00, 0xD7AF),
    UnicodeRange('halfwidth-and-fullwidth-forms', 0xFF00, 0xFFEF),
    UnicodeRange('emoticons', 0x1F600, 0x1F64F),
    # Обобщённый CJK для символов вне узких блоков (радикалы, бопомофо)
    UnicodeRange('cjk', 0x2E80, 0x9FFF),
)


def locale_keys() -> Tuple[str, ...]:
    """Все известные имена диапазонов (домен категориальных признаков)."""
    return tuple(r.name for r in UNICODE_RANGES)


def ranges_for_char(char: str) -> List[UnicodeRange]:
    """Все диапазоны, содержащие символ, в порядке таблицы."""
    return [r for r in UNICODE_RANGES if r.contains(char)]


def range_for_char(char: str) -> Optional[UnicodeRange]:
    """Самый узкий диапазон, содержащий символ (None, если таких нет)."""
    best: Optional[UnicodeRange] = None
    for r in ranges_for_char(char):
        if best is None or r.size < best.size:
            best = r
    return best


def unicode_counts(text: str, best_match: bool = True) -> List[RangeCount]:
    """
    Подсчитывает символы текста по диапазонам Unicode.

    Args:
        text: Текст для анализа
        best_match: Относить символ только к самому узкому диапазону;
            иначе символ учитывается во всех содержащих его диапазонах

    Returns:
        Ненулевые счётчики в порядке таблицы диапазонов
    """
    counts: Dict[str, int] = {}
    for char in text:
        if best_match:
            found = range_for_char(char)
            matched = [found] if found is not None else []
        else:
            matched = ranges_for_char(char)
        for r in matched:
            counts[r.name] = counts.get(r.name, 0) + 1
    return [RangeCount(r.name, counts[r.name]) for r in UNICODE_RANGES if r.name in counts]
