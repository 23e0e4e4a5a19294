"""
Строковые примитивы для модулей признаков.

- поиск повторяющихся подстрок (суффиксный массив + LCP)
- подсчёт подряд идущих вхождений подстроки
- уникальные символы и их частоты
- подсчёт заглавных букв в токенах
"""

from collections import Counter
from typing import Dict, Iterable, List, Tuple

import numpy as np


def suffix_array(text: str) -> List[int]:
    """
    Строит суффиксный массив удвоением префиксов.

    Args:
        text: Исходный текст

    Returns:
        Позиции суффиксов в лексикографическом порядке
    """
    n = len(text)
    if n == 0:
        return []

    rank = np.fromiter((ord(ch) for ch in text), dtype=np.int64, count=n)
    k = 1
    while True:
        # Второй ключ: ранг суффикса через k символов, -1 за концом текста
        second = np.full(n, -1, dtype=np.int64)
        if k < n:
            second[:n - k] = rank[k:]
        order = np.lexsort((second, rank))

        sorted_rank = rank[order]
        sorted_second = second[order]
        changed = (sorted_rank[1:] != sorted_rank[:-1]) | (sorted_second[1:] != sorted_second[:-1])
        new_rank = np.empty(n, dtype=np.int64)
        new_rank[order] = np.concatenate(([0], np.cumsum(changed)))
        rank = new_rank

        if rank[order[-1]] == n - 1:
            break
        k *= 2
    return order.tolist()


def lcp_array(text: str, suffixes: List[int]) -> List[int]:
    """
    Длины общих префиксов соседних суффиксов (алгоритм Kasai).

    ``lcp[i]`` — общий префикс ``suffixes[i - 1]`` и ``suffixes[i]``, ``lcp[0] == 0``.
    """
    n = len(text)
    rank = [0] * n
    for index, pos in enumerate(suffixes):
        rank[pos] = index

    lcp = [0] * n
    h = 0
    for pos in range(n):
        if rank[pos] == 0:
            h = 0
            continue
        prev = suffixes[rank[pos] - 1]
        while pos + h < n and prev + h < n and text[pos + h] == text[prev + h]:
            h += 1
        lcp[rank[pos]] = h
        if h:
            h -= 1
    return lcp


def longest_repeated_strings(text: str) -> List[str]:
    """
    Возвращает повторяющиеся подстроки текста.

    Для каждой пары соседних суффиксов в отсортированном порядке берётся
    их наибольший общий префикс: это максимальная подстрока, которая
    встречается в тексте не меньше двух раз (вхождения могут перекрываться
    и не обязаны идти подряд). Дубликаты отбрасываются.

    Пример: в ``"abcabc aabb"`` найдутся 'a', 'ab', 'abc', 'b', 'bc', 'c'.

    Args:
        text: Исходный текст

    Returns:
        Уникальные повторы в порядке суффиксного массива
    """
    suffixes = suffix_array(text)
    lcp = lcp_array(text, suffixes)

    found: Dict[str, None] = {}
    for index in range(1, len(suffixes)):
        if lcp[index]:
            start = suffixes[index]
            found.setdefault(text[start:start + lcp[index]], None)
    return list(found)


def count_consecutive_occurs(substring: str, text: str) -> int:
    """
    Подсчитывает максимальное число копий подстроки, идущих подряд без перекрытия.

    Args:
        substring: Искомая подстрока
        text: Текст для поиска

    Returns:
        Длина самой длинной цепочки копий (0, если подстрока не найдена)
    """
    if not substring:
        return 0

    positions = []
    pos = text.find(substring)
    while pos != -1:
        positions.append(pos)
        pos = text.find(substring, pos + 1)

    step = len(substring)
    chain: Dict[int, int] = {}
    best = 0
    for pos in reversed(positions):
        chain[pos] = chain.get(pos + step, 0) + 1
        best = max(best, chain[pos])
    return best


def unique_chars(text: str) -> List[str]:
    """Уникальные символы строки в порядке первого появления."""
    return list(dict.fromkeys(text))


def unique_char_counts(text: str) -> Counter:
    """Частота каждого символа строки."""
    return Counter(text)


def is_capitalized(token: str) -> bool:
    """
    Слово с заглавной буквы: 'Yes', а также 'YES' (частный случай).

    'YEs' не считается: после первой буквы регистр смешанный.
    """
    if not token or not token[0].isupper():
        return False
    rest = token[1:]
    return not any(ch.isupper() for ch in rest) or rest.isupper()


def count_capitals(tokens: Iterable[str]) -> Tuple[int, int, int]:
    """
    Подсчитывает заглавные буквы в токенах.

    Args:
        tokens: Тексты токенов

    Returns:
        Кортеж (первая буква заглавная, с заглавной буквы, все заглавные)
    """
    first_char = 0
    capitalized = 0
    all_caps = 0
    for token in tokens:
        if not token:
            continue
        if token[0].isupper():
            first_char += 1
        if is_capitalized(token):
            capitalized += 1
        if token.isupper():
            all_caps += 1
    return first_char, capitalized, all_caps
