"""Наборы текстов для тестирования.

Содержит тексты на разных языках, смешанный текст и текст с повторами.
"""

SAMPLE_ENGLISH_TEXT = """
The quick brown fox jumps over the lazy dog. Does it? YES!
""".strip()


SAMPLE_SPANISH_TEXT = """
¿Dónde está la estación? ¡Muy cerca, señor!
""".strip()


SAMPLE_RUSSIAN_TEXT = """
Съешь же ещё этих мягких французских булок
""".strip()


SAMPLE_MIXED_TEXT = """
Hello мир, 你好 world!
""".strip()


SAMPLE_REPEATING_TEXT = """
abcabc aabb aaaaaa abcabcabcabc abcdefgabcdefgabcdefg
""".strip()
