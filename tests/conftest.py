from pathlib import Path

import pytest

from char_features.config import Config
from char_features.interfaces import Token


@pytest.fixture
def default_config(tmp_path: Path) -> Config:
    """Конфигурация со значениями по умолчанию (файл config.yaml отсутствует)."""
    return Config(config_path=str(tmp_path / "missing.yaml"))


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_ENGLISH_TEXT,
        SAMPLE_SPANISH_TEXT,
        SAMPLE_RUSSIAN_TEXT,
        SAMPLE_MIXED_TEXT,
        SAMPLE_REPEATING_TEXT,
    )

    return {
        "english": SAMPLE_ENGLISH_TEXT,
        "spanish": SAMPLE_SPANISH_TEXT,
        "russian": SAMPLE_RUSSIAN_TEXT,
        "mixed": SAMPLE_MIXED_TEXT,
        "repeating": SAMPLE_REPEATING_TEXT,
    }


def make_tokens(*texts: str):
    """Токены с позициями, как если бы их выдал внешний токенизатор."""
    tokens = []
    pos = 0
    for text in texts:
        tokens.append(Token(text, pos, pos + len(text)))
        pos += len(text) + 1
    return tokens


@pytest.fixture
def tokens_factory():
    return make_tokens


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
