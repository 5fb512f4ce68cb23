import sys
from pathlib import Path
from typing import List

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from media_analyser.components.lexicons import Lexicon  # noqa: E402
from media_analyser.interfaces.text_processor import Document  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов на разных языках для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_POSITIVE_TEXT,
        SAMPLE_NEGATIVE_TEXT,
        SAMPLE_NEUTRAL_TEXT,
        SAMPLE_KAZAKH_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "positive": SAMPLE_POSITIVE_TEXT,
        "negative": SAMPLE_NEGATIVE_TEXT,
        "neutral": SAMPLE_NEUTRAL_TEXT,
        "kazakh": SAMPLE_KAZAKH_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


@pytest.fixture
def sample_posts() -> List[Document]:
    """Демо-посты в формате, который отдаёт источник постов."""
    from .fixtures.sample_texts import SAMPLE_POSTS

    return [Document.from_dict(post) for post in SAMPLE_POSTS]


@pytest.fixture
def small_lexicon() -> Lexicon:
    """Маленький словарь для тестов классификатора."""
    return Lexicon.from_words(positive=["good", "win"], negative=["bad", "loss"])


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
