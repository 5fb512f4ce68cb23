"""
Абстрактные интерфейсы и модели данных для анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..exceptions import InvalidInputError

# Таблица частот: (токен, количество), по убыванию количества
TermFrequencyTable = List[Tuple[str, int]]


class SentimentLabel(Enum):
    """Метка тональности текста."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    @property
    def display_name(self) -> str:
        """Название метки для вывода пользователю."""
        return _LABEL_NAMES_RU[self]


_LABEL_NAMES_RU = {
    SentimentLabel.POSITIVE: "Позитив",
    SentimentLabel.NEUTRAL: "Нейтраль",
    SentimentLabel.NEGATIVE: "Негатив",
}


@dataclass(frozen=True)
class SentimentResult:
    """Результат оценки тональности."""
    positive_hits: int
    negative_hits: int
    label: SentimentLabel

    @property
    def score(self) -> int:
        """Разница позитивных и негативных совпадений."""
        return self.positive_hits - self.negative_hits


@dataclass(frozen=True)
class Document:
    """Документ (пост) для поиска паттернов. Метаданные для ядра непрозрачны."""
    id: Any
    text: str
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Замораживаем метаданные, чтобы документ не менялся после создания
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """
        Создаёт документ из словаря поста.

        Args:
            data: Словарь с ключами id, text и произвольными метаданными

        Returns:
            Новый документ
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"Пост должен быть объектом, получено: {type(data).__name__}")
        if "text" not in data:
            raise InvalidInputError("У поста отсутствует поле 'text'")
        metadata = {k: v for k, v in data.items() if k not in ("id", "text")}
        return cls(id=data.get("id"), text=data["text"], metadata=metadata)


@dataclass
class TextAnalysisResult:
    """Сводка анализа одного текста."""
    tokens: Tuple[str, ...]
    total_words: int
    unique_words: int
    top_words: TermFrequencyTable
    sentiment: SentimentResult
    metadata: Optional[Dict[str, Any]] = None


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> Tuple[str, ...]:
        """Разбивает текст на токены."""
        pass


class FrequencyCounterInterface(ABC):
    """Интерфейс для подсчёта частотности токенов."""

    @abstractmethod
    def count_terms(self, tokens: Iterable[str]) -> TermFrequencyTable:
        """Подсчитывает частоту токенов и ранжирует их."""
        pass


class SentimentClassifierInterface(ABC):
    """Интерфейс для определения тональности."""

    @abstractmethod
    def classify(self, tokens: Iterable[str]) -> SentimentResult:
        """Определяет тональность последовательности токенов."""
        pass


class PatternMinerInterface(ABC):
    """Интерфейс для поиска повторяющихся слов в наборе документов."""

    @abstractmethod
    def mine_patterns(self, documents: Sequence[Document]) -> TermFrequencyTable:
        """Находит слова, повторяющиеся в коллекции документов."""
        pass
