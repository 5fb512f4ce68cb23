"""
Модуль для анализа текста и наборов постов

Предоставляет функциональность для:
- Токенизации текста
- Подсчёта частоты слов
- Определения тональности по словарю
- Поиска повторяющихся слов в наборе постов
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple
from .components.tokenizer import TokenProcessor
from .components.frequency_analyzer import FrequencyCounter
from .components.sentiment import SentimentClassifier
from .components.pattern_miner import PatternMiner, DEFAULT_MAX_PATTERNS
from .components.lexicons import load_lexicon
from .interfaces.text_processor import (
    Document,
    SentimentResult,
    TermFrequencyTable,
    TextAnalysisResult,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_WORDS = 10


class TextAnalyzer:
    """Фасад, объединяющий компоненты анализа текста"""

    def __init__(self,
                 tokenizer: Optional[TokenProcessor] = None,
                 counter: Optional[FrequencyCounter] = None,
                 classifier: Optional[SentimentClassifier] = None,
                 miner: Optional[PatternMiner] = None,
                 top_n: int = DEFAULT_TOP_WORDS):
        """Инициализация анализатора. Не переданные компоненты создаются по умолчанию."""
        if top_n < 1:
            raise ValueError(f"top_n должен быть >= 1, получено: {top_n}")
        self.tokenizer = tokenizer or TokenProcessor()
        self.counter = counter or FrequencyCounter()
        self.classifier = classifier or SentimentClassifier()
        self.miner = miner or PatternMiner(tokenizer=self.tokenizer, counter=self.counter)
        self.top_n = top_n

    @classmethod
    def from_config(cls, cfg=None) -> "TextAnalyzer":
        """
        Создаёт анализатор по настройкам конфигурации

        Args:
            cfg: Экземпляр Config (по умолчанию глобальный)

        Returns:
            Настроенный анализатор
        """
        if cfg is None:
            from .config import config as cfg

        lexicon_file = cfg.get_lexicon_file()
        classifier = SentimentClassifier(load_lexicon(lexicon_file)) if lexicon_file else SentimentClassifier()
        tokenizer = TokenProcessor()
        counter = FrequencyCounter()
        miner = PatternMiner(tokenizer=tokenizer, counter=counter, max_patterns=cfg.get_max_patterns())
        return cls(
            tokenizer=tokenizer,
            counter=counter,
            classifier=classifier,
            miner=miner,
            top_n=cfg.get_top_words(),
        )

    def analyze_text(self, text: str, metadata: Optional[Mapping[str, Any]] = None) -> TextAnalysisResult:
        """
        Анализирует один текст: статистика, топ-слова и тональность

        Args:
            text: Исходный текст
            metadata: Сведения об источнике текста (имя файла и т.п.), в анализе не участвуют

        Returns:
            Сводка анализа
        """
        tokens = self.tokenizer.tokenize(text)
        table = self.counter.count_terms(tokens)
        sentiment = self.classifier.classify(tokens)

        logger.debug(
            f"Анализ текста: слов {len(tokens)}, уникальных {len(table)}, "
            f"тональность {sentiment.label.value}"
        )
        return TextAnalysisResult(
            tokens=tokens,
            total_words=len(tokens),
            unique_words=len(table),
            top_words=table[:self.top_n],
            sentiment=sentiment,
            metadata=dict(metadata) if metadata else None,
        )

    def find_patterns(self, documents: Sequence[Document]) -> TermFrequencyTable:
        """Находит повторяющиеся слова в наборе постов"""
        return self.miner.mine_patterns(documents)


_default_tokenizer = TokenProcessor()
_default_counter = FrequencyCounter()
_default_classifier = SentimentClassifier()
_default_miner = PatternMiner(
    tokenizer=_default_tokenizer,
    counter=_default_counter,
    max_patterns=DEFAULT_MAX_PATTERNS,
)


def tokenize(text: str) -> Tuple[str, ...]:
    """Разбивает текст на токены компонентом по умолчанию."""
    return _default_tokenizer.tokenize(text)


def count_terms(tokens: Iterable[str]) -> TermFrequencyTable:
    """Строит таблицу частот по убыванию."""
    return _default_counter.count_terms(tokens)


def classify(tokens: Iterable[str]) -> SentimentResult:
    """Определяет тональность по встроенному словарю."""
    return _default_classifier.classify(tokens)


def mine_patterns(documents: Sequence[Document]) -> TermFrequencyTable:
    """Находит до 10 слов, повторяющихся в наборе документов."""
    return _default_miner.mine_patterns(documents)
