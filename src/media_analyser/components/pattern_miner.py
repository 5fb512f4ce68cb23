"""
Компонент для поиска повторяющихся слов (паттернов) в наборе постов.

Частоты накапливаются по всей коллекции: документы обрабатываются
в исходном порядке, токены внутри документа - в порядке появления.
"""

import logging
from typing import Iterator, Optional, Sequence
from ..interfaces.text_processor import Document, PatternMinerInterface, TermFrequencyTable
from .tokenizer import TokenProcessor
from .frequency_analyzer import FrequencyCounter

logger = logging.getLogger(__name__)

DEFAULT_MAX_PATTERNS = 10


class PatternMiner(PatternMinerInterface):
    """Поиск слов, встречающихся в коллекции документов больше одного раза."""

    def __init__(self,
                 tokenizer: Optional[TokenProcessor] = None,
                 counter: Optional[FrequencyCounter] = None,
                 max_patterns: int = DEFAULT_MAX_PATTERNS):
        """
        Инициализирует поиск паттернов.

        Args:
            tokenizer: Токенизатор (по умолчанию TokenProcessor)
            counter: Счётчик частот (по умолчанию FrequencyCounter)
            max_patterns: Максимальное количество паттернов в результате
        """
        if max_patterns < 1:
            raise ValueError(f"max_patterns должен быть >= 1, получено: {max_patterns}")
        self.tokenizer = tokenizer or TokenProcessor()
        self.counter = counter or FrequencyCounter()
        self.max_patterns = max_patterns

    def mine_patterns(self, documents: Sequence[Document]) -> TermFrequencyTable:
        """
        Находит повторяющиеся слова в коллекции документов.

        Args:
            documents: Документы в исходном порядке

        Returns:
            Список кортежей (слово, суммарная частота) с частотой > 1,
            не длиннее max_patterns
        """
        table = self.counter.count_terms(self._iter_tokens(documents))
        # Таблица уже отсортирована по убыванию, поэтому фильтр сохраняет порядок
        patterns = [(token, count) for token, count in table if count > 1]

        logger.debug(
            f"Паттерны: уникальных слов {len(table)}, повторяющихся {len(patterns)}"
        )
        return patterns[:self.max_patterns]

    def _iter_tokens(self, documents: Sequence[Document]) -> Iterator[str]:
        """Выдаёт токены всех документов единым потоком."""
        for document in documents:
            yield from self.tokenizer.tokenize(document.text)
