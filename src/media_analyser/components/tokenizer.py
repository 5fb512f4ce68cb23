"""
Компонент для токенизации текста.

Отвечает за разбивку текста на токены: приведение к нижнему регистру
и разделение по любым символам, кроме букв и цифр Unicode.
"""

import re
import logging
from typing import Tuple
from ..exceptions import InvalidInputError
from ..interfaces.text_processor import TokenProcessorInterface

logger = logging.getLogger(__name__)

# Всё, что не буква и не цифра (\W плюс подчёркивание, которое \w считает словесным)
_SEPARATOR_PATTERN = re.compile(r'[\W_]+')


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации многоязычного текста (кириллица, латиница, казахский и др.)."""

    def tokenize(self, text: str) -> Tuple[str, ...]:
        """
        Разбивает текст на токены.

        Args:
            text: Исходный текст

        Returns:
            Кортеж токенов в порядке появления

        Raises:
            InvalidInputError: если text не является строкой
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Ожидалась строка для токенизации, получено: {type(text).__name__}"
            )

        # Каждая серия разделителей превращается в один пробел
        normalized = _SEPARATOR_PATTERN.sub(' ', text.lower())
        tokens = tuple(normalized.split())

        logger.debug(f"Токенизация: {len(text)} символов -> {len(tokens)} токенов")
        return tokens
