"""
Исключения модуля media_analyser.
"""


class MediaAnalyserError(Exception):
    """Базовое исключение проекта."""


class InvalidInputError(MediaAnalyserError, TypeError):
    """Входные данные имеют неверный тип (например, текст не является строкой)."""


class LexiconError(MediaAnalyserError, ValueError):
    """Файл словаря тональности повреждён или имеет неверную структуру."""
