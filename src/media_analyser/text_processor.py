"""
Модуль для подготовки текста перед анализом

Содержит функции для:
- Удаления HTML тегов
- Чтения текстовых файлов
- Загрузки постов из JSON
"""

import json
import logging
from pathlib import Path
from typing import List, Union
from bs4 import BeautifulSoup
from .exceptions import InvalidInputError
from .interfaces.text_processor import Document

logger = logging.getLogger(__name__)


class TextCleaner:
    """Класс для очистки и загрузки входного текста"""

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        # Проверяем, содержит ли текст HTML теги
        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            # Разделитель не даёт склеить слова из соседних тегов
            return soup.get_text(separator=" ")
        return text

    def clean_text(self, text: str, strip_html: bool = True) -> str:
        """
        Очистка текста от HTML тегов и лишних пробелов по краям

        Args:
            text: Исходный текст
            strip_html: Удалять ли HTML теги

        Returns:
            Очищенный текст
        """
        if strip_html:
            text = self.remove_html_tags(text)
        return text.strip()

    def read_text_file(self, path: Union[str, Path], encoding: str = 'utf-8') -> str:
        """
        Читает текстовый файл целиком

        Args:
            path: Путь к файлу
            encoding: Кодировка файла

        Returns:
            Содержимое файла
        """
        path = Path(path)
        text = path.read_text(encoding=encoding)
        logger.info(f"Прочитан файл {path.name}: {len(text)} символов")
        return text

    def load_documents(self, path: Union[str, Path]) -> List[Document]:
        """
        Загружает посты из JSON файла (массив объектов с полями id и text)

        Args:
            path: Путь к JSON файлу

        Returns:
            Список документов в исходном порядке

        Raises:
            InvalidInputError: если корень JSON не массив или пост некорректен
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise InvalidInputError(f"Файл {path.name} должен содержать JSON массив постов")

        documents = [Document.from_dict(item) for item in data]
        logger.info(f"Загружено постов из {path.name}: {len(documents)}")
        return documents
