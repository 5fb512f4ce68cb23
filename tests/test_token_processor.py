"""
Тесты для компонента TokenProcessor.
"""

import pytest
from media_analyser.components.tokenizer import TokenProcessor
from media_analyser.exceptions import InvalidInputError


class TestTokenProcessor:
    """Тесты для TokenProcessor."""

    def test_tokenize_empty_text(self):
        """Пустой текст и текст из пробелов дают пустую последовательность."""
        processor = TokenProcessor()
        assert processor.tokenize("") == ()
        assert processor.tokenize("   ") == ()

    def test_tokenize_punctuation_only(self):
        """Текст только из знаков препинания не содержит токенов."""
        processor = TokenProcessor()
        assert processor.tokenize("   ...!!  ") == ()
        assert processor.tokenize("—«»;:?!") == ()

    def test_tokenize_simple_text(self):
        """Тест токенизации простого текста с сохранением порядка."""
        processor = TokenProcessor()
        tokens = processor.tokenize("Привет, мир! Hello world")
        assert tokens == ("привет", "мир", "hello", "world")

    def test_tokenize_lowercases(self):
        """Токены приводятся к нижнему регистру."""
        processor = TokenProcessor()
        assert processor.tokenize("РОСТ Рост рост") == ("рост", "рост", "рост")

    def test_tokenize_keeps_repeats(self):
        """Повторы сохраняются в порядке появления."""
        processor = TokenProcessor()
        assert processor.tokenize("a b a") == ("a", "b", "a")

    def test_tokenize_kazakh_letters(self):
        """Казахские буквы считаются буквами, а не разделителями."""
        processor = TokenProcessor()
        tokens = processor.tokenize("Қолдау, үміт және өсу!")
        assert tokens == ("қолдау", "үміт", "және", "өсу")

    def test_tokenize_numbers_are_tokens(self):
        """Цифры входят в токены."""
        processor = TokenProcessor()
        assert processor.tokenize("Пост #12 (2024)") == ("пост", "12", "2024")

    def test_tokenize_splits_on_hyphen_and_underscore(self):
        """Дефис и подчёркивание - разделители."""
        processor = TokenProcessor()
        assert processor.tokenize("Демо-пост user_1") == ("демо", "пост", "user", "1")

    def test_tokenize_returns_tuple(self):
        """Результат неизменяем."""
        processor = TokenProcessor()
        assert isinstance(processor.tokenize("a b"), tuple)

    @pytest.mark.parametrize("value", [None, 42, b"bytes", ["a", "b"]])
    def test_tokenize_rejects_non_string(self, value):
        """Не строка приводит к InvalidInputError."""
        processor = TokenProcessor()
        with pytest.raises(InvalidInputError):
            processor.tokenize(value)

    def test_invalid_input_is_type_error(self):
        """InvalidInputError совместим с TypeError."""
        with pytest.raises(TypeError):
            TokenProcessor().tokenize(None)

    def test_tokenize_is_repeatable(self):
        """Повторный вызов даёт тот же результат."""
        processor = TokenProcessor()
        text = "Кризис, кризис и снова рост!"
        assert processor.tokenize(text) == processor.tokenize(text)
