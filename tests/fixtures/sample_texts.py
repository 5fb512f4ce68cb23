"""Наборы текстов и постов для тестирования.

Содержит русские, английские и казахские примеры, HTML-текст
и набор демо-постов для поиска паттернов.
"""

SAMPLE_POSITIVE_TEXT = """
Отлично! Рост экономики и успех реформ. Хорошо, что поддержка продолжается.
""".strip()


SAMPLE_NEGATIVE_TEXT = """
Кризис усиливается: провал переговоров, угроза срыва поставок и новая проблема.
""".strip()


SAMPLE_NEUTRAL_TEXT = """
Заседание перенесли на четверг. Хорошо, что успели, но есть проблема с залом.
""".strip()


SAMPLE_KAZAKH_TEXT = """
Бүгін жақсы жаңалық: даму мен өсу байқалады, үміт бар.
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>Рост <strong>продолжается</strong>.</p>
  <p>Успех и поддержка</p>
</div>
""".strip()


SAMPLE_POSTS = [
    {"id": 0, "author": "user_0", "engagement": 120,
     "text": 'Демо-пост #1 (twitter): "военная аналитика"'},
    {"id": 1, "author": "user_1", "engagement": 45,
     "text": 'Демо-пост #2 (twitter): "военная аналитика"'},
    {"id": 2, "author": "user_2", "engagement": 300,
     "text": 'Демо-пост #3 (twitter): "военная аналитика"'},
]
