"""
Тесты для PatternMiner.
"""

import pytest
from media_analyser.components.pattern_miner import PatternMiner
from media_analyser.exceptions import InvalidInputError
from media_analyser.interfaces.text_processor import Document


def _docs(*texts):
    return [Document(id=i, text=text) for i, text in enumerate(texts)]


class TestPatternMiner:
    """Тесты поиска паттернов."""

    def test_empty_collection(self):
        assert PatternMiner().mine_patterns([]) == []

    def test_no_repeats(self):
        assert PatternMiner().mine_patterns(_docs("a b", "c d")) == []

    def test_counts_within_and_across_documents(self):
        """'a' встречается трижды (дважды в первом документе), 'b' - один раз."""
        assert PatternMiner().mine_patterns(_docs("a a", "a b")) == [("a", 3)]

    def test_repeat_within_single_document(self):
        assert PatternMiner().mine_patterns(_docs("рост рост кризис")) == [("рост", 2)]

    def test_tie_break_by_first_occurrence_across_documents(self):
        patterns = PatternMiner().mine_patterns(_docs("z y", "x y z", "x"))
        assert patterns == [("z", 2), ("y", 2), ("x", 2)]

    def test_sorted_descending(self):
        patterns = PatternMiner().mine_patterns(_docs("b a", "a c", "c a b"))
        assert patterns == [("a", 3), ("b", 2), ("c", 2)]

    def test_truncated_to_ten(self):
        words = [f"w{i}" for i in range(15)]
        text = " ".join(words)
        patterns = PatternMiner().mine_patterns(_docs(text, text))

        assert len(patterns) == 10
        assert patterns == [(w, 2) for w in words[:10]]

    def test_custom_max_patterns(self):
        patterns = PatternMiner(max_patterns=2).mine_patterns(_docs("a b c", "a b c"))
        assert patterns == [("a", 2), ("b", 2)]

    @pytest.mark.parametrize("value", [0, -3])
    def test_invalid_max_patterns(self, value):
        with pytest.raises(ValueError):
            PatternMiner(max_patterns=value)

    def test_sample_posts(self, sample_posts):
        patterns = PatternMiner().mine_patterns(sample_posts)
        assert patterns == [
            ("демо", 3),
            ("пост", 3),
            ("twitter", 3),
            ("военная", 3),
            ("аналитика", 3),
        ]

    def test_documents_not_mutated(self, sample_posts):
        before = [(d.id, d.text, dict(d.metadata)) for d in sample_posts]
        PatternMiner().mine_patterns(sample_posts)
        after = [(d.id, d.text, dict(d.metadata)) for d in sample_posts]
        assert before == after

    def test_repeatable(self, sample_posts):
        miner = PatternMiner()
        assert miner.mine_patterns(sample_posts) == miner.mine_patterns(sample_posts)

    def test_non_string_text(self):
        with pytest.raises(InvalidInputError):
            PatternMiner().mine_patterns([Document(id=1, text=None)])


class TestDocument:
    """Тесты модели Document."""

    def test_from_dict_collects_metadata(self):
        doc = Document.from_dict({"id": 7, "text": "hi", "author": "user_7", "engagement": 5})
        assert doc.id == 7
        assert doc.text == "hi"
        assert dict(doc.metadata) == {"author": "user_7", "engagement": 5}

    def test_from_dict_without_id(self):
        assert Document.from_dict({"text": "hi"}).id is None

    def test_from_dict_requires_text(self):
        with pytest.raises(InvalidInputError):
            Document.from_dict({"id": 1})

    def test_from_dict_requires_mapping(self):
        with pytest.raises(InvalidInputError):
            Document.from_dict(["not", "a", "post"])

    def test_metadata_is_read_only(self):
        source = {"author": "a"}
        doc = Document(id=1, text="x", metadata=source)
        source["author"] = "b"
        assert doc.metadata["author"] == "a"
        with pytest.raises(TypeError):
            doc.metadata["author"] = "c"

    def test_document_is_frozen(self):
        doc = Document(id=1, text="x")
        with pytest.raises(AttributeError):
            doc.text = "y"
