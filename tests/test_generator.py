"""Tests for keyword_labels.core.generator."""

import logging

import pytest

from keyword_labels.core.generator import DatasetProcessor


@pytest.fixture
def processor(classifier, stopword_filter):
    return DatasetProcessor(classifier, stopword_filter)


class TestDatasetProcessor:
    def test_shared_words_rank_first(self, processor):
        labels = processor.process(["The quick brown fox", "A quick red fox"], set(), [])
        assert labels == ["Quick Fox Brown", "Quick Fox Red"]

    def test_priority_order_across_records(self, processor):
        labels = processor.process(
            ["Raw moringa (Organic) powder", "Organic green tea"],
            set(),
            ["organic", "raw"],
        )
        assert labels == ["Organic Raw Moringa Powder", "Organic Green Tea"]

    def test_aligned_with_records(self, processor):
        records = ["green tea", "", "xyzzplk", "moringa leaf"]
        labels = processor.process(records, set(), [])
        assert len(labels) == len(records)
        assert labels[1] == ""
        assert labels[2] == ""
        assert labels[3] == "Moringa Leaf"

    def test_ignored_words(self, processor):
        labels = processor.process(["green tea", "green leaf"], {"green"}, [])
        assert labels == ["Tea", "Leaf"]

    def test_max_words(self, classifier, stopword_filter):
        processor = DatasetProcessor(classifier, stopword_filter, max_words=1)
        assert processor.process(["green tea", "tea leaf"], set(), []) == ["Tea", "Tea"]

    def test_frequency_map(self, processor):
        freq = processor.build_frequency_map(["green tea", "tea"], set())
        assert freq == {"green": 1, "tea": 2}

    def test_bracketed_priority_words_count_toward_frequency(self, processor):
        # A capitalized priority entry survives bracket stripping but is
        # ranked as an ordinary word, so it needs a corpus count.
        assert processor.process(["Tea (Organic)"], set(), ["Organic"]) == ["Tea Organic"]
        labels = processor.process(["Tea (Organic)", "green tea"], set(), ["Organic"])
        assert labels == ["Tea Organic", "Tea Green"]

    def test_logs_summary(self, processor, caplog):
        with caplog.at_level(logging.INFO):
            processor.process(["green tea", "xyzzplk"], set(), [])
        assert "Frequency map built: 2 words" in caplog.text
        assert "Processed 2 records (1 without label)" in caplog.text

    def test_empty_dataset(self, processor):
        assert processor.process([], set(), []) == []
