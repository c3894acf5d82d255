"""Shared test fixtures for keyword_labels."""

import pytest

from keyword_labels.processors.lexicon import LexiconClassifier
from keyword_labels.processors.stopwords import SetStopwordFilter


LEXICON = {
    "quick": ["a"],
    "brown": ["a", "n"],
    "fox": ["n", "v"],
    "red": ["a", "n"],
    "great": ["a"],
    "organic": ["a", "n"],
    "product": ["n"],
    "running": ["v", "n"],
    "cat": ["n"],
    "cats": ["n"],
    "dog": ["n", "v"],
    "moringa": ["n"],
    "leaf": ["n", "v"],
    "leaves": ["n", "v"],
    "powder": ["n", "v"],
    "capsules": ["n"],
    "tea": ["n"],
    "green": ["a", "n"],
    "seed": ["n", "v"],
    "oil": ["n", "v"],
    "raw": ["a"],
    "ox": ["n"],
    "rhythm": ["n"],
    "strengths": ["n"],
    "queueing": ["v"],
    "the": [],
}

STOPWORDS = {"the", "a", "an", "and", "of", "with", "for", "in", "is"}


@pytest.fixture
def classifier():
    """Lexicon-backed classifier with a small fixed vocabulary."""
    return LexiconClassifier(LEXICON)


@pytest.fixture
def stopword_filter():
    """Stop-word filter over a small fixed English list."""
    return SetStopwordFilter(STOPWORDS)
