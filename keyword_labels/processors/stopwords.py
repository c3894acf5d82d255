"""
Фільтри стоп-слів.
"""

from typing import Iterable, Optional
import logging

from nltk.corpus import stopwords

from keyword_labels.processors.base import BaseStopwordFilter
from keyword_labels.processors.nltk_data import ensure_nltk_data, STOPWORDS_RESOURCE


class SetStopwordFilter(BaseStopwordFilter):
    """Фільтр за довільною множиною стоп-слів"""

    def __init__(self, words: Iterable[str]):
        self.words = frozenset(words)

    def is_stopword(self, word: str) -> bool:
        return word in self.words


class NltkStopwordFilter(SetStopwordFilter):
    """Англійські стоп-слова з корпусу NLTK"""

    def __init__(self, language: str = "english", logger: Optional[logging.Logger] = None):
        ensure_nltk_data([STOPWORDS_RESOURCE], logger)
        super().__init__(stopwords.words(language))
