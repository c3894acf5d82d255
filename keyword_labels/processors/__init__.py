"""
Класифікатори частин мови та фільтри стоп-слів.
"""

from keyword_labels.processors.base import BaseClassifier, BaseStopwordFilter
from keyword_labels.processors.lexicon import LexiconClassifier
from keyword_labels.processors.wordnet import WordNetClassifier
from keyword_labels.processors.stopwords import SetStopwordFilter, NltkStopwordFilter
from keyword_labels.processors.router import get_classifier

__all__ = [
    "BaseClassifier",
    "BaseStopwordFilter",
    "LexiconClassifier",
    "WordNetClassifier",
    "SetStopwordFilter",
    "NltkStopwordFilter",
    "get_classifier",
]
