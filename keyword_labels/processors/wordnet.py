"""
Класифікатор частин мови на основі лексикону WordNet (NLTK).
"""

from typing import Dict, Optional
import logging

from nltk.corpus import wordnet

from keyword_labels.core.models import PartsOfSpeech
from keyword_labels.processors.base import BaseClassifier
from keyword_labels.processors.nltk_data import ensure_nltk_data, WORDNET_RESOURCE


class WordNetClassifier(BaseClassifier):
    """
    Класифікатор, який вважає слово іменником, дієсловом чи прикметником,
    якщо WordNet має для нього хоча б один синсет відповідної частини мови.

    Морфологія WordNet зводить словоформи до лем (running -> run).
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        ensure_nltk_data([WORDNET_RESOURCE], self.logger)
        self._cache: Dict[str, PartsOfSpeech] = {}

    def classify(self, word: str) -> PartsOfSpeech:
        cached = self._cache.get(word)
        if cached is not None:
            return cached

        result = PartsOfSpeech(
            is_noun=bool(wordnet.synsets(word, pos=wordnet.NOUN)),
            is_verb=bool(wordnet.synsets(word, pos=wordnet.VERB)),
            is_adjective=bool(wordnet.synsets(word, pos=wordnet.ADJ)),
        )
        self._cache[word] = result
        return result
