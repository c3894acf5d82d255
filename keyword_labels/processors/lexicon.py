"""
Класифікатор частин мови на основі словника з файлу.
"""

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional
import json
import logging

from keyword_labels.core.models import PartsOfSpeech
from keyword_labels.processors.base import BaseClassifier


# Теги частин мови у файлі словника
NOUN_TAG = "n"
VERB_TAG = "v"
ADJECTIVE_TAG = "a"


class LexiconClassifier(BaseClassifier):
    """Класифікатор за словником {слово: [теги]}"""

    def __init__(self, lexicon: Mapping[str, Iterable[str]]):
        """
        Args:
            lexicon: Словник слово -> теги ("n", "v", "a")
        """
        self._entries: Dict[str, PartsOfSpeech] = {}
        for word, tags in lexicon.items():
            tag_set = {tag.strip().lower() for tag in tags}
            self._entries[word.lower()] = PartsOfSpeech(
                is_noun=NOUN_TAG in tag_set,
                is_verb=VERB_TAG in tag_set,
                is_adjective=ADJECTIVE_TAG in tag_set,
            )

    def classify(self, word: str) -> PartsOfSpeech:
        return self._entries.get(word, PartsOfSpeech())

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_json(
        cls,
        json_path: str,
        logger: Optional[logging.Logger] = None
    ) -> "LexiconClassifier":
        """
        Завантаження словника з JSON-об'єкта.

        Args:
            json_path: Шлях до JSON {слово: [теги]}
            logger: Опціональний логгер

        Returns:
            Класифікатор
        """
        logger = logger or logging.getLogger(__name__)

        try:
            path = Path(json_path)
            if not path.exists():
                raise FileNotFoundError(f"Lexicon JSON not found: {json_path}")

            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError(f"Lexicon JSON must be an object: {json_path}")

            classifier = cls(data)
            logger.info(f"Loaded {len(classifier)} lexicon entries")
            return classifier

        except Exception as e:
            logger.error(f"Failed to load lexicon JSON: {e}")
            raise
