"""
Моделі даних і константи для генератора міток.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict, List, Optional, Tuple


class ClassifierType(str, Enum):
    """Типи класифікаторів частин мови"""
    WORDNET = "wordnet"
    LEXICON = "lexicon"


class ProcessedRecord(TypedDict):
    """Рядок першого вихідного файлу"""
    original: str
    processed: str


@dataclass(frozen=True)
class PartsOfSpeech:
    """Результат класифікації одного слова"""
    is_noun: bool = False
    is_verb: bool = False
    is_adjective: bool = False

    @property
    def is_content_word(self) -> bool:
        return self.is_noun or self.is_verb or self.is_adjective


# Константи лімітів
MAX_LABEL_WORDS = 4
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 15
MAX_CONSONANT_RUN = 3
MAX_VOWEL_RUN = 3

VOWELS = frozenset("aeiou")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

# Відкриваюча дужка -> закриваюча
BRACKET_PAIRS = {
    "[": "]",
    "(": ")",
    "{": "}",
}

# Правила множини: порядок перевірки важливий, спрацьовує перше
PLURAL_RULES: List[Tuple[str, str]] = [
    ("y", "ies"),
    ("s", "s"),
    ("ch", "ches"),
    ("sh", "shes"),
    ("o", "oes"),
    ("f", "ves"),
    ("fe", "ves"),
]

# Шляхи за замовчуванням
DEFAULT_INPUT_PATH = "./allcsv/moringa.csv"
DEFAULT_RESULTS_PATH = "./processed_data.json"
DEFAULT_LABELS_PATH = "./processed_lines.json"
DEFAULT_IGNORED_WORDS_PATH = "./ignored_words.json"
DEFAULT_PRIORITY_WORDS_PATH = "./allpriority/moringa_priority_words.json"


@dataclass
class LabelsConfig:
    """Конфігурація одного запуску"""
    input_path: str = DEFAULT_INPUT_PATH
    results_path: str = DEFAULT_RESULTS_PATH
    labels_path: str = DEFAULT_LABELS_PATH
    ignored_words_path: str = DEFAULT_IGNORED_WORDS_PATH
    priority_words_path: str = DEFAULT_PRIORITY_WORDS_PATH
    csv_delimiter: str = ","
    max_words: int = MAX_LABEL_WORDS
    classifier_type: ClassifierType = ClassifierType.WORDNET
    lexicon_path: Optional[str] = None
