"""
Роутер класифікаторів частин мови.
"""

from typing import Optional
import logging

from keyword_labels.core.models import ClassifierType
from keyword_labels.processors.base import BaseClassifier
from keyword_labels.processors.lexicon import LexiconClassifier
from keyword_labels.processors.wordnet import WordNetClassifier


def get_classifier(
    classifier_type: ClassifierType,
    lexicon_path: Optional[str] = None,
    logger: Optional[logging.Logger] = None
) -> BaseClassifier:
    """
    Створити класифікатор за типом.

    Args:
        classifier_type: Тип класифікатора
        lexicon_path: Шлях до словника (для LEXICON)
        logger: Опціональний логгер

    Returns:
        Екземпляр класифікатора
    """
    if classifier_type == ClassifierType.WORDNET:
        return WordNetClassifier(logger)

    if classifier_type == ClassifierType.LEXICON:
        if not lexicon_path:
            raise ValueError("Lexicon classifier requires lexicon_path")
        return LexiconClassifier.from_json(lexicon_path, logger)

    raise ValueError(f"Unknown classifier type: {classifier_type}")
