"""
Обробник набору записів (тонкий оркестратор).
"""

from typing import AbstractSet, Dict, List, Optional, Sequence
import logging

from keyword_labels.core.models import MAX_LABEL_WORDS
from keyword_labels.core.frequency import build_frequency_map
from keyword_labels.core.extractor import extract_top_words
from keyword_labels.processors.base import BaseClassifier, BaseStopwordFilter
from keyword_labels.utils.text_helpers import clean_text


class DatasetProcessor:
    """Генератор міток для всіх записів набору (оркестратор)"""

    def __init__(
        self,
        classifier: BaseClassifier,
        stopword_filter: BaseStopwordFilter,
        max_words: int = MAX_LABEL_WORDS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            classifier: Класифікатор частин мови
            stopword_filter: Фільтр стоп-слів
            max_words: Максимальна кількість слів у мітці
            logger: Опціональний логгер
        """
        self.logger = logger or logging.getLogger(__name__)
        self.classifier = classifier
        self.stopword_filter = stopword_filter
        self.max_words = max_words

    def process(
        self,
        dataset: Sequence[str],
        ignored_words: AbstractSet[str],
        priority_words: Sequence[str],
    ) -> List[str]:
        """
        Генерація міток для набору записів.

        Args:
            dataset: Тексти записів
            ignored_words: Ігноровані слова
            priority_words: Пріоритетні слова

        Returns:
            Мітки, вирівняні за індексом із записами
        """
        cleaned_data = [clean_text(line, priority_words) for line in dataset]

        # Частоти рахуються по текстах, очищених ще раз без пріоритетних слів
        frequency_map = self.build_frequency_map(cleaned_data, ignored_words)

        processed = [
            extract_top_words(
                line,
                frequency_map,
                ignored_words,
                priority_words,
                self.classifier,
                self.stopword_filter,
                self.max_words,
            )
            for line in cleaned_data
        ]

        empty = 0
        for index, label in enumerate(processed):
            if not label:
                empty += 1
                self.logger.debug(f"Empty label for record {index}")

        self.logger.info(f"Processed {len(processed)} records ({empty} without label)")
        return processed

    def build_frequency_map(
        self,
        dataset: Sequence[str],
        ignored_words: AbstractSet[str]
    ) -> Dict[str, int]:
        """Частотний словник корпусу"""
        frequency_map = build_frequency_map(
            dataset, ignored_words, self.classifier, self.stopword_filter
        )
        self.logger.info(f"Frequency map built: {len(frequency_map)} words")
        return frequency_map
