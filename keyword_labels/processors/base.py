"""
Базові класи для класифікаторів частин мови та фільтрів стоп-слів.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from keyword_labels.core.models import PartsOfSpeech


class BaseClassifier(ABC):
    """Базовий класифікатор частин мови"""

    @abstractmethod
    def classify(self, word: str) -> PartsOfSpeech:
        """
        Класифікація одного слова.

        Args:
            word: Слово в нижньому регістрі

        Returns:
            Ознаки іменника, дієслова та прикметника
        """
        pass


class BaseStopwordFilter(ABC):
    """Базовий фільтр стоп-слів"""

    @abstractmethod
    def is_stopword(self, word: str) -> bool:
        """
        Перевірка, чи є слово стоп-словом.

        Args:
            word: Слово

        Returns:
            True, якщо слово треба відкинути
        """
        pass

    def remove_stopwords(self, words: Iterable[str]) -> List[str]:
        """Видалення стоп-слів зі збереженням порядку"""
        return [word for word in words if not self.is_stopword(word)]
