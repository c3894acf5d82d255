"""
Побудова частотного словника по всьому корпусу.
"""

from typing import AbstractSet, Dict, Iterable, List

from keyword_labels.processors.base import BaseClassifier, BaseStopwordFilter
from keyword_labels.utils.text_helpers import clean_text
from keyword_labels.utils.word_helpers import is_meaningful_word


def tokenize(
    cleaned: str,
    ignored_words: AbstractSet[str],
    stopword_filter: BaseStopwordFilter
) -> List[str]:
    """
    Розбиття очищеного тексту на слова без ігнорованих та стоп-слів.

    Args:
        cleaned: Очищений текст
        ignored_words: Ігноровані слова
        stopword_filter: Фільтр стоп-слів

    Returns:
        Слова в початковому порядку
    """
    words = [word for word in cleaned.split() if word not in ignored_words]
    return stopword_filter.remove_stopwords(words)


def build_frequency_map(
    dataset: Iterable[str],
    ignored_words: AbstractSet[str],
    classifier: BaseClassifier,
    stopword_filter: BaseStopwordFilter
) -> Dict[str, int]:
    """
    Підрахунок входжень значущих слів у всіх записах.

    Пріоритетні слова з дужок не зберігаються, щоб не впливати на частоти.
    Повтори всередині запису рахуються кожен раз.

    Args:
        dataset: Тексти записів
        ignored_words: Ігноровані слова
        classifier: Класифікатор частин мови
        stopword_filter: Фільтр стоп-слів

    Returns:
        Словник слово -> кількість
    """
    frequency_map: Dict[str, int] = {}

    for line in dataset:
        for word in tokenize(clean_text(line), ignored_words, stopword_filter):
            if is_meaningful_word(word, classifier):
                frequency_map[word] = frequency_map.get(word, 0) + 1

    return frequency_map
