"""
Вибір найчастотніших слів запису для мітки.
"""

from typing import AbstractSet, List, Mapping, Sequence

from keyword_labels.core.helpers import KeywordBucket, unique_in_order, capitalize_word
from keyword_labels.core.frequency import tokenize
from keyword_labels.core.models import MAX_LABEL_WORDS
from keyword_labels.processors.base import BaseClassifier, BaseStopwordFilter
from keyword_labels.utils.text_helpers import clean_text
from keyword_labels.utils.word_helpers import is_meaningful_word, apply_plural_correction


def rank_by_frequency(words: Sequence[str], frequency_map: Mapping[str, int]) -> List[str]:
    """
    Сортування слів за спаданням частоти.

    Слова без частоти відкидаються. Сортування стабільне: при рівній
    частоті зберігається порядок появи.
    """
    known = [word for word in words if frequency_map.get(word, 0) > 0]
    return sorted(known, key=lambda word: -frequency_map[word])


def extract_top_words(
    line: str,
    frequency_map: Mapping[str, int],
    ignored_words: AbstractSet[str],
    priority_words: Sequence[str],
    classifier: BaseClassifier,
    stopword_filter: BaseStopwordFilter,
    max_words: int = MAX_LABEL_WORDS
) -> str:
    """
    Генерація мітки для одного запису.

    Args:
        line: Текст запису
        frequency_map: Частотний словник корпусу
        ignored_words: Ігноровані слова
        priority_words: Пріоритетні слова (порядок - пріоритет у мітці)
        classifier: Класифікатор частин мови
        stopword_filter: Фільтр стоп-слів
        max_words: Максимальна кількість слів у мітці

    Returns:
        Слова з великої літери через пробіл
    """
    words = tokenize(clean_text(line, priority_words), ignored_words, stopword_filter)
    words = [word for word in words if is_meaningful_word(word, classifier)]
    words = apply_plural_correction(words)

    unique_words = unique_in_order(words)
    present = set(unique_words)

    # Пріоритетні слова йдуть першими в порядку оголошення
    priority_in_line = [word for word in priority_words if word in present]
    candidates = [word for word in unique_words if word not in priority_words]

    bucket = KeywordBucket(max_words)
    bucket.extend(priority_in_line)
    bucket.extend(rank_by_frequency(candidates, frequency_map))

    return " ".join(capitalize_word(word) for word in bucket.to_list())
