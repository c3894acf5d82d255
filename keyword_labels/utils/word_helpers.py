"""
Утиліти для фільтрації та нормалізації окремих слів.
"""

from typing import Dict, List, Sequence

from keyword_labels.core.models import (
    CONSONANTS,
    VOWELS,
    MIN_WORD_LENGTH,
    MAX_WORD_LENGTH,
    MAX_CONSONANT_RUN,
    MAX_VOWEL_RUN,
    PLURAL_RULES,
)
from keyword_labels.processors.base import BaseClassifier


def is_alphabetic(word: str) -> bool:
    """Слово складається тільки з літер a-z"""
    return bool(word) and all("a" <= ch <= "z" for ch in word)


def longest_run(word: str, letters: frozenset) -> int:
    """
    Довжина найдовшої послідовності літер з множини letters.

    Args:
        word: Слово
        letters: Множина літер (голосні або приголосні)

    Returns:
        Довжина послідовності
    """
    longest = current = 0
    for ch in word.lower():
        if ch in letters:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def is_random_word(word: str) -> bool:
    """
    Перевірка на "випадковий" набір літер.

    Відкидаються слова з 4+ приголосними або 4+ голосними підряд,
    а також довші за MAX_WORD_LENGTH.
    """
    return (
        longest_run(word, CONSONANTS) > MAX_CONSONANT_RUN
        or longest_run(word, VOWELS) > MAX_VOWEL_RUN
        or len(word) > MAX_WORD_LENGTH
    )


def is_meaningful_word(word: str, classifier: BaseClassifier) -> bool:
    """
    Перевірка, чи варто враховувати слово.

    Args:
        word: Слово в нижньому регістрі
        classifier: Класифікатор частин мови

    Returns:
        True, якщо слово - іменник, дієслово або прикметник без ознак шуму
    """
    # Класифікатор викликається останнім
    if len(word) < MIN_WORD_LENGTH:
        return False
    if not is_alphabetic(word):
        return False
    if is_random_word(word):
        return False
    return classifier.classify(word).is_content_word


def get_plural_form(word: str) -> str:
    """
    Евристична форма множини.

    Args:
        word: Слово

    Returns:
        Форма множини
    """
    if word.endswith("s"):
        return word

    for suffix, replacement in PLURAL_RULES:
        if word.endswith(suffix):
            return word[:-len(suffix)] + replacement

    return word + "s"


def get_singular_candidate(word: str) -> str:
    return word[:-1] if word.endswith("s") else word


def apply_plural_correction(words: Sequence[str]) -> List[str]:
    """
    Зведення пар однина/множина в межах одного запису до форми множини.

    Args:
        words: Слова запису в початковому порядку

    Returns:
        Список тієї ж довжини з заміненими словами
    """
    word_set = set(words)
    plural_map: Dict[str, str] = {}

    for word in word_set:
        plural = get_plural_form(word)
        singular = get_singular_candidate(word)
        if singular in word_set and plural in word_set and plural != word:
            plural_map[word] = plural

    return [plural_map.get(word, word) for word in words]
