"""
Допоміжні класи для роботи зі словами та мітками.
"""

from typing import Iterable, List, Optional, Set


class KeywordBucket:
    """Контейнер для слів з дедуплікацією (перше входження) та лімітом"""

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: Максимальна кількість елементів (None - без ліміту)
        """
        self.limit = limit
        self.items: List[str] = []
        self.seen: Set[str] = set()

    def is_full(self) -> bool:
        return self.limit is not None and len(self.items) >= self.limit

    def add(self, value: str) -> None:
        """Додати одне слово"""
        if value not in self.seen and not self.is_full():
            self.seen.add(value)
            self.items.append(value)

    def extend(self, values: Iterable[str]) -> None:
        """Додати декілька слів"""
        for v in values:
            self.add(v)

    def to_list(self) -> List[str]:
        """Отримати список слів"""
        return self.items

    def __contains__(self, value: str) -> bool:
        return value in self.seen


def unique_in_order(values: Iterable[str]) -> List[str]:
    """Дедуплікація зі збереженням порядку першого входження"""
    bucket = KeywordBucket()
    bucket.extend(values)
    return bucket.to_list()


def capitalize_word(word: str) -> str:
    """Перша літера велика, решта без змін"""
    return word[:1].upper() + word[1:]
