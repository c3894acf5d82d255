"""
Завантажувачі вхідних даних з CSV та JSON файлів.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Set
import logging


class ConfigLoader:
    """Завантажувач записів і списків слів"""

    @staticmethod
    def load_records(csv_path: str, logger: logging.Logger, delimiter: str = ",") -> List[str]:
        """
        Завантаження записів з CSV із заголовком.

        Args:
            csv_path: Шлях до CSV
            logger: Логгер
            delimiter: Роздільник колонок

        Returns:
            Значення колонок кожного рядка через пробіл (порожні рядки пропускаються)
        """
        records: List[str] = []

        try:
            path = Path(csv_path)
            if not path.exists():
                raise FileNotFoundError(f"Input CSV not found: {csv_path}")

            with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
                reader = csv.DictReader(f, delimiter=delimiter)
                for row in reader:
                    full_row = ConfigLoader._join_row(row)
                    if full_row.strip():
                        records.append(full_row)

            logger.info(f"Loaded {len(records)} records")
            return records

        except Exception as e:
            logger.error(f"Failed to load input CSV: {e}")
            raise

    @staticmethod
    def load_ignored_words(json_path: str, logger: logging.Logger) -> Set[str]:
        """
        Завантаження ігнорованих слів.

        Args:
            json_path: Шлях до JSON-масиву рядків
            logger: Логгер

        Returns:
            Множина слів
        """
        try:
            words = set(ConfigLoader._load_word_list(json_path))
            logger.info(f"Loaded {len(words)} ignored words")
            return words

        except Exception as e:
            logger.error(f"Failed to load ignored words: {e}")
            raise

    @staticmethod
    def load_priority_words(json_path: str, logger: logging.Logger) -> List[str]:
        """
        Завантаження пріоритетних слів (порядок зберігається).

        Args:
            json_path: Шлях до JSON-масиву рядків
            logger: Логгер

        Returns:
            Список слів
        """
        try:
            words = ConfigLoader._load_word_list(json_path)
            logger.info(f"Loaded {len(words)} priority words")
            return words

        except Exception as e:
            logger.error(f"Failed to load priority words: {e}")
            raise

    @staticmethod
    def _load_word_list(json_path: str) -> List[str]:
        """Читання JSON-масиву рядків"""
        path = Path(json_path)
        if not path.exists():
            raise FileNotFoundError(f"Word list JSON not found: {json_path}")

        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)

        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"Word list must be a JSON array of strings: {json_path}")
        return data

    @staticmethod
    def _join_row(row: Dict[Any, Any]) -> str:
        """Об'єднання значень рядка через пробіл"""
        values = []
        for value in row.values():
            # Зайві значення DictReader складає в список
            if isinstance(value, list):
                values.extend(value)
            else:
                values.append(value or "")
        return " ".join(values)
