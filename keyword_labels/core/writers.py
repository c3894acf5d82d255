"""
Запис результатів у JSON файли.
"""

import json
from pathlib import Path
from typing import Any, List, Sequence
import logging

from keyword_labels.core.helpers import unique_in_order
from keyword_labels.core.models import ProcessedRecord


def build_results(records: Sequence[str], processed: Sequence[str]) -> List[ProcessedRecord]:
    """Пари {original, processed} у порядку записів"""
    if len(records) != len(processed):
        raise ValueError(
            f"Records and labels are not aligned: {len(records)} != {len(processed)}"
        )
    return [
        ProcessedRecord(original=original, processed=label)
        for original, label in zip(records, processed)
    ]


def unique_labels(processed: Sequence[str]) -> List[str]:
    """Унікальні мітки в порядку першої появи"""
    return unique_in_order(processed)


class ResultWriter:
    """Запис вихідних файлів"""

    @staticmethod
    def write_results(
        records: Sequence[str],
        processed: Sequence[str],
        json_path: str,
        logger: logging.Logger
    ) -> None:
        """
        Запис пар {original, processed}.

        Args:
            records: Оригінальні записи
            processed: Мітки
            json_path: Шлях до вихідного JSON
            logger: Логгер
        """
        ResultWriter._write_json(build_results(records, processed), json_path)
        logger.info(f"Processed data written to {json_path}")

    @staticmethod
    def write_labels(processed: Sequence[str], json_path: str, logger: logging.Logger) -> None:
        """
        Запис унікальних міток.

        Args:
            processed: Мітки
            json_path: Шлях до вихідного JSON
            logger: Логгер
        """
        ResultWriter._write_json(unique_labels(processed), json_path)
        logger.info(f"Processed lines written to {json_path}")

    @staticmethod
    def _write_json(data: Any, json_path: str) -> None:
        path = Path(json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
