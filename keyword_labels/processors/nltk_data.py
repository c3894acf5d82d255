"""
Завантаження корпусів NLTK, потрібних класифікатору та фільтру стоп-слів.
"""

from typing import Iterable, Optional, Tuple
import logging

import nltk


# (шлях у nltk_data, назва пакета для nltk.download)
WORDNET_RESOURCE = ("corpora/wordnet", "wordnet")
STOPWORDS_RESOURCE = ("corpora/stopwords", "stopwords")


def ensure_nltk_data(
    resources: Iterable[Tuple[str, str]],
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Завантажує відсутні корпуси NLTK.

    Args:
        resources: Пари (шлях, пакет)
        logger: Опціональний логгер

    Raises:
        LookupError: Якщо корпус не вдалося завантажити
    """
    logger = logger or logging.getLogger(__name__)

    for path, package in resources:
        try:
            nltk.data.find(path)
        except LookupError:
            logger.info(f"Downloading NLTK data: {package}")
            if not nltk.download(package, quiet=True, raise_on_error=True):
                raise LookupError(f"NLTK resource not available: {package}")
