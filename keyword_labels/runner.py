"""
Запуск повного циклу: завантаження -> обробка -> запис результатів.
"""

from typing import List, Optional
import logging

from keyword_labels.core.generator import DatasetProcessor
from keyword_labels.core.loaders import ConfigLoader
from keyword_labels.core.models import LabelsConfig
from keyword_labels.core.writers import ResultWriter
from keyword_labels.processors.base import BaseClassifier, BaseStopwordFilter
from keyword_labels.processors.router import get_classifier
from keyword_labels.processors.stopwords import NltkStopwordFilter


LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> None:
    """Базове логування Python без технічного шуму NLTK"""
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT, level=level)
    logging.getLogger("nltk").setLevel(logging.WARNING)


def run(
    config: LabelsConfig,
    classifier: Optional[BaseClassifier] = None,
    stopword_filter: Optional[BaseStopwordFilter] = None,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """
    Повний прогін над файлами з конфігурації.

    Args:
        config: Конфігурація запуску
        classifier: Класифікатор (за замовчуванням - з config.classifier_type)
        stopword_filter: Фільтр стоп-слів (за замовчуванням - NLTK)
        logger: Опціональний логгер

    Returns:
        Мітки, вирівняні за індексом із записами
    """
    logger = logger or logging.getLogger(__name__)

    ignored_words = ConfigLoader.load_ignored_words(config.ignored_words_path, logger)
    priority_words = ConfigLoader.load_priority_words(config.priority_words_path, logger)
    records = ConfigLoader.load_records(config.input_path, logger, config.csv_delimiter)

    if classifier is None:
        classifier = get_classifier(config.classifier_type, config.lexicon_path, logger)
    if stopword_filter is None:
        stopword_filter = NltkStopwordFilter(logger=logger)

    processor = DatasetProcessor(classifier, stopword_filter, config.max_words, logger)
    processed = processor.process(records, ignored_words, priority_words)

    ResultWriter.write_results(records, processed, config.results_path, logger)
    ResultWriter.write_labels(processed, config.labels_path, logger)
    return processed


def main() -> None:
    configure_logging()
    run(LabelsConfig())
