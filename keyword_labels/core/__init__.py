"""
Ядро генератора міток.
"""

from keyword_labels.core.generator import DatasetProcessor
from keyword_labels.core.models import (
    ClassifierType,
    LabelsConfig,
    PartsOfSpeech,
    ProcessedRecord,
    MAX_LABEL_WORDS,
)
from keyword_labels.core.helpers import KeywordBucket
from keyword_labels.core.frequency import build_frequency_map
from keyword_labels.core.extractor import extract_top_words
from keyword_labels.core.loaders import ConfigLoader
from keyword_labels.core.writers import ResultWriter

__all__ = [
    "DatasetProcessor",
    "ClassifierType",
    "LabelsConfig",
    "PartsOfSpeech",
    "ProcessedRecord",
    "KeywordBucket",
    "ConfigLoader",
    "ResultWriter",
    "build_frequency_map",
    "extract_top_words",
    "MAX_LABEL_WORDS",
]
