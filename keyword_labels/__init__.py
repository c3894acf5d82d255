"""
Генератор коротких міток із ключових слів для записів CSV.

Модульна архітектура:
- keyword_labels/core/ - ядро системи (оркестрація, моделі, завантажувачі, запис)
- keyword_labels/processors/ - класифікатори частин мови та фільтри стоп-слів
- keyword_labels/utils/ - утиліти для очищення тексту та роботи зі словами

Приклад використання:
    >>> from keyword_labels import DatasetProcessor
    >>> from keyword_labels.processors import WordNetClassifier, NltkStopwordFilter
    >>>
    >>> processor = DatasetProcessor(
    ...     classifier=WordNetClassifier(),
    ...     stopword_filter=NltkStopwordFilter(),
    ... )
    >>>
    >>> labels = processor.process(
    ...     ["Moringa Leaf Powder (Organic) 100g", "Moringa Capsules"],
    ...     ignored_words={"powder"},
    ...     priority_words=["organic"],
    ... )
"""

from keyword_labels.core import DatasetProcessor, LabelsConfig

__version__ = "1.0.0"

__all__ = [
    "DatasetProcessor",
    "LabelsConfig",
]
