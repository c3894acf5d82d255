"""
Утиліти для роботи з текстом записів і окремими словами.
"""

from keyword_labels.utils.text_helpers import clean_text
from keyword_labels.utils.word_helpers import (
    is_meaningful_word,
    is_random_word,
    get_plural_form,
    apply_plural_correction,
)

__all__ = [
    "clean_text",
    "is_meaningful_word",
    "is_random_word",
    "get_plural_form",
    "apply_plural_correction",
]
