"""
Утиліти для очищення тексту записів.
"""

from typing import List, Optional, Sequence

from keyword_labels.core.models import BRACKET_PAIRS


LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


def is_ascii_lower_letter(ch: str) -> bool:
    """Символ з діапазону a-z"""
    return "a" <= ch <= "z"


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


def is_line_terminator(ch: str) -> bool:
    return ch in LINE_TERMINATORS


def find_closing_bracket(text: str, start: int) -> Optional[int]:
    """
    Пошук першої закриваючої дужки для відкриваючої на позиції start.

    Вкладеність не враховується. Дужки не можуть охоплювати перенос рядка.

    Args:
        text: Текст
        start: Позиція відкриваючої дужки

    Returns:
        Позиція закриваючої дужки або None
    """
    closing = BRACKET_PAIRS[text[start]]
    for pos in range(start + 1, len(text)):
        ch = text[pos]
        if ch == closing:
            return pos
        if is_line_terminator(ch):
            return None
    return None


def preserve_priority_words(content: str, priority_words: Sequence[str]) -> str:
    """
    Залишає з вмісту дужок тільки пріоритетні слова.

    Args:
        content: Вміст дужок без самих дужок
        priority_words: Пріоритетні слова

    Returns:
        Збережені слова через пробіл або порожній рядок
    """
    priority = {word.lower() for word in priority_words}
    kept = [piece.lower() for piece in content.split() if piece.lower() in priority]
    return " ".join(kept)


def strip_brackets(text: str, priority_words: Sequence[str]) -> str:
    """Заміна кожного фрагмента в дужках на пріоритетні слова з нього"""
    parts: List[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]
        if ch in BRACKET_PAIRS:
            end = find_closing_bracket(text, pos)
            if end is not None:
                parts.append(preserve_priority_words(text[pos + 1:end], priority_words))
                pos = end + 1
                continue
        parts.append(ch)
        pos += 1

    return "".join(parts)


def scrub_characters(text: str) -> str:
    """Все, що не a-z і не пробільний символ, замінюється пробілом"""
    return "".join(
        ch if is_ascii_lower_letter(ch) or is_whitespace(ch) else " "
        for ch in text
    )


def clean_text(text: str, priority_words: Optional[Sequence[str]] = None) -> str:
    """
    Нормалізація тексту запису.

    Прибирає фрагменти в дужках (крім пріоритетних слів у них), переводить
    у нижній регістр, залишає тільки літери a-z і одинарні пробіли.

    Args:
        text: Сирий текст запису
        priority_words: Пріоритетні слова, які зберігаються з дужок

    Returns:
        Очищений текст
    """
    text = strip_brackets(text, priority_words or [])
    text = scrub_characters(text.lower())
    return " ".join(text.split())
