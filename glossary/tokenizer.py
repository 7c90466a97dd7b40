"""
Word/separator tokenizer for the glossary builder.

Splits definition text into maximal runs of separator characters or word
characters so that the runs concatenate back to the original text.
"""

from typing import AbstractSet, Iterator, Optional

from models import SEPARATORS, Token, TokenKind


def next_token(text: str, position: int, separators: AbstractSet[str] = SEPARATORS) -> str:
    """
    Return the word or separator run of `text` starting at `position`.

    Args:
        text: The text to scan
        position: Start index, 0 <= position < len(text)
        separators: Characters that delimit words

    Returns:
        The longest substring starting at `position` whose characters are all
        separators or all non-separators, matching the class of text[position]
    """
    if not 0 <= position < len(text):
        raise IndexError(
            f"position {position} out of range for text of length {len(text)}"
        )

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


class Tokenizer:
    """Walks text as a sequence of word and separator tokens."""

    def __init__(self, separators: Optional[AbstractSet[str]] = None):
        """
        Initialize the tokenizer.

        Args:
            separators: Characters that delimit words; defaults to the
                glossary separator set
        """
        self.separators = frozenset(SEPARATORS if separators is None else separators)

    def is_separator(self, ch: str) -> bool:
        return ch in self.separators

    def next_token(self, text: str, position: int) -> str:
        return next_token(text, position, self.separators)

    def tokens(self, text: str) -> Iterator[Token]:
        """Yield tokens of `text` from position 0 until it is exhausted."""
        position = 0
        while position < len(text):
            chunk = self.next_token(text, position)
            kind = TokenKind.SEPARATOR if self.is_separator(chunk[0]) else TokenKind.WORD
            yield Token(text=chunk, kind=kind, start=position)
            position += len(chunk)
