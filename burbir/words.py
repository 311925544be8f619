"""Words and lines read from a character tape that ends at ';', plus word helpers."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

MARK = ";"
BLANK = " "
NEWLINE = "\n"
CARRIAGE = "\r"
NMAX = 300

_WORD_STOPS = frozenset({MARK, BLANK, NEWLINE, CARRIAGE})
_LINE_STOPS = frozenset({MARK, NEWLINE, CARRIAGE})


class WordReader:
    """Reads words or whole lines from a text stream.

    The tape ends at the first ';' or at the end of the stream. Words longer
    than NMAX characters are cut to NMAX.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.current_char: Optional[str] = None
        self.current_word = ""
        self.end_word = False

    def _advance(self) -> None:
        char = self._stream.read(1)
        self.current_char = char if char else MARK

    def _ensure_started(self) -> None:
        if self.current_char is None:
            self._advance()

    def _skip_newline(self) -> None:
        if self.current_char == CARRIAGE:
            self._advance()
        if self.current_char == NEWLINE:
            self._advance()

    def _skip_blanks(self) -> None:
        while self.current_char == BLANK:
            self._advance()
        self._skip_newline()

    def _copy(self, stops: frozenset) -> None:
        chars = []
        while self.current_char not in stops:
            chars.append(self.current_char)
            self._advance()
        self.current_word = "".join(chars[:NMAX])

    def start_word(self) -> Optional[str]:
        """Start the tape and read the first word; None if the tape is empty."""
        self._advance()
        self._skip_blanks()
        if self.current_char == MARK:
            self.end_word = True
            return None
        self.end_word = False
        self._copy(_WORD_STOPS)
        self._skip_newline()
        return self.current_word

    def advance_word(self) -> Optional[str]:
        """Read the next word; None if the tape ended before one was found."""
        self._ensure_started()
        self._skip_blanks()
        if self.current_char == MARK:
            self.end_word = True
            return None
        self._copy(_WORD_STOPS)
        if self.current_char == MARK:
            self.end_word = True
        elif self.current_char in (NEWLINE, CARRIAGE):
            self._skip_newline()
        else:
            self._skip_blanks()
        return self.current_word

    def advance_line(self) -> Optional[str]:
        """Read the rest of the current line; None if the tape has ended."""
        self._ensure_started()
        if self.current_char == MARK:
            self.end_word = True
            return None
        self._copy(_LINE_STOPS)
        if self.current_char == MARK:
            self.end_word = True
        elif self.current_char in (NEWLINE, CARRIAGE):
            self._skip_newline()
        return self.current_word

    def words(self) -> Iterator[str]:
        """Yield every word from the start of the tape up to its end."""
        word = self.start_word()
        while word is not None:
            yield word
            if self.end_word:
                return
            word = self.advance_word()


def word_to_int(word: str) -> int:
    """Convert a word of digits, optionally led by '-', to an integer."""
    negative = word.startswith("-")
    digits = word[1:] if negative else word
    result = 0
    for char in digits:
        result = result * 10 + (ord(char) - ord("0"))
    return -result if negative else result


def int_to_word(number: int) -> str:
    """Convert an integer to its decimal word."""
    return str(number)


def cap_word(word: str, cap: int) -> str:
    """Cut a word to at most ``cap`` characters."""
    return word[:cap]


def word_to_char(word: str) -> str:
    """First character of the word, or an empty string for an empty word."""
    return word[:1]


def word_after_first_space(word: str) -> str:
    """Everything after the first blank; empty if there is no blank."""
    return word.partition(BLANK)[2]


def split_trailing_int(text: str) -> tuple[str, int]:
    """Split "Tuan Hak 32" into ("Tuan Hak", 32)."""
    head, _, number = text.rpartition(BLANK)
    return head, word_to_int(number)