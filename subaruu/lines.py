import logging
from typing import Iterator, Set

from subaruu.tokenizer import Tokenizer
from subaruu.tokens import TokenType

logger = logging.getLogger(__name__)

LINE_NUMBER_FOLLOWERS = (' ', '\n', '\r')


def is_line_number(tokenizer: Tokenizer, allow_end: bool = True) -> bool:
    """Check whether the current NUMBER token reads as a line number.

    Line numbers are >= 10, multiples of 10, and followed by whitespace or a
    newline. With `allow_end` the end of the source also counts as a valid
    follower; PRINT uses the stricter form.
    """
    if tokenizer.current_token() != TokenType.NUMBER:
        return False
    num = tokenizer.get_num()
    if num < 10 or num % 10 != 0:
        return False
    next_char = tokenizer.peek_char()
    if next_char is None:
        return allow_end
    return next_char in LINE_NUMBER_FOLLOWERS


class LineIndex:
    """Existence-only set of the line numbers found in a program."""

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer
        self.lines: Set[int] = set()

    def build(self) -> Set[int]:
        logger.debug("Building line number index")
        self.lines.clear()
        tokenizer = self.tokenizer
        tokenizer.reset()
        while not tokenizer.finished():
            token = tokenizer.current_token()
            if token == TokenType.REM:
                tokenizer.skip_to_eol()
                continue
            if token == TokenType.NUMBER and is_line_number(tokenizer):
                self.lines.add(tokenizer.get_num())
            tokenizer.next_token()
        logger.debug(f"Found these line numbers: {' '.join(map(str, sorted(self.lines)))}")
        tokenizer.reset()
        return set(self.lines)

    def __contains__(self, line: int) -> bool:
        return line in self.lines

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.lines))

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)
