from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


# Token types
class TokenType(Enum):
    # Keywords
    LET = "LET"
    IF = "IF"
    THEN = "THEN"
    GOTO = "GOTO"
    PRINT = "PRINT"
    REM = "REM"

    # Operators
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    EQUAL = "="
    LT = "<"
    GT = ">"
    LT_EQ = "<="
    GT_EQ = ">="
    NOT_EQUAL = "<>"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    SEPARATOR = ","

    # Literals
    NUMBER = "NUMBER"
    LETTER = "LETTER"
    STRING = "STRING"

    # Special
    EOL = "EOL"
    EOF = "EOF"


KEYWORDS: Dict[str, TokenType] = {
    'LET': TokenType.LET, 'IF': TokenType.IF, 'THEN': TokenType.THEN,
    'GOTO': TokenType.GOTO, 'PRINT': TokenType.PRINT, 'REM': TokenType.REM,
}

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    '+': TokenType.PLUS, '-': TokenType.MINUS, '*': TokenType.ASTERISK,
    '/': TokenType.SLASH, '=': TokenType.EQUAL, '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN, ',': TokenType.SEPARATOR, ';': TokenType.SEPARATOR,
}

COMPARISONS = frozenset({
    TokenType.EQUAL, TokenType.LT, TokenType.GT,
    TokenType.LT_EQ, TokenType.GT_EQ, TokenType.NOT_EQUAL,
})


def token_name(kind: TokenType) -> str:
    if kind in (TokenType.EOL, TokenType.EOF):
        return kind.value
    if kind in (TokenType.NUMBER, TokenType.LETTER, TokenType.STRING):
        return kind.value.lower()
    return kind.value


@dataclass
class Token:
    type: TokenType
    value: Optional[Union[int, str]]
    line: int
    column: int
    start: int
    end: int

    def __str__(self):
        return f"{self.type.name}({self.value!r}) at {self.line}:{self.column}"
