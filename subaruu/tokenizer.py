import logging
from typing import Optional, Union

from subaruu.errors import ScanError
from subaruu.tokens import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenType, token_name

logger = logging.getLogger(__name__)

WHITESPACE = ' \t\r'


class Tokenizer:
    """Lazy scanner over program text with one token of lookahead.

    Only the current token is materialised; `next_token` scans the next one
    from where the current token ends, and `reset` seeks back to the start
    of the program. This cursor is the only position state the interpreter
    has.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.line = 1
        self.line_start = 0
        self.token: Token = None
        self.reset()

    def reset(self):
        self.line = 1
        self.line_start = 0
        self.token = self.scan_token(0)

    def current_token(self) -> TokenType:
        return self.token.type

    def next_token(self):
        if self.token.type == TokenType.EOF:
            return
        if self.token.type == TokenType.EOL:
            self.line += 1
            self.line_start = self.token.end
        self.token = self.scan_token(self.token.end)

    def finished(self) -> bool:
        return self.token.type == TokenType.EOF

    def peek_char(self) -> Optional[str]:
        """Raw character right after the current token, None at end of stream."""
        if self.token.end >= len(self.source):
            return None
        return self.source[self.token.end]

    def get_num(self) -> int:
        if self.token.type != TokenType.NUMBER:
            self.error(f"Expected number, found {token_name(self.token.type)}")
        return self.token.value

    def get_string(self) -> str:
        if self.token.type != TokenType.STRING:
            self.error(f"Expected string, found {token_name(self.token.type)}")
        return self.token.value

    def get_token_data(self) -> Union[str, int]:
        if self.token.type not in (TokenType.LETTER, TokenType.NUMBER):
            self.error(f"No data for {token_name(self.token.type)} token")
        return self.token.value

    def skip_to_eol(self):
        if self.token.type == TokenType.EOF:
            return
        newline = self.source.find('\n', self.token.start)
        if newline == -1:
            self.token = self.scan_token(len(self.source))
            return
        self.line += 1
        self.line_start = newline + 1
        self.token = self.scan_token(newline + 1)

    @staticmethod
    def token_to_string(kind: TokenType) -> str:
        return token_name(kind)

    def scan_token(self, pos: int) -> Token:
        source = self.source
        while pos < len(source) and source[pos] in WHITESPACE:
            pos += 1

        if pos >= len(source):
            return self.make_token(TokenType.EOF, None, pos, pos)

        char = source[pos]

        if char == '\n':
            return self.make_token(TokenType.EOL, char, pos, pos + 1)

        # Numbers
        if char.isdigit():
            end = pos
            while end < len(source) and source[end].isdigit():
                end += 1
            return self.make_token(TokenType.NUMBER, int(source[pos:end]), pos, end)

        # Strings
        if char == '"':
            end = pos + 1
            while end < len(source) and source[end] not in '"\n':
                end += 1
            if end >= len(source) or source[end] != '"':
                self.error("Unterminated string", pos)
            return self.make_token(TokenType.STRING, source[pos + 1:end], pos, end + 1)

        if char == '<':
            follow = source[pos + 1:pos + 2]
            if follow == '=':
                return self.make_token(TokenType.LT_EQ, '<=', pos, pos + 2)
            if follow == '>':
                return self.make_token(TokenType.NOT_EQUAL, '<>', pos, pos + 2)
            return self.make_token(TokenType.LT, char, pos, pos + 1)

        if char == '>':
            if source[pos + 1:pos + 2] == '=':
                return self.make_token(TokenType.GT_EQ, '>=', pos, pos + 2)
            return self.make_token(TokenType.GT, char, pos, pos + 1)

        if char in SINGLE_CHAR_TOKENS:
            return self.make_token(SINGLE_CHAR_TOKENS[char], char, pos, pos + 1)

        # Keywords win over single letters
        if char.isalpha() and char.isascii():
            for word, kind in KEYWORDS.items():
                if source[pos:pos + len(word)].upper() == word:
                    return self.make_token(kind, word, pos, pos + len(word))
            return self.make_token(TokenType.LETTER, char, pos, pos + 1)

        self.error(f"Unexpected character: {char!r}", pos)

    def make_token(self, kind: TokenType, value, start: int, end: int) -> Token:
        return Token(kind, value, self.line, start - self.line_start + 1, start, end)

    def get_current_line(self) -> str:
        end = self.source.find('\n', self.line_start)
        if end == -1:
            end = len(self.source)
        return self.source[self.line_start:end].rstrip('\r')

    def error(self, message: str, pos: int = None):
        if pos is None:
            token = self.token
        else:
            token = Token(TokenType.EOF, None, self.line, pos - self.line_start + 1, pos, pos + 1)
        logger.debug(f"{self.filename}:{token.line}:{token.column}: {message}")
        raise ScanError(f"{message} in {self.filename}", token, self.get_current_line())
