import logging

from subaruu.config import Config
from subaruu.errors import BasicSyntaxError, Diagnostics, InternalError
from subaruu.lines import is_line_number
from subaruu.tokenizer import Tokenizer
from subaruu.tokens import COMPARISONS, TokenType
from subaruu.variables import VariableStore

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """Recursive-descent parser that evaluates as it goes.

    There is no expression tree: each level reads tokens straight off the
    shared tokenizer and returns an integer.
    """

    def __init__(self, tokenizer: Tokenizer, variables: VariableStore,
                 diagnostics: Diagnostics, config: Config = None):
        self.tokenizer = tokenizer
        self.variables = variables
        self.diagnostics = diagnostics
        self.config = config or Config()

    def accept(self, expected: TokenType):
        found = self.tokenizer.current_token()
        if found != expected:
            self.diagnostics.error(
                f"unexpected `{Tokenizer.token_to_string(found)}` "
                f"expected `{Tokenizer.token_to_string(expected)}`",
                BasicSyntaxError, self.tokenizer.token)
        self.tokenizer.next_token()

    def factor(self) -> int:
        token = self.tokenizer.current_token()

        if token == TokenType.NUMBER:
            result = self.config.wrap(self.tokenizer.get_num())
            logger.debug(f"Factor number: {result}")
            self.tokenizer.next_token()
        elif token == TokenType.LETTER:
            name = self.tokenizer.get_token_data().lower()
            result = self.variables.read(name)
            logger.debug(f"Factor variable {name} = {result}")
            self.tokenizer.next_token()
        elif token == TokenType.LEFT_PAREN:
            self.tokenizer.next_token()
            result = self.expression()
            self.accept(TokenType.RIGHT_PAREN)
        else:
            self.diagnostics.error(
                f"Syntax Error: Unexpected token in factor: {Tokenizer.token_to_string(token)}",
                BasicSyntaxError, self.tokenizer.token)
        return result

    def term(self) -> int:
        result = self.factor()
        token = self.tokenizer.current_token()

        while token in (TokenType.ASTERISK, TokenType.SLASH):
            self.tokenizer.next_token()
            value = self.factor()
            if token == TokenType.ASTERISK:
                result = self.config.wrap(result * value)
            else:
                result = self.divide(result, value)
            token = self.tokenizer.current_token()

        return result

    def expression(self) -> int:
        result = self.term()
        token = self.tokenizer.current_token()

        # A line number right after the first term belongs to the statement
        if token == TokenType.NUMBER and is_line_number(self.tokenizer):
            logger.debug(f"Expression stops before line number {self.tokenizer.get_num()}")
            return result

        while token in (TokenType.PLUS, TokenType.MINUS):
            self.tokenizer.next_token()
            value = self.term()
            if token == TokenType.PLUS:
                result = self.config.wrap(result + value)
            else:
                result = self.config.wrap(result - value)
            token = self.tokenizer.current_token()

        return result

    def divide(self, numerator: int, denominator: int) -> int:
        if denominator == 0:
            self.diagnostics.warning("divide by zero")
            logger.debug("Division by zero detected, setting result to 0")
            return 0
        quotient = abs(numerator) // abs(denominator)
        if (numerator < 0) != (denominator < 0):
            quotient = -quotient
        return self.config.wrap(quotient)

    def relation(self) -> int:
        left = self.expression()
        op = self.tokenizer.current_token()
        if op not in COMPARISONS:
            return int(left != 0)

        self.tokenizer.next_token()
        right = self.expression()
        logger.debug(f"Relation {left} {op.value} {right}")

        if op == TokenType.EQUAL:
            return int(left == right)
        elif op == TokenType.LT:
            return int(left < right)
        elif op == TokenType.GT:
            return int(left > right)
        elif op == TokenType.LT_EQ:
            return int(left <= right)
        elif op == TokenType.GT_EQ:
            return int(left >= right)
        elif op == TokenType.NOT_EQUAL:
            return int(left != right)
        self.diagnostics.error("Internal Error: Invalid comparison operator", InternalError)
