import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from subaruu.config import Config
from subaruu.errors import BasicRuntimeError, BasicSyntaxError, Diagnostics, InternalError, ScanError
from subaruu.evaluator import ExpressionEvaluator
from subaruu.lines import LineIndex, is_line_number
from subaruu.tokenizer import Tokenizer
from subaruu.tokens import TokenType
from subaruu.variables import VariableStore

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs a line-numbered program directly off its token stream.

    Jumps have no instruction list to index into: the cursor is reset to the
    start of the program and the target line is found by scanning forward.
    """

    def __init__(self, source: str, output: Optional[TextIO] = None,
                 diagnostics: Optional[Diagnostics] = None,
                 config: Optional[Config] = None, filename: str = "<input>"):
        self.config = config or Config()
        self.diagnostics = diagnostics or Diagnostics()
        # The first token is scanned on construction
        try:
            self.tokenizer = Tokenizer(source, filename)
        except ScanError as e:
            self.diagnostics.report(e)
            raise
        self.variables = VariableStore()
        self.output = output
        self.evaluator = ExpressionEvaluator(self.tokenizer, self.variables, self.diagnostics, self.config)
        self.line_index = LineIndex(self.tokenizer)
        self.execution_finished = False
        self.started = False

    def finished(self) -> bool:
        return self.execution_finished

    def run(self):
        logger.debug("Starting program execution")
        while self.step():
            pass
        logger.debug("Program execution finished")

    def step(self) -> bool:
        """Execute one logical line. Returns False once the program has finished."""
        try:
            if not self.started:
                self.line_index.build()
                self.started = True
            if self.execution_finished:
                return False
            if self.tokenizer.finished():
                self.execution_finished = True
                return False
            self.line_statement()
        except ScanError as e:
            self.diagnostics.report(e)
            raise
        return not self.execution_finished

    def accept(self, expected: TokenType):
        self.evaluator.accept(expected)

    def line_statement(self):
        # Skip empty lines
        while self.tokenizer.current_token() == TokenType.EOL:
            self.tokenizer.next_token()

        if self.tokenizer.current_token() == TokenType.EOF:
            self.execution_finished = True
            return

        if self.tokenizer.current_token() == TokenType.NUMBER:
            logger.debug(f"line {self.tokenizer.get_num()}")
            self.tokenizer.next_token()

        self.statement()

    def statement(self):
        token = self.tokenizer.current_token()

        if token == TokenType.REM:
            self.tokenizer.skip_to_eol()
        elif token == TokenType.PRINT:
            self.print_statement()
        elif token == TokenType.IF:
            self.if_statement()
        elif token == TokenType.GOTO:
            self.goto_statement()
        elif token == TokenType.LET:
            self.accept(TokenType.LET)
            self.let_statement()
        elif token == TokenType.LETTER:
            self.let_statement()
        else:
            logger.debug(f"Unrecognized statement type: {Tokenizer.token_to_string(token)}")
            self.diagnostics.error("Syntax Error: Unrecognized statement", BasicSyntaxError, self.tokenizer.token)

    def let_statement(self):
        if self.tokenizer.current_token() != TokenType.LETTER:
            self.diagnostics.error("Syntax Error: Expected variable name", BasicSyntaxError, self.tokenizer.token)

        name = self.tokenizer.get_token_data().lower()
        self.tokenizer.next_token()
        self.accept(TokenType.EQUAL)

        value = self.evaluator.expression()
        self.variables.assign(name, value)
        logger.debug(f"LET {name} = {value}")

    def if_statement(self):
        self.accept(TokenType.IF)
        condition = self.evaluator.relation()
        self.accept(TokenType.THEN)

        if self.tokenizer.current_token() != TokenType.NUMBER:
            self.diagnostics.error("Syntax Error: Expected line number after THEN",
                                   BasicSyntaxError, self.tokenizer.token)

        # The target is consumed whether or not the jump is taken
        line_number = self.tokenizer.get_num()
        self.tokenizer.next_token()

        if condition:
            logger.debug(f"Condition true, jumping to line {line_number}")
            self.jump(line_number)
        elif self.tokenizer.current_token() == TokenType.EOL:
            self.tokenizer.next_token()

    def goto_statement(self):
        self.accept(TokenType.GOTO)
        target = self.tokenizer.token
        self.accept(TokenType.NUMBER)
        self.accept(TokenType.EOL)
        self.jump(target.value)

    def print_statement(self):
        self.accept(TokenType.PRINT)
        output = []
        need_space = False

        def emit(text: str):
            output.append(text)
            print(text, end="", file=self.output)

        while not self.tokenizer.finished():
            token = self.tokenizer.current_token()
            if token == TokenType.EOL:
                break
            if is_line_number(self.tokenizer, allow_end=False):
                break

            if token == TokenType.STRING:
                if need_space:
                    emit(" ")
                emit(self.tokenizer.get_string())
                need_space = True
                self.tokenizer.next_token()
            elif token == TokenType.SEPARATOR:
                need_space = False
                emit(" ")
                self.tokenizer.next_token()
            elif token in (TokenType.LETTER, TokenType.NUMBER, TokenType.LEFT_PAREN):
                if need_space:
                    emit(" ")
                emit(str(self.evaluator.expression()))
                need_space = True
            else:
                logger.debug(f"Found unexpected token: {Tokenizer.token_to_string(token)}")
                break

        print(file=self.output)
        logger.info(f"PRINT: {''.join(output)!r}")

        # Leave a following line number for the run loop
        if is_line_number(self.tokenizer, allow_end=False):
            return

        final_token = self.tokenizer.current_token()
        if final_token == TokenType.EOF:
            self.execution_finished = True
        elif final_token == TokenType.EOL:
            self.tokenizer.next_token()

    def jump(self, line_number: int):
        if not self.line_index:
            self.line_index.build()

        if line_number not in self.line_index:
            self.diagnostics.error(f"Runtime Error: Line number {line_number} not found", BasicRuntimeError)

        self.tokenizer.reset()
        if not self.find_target_line(line_number):
            self.diagnostics.error(f"Internal Error: Failed to find valid line number {line_number}", InternalError)

    def find_target_line(self, line_number: int) -> bool:
        """Scan forward from the cursor to the body of `line_number`."""
        tokenizer = self.tokenizer
        while not tokenizer.finished():
            if tokenizer.current_token() == TokenType.NUMBER and tokenizer.get_num() == line_number:
                tokenizer.next_token()
                return True
            tokenizer.skip_to_eol()
        return False


def load_source(path: Union[str, Path]) -> str:
    source = Path(path).read_text(encoding="utf-8")
    if not source.endswith('\n'):
        source += '\n'
    return source


def run_source(source: str, **kwargs) -> Interpreter:
    interpreter = Interpreter(source, **kwargs)
    interpreter.run()
    return interpreter
