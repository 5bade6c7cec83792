import io
from dataclasses import dataclass

import pytest
from rich.console import Console

from subaruu import Config, Diagnostics, Interpreter


@dataclass
class Result:
    interpreter: Interpreter
    output: str
    diagnostics: str


def make_interpreter(source: str, config: Config = None):
    output = io.StringIO()
    diagnostics = Diagnostics(Console(file=io.StringIO(), width=200))
    interpreter = Interpreter(source, output=output, diagnostics=diagnostics, config=config)
    return interpreter, output


def diagnostics_text(interpreter: Interpreter) -> str:
    return interpreter.diagnostics.console.file.getvalue()


@pytest.fixture
def run_program():
    """Run a program to completion and capture its output and diagnostics."""

    def run(source: str, config: Config = None) -> Result:
        interpreter, output = make_interpreter(source, config)
        interpreter.run()
        return Result(interpreter, output.getvalue(), diagnostics_text(interpreter))

    return run


@pytest.fixture
def interpreter_for():
    return make_interpreter
