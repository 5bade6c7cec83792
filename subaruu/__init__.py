from subaruu.config import Config
from subaruu.errors import (BasicRuntimeError, BasicSyntaxError, Diagnostics, InternalError,
                            ScanError, SubaruuError)
from subaruu.interpreter import Interpreter, load_source, run_source
from subaruu.tokenizer import Tokenizer
from subaruu.tokens import Token, TokenType

__all__ = [
    "Config", "Diagnostics", "Interpreter", "Tokenizer", "Token", "TokenType",
    "SubaruuError", "ScanError", "BasicSyntaxError", "BasicRuntimeError", "InternalError",
    "load_source", "run_source",
]
