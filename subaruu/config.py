import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "SUBARUU_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    word_bits: int = 32
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.word_bits < 2:
            raise ValueError(f"word_bits must be at least 2, got {self.word_bits}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None, **overrides) -> "Config":
        environ = os.environ if environ is None else environ
        values = {}
        if ENV_PREFIX + "WORD_BITS" in environ:
            values["word_bits"] = int(environ[ENV_PREFIX + "WORD_BITS"])
        if ENV_PREFIX + "LOG_LEVEL" in environ:
            values["log_level"] = environ[ENV_PREFIX + "LOG_LEVEL"]
        if environ.get(ENV_PREFIX + "LOG_FILE"):
            values["log_file"] = environ[ENV_PREFIX + "LOG_FILE"]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def wrap(self, value: int) -> int:
        """Two's-complement wraparound to a signed word."""
        modulus = 1 << self.word_bits
        value &= modulus - 1
        if value >= modulus >> 1:
            value -= modulus
        return value
