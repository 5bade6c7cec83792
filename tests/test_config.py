import pytest

from subaruu import Config


def test_defaults():
    config = Config()
    assert config.word_bits == 32
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_from_env_and_overrides():
    environ = {"SUBARUU_WORD_BITS": "16", "SUBARUU_LOG_LEVEL": "debug", "SUBARUU_LOG_FILE": "trace.log"}
    config = Config.from_env(environ)
    assert config.word_bits == 16
    assert config.log_level == "DEBUG"
    assert config.log_file == "trace.log"

    config = Config.from_env(environ, word_bits=8, log_level=None)
    assert config.word_bits == 8
    assert config.log_level == "DEBUG"


def test_word_bits_must_be_sensible():
    with pytest.raises(ValueError):
        Config(word_bits=1)


@pytest.mark.parametrize("value, expected", [
    (2 ** 31 - 1, 2 ** 31 - 1),
    (2 ** 31, -2 ** 31),
    (-2 ** 31 - 1, 2 ** 31 - 1),
    (2 ** 32 + 5, 5),
])
def test_wrap_32_bit(value, expected):
    assert Config().wrap(value) == expected


def test_unknown_log_level():
    with pytest.raises(ValueError, match="unknown log level"):
        Config.from_env({"SUBARUU_LOG_LEVEL": "loud"})
