from subaruu import Tokenizer, TokenType
from subaruu.lines import LineIndex, is_line_number

PROGRAM = (
    '10 LET a = 20\n'
    '20 REM 30 is not read here 40\n'
    '30 PRINT a 15 25\n'
    '40 IF a > 5 THEN 70\n'
    '50 GOTO 10\n'
)


def test_index_records_line_headers_and_targets():
    index = LineIndex(Tokenizer(PROGRAM))
    lines = index.build()
    assert lines == {10, 20, 30, 40, 50, 70}
    assert 70 in index
    assert 15 not in index
    assert list(index) == [10, 20, 30, 40, 50, 70]


def test_index_build_is_repeatable_and_resets_cursor():
    tokenizer = Tokenizer(PROGRAM)
    index = LineIndex(tokenizer)
    first = index.build()
    second = index.build()
    assert first == second
    assert tokenizer.current_token() == TokenType.NUMBER
    assert tokenizer.get_num() == 10


def test_empty_program_has_empty_index():
    index = LineIndex(Tokenizer(''))
    assert index.build() == set()
    assert not index


def test_line_number_rules():
    tokenizer = Tokenizer('5 15 20+ 30\r\n')
    assert not is_line_number(tokenizer)  # below ten
    tokenizer.next_token()
    assert not is_line_number(tokenizer)  # not a multiple of ten
    tokenizer.next_token()
    assert not is_line_number(tokenizer)  # followed by an operator
    tokenizer.next_token()
    tokenizer.next_token()
    assert is_line_number(tokenizer)  # followed by \r


def test_end_of_source_only_counts_when_allowed():
    tokenizer = Tokenizer('PRINT 40')
    tokenizer.next_token()
    assert is_line_number(tokenizer)
    assert not is_line_number(tokenizer, allow_end=False)


def test_only_numbers_are_line_numbers():
    assert not is_line_number(Tokenizer('PRINT 10'))
