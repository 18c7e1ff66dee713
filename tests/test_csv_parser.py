import io

import pytest

from zep_clockify.csv_parser import EOF, CSVParser, Token
from zep_clockify.errors import (
    ColumnCountMismatchError,
    StructuralTruncationError,
    UnterminatedQuoteError,
)


def read_all_tokens(parser: CSVParser) -> list:
    tokens = []
    while True:
        token = parser.read_token()
        if token is EOF:
            return tokens
        tokens.append(token)


class TestReadToken:
    """Tokenizer framing of quoted and unquoted fields."""

    def test_empty_and_quoted_empty_fields(self, make_parser) -> None:
        parser = make_parser('Abbreviation;;"";Description')

        assert read_all_tokens(parser) == [
            Token("Abbreviation", True),
            Token("", True),
            Token("", True),
            Token("Description", False),
        ]

    def test_quoted_field_with_embedded_newline(self, make_parser) -> None:
        parser = make_parser('Abbreviation;Description;;"ID:\n123"')

        tokens = read_all_tokens(parser)

        assert [t.value for t in tokens] == ["Abbreviation", "Description", "", "ID:\n123"]
        assert [t.further_tokens for t in tokens] == [True, True, True, False]

    def test_multi_line_field_followed_by_record(self, make_parser) -> None:
        parser = make_parser('Abbreviation;"Project\nName";ID\nproj1;Foobar;123')

        tokens = read_all_tokens(parser)

        assert [t.value for t in tokens] == ["Abbreviation", "Project\nName", "ID", "proj1", "Foobar", "123"]
        assert [t.further_tokens for t in tokens] == [True, True, False, True, True, False]

    def test_eof_is_repeated(self, make_parser) -> None:
        parser = make_parser("a\n")

        assert parser.read_token() == Token("a", False)
        assert parser.read_token() is EOF
        assert parser.read_token() is EOF

    def test_trailing_delimiter_yields_empty_last_field(self, make_parser) -> None:
        parser = make_parser("a;\nb;;\n")

        assert read_all_tokens(parser) == [
            Token("a", True),
            Token("", False),
            Token("b", True),
            Token("", True),
            Token("", False),
        ]

    def test_quoted_field_keeps_delimiters(self, make_parser) -> None:
        parser = make_parser('"a;b";c')

        assert read_all_tokens(parser) == [Token("a;b", True), Token("c", False)]

    def test_text_after_closing_quote_is_dropped(self, make_parser) -> None:
        parser = make_parser('"ab"cd;e')

        assert read_all_tokens(parser) == [Token("ab", True), Token("e", False)]

    def test_blank_line_is_single_empty_field(self, make_parser) -> None:
        parser = make_parser("a\n\nb\n")

        assert read_all_tokens(parser) == [Token("a", False), Token("", False), Token("b", False)]

    def test_whitespace_is_not_trimmed(self, make_parser) -> None:
        parser = make_parser(" a ; b ")

        assert read_all_tokens(parser) == [Token(" a ", True), Token(" b ", False)]

    def test_unterminated_quote_raises(self, make_parser) -> None:
        parser = make_parser('a;"open\nstill open\n')

        assert parser.read_token() == Token("a", True)
        with pytest.raises(UnterminatedQuoteError) as exc_info:
            parser.read_token()
        assert exc_info.value.line_number == 1

    def test_further_tokens_false_only_on_last_field(self, make_parser) -> None:
        parser = make_parser('x;"y\nz";w;v\n1;2;3;4\n')

        tokens = read_all_tokens(parser)
        flags = [t.further_tokens for t in tokens]

        assert flags == [True, True, True, False, True, True, True, False]


class TestReadHeaderRecord:

    def test_reads_header_and_fixes_columns(self, make_parser) -> None:
        parser = make_parser("ID;Abbreviation;Description\n")

        assert parser.read_header_record() == ["ID", "Abbreviation", "Description"]
        assert parser.num_columns == 3

    def test_second_call_is_a_programming_error(self, make_parser) -> None:
        parser = make_parser("a;b\n1;2\n")
        parser.read_header_record()

        with pytest.raises(RuntimeError):
            parser.read_header_record()

    def test_empty_input_is_truncation(self, make_parser) -> None:
        parser = make_parser("")

        with pytest.raises(StructuralTruncationError):
            parser.read_header_record()


class TestReadRecord:

    def test_reads_records_until_eof(self, make_parser) -> None:
        parser = make_parser("a;b\n1;2\n3;4\n")
        parser.read_header_record()
        row = ["", ""]

        assert parser.read_record(row) == ["1", "2"]
        assert parser.read_record(row) == ["3", "4"]
        assert parser.read_record(row) is EOF
        assert parser.read_record(row) is EOF

    def test_too_few_columns(self, make_parser) -> None:
        parser = make_parser("a;b;c\n1;2;3\n4;5\n")
        parser.read_header_record()
        row = [""] * 3
        parser.read_record(row)

        with pytest.raises(ColumnCountMismatchError) as exc_info:
            parser.read_record(row)

        assert exc_info.value.direction == "too few"
        assert exc_info.value.line_number == 3

    def test_too_many_columns(self, make_parser) -> None:
        parser = make_parser("a;b\n1;2;3\n")
        parser.read_header_record()

        with pytest.raises(ColumnCountMismatchError) as exc_info:
            parser.read_record(["", ""])

        assert exc_info.value.direction == "too many"
        assert exc_info.value.line_number == 2
        assert "Line 2" in str(exc_info.value)

    def test_trailing_delimiter_completes_last_field(self, make_parser) -> None:
        parser = make_parser('a;b\n1;')
        parser.read_header_record()

        assert parser.read_record(["", ""]) == ["1", ""]

    def test_eof_after_partial_record_is_truncation(self, make_parser) -> None:
        parser = make_parser("a;b;c\n")
        parser.read_header_record()
        tokens = iter([Token("1", True), EOF])
        parser.read_token = lambda: next(tokens)

        with pytest.raises(StructuralTruncationError) as exc_info:
            parser.read_record(["", "", ""])
        assert exc_info.value.line_number == 1

    def test_record_ending_early_at_end_of_input(self, make_parser) -> None:
        parser = make_parser('a;b\n"x"')
        parser.read_header_record()

        with pytest.raises(ColumnCountMismatchError) as exc_info:
            parser.read_record(["", ""])
        assert exc_info.value.direction == "too few"

    def test_trailing_blank_line_is_a_short_record(self, make_parser) -> None:
        parser = make_parser("a;b\n1;2\n\n")
        parser.read_header_record()
        row = ["", ""]
        parser.read_record(row)

        with pytest.raises(ColumnCountMismatchError) as exc_info:
            parser.read_record(row)
        assert exc_info.value.direction == "too few"
        assert exc_info.value.line_number == 3

    def test_trailing_blank_line_with_single_column(self, make_parser) -> None:
        parser = make_parser("a\n1\n\n")
        parser.read_header_record()

        assert list(parser.iter_records()) == [["1"], [""]]

    def test_requires_header(self, make_parser) -> None:
        parser = make_parser("a;b\n")

        with pytest.raises(RuntimeError):
            parser.read_record(["", ""])

    def test_buffer_size_must_match(self, make_parser) -> None:
        parser = make_parser("a;b\n1;2\n")
        parser.read_header_record()

        with pytest.raises(ValueError):
            parser.read_record([""])

    def test_iter_records_returns_independent_rows(self, make_parser) -> None:
        parser = make_parser('h1;h2\n1;"multi\nline"\n2;x\n')
        parser.read_header_record()

        assert list(parser.iter_records()) == [["1", "multi\nline"], ["2", "x"]]

    def test_two_parsers_give_identical_output(self) -> None:
        data = 'ID;Name\n1;"A\nB"\n2;\n'

        def parse():
            parser = CSVParser(io.StringIO(data))
            return parser.read_header_record(), list(parser.iter_records())

        assert parse() == parse()

    def test_binary_source(self) -> None:
        parser = CSVParser(io.BytesIO("a;b\r\nä;ö\r\n".encode("latin-1")), encoding="latin-1")

        assert parser.read_header_record() == ["a", "b"]
        assert list(parser.iter_records()) == [["ä", "ö"]]
