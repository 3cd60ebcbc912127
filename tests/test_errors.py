import pytest

from kplfront.errors import CompileError, ErrorCode, MissingTokenError
from kplfront.tokens import TokenType


def test_every_error_code_formats_a_distinct_message():
    rendered = [str(CompileError(code, 1, 1)) for code in ErrorCode]
    assert len(rendered) == 30
    assert len(set(rendered)) == 30
    assert all(text.startswith("1-1:") for text in rendered)


@pytest.mark.parametrize(
    "code, message",
    [
        (ErrorCode.END_OF_COMMENT, "End of comment expected."),
        (ErrorCode.IDENT_TOO_LONG, "Identifier too long."),
        (ErrorCode.NUMBER_TOO_LONG, "Value of integer number exceeds the range!"),
        (ErrorCode.INVALID_SYMBOL, "Invalid symbol."),
        (ErrorCode.DUPLICATE_IDENT, "Duplicate identifier."),
        (ErrorCode.TYPE_INCONSISTENCY, "Type inconsistency"),
        (ErrorCode.INVALID_RETURN, "Expect the owner of the current scope."),
    ],
)
def test_messages(code, message):
    assert code.message == message


def test_compile_error_format():
    err = CompileError(ErrorCode.IDENT_TOO_LONG, 3, 7)
    assert str(err) == "3-7:Identifier too long."
    assert (err.code, err.line_no, err.col_no) == (ErrorCode.IDENT_TOO_LONG, 3, 7)


def test_compile_error_is_an_exception():
    err = CompileError(ErrorCode.UNDECLARED_VARIABLE, 12, 4)
    assert isinstance(err, Exception)
    assert str(err) == "12-4:Undeclared variable."
    assert err.code is ErrorCode.UNDECLARED_VARIABLE


def test_missing_token_format():
    err = MissingTokenError(TokenType.SB_SEMICOLON, 2, 5)
    assert str(err) == "2-5:Missing ';'"
    assert err.token_type is TokenType.SB_SEMICOLON
    assert err.code is None


def test_missing_keyword_format():
    err = MissingTokenError(TokenType.KW_END, 9, 1)
    assert str(err) == "9-1:Missing keyword END"


def test_missing_token_is_a_compile_error():
    err = MissingTokenError(TokenType.TK_IDENT, 1, 1)
    assert isinstance(err, CompileError)
    assert str(err) == "1-1:Missing an identification"
    assert (err.line_no, err.col_no) == (1, 1)