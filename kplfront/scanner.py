"""Lexical scanner turning source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .charcodes import CharCode, char_code
from .errors import CompileError, ErrorCode
from .reader import Reader
from .tokens import MAX_IDENT_LEN, Token, TokenType, check_keyword

INT_MAX = 2**31 - 1

_SINGLE_CHAR_TOKENS = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.SLASH: TokenType.SB_SLASH,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
}

# Operators that may be followed by '=' to form a longer one.
_EQ_PAIRS = {
    CharCode.LT: (TokenType.SB_LT, TokenType.SB_LE),
    CharCode.GT: (TokenType.SB_GT, TokenType.SB_GE),
    CharCode.COLON: (TokenType.SB_COLON, TokenType.SB_ASSIGN),
}

_WORD_CHARS = (CharCode.LETTER, CharCode.DIGIT)


def _is_printable(ch: str | None) -> bool:
    return ch is not None and " " <= ch <= "~"


class Scanner:
    """Produces tokens from a :class:`Reader`.

    Lexical errors are raised as :class:`CompileError`.
    """

    def __init__(self, reader: Reader) -> None:
        self._reader = reader

    def _code(self) -> CharCode:
        return char_code(self._reader.current_char)

    def _fail(self, code: ErrorCode, line_no: int, col_no: int) -> CompileError:
        return CompileError(code, line_no, col_no)

    def get_token(self) -> Token:
        """Scan and return the next token; TK_EOF is returned at end of input."""
        reader = self._reader
        while True:
            if reader.current_char is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            code = self._code()
            if code is CharCode.SPACE:
                reader.read_char()
                continue
            if code is CharCode.LPAR:
                token = self._lpar_or_comment()
                if token is None:
                    continue
                return token
            return self._dispatch(code)

    def _dispatch(self, code: CharCode) -> Token:
        reader = self._reader
        if code is CharCode.LETTER:
            return self._identifier()
        if code is CharCode.DIGIT:
            return self._number()
        if code in _SINGLE_CHAR_TOKENS:
            return self._after_advance(_SINGLE_CHAR_TOKENS[code])
        if code in _EQ_PAIRS:
            short, long = _EQ_PAIRS[code]
            reader.read_char()
            if self._code() is CharCode.EQ:
                return self._after_advance(long)
            return Token(short, reader.line_no, reader.col_no - 1)
        if code is CharCode.EXCLAMATION:
            reader.read_char()
            if self._code() is CharCode.EQ:
                return self._after_advance(TokenType.SB_NEQ)
            raise self._fail(ErrorCode.INVALID_SYMBOL, reader.line_no, reader.col_no - 1)
        if code is CharCode.PERIOD:
            reader.read_char()
            if self._code() is CharCode.RPAR:
                return self._after_advance(TokenType.SB_RSEL)
            return self._after_advance(TokenType.SB_PERIOD)
        if code is CharCode.SEMICOLON:
            return self._at_start(TokenType.SB_SEMICOLON)
        if code is CharCode.RPAR:
            return self._at_start(TokenType.SB_RPAR)
        if code is CharCode.SINGLEQUOTE:
            return self._char_constant()
        raise self._fail(ErrorCode.INVALID_SYMBOL, reader.line_no, reader.col_no)

    def _after_advance(self, token_type: TokenType) -> Token:
        reader = self._reader
        reader.read_char()
        return Token(token_type, reader.line_no, reader.col_no - 1)

    def _at_start(self, token_type: TokenType) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        return Token(token_type, line_no, col_no)

    def _identifier(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        chars = [reader.current_char]
        reader.read_char()
        while self._code() in _WORD_CHARS:
            chars.append(reader.current_char)
            reader.read_char()
        if len(chars) > MAX_IDENT_LEN:
            raise self._fail(ErrorCode.IDENT_TOO_LONG, line_no, col_no)
        name = "".join(chars)
        keyword = check_keyword(name)
        if keyword is TokenType.TK_NONE:
            return Token(TokenType.TK_IDENT, line_no, col_no, string=name)
        return Token(keyword, line_no, col_no)

    def _number(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        while reader.current_char == "0":
            reader.read_char()
        digits = []
        while self._code() is CharCode.DIGIT:
            digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits) or "0"
        value = int(text)
        if value > INT_MAX:
            raise self._fail(ErrorCode.NUMBER_TOO_LONG, line_no, col_no)
        return Token(TokenType.TK_NUMBER, line_no, col_no, string=text, value=value)

    def _char_constant(self) -> Token:
        reader = self._reader
        reader.read_char()
        ch = reader.current_char
        if not _is_printable(ch):
            raise self._fail(ErrorCode.INVALID_CONSTANT_CHAR, reader.line_no, reader.col_no - 2)
        reader.read_char()
        if self._code() is not CharCode.SINGLEQUOTE:
            raise self._fail(ErrorCode.INVALID_CONSTANT_CHAR, reader.line_no, reader.col_no - 2)
        token = Token(TokenType.TK_CHAR, reader.line_no, reader.col_no - 1, string=ch)
        reader.read_char()
        return token

    def _lpar_or_comment(self) -> Token | None:
        """Scan '(' , '(.' or skip a comment; return None after a comment."""
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        code = self._code()
        if code is CharCode.PERIOD:
            reader.read_char()
            return Token(TokenType.SB_LSEL, line_no, col_no)
        if code is CharCode.TIMES:
            self._skip_comment()
            return None
        return Token(TokenType.SB_LPAR, line_no, col_no)

    def _skip_comment(self) -> None:
        reader = self._reader
        while True:
            while self._code() is CharCode.TIMES:
                reader.read_char()
            if reader.current_char is None:
                raise self._fail(ErrorCode.END_OF_COMMENT, reader.line_no, reader.col_no)
            if self._code() is CharCode.RPAR:
                reader.read_char()
                return
            while reader.current_char is not None and self._code() is not CharCode.TIMES:
                reader.read_char()
            if reader.current_char is None:
                raise self._fail(ErrorCode.END_OF_COMMENT, reader.line_no, reader.col_no)

    def get_valid_token(self) -> Token:
        """Return the next token that is not TK_NONE."""
        token = self.get_token()
        while token.token_type is TokenType.TK_NONE:
            token = self.get_token()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including TK_EOF."""
        while True:
            token = self.get_valid_token()
            yield token
            if token.token_type is TokenType.TK_EOF:
                return


def format_token(token: Token) -> str:
    """Render a token as ``line-col:KIND`` with its text where it has one."""
    prefix = f"{token.line_no}-{token.col_no}:"
    name = token.token_type.name
    if token.token_type in (TokenType.TK_IDENT, TokenType.TK_NUMBER):
        return f"{prefix}{name}({token.string})"
    if token.token_type is TokenType.TK_CHAR:
        return f"{prefix}{name}('{token.string}')"
    return f"{prefix}{name}"


def tokenize(text: str) -> list[Token]:
    """Scan ``text`` completely and return its tokens, ending with TK_EOF."""
    return list(Scanner(Reader(text)))