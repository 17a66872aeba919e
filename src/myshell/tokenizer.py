"""Tokenize shell input into words and redirection operators.

Three small sub-parsers handle the quoting modes:

* normal (unquoted) text, where ``\\`` escapes any character,
* single-quoted spans, copied verbatim with no escape processing,
* double-quoted spans, where ``\\`` only escapes ``"`` and ``\\``.
"""

from dataclasses import dataclass
from typing import TypeAlias

from myshell.errors import ParseError

REDIRECT_OUT = ">"
REDIRECT_APPEND = ">>"
REDIRECT_ERR = "2>"
REDIRECT_ERR_APPEND = "2>>"
OPERATORS = {REDIRECT_OUT, REDIRECT_APPEND, REDIRECT_ERR, REDIRECT_ERR_APPEND}

# File descriptors that may prefix '>' to form a single operator token
_FD_PREFIXES = {"1": "", "2": "2"}

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"


@dataclass(frozen=True)
class Word:
    text: str


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __post_init__(self) -> None:
        if self.symbol not in OPERATORS:
            raise ValueError(f"unknown redirection operator: {self.symbol!r}")

    @property
    def stream(self) -> str:
        return "stderr" if self.symbol.startswith("2") else "stdout"

    @property
    def append(self) -> bool:
        return self.symbol.endswith(">>")


Token: TypeAlias = Word | Operator


def tokenize(line: str) -> list[Token]:
    """Split a whole line into tokens.

    Raises ParseError on an unterminated quote.
    """
    tokens: list[Token] = []
    pos = 0
    while True:
        token, pos = next_token(line, pos)
        if token is None:
            return tokens
        tokens.append(token)


def next_token(line: str, pos: int) -> tuple[Token | None, int]:
    """Read the token starting at or after ``line[pos]``.

    Returns (token, new_pos). The token is None once only whitespace
    remains. A word is cut short by an unquoted '>', which is left at
    new_pos for the following call.
    """
    buf: list[str] = []
    n = len(line)

    while pos < n:
        ch = line[pos]
        match ch:
            case _ if ch.isspace():
                if buf:
                    return Word("".join(buf)), pos
                pos += 1
            case "\\":
                if pos + 1 < n:
                    buf.append(line[pos + 1])
                pos = min(pos + 2, n)
            case "'":
                pos = _read_single_quoted(line, pos + 1, buf)
            case '"':
                pos = _read_double_quoted(line, pos + 1, buf)
            case ">":
                if buf:
                    return Word("".join(buf)), pos
                return _read_operator(line, pos, "")
            case _ if ch in _FD_PREFIXES and not buf and line.startswith(">", pos + 1):
                return _read_operator(line, pos + 1, _FD_PREFIXES[ch])
            case _:
                buf.append(ch)
                pos += 1

    if buf:
        return Word("".join(buf)), pos
    return None, pos


def _read_operator(line: str, pos: int, prefix: str) -> tuple[Operator, int]:
    """Read '>' or '>>' at line[pos]; prefix is the file descriptor part."""
    if line.startswith(">>", pos):
        return Operator(prefix + REDIRECT_APPEND), pos + 2
    return Operator(prefix + REDIRECT_OUT), pos + 1


def _read_single_quoted(line: str, pos: int, buf: list[str]) -> int:
    """Copy everything up to the closing quote. Returns the position after it."""
    end = line.find(SINGLE_QUOTE, pos)
    if end == -1:
        raise ParseError("unclosed single quote")
    if end > pos:
        buf.append(line[pos:end])
    return end + 1


def _read_double_quoted(line: str, pos: int, buf: list[str]) -> int:
    """Copy a double-quoted span, collapsing only \\" and \\\\.

    Any other backslash sequence is kept as written, backslash included.
    Returns the position after the closing quote.
    """
    n = len(line)
    while pos < n:
        ch = line[pos]
        if ch == DOUBLE_QUOTE:
            return pos + 1
        if ch == BACKSLASH and pos + 1 < n:
            nxt = line[pos + 1]
            if nxt in (DOUBLE_QUOTE, BACKSLASH):
                buf.append(nxt)
            else:
                buf.append(ch + nxt)
            pos += 2
            continue
        buf.append(ch)
        pos += 1
    raise ParseError("unclosed double quote")
