"""
calclex scanner.

Tokenizes integers, identifiers, the ``div``/``mod`` keyword operators,
arithmetic symbols, parentheses and ``;`` separators, skipping whitespace and
``//`` line comments. Scanning is pull-based: each ``next_token`` call consumes
exactly one token's worth of input.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional


class TokenKind(Enum):
    # Literals / identifiers
    NUM = auto()
    ID = auto()

    # Single-char symbols
    OP = auto()
    LPAR = auto()
    RPAR = auto()
    SEMICOLON = auto()

    # Keyword operators (matched case-insensitively)
    DIV = auto()
    MOD = auto()

    INVALID = auto()
    EOF = auto()


KEYWORDS = {
    "div": TokenKind.DIV,
    "mod": TokenKind.MOD,
}

OPERATORS = frozenset("+-*/")

PUNCTUATION = {
    "(": TokenKind.LPAR,
    ")": TokenKind.RPAR,
    ";": TokenKind.SEMICOLON,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        # None once the cursor is past the last character
        self.current: Optional[str] = source[0] if source else None

    def next_token(self) -> Token:
        while self.current is not None:
            c = self.current

            if c.isspace():
                self._skip_whitespace()
                continue

            # '//' starts a comment, a lone '/' is division
            if c == "/" and self._peek() == "/":
                self._skip_comment()
                continue

            if c.isdecimal():
                return Token(TokenKind.NUM, self._number())

            if c.isalpha():
                text = self._identifier()
                keyword = KEYWORDS.get(text.lower())
                if keyword is not None:
                    return Token(keyword)
                return Token(TokenKind.ID, text)

            self._advance()
            if c in OPERATORS:
                return Token(TokenKind.OP, c)
            kind = PUNCTUATION.get(c)
            if kind is not None:
                return Token(kind)
            return Token(TokenKind.INVALID, c)

        return Token(TokenKind.EOF)

    def scan(self) -> List[Token]:
        """Scan to the end of input; the last token is always EOF."""
        tokens: List[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.kind is TokenKind.EOF:
                return tokens

    def __iter__(self) -> Iterator[Token]:
        tok = self.next_token()
        while tok.kind is not TokenKind.EOF:
            yield tok
            tok = self.next_token()

    def _advance(self) -> None:
        self.pos += 1
        self.current = self.source[self.pos] if self.pos < self.length else None

    def _peek(self) -> Optional[str]:
        if self.pos + 1 >= self.length:
            return None
        return self.source[self.pos + 1]

    def _skip_whitespace(self) -> None:
        while self.current is not None and self.current.isspace():
            self._advance()

    def _skip_comment(self) -> None:
        self._advance()  # first '/'
        self._advance()  # second '/'
        while self.current is not None and self.current != "\n":
            self._advance()
        if self.current == "\n":
            self._advance()

    def _number(self) -> str:
        start = self.pos
        while self.current is not None and self.current.isdecimal():
            self._advance()
        return self.source[start : self.pos]

    def _identifier(self) -> str:
        start = self.pos
        while self.current is not None and (
            self.current.isalpha() or self.current.isdecimal()
        ):
            self._advance()
        return self.source[start : self.pos]


def tokenize(source: str) -> List[Token]:
    return Lexer(source).scan()


__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "OPERATORS",
    "PUNCTUATION",
    "tokenize",
]
