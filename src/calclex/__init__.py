from .lexer import KEYWORDS, Lexer, Token, TokenKind, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "tokenize",
]
