"""CLI to lex a calclex expression file (or stdin) and print its tokens."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, TextIO

from .lexer import Lexer, Token, TokenKind

PROMPT = "Enter your sequence:"

_verbose = False


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Lex a calclex expression source")
    ap.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Source file (default: read lines from stdin until a blank line)",
    )
    ap.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print the input prompt when reading stdin",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any invalid character was found",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    args = ap.parse_args(argv)

    global _verbose
    _verbose = args.verbose

    if args.path is None:
        if not args.no_prompt:
            print(PROMPT)
        log_step("reading stdin")
        src = collect_lines(sys.stdin)
    else:
        log_step(f"reading {args.path}")
        try:
            src = args.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log_error(f"file not found: {args.path}")
            return 1
        except (OSError, UnicodeDecodeError) as e:
            log_error(f"cannot read {args.path}: {e}")
            return 1

    log_step("lexing")
    invalid = write_tokens(Lexer(src), sys.stdout)

    if args.strict and invalid:
        log_error(f"{invalid} invalid character(s)")
        return 2
    return 0


def collect_lines(stream: TextIO) -> str:
    """Read lines up to the first empty one and join them with newlines."""
    lines: list[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == "":
            break
        lines.append(line)
    return "\n".join(lines)


def format_token(token: Token) -> str:
    if token.text:
        return f"{token.kind.name}:{token.text}"
    return token.kind.name


def write_tokens(tokens: Iterable[Token], out: TextIO) -> int:
    """Print one token per line; returns the number of INVALID tokens."""
    invalid = 0
    for tok in tokens:
        if tok.kind is TokenKind.INVALID:
            invalid += 1
        print(format_token(tok), file=out)
    return invalid


def log_step(msg: str) -> None:
    if _verbose:
        print(f"[calclex] {msg}...", file=sys.stderr)


def log_error(msg: str) -> None:
    print(f"[calclex:error] {msg}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
