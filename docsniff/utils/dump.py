"""Load pre-tokenized source files.

A dump is a YAML or JSON list of tokens, optionally wrapped in a mapping
under ``tokens``. Each entry is either a mapping such as
``{type: T_CLASS, content: "class", line: 3}`` or a ``[kind, text]`` pair.
Positions follow list order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml

from docsniff.tokens import Token, TokenKind

from .fileio import read_yaml_file

KIND_KEYS = ("type", "kind", "code")
TEXT_KEYS = ("content", "text")


class TokenDumpError(ValueError):
    """Raised when a token dump does not have the expected shape."""


def _entry_to_token(entry: Any, position: int) -> Token:
    if isinstance(entry, dict):
        kind_name = next((entry[key] for key in KIND_KEYS if key in entry), None)
        if kind_name is None:
            raise TokenDumpError(f"Token {position} has no type")
        text = next((entry[key] for key in TEXT_KEYS if key in entry), "")
        line = entry.get("line")
        if line is not None:
            try:
                line = int(line)
            except (TypeError, ValueError) as exc:
                raise TokenDumpError(f"Token {position} has a non-integer line") from exc
        return Token(
            kind=TokenKind.from_name(kind_name),
            position=position,
            text="" if text is None else str(text),
            line=line,
        )
    if isinstance(entry, (list, tuple)) and 1 <= len(entry) <= 2:
        text = entry[1] if len(entry) == 2 else ""
        return Token(kind=TokenKind.from_name(entry[0]), position=position, text=str(text))
    if isinstance(entry, str):
        return Token(kind=TokenKind.from_name(entry), position=position)
    raise TokenDumpError(f"Token {position} is not a mapping, pair or name")


def parse_token_dump(data: Any) -> List[Token]:
    """Turn already-parsed dump data into a token stream."""

    if isinstance(data, dict):
        data = data.get("tokens")
    if data is None:
        return []
    if not isinstance(data, list):
        raise TokenDumpError("Token dump must be a list of tokens")
    return [_entry_to_token(entry, position) for position, entry in enumerate(data)]


def load_token_dump(path: Path) -> List[Token]:
    """Load the token stream stored at ``path``."""

    try:
        data = read_yaml_file(path)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise TokenDumpError(f"Failed to parse token dump {path}: {exc}") from exc
    return parse_token_dump(data)
