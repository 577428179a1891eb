"""Command domain - recognising what the user asked for."""

from .parser import (
    DEADLINE_KEYWORD,
    EVENT_KEYWORD,
    FLAG_TOKENS,
    TIME_KEYWORDS,
    Command,
    CommandName,
    UpdateFlag,
    flag_of,
    parse,
    split_segments,
    tokenize,
)

__all__ = [
    "DEADLINE_KEYWORD",
    "EVENT_KEYWORD",
    "FLAG_TOKENS",
    "TIME_KEYWORDS",
    "Command",
    "CommandName",
    "UpdateFlag",
    "flag_of",
    "parse",
    "split_segments",
    "tokenize",
]
