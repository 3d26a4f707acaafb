"""Bracket pairing checks driven by bracket type and line indentation."""

from braces.check import (
    CheckReport,
    SourceReport,
    check_lines,
    check_sources,
    check_text,
    split_lines,
)
from braces.diagnostics import Diagnostic, DiagnosticKind
from braces.matcher import MatchOutcome, MatchResult, classify_close, match
from braces.tokenizer import indent_level, tokenize, tokenize_line
from braces.tokens import BracketKind, BracketOccurrence

__all__ = [
    "BracketKind",
    "BracketOccurrence",
    "CheckReport",
    "Diagnostic",
    "DiagnosticKind",
    "MatchOutcome",
    "MatchResult",
    "SourceReport",
    "check_lines",
    "check_sources",
    "check_text",
    "classify_close",
    "indent_level",
    "match",
    "split_lines",
    "tokenize",
    "tokenize_line",
]
