"""Tokenizer, parser and resolver for navigation expressions."""

from .errors import GrammarContractError
from .interpret import interpret
from .parser import parse
from .resolver import interpret_target
from .targets import GoToTarget, SelectionTarget, Target
from .tokenizer import tokenize
from .tokens import Token, TokenKind, TokenStream

__all__ = [
    "GoToTarget",
    "GrammarContractError",
    "SelectionTarget",
    "Target",
    "Token",
    "TokenKind",
    "TokenStream",
    "interpret",
    "interpret_target",
    "parse",
    "tokenize",
]
