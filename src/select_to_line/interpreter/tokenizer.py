"""Lexical scanner turning raw input into a :class:`TokenStream`."""

from __future__ import annotations

import logging

from .tokens import Token, TokenKind, TokenStream

LOGGER = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset(",:")
_SHORTCUTS: dict[str, TokenKind] = {
    "H": TokenKind.CAPITAL_H,
    "L": TokenKind.CAPITAL_L,
    "h": TokenKind.SMALL_H,
    "l": TokenKind.SMALL_L,
}


def tokenize(text: str) -> TokenStream | None:
    """Scan ``text`` into tokens, or return ``None`` on any unknown character.

    Whitespace is dropped before scanning, so it never separates lexemes:
    ``"1 2"`` is the number ``12`` and ``". ."`` is a double period.
    """

    chars = [char for char in text if not char.isspace()]
    tokens: list[Token] = []
    index = 0
    while index < len(chars):
        char = chars[index]
        if char in _DIGITS:
            digits, index = _scan_digits(chars, index)
            tokens.append(Token(TokenKind.NUMBER, digits))
            continue
        if char == "-":
            if index + 1 >= len(chars) or chars[index + 1] not in _DIGITS:
                LOGGER.debug("Rejected %r: '-' must be followed by a digit", text)
                return None
            digits, index = _scan_digits(chars, index + 1)
            tokens.append(Token(TokenKind.NEGATIVE_NUMBER, digits))
            continue
        if char in _SEPARATORS:
            tokens.append(Token(TokenKind.COMMA_OR_COLON))
        elif char == ".":
            if index + 1 < len(chars) and chars[index + 1] == ".":
                tokens.append(Token(TokenKind.DOUBLE_PERIOD))
                index += 1
            else:
                tokens.append(Token(TokenKind.PERIOD))
        elif char in _SHORTCUTS:
            tokens.append(Token(_SHORTCUTS[char]))
        else:
            LOGGER.debug("Rejected %r: unknown character %r", text, char)
            return None
        index += 1
    return TokenStream(tokens)


def _scan_digits(chars: list[str], start: int) -> tuple[str, int]:
    end = start
    while end < len(chars) and chars[end] in _DIGITS:
        end += 1
    return "".join(chars[start:end]), end


__all__ = ["tokenize"]
