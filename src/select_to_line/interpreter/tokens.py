"""Token values and the one-token-lookahead stream consumed by the parser."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_MAX_EXACT_DIGITS = 18


class TokenKind(Enum):
    """Every terminal the tokenizer can emit."""

    NUMBER = "number"
    NEGATIVE_NUMBER = "negativeNumber"
    COMMA_OR_COLON = "commaOrColon"
    PERIOD = "period"
    DOUBLE_PERIOD = "doublePeriod"
    CAPITAL_H = "H"
    CAPITAL_L = "L"
    SMALL_H = "h"
    SMALL_L = "l"
    EOF = "EOF"


@dataclass(slots=True, frozen=True)
class Token:
    """A single lexeme.

    Numeric tokens keep their digit string in ``digits``; the sign of a
    ``NEGATIVE_NUMBER`` is carried by the kind, never by the digits.
    """

    kind: TokenKind
    digits: str = ""

    @property
    def magnitude(self) -> int:
        """Return the unsigned value of a numeric token, saturated at ``sys.maxsize``.

        Positions clamp to the document, so every run longer than
        :data:`_MAX_EXACT_DIGITS` resolves the same as the cap.
        """

        if self.kind not in (TokenKind.NUMBER, TokenKind.NEGATIVE_NUMBER):
            raise ValueError(f"{self.kind.value} token has no magnitude")
        digits = self.digits.lstrip("0")
        if len(digits) > _MAX_EXACT_DIGITS:
            return sys.maxsize
        return int(digits or "0")

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return self.digits
        if self.kind is TokenKind.NEGATIVE_NUMBER:
            return f"-{self.digits}"
        return self.kind.value


EOF_TOKEN = Token(TokenKind.EOF)


class TokenStream:
    """Cursor over a finite token sequence.

    ``peek`` never consumes; ``pop``/``advance`` consume one token. Once the
    sequence is exhausted both keep yielding :data:`EOF_TOKEN`.
    """

    __slots__ = ("_tokens", "_index")

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._index = 0

    def peek(self) -> Token:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return EOF_TOKEN

    def pop(self) -> Token:
        token = self.peek()
        self.advance()
        return token

    def advance(self) -> None:
        if self._index < len(self._tokens):
            self._index += 1

    def has_tokens_remaining(self) -> bool:
        return self._index < len(self._tokens)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Return the full token sequence, consumed or not."""

        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        rendered = " ".join(str(token) for token in self._tokens)
        return f"TokenStream([{rendered}], position={self._index})"


__all__ = ["EOF_TOKEN", "Token", "TokenKind", "TokenStream"]
