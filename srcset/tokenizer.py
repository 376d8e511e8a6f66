"""Splits the descriptor region of one srcset candidate into tokens."""

from __future__ import annotations

from enum import Enum
from typing import List

from .scanner import LEADING_SPACES, Cursor, collect, is_space

COMMA = ","
LEFT_PAREN = "("
RIGHT_PAREN = ")"


class TokenizerState(Enum):
    IN_DESCRIPTOR = "in descriptor"
    IN_PARENS = "in parens"
    AFTER_DESCRIPTOR = "after descriptor"


def tokenize_descriptors(cursor: Cursor) -> List[str]:
    """Collect the descriptor tokens that follow a candidate URL.

    Reading stops after an unparenthesised comma or at the end of input.
    Parenthesised text is kept verbatim inside the current token, so commas
    and whitespace within it never split anything. Only one level of
    parentheses is tracked; a nested ``(`` is an ordinary character.
    """
    collect(cursor, LEADING_SPACES)
    tokens: List[str] = []
    current = ""
    state = TokenizerState.IN_DESCRIPTOR

    while not cursor.at_end:
        char = cursor.text[cursor.pos]

        if state is TokenizerState.IN_DESCRIPTOR:
            if is_space(char):
                if current:
                    tokens.append(current)
                    current = ""
                    state = TokenizerState.AFTER_DESCRIPTOR
            elif char == COMMA:
                cursor.pos += 1
                if current:
                    tokens.append(current)
                    return tokens
                # A comma with nothing collected is skipped; the candidate goes on.
                continue
            elif char == LEFT_PAREN:
                current += char
                state = TokenizerState.IN_PARENS
            else:
                current += char
        elif state is TokenizerState.IN_PARENS:
            current += char
            if char == RIGHT_PAREN:
                state = TokenizerState.IN_DESCRIPTOR
        elif not is_space(char):
            # AFTER_DESCRIPTOR: leave the character for IN_DESCRIPTOR to read.
            state = TokenizerState.IN_DESCRIPTOR
            continue

        cursor.pos += 1

    if state is not TokenizerState.AFTER_DESCRIPTOR and current:
        tokens.append(current)
    return tokens
