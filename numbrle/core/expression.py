"""Arithmetic evaluation for the left-hand side of an equation."""

from __future__ import annotations

from typing import List, Optional

DIGITS = "0123456789"
PLUS = "+"
MINUS = "-"
TIMES = "×"
DIVIDE = "÷"
OPERATORS = (PLUS, MINUS, TIMES, DIVIDE)


def tokenize(expr: str) -> Optional[List[str]]:
    """Split *expr* into alternating number / operator tokens.

    Returns ``None`` for an empty string, an operator with no number before
    it (this includes a leading minus), a trailing operator, or any
    character that is neither a digit nor an operator.
    """
    tokens: List[str] = []
    number = ""
    for ch in expr:
        if ch in DIGITS:
            number += ch
        elif ch in OPERATORS:
            if not number:
                return None
            tokens.append(number)
            tokens.append(ch)
            number = ""
        else:
            return None
    if not number:
        return None
    tokens.append(number)
    return tokens


def evaluate(expr: str) -> Optional[int]:
    """Evaluate *expr* with × and ÷ binding tighter than + and -.

    Division must be exact: a zero divisor or a remainder makes the whole
    expression fail, and failure is reported as ``None``.
    """
    tokens = tokenize(expr)
    if tokens is None:
        return None

    # First pass: fold × and ÷ into the running term.
    terms: List[int] = [int(tokens[0])]
    signs: List[str] = []
    for i in range(1, len(tokens), 2):
        op = tokens[i]
        value = int(tokens[i + 1])
        if op == TIMES:
            terms[-1] = terms[-1] * value
        elif op == DIVIDE:
            if value == 0 or terms[-1] % value != 0:
                return None
            terms[-1] = terms[-1] // value
        else:
            terms.append(value)
            signs.append(op)

    result = terms[0]
    for sign, value in zip(signs, terms[1:]):
        result = result + value if sign == PLUS else result - value
    return result
