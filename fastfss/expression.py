"""Recursive-descent evaluator for simple arithmetic expressions."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_END = "\0"
_NUMBER_PREFIX = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


class EvaluationError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class ExpressionEvaluator:
    """Evaluate expressions built from numbers, ``+ - * /`` and parentheses."""

    def __init__(self) -> None:
        self._expr = ""
        self._pos = 0

    def evaluate(self, expr: str) -> float:
        """Evaluate ``expr`` and return its value as a float."""
        self._expr = expr
        self._pos = 0
        result = self._parse_expression()
        if self._pos < len(self._expr):
            raise EvaluationError(
                f"Unexpected character at end: '{self._expr[self._pos:]}'"
            )
        return result

    def _peek(self) -> str:
        if self._pos < len(self._expr):
            return self._expr[self._pos]
        return _END

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._expr) and self._expr[self._pos] in _WHITESPACE:
            self._pos += 1

    def _parse_number(self) -> float:
        self._skip_whitespace()
        start = self._pos
        if self._peek() == "-":
            self._pos += 1
        while self._pos < len(self._expr) and (
            self._expr[self._pos] in _DIGITS or self._expr[self._pos] == "."
        ):
            self._pos += 1
        text = self._expr[start:self._pos]
        # Like strtod, the longest valid prefix is taken.
        match = _NUMBER_PREFIX.match(text)
        if match is None:
            raise EvaluationError(f"Invalid number: '{text}'")
        return float(match.group(0))

    def _parse_factor(self) -> float:
        self._skip_whitespace()
        char = self._peek()
        if char == "(":
            self._pos += 1
            value = self._parse_expression()
            self._skip_whitespace()
            if self._peek() != ")" or self._pos >= len(self._expr):
                raise EvaluationError("Missing ')'")
            self._pos += 1
            return value
        if char in "-+" and char != _END or char in _DIGITS:
            return self._parse_number()
        raise EvaluationError(f"Unexpected character: '{char}'")

    def _parse_term(self) -> float:
        value = self._parse_factor()
        while True:
            self._skip_whitespace()
            op = self._peek()
            if op not in ("*", "/"):
                return value
            self._pos += 1
            right = self._parse_factor()
            if op == "*":
                value *= right
            else:
                if right == 0.0:
                    raise EvaluationError("Division by zero")
                value /= right

    def _parse_expression(self) -> float:
        value = self._parse_term()
        while True:
            self._skip_whitespace()
            op = self._peek()
            if op not in ("+", "-"):
                return value
            self._pos += 1
            right = self._parse_term()
            if op == "+":
                value += right
            else:
                value -= right