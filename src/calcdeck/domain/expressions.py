"""
Single-variable algebraic expression engine.

A small recursive-descent parser that turns user-entered formulas such as
``x^2 - 3x + sin(x)/2`` into an immutable syntax tree which can be evaluated
at any ``x``. Nothing is ever passed to ``eval``.

Grammar (lowest to highest precedence)::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary | <implicit> power)*
    unary      := ("+" | "-") unary | power
    power      := primary (("^" | "**") unary)?
    primary    := NUMBER | "x" | CONSTANT | FUNCTION "(" expression ")"
                | "(" expression ")"

Implicit multiplication applies when a factor is directly followed by a
name or an opening parenthesis (``2x``, ``3(x+1)``, ``(x+1)(x-1)``), and
when a name or closing parenthesis is immediately followed by a number
(``x2``, ``(x+1)3``). Runs of letters are split into known names, longest
first, so ``xsin(x)`` reads as ``x*sin(x)`` and ``2ex`` as ``2*e*x``.
Exponentiation is right associative and binds tighter than a leading
minus, so ``-x^2`` is ``-(x^2)``.

Evaluation walks the tree recursively, so parsing rejects trees deeper than
``MAX_TREE_DEPTH`` and bracket, sign or exponent nesting beyond
``MAX_NESTING``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass

from calcdeck.domain.errors import ErrorCode

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "exp": math.exp,
    "ln": math.log,
    "log": math.log,
    "log10": math.log10,
    "sqrt": math.sqrt,
    "abs": math.fabs,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}

VARIABLE = "x"

MAX_TREE_DEPTH = 200
MAX_NESTING = 50

# Longest first, so "sinh" wins over "sin" and "exp" over "e"
_KNOWN_NAMES = sorted([VARIABLE, *CONSTANTS, *FUNCTIONS], key=len, reverse=True)

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<name>log10|[A-Za-z_]+)
  | (?P<op>\*\*|[-+*/^])
  | (?P<lparen>\()
  | (?P<rparen>\))
    """,
    re.VERBOSE,
)


# --- Errors ---


class ExpressionSyntaxError(ValueError):
    """Raised when an expression cannot be parsed."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} at position {position}")


class ExpressionEvaluationError(ArithmeticError):
    """Raised when an expression has no finite value at a point."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        super().__init__(message)


# --- Syntax Tree ---


@dataclass(frozen=True)
class Number:
    value: float

    def evaluate(self, x: float) -> float:
        return self.value


@dataclass(frozen=True)
class Variable:
    name: str = VARIABLE

    def evaluate(self, x: float) -> float:
        return x


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: Node

    def evaluate(self, x: float) -> float:
        value = self.operand.evaluate(x)
        return -value if self.op == "-" else value


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: Node
    right: Node

    def evaluate(self, x: float) -> float:
        a = self.left.evaluate(x)
        b = self.right.evaluate(x)

        if self.op == "+":
            return a + b
        if self.op == "-":
            return a - b
        if self.op == "*":
            return a * b
        if self.op == "/":
            if b == 0:
                raise ExpressionEvaluationError(
                    ErrorCode.DIVISION_BY_ZERO, f"Division by zero at x = {x}"
                )
            return a / b

        # Power
        if a == 0 and b < 0:
            raise ExpressionEvaluationError(
                ErrorCode.DIVISION_BY_ZERO, f"Zero raised to a negative power at x = {x}"
            )
        try:
            return math.pow(a, b)
        except (ValueError, OverflowError) as e:
            raise ExpressionEvaluationError(
                ErrorCode.INVALID_RANGE, f"Power is undefined at x = {x}: {e}"
            ) from e


@dataclass(frozen=True)
class Call:
    function: str
    argument: Node

    def evaluate(self, x: float) -> float:
        value = self.argument.evaluate(x)
        try:
            return FUNCTIONS[self.function](value)
        except (ValueError, OverflowError) as e:
            raise ExpressionEvaluationError(
                ErrorCode.INVALID_RANGE,
                f"{self.function}({value}) is undefined at x = {x}",
            ) from e


Node = Number | Variable | UnaryOp | BinaryOp | Call


@dataclass(frozen=True)
class Expression:
    """A parsed expression in the single variable ``x``."""

    source: str
    root: Node

    def evaluate(self, x: float) -> float:
        """
        Evaluate the expression at ``x``.

        Raises:
            ExpressionEvaluationError: If the value is undefined or not finite.
        """
        value = self.root.evaluate(x)
        if not math.isfinite(value):
            raise ExpressionEvaluationError(
                ErrorCode.INVALID_RANGE, f"{self.source} is not finite at x = {x}"
            )
        return value

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


# --- Tokenizer ---


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    position: int


def _split_name(text: str, position: int) -> list[_Token]:
    """
    Split a run of letters into known names, e.g. ``xsin`` -> ``x``, ``sin``.

    A run that does not split cleanly is kept whole so the parser can report
    it as an unknown name.
    """
    lowered = text.lower()
    pieces: list[_Token] = []
    start = 0
    while start < len(lowered):
        for name in _KNOWN_NAMES:
            if lowered.startswith(name, start):
                pieces.append(_Token("name", text[start : start + len(name)], position + start))
                start += len(name)
                break
        else:
            return [_Token("name", text, position)]
    return pieces


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    position = 0

    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if match is None:
            raise ExpressionSyntaxError(f"Unexpected character {text[position]!r}", position)
        kind = match.lastgroup
        assert kind is not None
        if kind == "name":
            tokens.extend(_split_name(match.group(), position))
        elif kind != "ws":
            tokens.append(_Token(kind=kind, text=match.group(), position=position))
        position = match.end()

    tokens.append(_Token(kind="end", text="", position=len(text)))
    return tokens


# --- Parser ---


def _tree_depth(root: Node) -> int:
    deepest = 0
    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node, UnaryOp):
            stack.append((node.operand, depth + 1))
        elif isinstance(node, BinaryOp):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        elif isinstance(node, Call):
            stack.append((node.argument, depth + 1))
    return deepest


class _Parser:
    def __init__(self, text: str) -> None:
        self._tokens = _tokenize(text)
        self._index = 0
        self._nesting = 0

    @property
    def _current(self) -> _Token:
        return self._tokens[self._index]

    def _advance(self) -> _Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _at_op(self, *ops: str) -> bool:
        return self._current.kind == "op" and self._current.text in ops

    def _at_trailing_number(self) -> bool:
        """A number written directly after a name or ``)``, as in ``x2``."""
        if self._current.kind != "number" or self._index == 0:
            return False
        previous = self._tokens[self._index - 1]
        return (
            previous.kind in ("name", "rparen")
            and previous.position + len(previous.text) == self._current.position
        )

    def _enter(self) -> None:
        self._nesting += 1
        if self._nesting > MAX_NESTING:
            raise ExpressionSyntaxError(
                f"Expression is nested more than {MAX_NESTING} levels deep",
                self._current.position,
            )

    def _leave(self) -> None:
        self._nesting -= 1

    def parse(self) -> Node:
        if self._current.kind == "end":
            raise ExpressionSyntaxError("Empty expression", 0)
        node = self._expression()
        if self._current.kind != "end":
            raise ExpressionSyntaxError(
                f"Unexpected {self._current.text!r}", self._current.position
            )
        if _tree_depth(node) > MAX_TREE_DEPTH:
            raise ExpressionSyntaxError(
                f"Expression has more than {MAX_TREE_DEPTH} nested operations", 0
            )
        return node

    def _expression(self) -> Node:
        node = self._term()
        while self._at_op("+", "-"):
            op = self._advance().text
            node = BinaryOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while True:
            if self._at_op("*", "/"):
                op = self._advance().text
                node = BinaryOp(op, node, self._unary())
            elif self._current.kind in ("name", "lparen") or self._at_trailing_number():
                node = BinaryOp("*", node, self._power())
            else:
                return node

    def _unary(self) -> Node:
        if self._at_op("+", "-"):
            op = self._advance().text
            self._enter()
            operand = self._unary()
            self._leave()
            return UnaryOp(op, operand)
        return self._power()

    def _power(self) -> Node:
        base = self._primary()
        if self._at_op("^", "**"):
            self._advance()
            self._enter()
            exponent = self._unary()
            self._leave()
            return BinaryOp("^", base, exponent)
        return base

    def _primary(self) -> Node:
        token = self._current

        if token.kind == "number":
            self._advance()
            return Number(float(token.text))

        if token.kind == "name":
            self._advance()
            name = token.text.lower()
            if name == VARIABLE:
                return Variable()
            if name in CONSTANTS:
                return Number(CONSTANTS[name])
            if name in FUNCTIONS:
                if self._current.kind != "lparen":
                    raise ExpressionSyntaxError(
                        f"Function {name!r} requires parentheses", self._current.position
                    )
                self._advance()
                argument = self._group()
                return Call(name, argument)
            raise ExpressionSyntaxError(f"Unknown name {token.text!r}", token.position)

        if token.kind == "lparen":
            self._advance()
            return self._group()

        if token.kind == "end":
            raise ExpressionSyntaxError("Unexpected end of expression", token.position)
        raise ExpressionSyntaxError(f"Unexpected {token.text!r}", token.position)

    def _group(self) -> Node:
        """Bracketed expression after its opening ``(``."""
        self._enter()
        node = self._expression()
        self._expect_rparen()
        self._leave()
        return node

    def _expect_rparen(self) -> None:
        if self._current.kind != "rparen":
            raise ExpressionSyntaxError("Expected ')'", self._current.position)
        self._advance()


def parse_expression(text: str) -> Expression:
    """
    Parse ``text`` into an Expression.

    Raises:
        ExpressionSyntaxError: If the text is not a valid expression.
    """
    return Expression(source=text, root=_Parser(text).parse())
