"""Tokenización y evaluación de expresiones aritméticas sin eval().

Tubería: texto → tokens (infija) → postfija (shunting-yard) → pila RPN.
"""

import logging
import math
import operator
import re
from dataclasses import dataclass

from expression_rules import (
    is_decimal_point,
    is_digit,
    is_operator,
    is_unary_minus_position,
)

logger = logging.getLogger(__name__)


# ── Errores de evaluación ────────────────────────────────────────

class EvaluationError(ValueError):
    """Fallo al evaluar una expresión; la UI lo muestra como 'Error'."""


class InvalidCharacterError(EvaluationError):
    pass


class BadTokenError(EvaluationError):
    pass


class MalformedExpressionError(EvaluationError):
    pass


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    pass


class TrailingOperatorError(EvaluationError):
    pass


class NumericOverflowError(EvaluationError, OverflowError):
    pass


# ── Tokens ───────────────────────────────────────────────────────

NUMBER = "number"
OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str

    @property
    def is_operator(self) -> bool:
        return self.kind == OPERATOR


class FormulaEvaluator:
    """Convierte el texto del buffer en un valor numérico."""

    # signo opcional, al menos un dígito ASCII y como mucho un punto
    _NUMERAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

    _PRECEDENCE = {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
    }
    _OPERATIONS = {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "/": operator.truediv,
    }

    def evaluate(self, expression: str) -> float:
        tokens = self.tokenize(expression)
        if not tokens:
            raise MalformedExpressionError("Expresión vacía")
        if is_operator(tokens[-1].text):
            raise TrailingOperatorError("La expresión termina en operador")

        postfix = self.to_postfix(tokens)
        logger.debug(
            "postfija de %r: %s", expression, " ".join(t.text for t in postfix)
        )
        return self.evaluate_postfix(postfix)

    # ── Tokenizador ──────────────────────────────────────────────

    def tokenize(self, expression: str) -> list[Token]:
        tokens: list[Token] = []
        numeral = ""

        for i, ch in enumerate(expression):
            if is_digit(ch) or is_decimal_point(ch):
                numeral += ch
                continue

            if is_operator(ch):
                if ch == "-" and is_unary_minus_position(expression, i):
                    numeral += ch
                    continue

                if numeral:
                    tokens.append(Token(NUMBER, numeral))
                    numeral = ""
                tokens.append(Token(OPERATOR, ch))
                continue

            if ch == " ":
                continue

            raise InvalidCharacterError(f"Carácter no válido: {ch!r}")

        if numeral:
            tokens.append(Token(NUMBER, numeral))
        return tokens

    # ── Shunting-yard ────────────────────────────────────────────

    def is_numeral(self, text: str) -> bool:
        return self._NUMERAL.fullmatch(text) is not None

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        output: list[Token] = []
        ops: list[Token] = []

        for tok in tokens:
            if tok.kind == NUMBER and self.is_numeral(tok.text):
                output.append(tok)
                continue

            if tok.is_operator and tok.text in self._PRECEDENCE:
                prec = self._PRECEDENCE[tok.text]
                while ops and self._PRECEDENCE[ops[-1].text] >= prec:
                    output.append(ops.pop())
                ops.append(tok)
                continue

            raise BadTokenError(f"Token no válido: {tok.text!r}")

        while ops:
            output.append(ops.pop())
        return output

    # ── Pila RPN ─────────────────────────────────────────────────

    def evaluate_postfix(self, tokens: list[Token]) -> float:
        stack: list[float] = []

        for tok in tokens:
            if not tok.is_operator:
                if not self.is_numeral(tok.text):
                    raise BadTokenError(f"Token no válido: {tok.text!r}")
                stack.append(self._to_number(tok.text))
                continue

            if len(stack) < 2:
                raise MalformedExpressionError(
                    f"Faltan operandos para {tok.text!r}"
                )
            b = stack.pop()
            a = stack.pop()

            if tok.text == "/" and b == 0:
                raise DivisionByZeroError("División por cero")
            op = self._OPERATIONS.get(tok.text)
            if op is None:
                raise BadTokenError(f"Operador desconocido: {tok.text!r}")
            stack.append(self._check_finite(op(a, b)))

        if len(stack) != 1:
            raise MalformedExpressionError(
                f"La pila termina con {len(stack)} valores"
            )
        return stack[0]

    def _to_number(self, text: str) -> float:
        return self._check_finite(float(text))

    @staticmethod
    def _check_finite(value: float) -> float:
        if not math.isfinite(value):
            raise NumericOverflowError("Resultado demasiado grande")
        return value
