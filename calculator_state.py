"""
Estado del teclado de la calculadora.

El buffer de expresión vive en un CalculatorState inmutable: cada acción
recibe el estado actual y devuelve el siguiente, sin tocar la pantalla.
La interfaz solo tiene que pintar ``state.display``.

Acciones:
    - press_symbol(state, symbol)  dígito, operador o '.'
    - press_clear(state)
    - press_equals(state)
    - press_key(state, key)        'clear', 'equals' o un símbolo
"""

import logging
from dataclasses import dataclass

from calculator_engine import CalculatorEngine
from expression_rules import (
    DECIMAL_POINT,
    is_decimal_point,
    is_digit,
    is_operator,
    needs_leading_zero,
)
from formula_evaluator import EvaluationError

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"
CLEAR = "clear"
EQUALS = "equals"

# atajos de una letra para secuencias escritas como texto: "3*-4="
KEY_ALIASES = {
    "=": EQUALS,
    "C": CLEAR,
}


@dataclass(frozen=True)
class CalculatorState:
    expression: str = ""
    error: bool = False

    @property
    def display(self) -> str:
        return ERROR_TEXT if self.error else self.expression


_engine = CalculatorEngine()


def press_clear(state: CalculatorState) -> CalculatorState:
    return CalculatorState()


def press_equals(state: CalculatorState, engine=None) -> CalculatorState:
    engine = engine if engine is not None else _engine
    if state.error:
        state = CalculatorState()
    try:
        result = engine.evaluate(state.expression)
    except EvaluationError as exc:
        logger.info(
            "no se pudo evaluar %r: %s (%s)",
            state.expression, exc, type(exc).__name__,
        )
        return CalculatorState(error=True)
    return CalculatorState(expression=result)


def press_symbol(state: CalculatorState, symbol: str, engine=None) -> CalculatorState:
    engine = engine if engine is not None else _engine
    if not (is_digit(symbol) or is_operator(symbol) or is_decimal_point(symbol)):
        raise ValueError(f"Símbolo no admitido: {symbol!r}")

    if state.error:
        state = CalculatorState()
    expr = state.expression

    if not engine.can_append(expr, symbol):
        return state

    if symbol == DECIMAL_POINT and needs_leading_zero(expr):
        return CalculatorState(expression=expr + "0" + DECIMAL_POINT)
    return CalculatorState(expression=expr + symbol)


def press_key(state: CalculatorState, key: str, engine=None) -> CalculatorState:
    key = KEY_ALIASES.get(key, key)
    if key == CLEAR:
        return press_clear(state)
    if key == EQUALS:
        return press_equals(state, engine)
    return press_symbol(state, key, engine)


def press_keys(keys, state: CalculatorState | None = None, engine=None) -> CalculatorState:
    """Aplica una secuencia de teclas; útil para pruebas y scripts."""
    state = state if state is not None else CalculatorState()
    for key in keys:
        state = press_key(state, key, engine)
    return state
