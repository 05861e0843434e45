"""
Motor de cálculo para la calculadora de teclado.

Este módulo provee la clase CalculatorEngine que valida las pulsaciones
y evalúa la expresión acumulada. Está diseñado como módulo independiente
de la interfaz: no guarda el buffer, lo recibe en cada llamada.

Contrato de interfaz:
    - can_append(expression: str, symbol: str) -> bool
    - evaluate(expression: str) -> str
"""

from expression_rules import can_append as _can_append
from formula_evaluator import FormulaEvaluator

RESULT_DECIMALS = 10


class CalculatorEngine:
    """Evalúa expresiones aritméticas con + - * / y menos unario."""

    def __init__(self):
        self._evaluator = FormulaEvaluator()

    # ── Validación incremental ───────────────────────────────────

    @staticmethod
    def can_append(expression: str, symbol: str) -> bool:
        return _can_append(expression, symbol)

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, expression: str) -> str:
        """Evalúa la expresión y devuelve el resultado como cadena.

        Una expresión vacía (o solo espacios) devuelve "".

        Raises:
            EvaluationError: cualquier fallo de tokenización, conversión
                o evaluación (incluida la división por cero).
        """
        if not expression.strip():
            return ""
        result = self._evaluator.evaluate(expression)
        return normalize_result(result)


# ── Formato del resultado ────────────────────────────────────────

def normalize_result(value: float) -> str:
    """Redondea a RESULT_DECIMALS decimales y quita la parte fraccionaria
    vacía: 0.30000000000000004 → "0.3", 3.0 → "3".

    La salida nunca usa notación exponencial, así que siempre vuelve a ser
    una expresión válida para el tokenizador.
    """
    rounded = round(float(value), RESULT_DECIMALS)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{RESULT_DECIMALS}f}".rstrip("0").rstrip(".")


_default_engine = CalculatorEngine()


def can_append(expression: str, symbol: str) -> bool:
    return _default_engine.can_append(expression, symbol)


def evaluate_expression(expression: str) -> str:
    return _default_engine.evaluate(expression)
