"""
Reglas léxicas de la calculadora.

Clasificación de símbolos y validación incremental del buffer de
expresión. El validador decide, pulsación a pulsación, si añadir un
símbolo deja la expresión completable. Nunca lanza excepciones: una
pulsación rechazada simplemente se ignora.

Contrato de interfaz:
    - can_append(expression: str, value: str) -> bool
"""

OPERATORS = frozenset("+-*/")
DECIMAL_POINT = "."
MINUS = "-"


# ── Clasificación ────────────────────────────────────────────────

def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def is_digit(ch: str) -> bool:
    # str.isdigit() acepta dígitos unicode (p. ej. '²'); aquí solo ASCII
    return len(ch) == 1 and "0" <= ch <= "9"


def is_decimal_point(ch: str) -> bool:
    return ch == DECIMAL_POINT


# ── Consultas sobre el buffer ────────────────────────────────────

def is_unary_minus_position(expr: str, index: int) -> bool:
    """Indica si un '-' en ``index`` empezaría un número negativo.

    Es el caso al inicio de la expresión o justo después de otro
    operador, mirando el carácter anterior tal cual (un espacio no
    cuenta como operador). Tokenizador y validador comparten esta regla.
    """
    return index == 0 or is_operator(expr[index - 1])


def last_number_chunk(expr: str) -> str:
    """Porción numérica final, desde el último operador binario.

    Un '-' unario pertenece al número: en ``"3*-1.5"`` devuelve
    ``"-1.5"``; en ``"3*-"`` devuelve ``"-"``.
    """
    i = len(expr) - 1
    while i >= 0:
        if is_operator(expr[i]):
            if expr[i] == MINUS and is_unary_minus_position(expr, i):
                return expr[i:].strip()
            break
        i -= 1
    return expr[i + 1:].strip()


# ── Validación incremental ───────────────────────────────────────

def can_append(expr: str, value: str) -> bool:
    """Decide si ``value`` puede añadirse al final de ``expr``."""
    if not expr and value in ("*", "/"):
        return False

    if is_operator(value) and is_unary_minus_position(expr, len(expr)):
        # al inicio o tras un operador solo cabe un '-' unario: 3*-4
        return value == MINUS and not expr.endswith(MINUS)

    if is_decimal_point(value):
        if DECIMAL_POINT in last_number_chunk(expr):
            return False

    return True


def needs_leading_zero(expr: str) -> bool:
    """Un '.' al empezar un número se escribe como '0.' (o '-0.')."""
    return last_number_chunk(expr) in ("", MINUS)
