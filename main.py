"""Punto de entrada de la calculadora.

Sin argumentos abre la ventana. Con argumentos evalúa cada expresión e
imprime el resultado (o "Error"), una por línea:

    python main.py "2+3*4" "5/0"
"""

import logging
import os
import sys

from calculator_engine import CalculatorEngine
from calculator_state import ERROR_TEXT
from formula_evaluator import EvaluationError


WINDOW_GEOMETRY = "340x460"
WINDOW_MIN_SIZE = (300, 420)
LOG_LEVEL_ENV = "CALCULATOR_LOG_LEVEL"


def _configure_logging():
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def evaluate_all(expressions, engine=None) -> list[str]:
    engine = engine if engine is not None else CalculatorEngine()
    results = []
    for expr in expressions:
        try:
            results.append(engine.evaluate(expr))
        except EvaluationError:
            results.append(ERROR_TEXT)
    return results


def main(argv=None):
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv
    engine = CalculatorEngine()

    if args:
        for line in evaluate_all(args, engine):
            print(line)
        return

    import tkinter as tk

    from calculator_ui import CalculatorApp

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=engine)
    root.mainloop()


if __name__ == "__main__":
    main()
