"""
Interfaz gráfica de la calculadora.

Usa tkinter. La ventana solo pinta ``CalculatorState.display`` y
reenvía cada botón o tecla a calculator_state; no valida ni evalúa.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from calculator_state import CLEAR, EQUALS, CalculatorState, press_key


def key_spans(keys_in_row: int, width: int) -> list[int]:
    """Columnas que ocupa cada tecla de una fila de ``keys_in_row`` teclas.

    Las columnas sobrantes van a la primera tecla: en la fila inferior
    el '0' queda ancho, como en un teclado numérico.
    """
    base, extra = divmod(width, keys_in_row)
    return [base + extra] + [base] * (keys_in_row - 1)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    BG         = "#22252F"
    DISPLAY_BG = "#181A21"
    RESULT_FG  = "#9FE0B5"
    ERROR_FG   = "#FF8A80"

    # tipo_color → (fondo, texto)
    KEY_COLORS = {
        "num":     ("#323644", "#E3E7F1"),
        "op":      ("#F2A65A", "#22252F"),
        "special": ("#4B5063", "#E3E7F1"),
        "equals":  ("#7AA7F5", "#22252F"),
    }
    PRESSED_BG = "#5C6278"

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, tecla, tipo_color)
    #  tipo_color: "num", "op", "special", "equals"

    KEYPAD = [
        [("C",  CLEAR, "special"), ("÷", "/", "op")],

        [("7",  "7", "num"), ("8", "8", "num"),
         ("9",  "9", "num"), ("×", "*", "op")],

        [("4",  "4", "num"), ("5", "5", "num"),
         ("6",  "6", "num"), ("−", "-", "op")],

        [("1",  "1", "num"), ("2", "2", "num"),
         ("3",  "3", "num"), ("+", "+", "op")],

        [("0",  "0", "num"), (".", ".", "num"),
         ("=",  EQUALS, "equals")],
    ]

    # Teclas físicas → tecla de la calculadora
    KEYBOARD = {
        "<Return>":    EQUALS,
        "<KP_Enter>":  EQUALS,
        "<Escape>":    CLEAR,
        "<Delete>":    CLEAR,
    }

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.BG)
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.state = CalculatorState()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._render()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn     = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.DISPLAY_BG, padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.display_var = tk.StringVar()
        self.display = tk.Entry(
            frame, textvariable=self.display_var, state="readonly",
            font=self._f_display, fg=self.RESULT_FG,
            readonlybackground=self.DISPLAY_BG,
            relief="flat", justify="right", bd=0,
        )
        self.display.pack(fill="x", pady=(4, 4))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.BG)
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            # Repartir columnas con colspan para filas cortas
            spans = key_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, key, kind) in enumerate(row_def):
                bg, fg = self.KEY_COLORS[kind]
                btn = tk.Button(
                    frame, text=text, font=self._f_btn, bg=bg, fg=fg,
                    activebackground=self.PRESSED_BG, relief="flat",
                    command=lambda k=key: self._on_key(k),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        for sequence, key in self.KEYBOARD.items():
            self.root.bind(sequence, lambda _e, k=key: self._on_key(k))
        self.root.bind("<Key>", self._on_char)

    def _on_char(self, event):
        ch = event.char
        if ch == "=":
            self._on_key(EQUALS)
        elif ch and ch in "0123456789+-*/.":
            self._on_key(ch)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, key: str):
        self.state = press_key(self.state, key, self.engine)
        self._render()

    def _render(self):
        fg = self.ERROR_FG if self.state.error else self.RESULT_FG
        self.display.config(fg=fg)
        self.display_var.set(self.state.display)
        self.display.xview_moveto(1.0)
