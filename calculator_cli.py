"""
Interfaz de consola de la calculadora.

Menú de opciones numeradas; cada cálculo válido se guarda en el
historial de la sesión. Las funciones de entrada y salida se inyectan
para poder ejecutar la interfaz con entradas guionizadas.
"""

from calculator_session import CalculatorSession


# ═════════════════════════════════════════════════════════════════
#  Aplicación de consola
# ═════════════════════════════════════════════════════════════════

class CalculatorCLI:
    """Bucle de menú de la calculadora."""

    TITLE = "Calculadora de consola (historial en disco)"
    MENU = ("Opciones: 1)add  2)sub  3)mul  4)div  5)pow  6)mod  7)sqrt  "
            "8)show history 0)exit")

    # ── Opciones del menú ────────────────────────────────────────
    #  opción -> símbolo de operación

    BINARY_OPTIONS = {
        "1": "+",
        "2": "-",
        "3": "*",
        "4": "/",
        "5": "^",
        "6": "%",
    }
    SQRT_OPTION = "7"
    HISTORY_OPTION = "8"
    EXIT_OPTION = "0"

    # ── Mensajes ─────────────────────────────────────────────────

    MSG_INVALID_OPTION = "Opción no válida."
    MSG_INVALID_RESULT = ("Resultado inválido (NaN o infinito). "
                          "Revisa los operandos y la operación.")
    MSG_WRITE_WARNING = "[Advertencia] No se pudo escribir en el historial."
    MSG_EMPTY_HISTORY = "[No hay historial todavía]"
    HISTORY_HEADER = "---- Historial (más reciente abajo) ----"
    HISTORY_FOOTER = "----------------------------------------"
    MSG_EXIT = "Saliendo..."

    # ────────────────────────────────────────────────────────────

    def __init__(self, session: CalculatorSession, input_func=None, output=None):
        self.session = session
        self._input_func = input_func
        self._output_func = output

    # input() y print() se buscan en cada llamada, no al importar.

    def _input(self, prompt: str) -> str:
        if self._input_func is not None:
            return self._input_func(prompt)
        return input(prompt)

    def _output(self, text: str):
        if self._output_func is not None:
            self._output_func(text)
        else:
            print(text)

    def run(self) -> None:
        self._output(self.TITLE)
        self._output(self.MENU)

        while True:
            try:
                opt = self._input("opt: ").strip()
                if not opt:
                    continue
                if opt == self.EXIT_OPTION:
                    break
                self._on_option(opt)
            except (EOFError, KeyboardInterrupt):
                self._output("")
                break
            except (ValueError, ArithmeticError, TypeError) as exc:
                msg = str(exc) if str(exc) else type(exc).__name__
                self._output(f"Ocurrió un error: {msg}")

        self._output(self.MSG_EXIT)
        self._report_rotation(self.session.close())

    # ── Acciones ─────────────────────────────────────────────────

    def _on_option(self, opt: str):
        if opt == self.HISTORY_OPTION:
            self.show_history()
            return

        if opt == self.SQRT_OPTION:
            a = self._input("a: ")
            b = "0"
            op = "sqrt"
        else:
            a = self._input("a: ")
            b = self._input("b: ")
            op = self.BINARY_OPTIONS.get(opt, "")

        if not op:
            self._output(self.MSG_INVALID_OPTION)
            return

        self._calculate(a, b, op)

    def _calculate(self, a: str, b: str, op: str):
        outcome = self.session.calculate(a, b, op)
        if not outcome.is_valid:
            self._output(self.MSG_INVALID_RESULT)
            return

        self._output("= " + outcome.result_text)
        if not outcome.saved:
            self._output(self.MSG_WRITE_WARNING)
        self._report_rotation(outcome.backup)

    def show_history(self):
        history = self.session.history
        if not history:
            self._output(self.MSG_EMPTY_HISTORY)
            return

        self._output(self.HISTORY_HEADER)
        for line in history:
            self._output(line)
        self._output(self.HISTORY_FOOTER)

    def _report_rotation(self, backup):
        if backup is not None:
            self._output(f"[Historial rotado a '{backup.name}']")
