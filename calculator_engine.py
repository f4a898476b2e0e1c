"""
Motor de cálculo de la calculadora de consola.

Este módulo provee la clase CalculatorEngine, que ejecuta una única
operación binaria o unaria sobre dos operandos en texto. Es una
función pura: sin estado ni efectos secundarios.

Contrato de interfaz:
    - execute(left: str, right: str, op: str) -> float
    - un resultado NaN o infinito es inválido y no debe guardarse
"""

import math
from dataclasses import dataclass

from operand_parser import OperandParser


SUPPORTED_OPERATORS = ("+", "-", "*", "/", "^", "%", "sqrt")

# Menor double positivo representable (subnormal), 5e-324.
DOUBLE_EPSILON = math.ulp(0.0)

INVALID = math.nan


def is_valid_result(value: float) -> bool:
    return math.isfinite(value)


@dataclass(frozen=True)
class Evaluation:
    """Resultado de una operación junto con el origen de sus operandos."""

    value: float
    left_defaulted: bool = False
    right_defaulted: bool = False

    @property
    def is_valid(self) -> bool:
        return is_valid_result(self.value)


class CalculatorEngine:
    """Evalúa una operación con la semántica de coma flotante IEEE-754."""

    def __init__(self, parser: OperandParser | None = None):
        self._parser = parser if parser is not None else OperandParser()
        self._operations = {
            "+": lambda a, b: a + b,
            "-": lambda a, b: a - b,
            "*": lambda a, b: a * b,
            "/": self._divide,
            "^": self._power,
            "%": self._remainder,
            "sqrt": lambda a, _b: self._sqrt(a),
        }

    # ── Evaluación principal ─────────────────────────────────────

    def execute(self, left, right, op) -> float:
        """Devuelve el resultado o NaN si la operación no es válida.

        Nunca lanza excepciones: división por cero, raíz de un negativo y
        operador desconocido se convierten en NaN; el desbordamiento
        produce infinito.
        """
        return self.evaluate_detailed(left, right, op).value

    def evaluate_detailed(self, left, right, op) -> Evaluation:
        a = self._parser.parse(left)
        b = self._parser.parse(right)

        operation = self._operations.get(op)
        if operation is None:
            value = INVALID
        else:
            try:
                value = operation(a.value, b.value)
            except ArithmeticError:
                value = INVALID

        return Evaluation(value, a.defaulted, b.defaulted)

    # ── Operaciones con caso especial ────────────────────────────

    @staticmethod
    def _divide(a: float, b: float) -> float:
        if abs(b) < DOUBLE_EPSILON:
            return INVALID
        return a / b

    @staticmethod
    def _remainder(a: float, b: float) -> float:
        if abs(b) < DOUBLE_EPSILON:
            return INVALID
        try:
            return math.fmod(a, b)
        except ValueError:
            # fmod(±inf, b)
            return INVALID

    @staticmethod
    def _sqrt(a: float) -> float:
        if a < 0:
            return INVALID
        return math.sqrt(a)

    @staticmethod
    def _power(a: float, b: float) -> float:
        try:
            return math.pow(a, b)
        except OverflowError:
            negative = a < 0 and b.is_integer() and b % 2 == 1
            return -math.inf if negative else math.inf
        except ValueError:
            if a == 0 and b < 0:
                odd = b.is_integer() and b % 2 == 1
                return math.copysign(math.inf, a) if odd else math.inf
            return INVALID


def format_result(value: float) -> str:
    """Texto decimal con 17 cifras significativas (ida y vuelta exacta)."""
    return f"{value:.17g}".replace("e", "E")


_engine = CalculatorEngine()


def evaluate(left, right, op) -> float:
    return _engine.execute(left, right, op)
