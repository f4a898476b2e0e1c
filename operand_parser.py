"""Normalización y parseo de operandos escritos por el usuario."""

import math
import re
from typing import NamedTuple


class ParsedOperand(NamedTuple):
    value: float
    defaulted: bool


class OperandParser:
    """Convierte texto libre en float con formato numérico invariante.

    El texto se recorta, toda coma se trata como punto decimal y se
    interpreta con una gramática fija, independiente de la configuración
    regional. Si no es un número válido el valor es 0 (``defaulted=True``):
    un operando inválido nunca interrumpe el cálculo.
    """

    _NUMBER = re.compile(
        r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
    )
    _SYMBOLS = {
        "infinity": math.inf,
        "+infinity": math.inf,
        "-infinity": -math.inf,
        "nan": math.nan,
        "+nan": math.nan,
        "-nan": math.nan,
    }
    DEFAULT_VALUE = 0.0

    def parse(self, text) -> ParsedOperand:
        if text is None:
            return ParsedOperand(self.DEFAULT_VALUE, True)

        normalized = self._preprocess(str(text))

        symbol = self._SYMBOLS.get(normalized.lower())
        if symbol is not None:
            return ParsedOperand(symbol, False)

        if not self._NUMBER.fullmatch(normalized):
            return ParsedOperand(self.DEFAULT_VALUE, True)

        return ParsedOperand(float(normalized), False)

    @staticmethod
    def _preprocess(text: str) -> str:
        # Tras este reemplazo no queda ningún separador de miles posible.
        return text.strip().replace(",", ".")

