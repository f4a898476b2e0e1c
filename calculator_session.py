"""Sesión interactiva: une el motor de cálculo con el historial."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from calculator_engine import CalculatorEngine, format_result
from history_store import HistoryEntry, HistoryStore

logger = logging.getLogger(__name__)


@dataclass
class CalculationOutcome:
    value: float
    is_valid: bool
    result_text: str | None = None
    entry: HistoryEntry | None = None
    saved: bool = False
    backup: Path | None = None


class CalculatorSession:
    """Estado de una ejecución interactiva.

    Mantiene la lista de historial en memoria: se carga del archivo al
    crear la sesión y después sólo crece con los cálculos de esta misma
    sesión, aunque la escritura en disco falle.
    """

    def __init__(self, store: HistoryStore, engine: CalculatorEngine | None = None):
        self.store = store
        self.engine = engine if engine is not None else CalculatorEngine()
        self.history: list[str] = store.load()
        logger.debug("Historial cargado: %d entradas desde %s",
                     len(self.history), store.path)

    def calculate(self, left, right, op: str) -> CalculationOutcome:
        evaluation = self.engine.evaluate_detailed(left, right, op)
        if evaluation.left_defaulted or evaluation.right_defaulted:
            logger.debug("Operando no numérico tratado como 0: a=%r b=%r", left, right)

        if not evaluation.is_valid:
            return CalculationOutcome(evaluation.value, False)

        result_text = format_result(evaluation.value)
        entry = HistoryEntry(
            left="" if left is None else left,
            right="" if right is None else right,
            operator=op,
            result=result_text,
        )
        line = entry.to_line()
        self.history.append(line)

        saved = self.store.append(line)
        backup = self.store.rotate_if_needed() if saved else None

        return CalculationOutcome(
            evaluation.value,
            True,
            result_text=result_text,
            entry=entry,
            saved=saved,
            backup=backup,
        )

    def close(self) -> Path | None:
        """Última comprobación de rotación antes de terminar."""
        return self.store.rotate_if_needed()
