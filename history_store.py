"""Historial de cálculos persistido en un archivo de texto con rotación."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_HISTORY_BYTES = 1_000_000
FIELD_SEPARATOR = " | "
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 en UTC con sufijo 'Z', p. ej. 2026-10-17T10:07:00.123456Z.

    Raises:
        ValueError: ``moment`` no tiene zona horaria.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("La marca de tiempo debe incluir zona horaria")
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@dataclass(frozen=True)
class HistoryEntry:
    """Registro inmutable de un cálculo correcto."""

    left: str
    right: str
    operator: str
    result: str
    timestamp: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        if self.timestamp.tzinfo is None or self.timestamp.utcoffset() is None:
            raise ValueError("La marca de tiempo debe incluir zona horaria")

    def to_line(self) -> str:
        # Los campos no se escapan: el historial sólo se vuelve a mostrar tal cual.
        return FIELD_SEPARATOR.join((
            format_timestamp(self.timestamp),
            self.left,
            self.right,
            self.operator,
            self.result,
        ))

    def __str__(self) -> str:
        return self.to_line()


class HistoryStore:
    """Archivo de historial de solo-añadir con rotación por tamaño.

    - load(): lee todas las líneas; ante cualquier fallo devuelve [].
    - append(line): añade una línea; ante un fallo devuelve False y
      guarda el mensaje en ``last_error``. La entrada se pierde.
    - rotate_if_needed(): si el archivo supera ``max_bytes`` lo renombra
      a ``<nombre>_<AAAAMMDDhhmmss>.bak`` y deja uno nuevo vacío. Nunca
      lanza excepciones.
    """

    def __init__(self, path: str | Path, max_bytes: int = MAX_HISTORY_BYTES):
        self.path = Path(path)
        self.max_bytes = max_bytes
        self.last_error: str | None = None

    # ── Lectura ──────────────────────────────────────────────────

    def load(self) -> list[str]:
        try:
            if not self.path.exists():
                return []
            text = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("No se pudo leer el historial %s: %s", self.path, exc)
            return []

        lines = _LINE_BREAK.split(text)
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    # ── Escritura ────────────────────────────────────────────────

    def append(self, line: str) -> bool:
        try:
            with self.path.open("a", encoding="utf-8", newline="") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            self.last_error = str(exc)
            logger.warning("No se pudo escribir en el historial %s: %s", self.path, exc)
            return False

        self.last_error = None
        return True

    # ── Rotación ─────────────────────────────────────────────────

    def rotate_if_needed(self) -> Path | None:
        try:
            if not self.path.exists():
                return None
            if self.path.stat().st_size <= self.max_bytes:
                return None

            backup = self._backup_path(_utc_now())
            self.path.rename(backup)
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            logger.debug("Rotación del historial omitida: %s", exc)
            return None

        logger.info("Historial rotado a %s", backup)
        return backup

    def _backup_path(self, moment: datetime) -> Path:
        stamp = moment.strftime(BACKUP_TIMESTAMP_FORMAT)
        base = f"{self.path.stem}_{stamp}"
        candidate = self.path.with_name(f"{base}.bak")
        counter = 1
        # Dos rotaciones en el mismo segundo no deben pisar la copia anterior.
        while candidate.exists():
            candidate = self.path.with_name(f"{base}_{counter}.bak")
            counter += 1
        return candidate
