"""Punto de entrada de la calculadora de consola."""

import argparse
import logging
import sys

from calculator_cli import CalculatorCLI
from calculator_session import CalculatorSession
from history_store import HistoryStore


HISTORY_FILE = "history.txt"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "ERROR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calculadora de consola con historial rotativo en disco."
    )
    parser.add_argument(
        "--history",
        default=HISTORY_FILE,
        help=f"archivo de historial (por defecto: {HISTORY_FILE})",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="nivel de los mensajes de diagnóstico en stderr",
    )
    return parser


def _configure_console():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    _configure_console()

    session = CalculatorSession(HistoryStore(args.history))
    CalculatorCLI(session).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
