#!/usr/bin/env python3
"""
greet_cli - CLI para imprimir un saludo, opcionalmente personalizado.
Envuelve greeter.greet sin cambiar su salida.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass

from greeter import greet, is_blank
from greeter.logging_config import configure_logging, get_logger

# Nombres usados por --demo (default + personalizado)
DEMO_NAMES: tuple[str | None, ...] = (None, "Alice")

logger = get_logger(__name__)


@dataclass
class GreetingResult:
    """Resultado de un saludo para salida JSON."""
    name: str | None
    greeting: str
    personalized: bool


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        description="Imprime un saludo, personalizado si se da un nombre."
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Nombre a saludar (default: ninguno -> Hello, World!)",
    )
    parser.add_argument(
        "--out",
        choices=("text", "json"),
        default="text",
        help="Formato de salida: text o json (default: text)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Imprime el saludo por defecto y el de Alice (ignora --name)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Logs de debug en stderr",
    )
    return parser.parse_args(argv)


def build_result(name: str | None) -> GreetingResult:
    """Llama al core y arma el resultado."""
    greeting = greet(name)
    personalized = not is_blank(name)
    logger.debug("greeting_generated", personalized=personalized)
    return GreetingResult(name=name, greeting=greeting, personalized=personalized)


def output_json(results: list[GreetingResult]) -> None:
    """Imprime el resultado en JSON (objeto si es uno, lista si son varios)."""
    payload = [asdict(r) for r in results]
    data = payload[0] if len(payload) == 1 else payload
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_text(results: list[GreetingResult]) -> None:
    """Imprime un saludo por línea."""
    for r in results:
        print(r.greeting)


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    names = list(DEMO_NAMES) if args.demo else [args.name]
    logger.debug("cli_start", demo=args.demo, out=args.out)
    results = [build_result(n) for n in names]

    if args.out == "json":
        output_json(results)
    else:
        output_text(results)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
