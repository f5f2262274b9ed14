"""Funciones de saludo sin estado ni efectos secundarios."""

from __future__ import annotations

DEFAULT_GREETING = "Hello, World!"


def is_blank(value: str | None) -> bool:
    """True si el valor es None, vacío o solo espacios."""
    return value is None or not value.strip()


def greet(name: str | None = None) -> str:
    """Devuelve un saludo, personalizado si hay nombre.

    El nombre se recorta solo para decidir si está en blanco; en la salida
    se usa tal cual llegó.
    """
    if is_blank(name):
        return DEFAULT_GREETING
    return f"Hello, {name}!"
