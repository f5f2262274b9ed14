"""Tests de integración: flujo CLI -> core."""

import json

import pytest

import greet_cli
from greeter import greet


@pytest.mark.integration
def test_cli_matches_core(capsys: pytest.CaptureFixture[str]) -> None:
    """Flujo: la salida del CLI es la del core, para varios nombres."""
    for name in (None, "", "   ", "Alice", "  Bob  "):
        argv = [] if name is None else ["--name", name]
        assert greet_cli.main(argv) == 0
        assert capsys.readouterr().out == greet(name) + "\n"


@pytest.mark.integration
def test_demo_json_workflow(capsys: pytest.CaptureFixture[str]) -> None:
    """Flujo: --demo con JSON devuelve una lista con ambos saludos."""
    assert greet_cli.main(["--demo", "--out", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["greeting"] for d in data] == ["Hello, World!", "Hello, Alice!"]
    assert [d["personalized"] for d in data] == [False, True]
