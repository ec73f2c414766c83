"""
Test cases for the static typing contract of typed events.
"""

from pathlib import Path
from textwrap import dedent

import pytest

mypy_api = pytest.importorskip("mypy.api")

SRC = Path(__file__).resolve().parent.parent / "src"

SNIPPET = dedent(
    """\
    from typedemit import Event, EventEmitter

    MOUSE_CLICK: Event[int, int] = Event("mouseClick", int, int)
    emitter = EventEmitter()

    def on_click(x: int, y: int) -> None: ...
    def on_text(text: str) -> None: ...

    emitter.register(MOUSE_CLICK, on_click)
    emitter.emit(MOUSE_CLICK, 1, 2)
    emitter.register("untyped", on_text)
    emitter.emit("untyped", "anything", 3)
    emitter.emit(MOUSE_CLICK, "a")
    emitter.register(MOUSE_CLICK, on_text)
    """,
)
BAD_LINES = {13, 14}


def run_mypy(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> list[str]:
    monkeypatch.setenv("MYPYPATH", str(SRC))
    snippet = tmp_path / "usage.py"
    snippet.write_text(SNIPPET)
    stdout, _stderr, _status = mypy_api.run(
        [str(snippet), "--follow-imports=silent", "--no-incremental", "--cache-dir", str(tmp_path / ".mypy_cache")],
    )
    return [line for line in stdout.splitlines() if line.startswith(str(snippet)) and ": error:" in line]


class TestTypedEventContract:
    """Test that a type checker ties payloads to their Event."""

    def test_only_mismatched_calls_are_rejected(self, tmp_path, monkeypatch):
        """Test matching calls pass and mismatched payloads or listeners fail."""
        errors = run_mypy(tmp_path, monkeypatch)

        error_lines = {int(line.split(":")[1]) for line in errors}
        assert error_lines == BAD_LINES, errors
        assert any('No overload variant of "emit"' in line for line in errors)
