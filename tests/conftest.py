import builtins
import os
from collections.abc import Callable

import pytest

from romancalc.roman_repl import LineSession

# Subprocess-based CLI tests report coverage only when this is started early.
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


@pytest.fixture  # type: ignore[misc]
def session() -> LineSession:
    return LineSession()


@pytest.fixture  # type: ignore[misc]
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replaces `input()` with a scripted sequence of lines, then EOF."""

    def _feed(*lines: str) -> None:
        pending = list(lines)

        def fake_input(prompt: str = "") -> str:
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)

    return _feed
