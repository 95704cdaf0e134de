from collections.abc import Callable

import pytest

from romancalc.roman_constants import (
    DIGIT_ZERO_MESSAGE,
    EMPTY_LINE_MESSAGE,
    GOODBYE_MESSAGE,
)
from romancalc.roman_errors import (
    DivisionByZeroError,
    InvalidCharacterError,
    InvalidExpressionError,
)
from romancalc.roman_repl import (
    LineSession,
    calculate,
    format_result,
    handle_line,
    is_quit_directive,
    normalize_line,
    prepare_line,
    start_repl,
)


def test_normalize_and_prepare_line() -> None:
    assert normalize_line("  ii + iii =  ") == "II + III ="
    assert prepare_line("II + III =") == "II + III  "
    assert prepare_line("II") == "II "
    # Only one trailing "=" is removed.
    assert prepare_line("II ==") == "II = "


def test_quit_words_anywhere() -> None:
    assert is_quit_directive("QUIT ")
    assert is_quit_directive("PLEASE EXIT NOW ")
    assert not is_quit_directive("XII ")


def test_calculate_prepared_line() -> None:
    assert calculate("MCMXCIV + VI ") == 2000
    assert calculate("+ I ", previous_result=9) == 10


def test_format_result() -> None:
    assert format_result(5) == "Result: Roman V (Arabic 5)."
    assert format_result(-2) == "Result: Roman -II (Arabic -2)."
    assert format_result(0, used_previous=True) == (
        "Result (which uses previous line's result): Roman O (Arabic 0)."
    )


def test_handle_line_success_updates_session(session: LineSession) -> None:
    outcome = handle_line("ii + iii =", session)
    assert outcome.message == "Result: Roman V (Arabic 5)."
    assert outcome.value == 5
    assert not outcome.used_previous
    assert session.previous_result == 5


def test_handle_line_continues_from_previous(session: LineSession) -> None:
    handle_line("V", session)
    outcome = handle_line("+ III", session)
    assert outcome.used_previous
    assert outcome.message == (
        "Result (which uses previous line's result): Roman VIII (Arabic 8)."
    )
    assert session.previous_result == 8


def test_first_line_operator_uses_zero(session: LineSession) -> None:
    outcome = handle_line("+ III", session)
    assert outcome.message.endswith("Roman III (Arabic 3).")
    assert outcome.used_previous


def test_error_leaves_session_untouched(session: LineSession) -> None:
    handle_line("V", session)
    outcome = handle_line("VI / O", session)
    assert isinstance(outcome.error, DivisionByZeroError)
    assert outcome.value is None
    assert outcome.message == (
        "There's a division by zero detected at the end of this text: VI / O"
    )
    assert session.previous_result == 5


def test_error_message_includes_line_through_fault(session: LineSession) -> None:
    outcome = handle_line("II + ", session)
    assert outcome.message == (
        "There's a missing operand detected at the end of this text: II + "
    )


def test_double_equals_is_invalid_character(session: LineSession) -> None:
    outcome = handle_line("II ==", session)
    assert isinstance(outcome.error, InvalidCharacterError)
    assert outcome.message.endswith("at the end of this text: II =")


@pytest.mark.parametrize("raw", ["", "   ", "=", " = "])  # type: ignore[misc]
def test_empty_lines_prompt_again(raw: str, session: LineSession) -> None:
    outcome = handle_line(raw, session)
    assert outcome.message == EMPTY_LINE_MESSAGE
    assert not outcome.quit


def test_digit_zero_has_its_own_message(session: LineSession) -> None:
    assert handle_line("X0", session).message == DIGIT_ZERO_MESSAGE
    # The digit check runs before the quit check.
    assert not handle_line("QUIT 0", session).quit


@pytest.mark.parametrize("raw", ["quit", "Exit", "exit=", "I want to QUIT"])  # type: ignore[misc]
def test_quit_directive(raw: str, session: LineSession) -> None:
    outcome = handle_line(raw, session)
    assert outcome.quit
    assert outcome.message == GOODBYE_MESSAGE


def test_repl_session(
    feed_input: Callable[..., None], capsys: pytest.CaptureFixture[str]
) -> None:
    feed_input("II + II", "* II", "VI / O", "- I", "quit", "X")
    start_repl()
    out = capsys.readouterr().out
    assert "[] Welcome to the Roman numeral desk calculator!" in out
    assert "[] Result: Roman IV (Arabic 4)." in out
    assert "[] Result (which uses previous line's result): Roman VIII (Arabic 8)." in out
    assert "[] There's a division by zero detected at the end of this text: VI / O" in out
    assert "Roman VII (Arabic 7)." in out
    assert out.rstrip().endswith("[] Bye!  Visit again!")
    assert "Roman X " not in out


def test_repl_without_banner(
    feed_input: Callable[..., None], capsys: pytest.CaptureFixture[str]
) -> None:
    feed_input("exit")
    start_repl(banner=False)
    out = capsys.readouterr().out
    assert "Welcome" not in out
    assert "Bye!" in out


def test_repl_end_of_input(
    feed_input: Callable[..., None], capsys: pytest.CaptureFixture[str]
) -> None:
    feed_input("I")
    start_repl(banner=False)
    out = capsys.readouterr().out
    assert "Roman I (Arabic 1)." in out
    assert "Bye!" in out


def test_repl_keyboard_interrupt(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        "builtins.input", lambda _="": (_ for _ in ()).throw(KeyboardInterrupt())
    )
    start_repl(banner=False)
    assert "Bye!" in capsys.readouterr().out


def test_too_deep_nesting_keeps_shell_alive(session: LineSession) -> None:
    handle_line("V", session)
    outcome = handle_line("(" * 5000 + "I" + ")" * 5000, session)
    assert isinstance(outcome.error, InvalidExpressionError)
    assert outcome.message.startswith("There's an invalid expression detected")
    assert session.previous_result == 5
    assert handle_line("+ I", session).message.endswith("Roman VI (Arabic 6).")
