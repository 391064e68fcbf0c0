"""Pruebas de la máquina de estados de la calculadora."""

import pytest

from conftest import press
from core.actions import Action
from core.calculator import Calculator, CalculatorState
from core.operations import Operator


# --- Entrada de dígitos y decimales ---

def test_initial_state_is_empty(calc, rendered):
    assert calc.state == CalculatorState()
    assert calc.display_text == "0"
    assert rendered == []


def test_leading_zero_is_replaced(calc):
    calc.clear()
    press(calc, ["0", "5"])
    assert calc.state.current_input == "5"


def test_repeated_zero_stays_single(calc):
    press(calc, ["0", "0", "0"])
    assert calc.state.current_input == "0"


def test_decimal_on_empty_input_inserts_leading_zero(calc, rendered):
    press(calc, ["."])
    assert calc.state.current_input == "0."
    assert rendered == ["0."]


def test_second_decimal_is_ignored_but_refreshes(calc, rendered):
    press(calc, ["1", ".", "5", ".", "2"])
    assert calc.state.current_input == "1.52"
    assert calc.state.current_input.count(".") == 1
    assert rendered == ["1", "1.", "1.5", "1.5", "1.52"]


def test_zero_after_decimal_is_kept(calc):
    press(calc, [".", "0", "5"])
    assert calc.state.current_input == "0.05"


@pytest.mark.parametrize("keys", [
    ["1", ".", ".", "2", "."],
    [".", ".", "."],
    ["9", "9", ".", "0", ".", "1", "+", ".", ".", "3"],
])
def test_input_never_holds_two_decimal_separators(calc, keys):
    press(calc, keys)
    assert calc.state.current_input.count(".") <= 1


# --- Operaciones ---

def test_addition(calc, rendered):
    press(calc, ["5", "+", "3", "="])
    assert rendered[-1] == "8"
    assert calc.state.result_displayed is True
    assert calc.state.operator is None
    assert calc.state.previous_value is None


def test_chained_operators_evaluate_left_to_right(calc, rendered):
    press(calc, ["2", "+", "3", "*", "4", "="])
    assert rendered[-1] == "20"


def test_chaining_stores_intermediate_result(calc):
    press(calc, ["2", "+", "3", "*"])
    assert calc.state.previous_value == 5.0
    assert calc.state.operator is Operator.MULTIPLY
    assert calc.state.current_input == ""


def test_operator_renders_zero_while_waiting(calc, rendered):
    press(calc, ["7", "-"])
    assert rendered[-1] == "0"


def test_fractional_result(calc, rendered):
    press(calc, ["1", "/", "4", "="])
    assert rendered[-1] == "0.25"


def test_negative_result(calc, rendered):
    press(calc, ["3", "-", "5", "="])
    assert rendered[-1] == "-2"
    press(calc, ["+", "1", "="])
    assert rendered[-1] == "-1"


def test_float_rounding_is_not_hidden(calc):
    press(calc, [".", "1", "+", ".", "2", "="])
    assert calc.state.current_input == "0.30000000000000004"


def test_operator_after_result_reuses_it(calc, rendered):
    press(calc, ["5", "+", "3", "=", "*", "2", "="])
    assert rendered[-1] == "16"


def test_digit_after_result_starts_new_entry(calc):
    press(calc, ["5", "+", "3", "=", "4"])
    assert calc.state.current_input == "4"
    assert calc.state.result_displayed is False


def test_decimal_after_result_starts_new_entry(calc):
    press(calc, ["5", "+", "3", "=", "."])
    assert calc.state.current_input == "0."


def test_operator_can_be_replaced(calc, rendered):
    press(calc, ["5", "+", "-", "2", "="])
    assert rendered[-1] == "3"


def test_operator_without_operand_leaves_equals_as_noop(calc, rendered):
    press(calc, ["-", "3", "="])
    assert rendered == ["0", "3"]
    assert calc.state.previous_value is None
    assert calc.state.result_displayed is False
    press(calc, ["4"])
    assert calc.state.current_input == "34"


def test_operator_without_operand_chains_from_zero(calc, rendered):
    press(calc, ["-", "3", "*", "2", "="])
    assert rendered[-1] == "-6"


def test_equals_without_operator_is_noop(calc, rendered):
    press(calc, ["4", "2"])
    before = list(rendered)
    press(calc, ["="])
    assert rendered == before
    assert calc.state.current_input == "42"


def test_equals_without_second_operand_is_noop(calc, rendered):
    press(calc, ["4", "+"])
    before = list(rendered)
    press(calc, ["="])
    assert rendered == before
    assert calc.state.operator is Operator.ADD


def test_equals_on_fresh_calculator_does_not_render(calc, rendered):
    calc.equals()
    assert rendered == []


# --- Borrado ---

def test_clear_resets_everything(calc, rendered):
    press(calc, ["5", "+", "3", "C"])
    assert calc.state == CalculatorState()
    assert rendered[-1] == "0"


def test_clear_is_idempotent(calc):
    press(calc, ["5", "+", "3"])
    calc.clear()
    once = calc.state.snapshot()
    calc.clear()
    assert calc.state.snapshot() == once


def test_backspace_removes_last_character(calc, rendered):
    press(calc, ["1", "2", "3", "←"])
    assert calc.state.current_input == "12"
    assert rendered[-1] == "12"


def test_backspace_to_empty_shows_zero(calc, rendered):
    press(calc, ["7", "←"])
    assert calc.state.current_input == ""
    assert rendered[-1] == "0"


def test_backspace_on_empty_input_is_noop(calc, rendered):
    press(calc, ["←"])
    assert rendered == []


def test_backspace_after_result_clears_everything(calc, rendered):
    press(calc, ["1", "2", "*", "3", "=", "←"])
    assert calc.state == CalculatorState()
    assert rendered[-1] == "0"


def test_backspace_keeps_pending_operation(calc):
    press(calc, ["8", "-", "1", "2", "←"])
    assert calc.state.current_input == "1"
    assert calc.state.previous_value == 8.0


# --- Display ---

def test_long_input_is_truncated_only_on_display(calc, rendered):
    press(calc, list("12345678901234"))
    assert calc.state.current_input == "12345678901234"
    assert rendered[-1] == "123456789012…"
    assert calc.display_text == "123456789012…"


def test_twelve_characters_are_not_truncated(calc):
    press(calc, list("123456789012"))
    assert calc.display_text == "123456789012"


def test_long_result_keeps_full_precision(calc):
    press(calc, ["2", "/", "3", "="])
    assert calc.state.current_input == repr(2 / 3)
    assert calc.display_text == repr(2 / 3)[:12] + "…"


# --- División entre cero ---

def test_division_by_zero_shows_error_then_clears(calc, rendered, clock, scheduler):
    press(calc, ["5", "/", "0", "="])
    assert rendered[-1] == "Error"
    assert calc.error_pending

    clock.advance(1.1)
    assert scheduler.run_pending() == 0
    assert rendered[-1] == "Error"

    clock.advance(0.2)
    assert scheduler.run_pending() == 1
    assert rendered[-1] == "0"
    assert calc.state == CalculatorState()
    assert not calc.error_pending
    assert scheduler.pending == 0


def test_division_by_zero_leaves_state_until_reset(calc):
    press(calc, ["5", "/", "0", "="])
    assert calc.state.current_input == "0"
    assert calc.state.previous_value == 5.0
    assert calc.state.operator is Operator.DIVIDE


def test_division_by_zero_while_chaining(calc, rendered):
    press(calc, ["6", "/", "0", "+"])
    assert rendered[-1] == "Error"
    # operator y current_input sin cambios
    assert calc.state.operator is Operator.DIVIDE
    assert calc.state.current_input == "0"


def test_division_by_decimal_zero(calc, rendered):
    press(calc, ["1", "/", "0", ".", "0", "="])
    assert rendered[-1] == "Error"


def test_action_during_error_cancels_reset_and_starts_fresh(calc, rendered, clock, scheduler):
    press(calc, ["5", "/", "0", "=", "7"])
    assert rendered[-2:] == ["0", "7"]
    assert calc.state.current_input == "7"
    assert calc.state.previous_value is None
    assert scheduler.pending == 0

    press(calc, ["+", "1"])
    clock.advance(5)
    scheduler.run_pending()
    assert rendered[-1] == "1"
    assert calc.state.previous_value == 7.0


def test_equals_during_error_returns_to_zero(calc, rendered):
    press(calc, ["5", "/", "0", "=", "="])
    assert rendered[-1] == "0"
    assert not calc.error_pending


def test_clear_during_error_cancels_reset(calc, rendered, clock, scheduler):
    press(calc, ["5", "/", "0", "=", "C"])
    assert rendered[-1] == "0"
    assert scheduler.pending == 0
    press(calc, ["9"])
    clock.advance(2)
    scheduler.run_pending()
    assert rendered[-1] == "9"


def test_at_most_one_reset_timer(calc, scheduler):
    press(calc, ["5", "/", "0", "="])
    first = calc._reset_timer
    press(calc, ["5", "/", "0", "="])
    assert scheduler.pending == 1
    assert first.cancelled
    assert calc.error_pending


def test_calculator_recovers_after_error(calc, rendered, clock, scheduler):
    press(calc, ["5", "/", "0", "="])
    clock.advance(2)
    scheduler.run_pending()
    press(calc, ["5", "+", "3", "="])
    assert rendered[-1] == "8"


# --- dispatch y configuración ---

def test_dispatch_routes_actions(calc, rendered):
    for action in [Action.digit(9), Action.operator("*"), Action.digit("9"), Action.equals()]:
        calc.dispatch(action)
    assert rendered[-1] == "81"


def test_custom_config_changes_display_and_delay(scheduler, clock):
    from config.settings import CalculatorConfig

    config = CalculatorConfig()
    config.max_display_length = 4
    config.overflow_marker = "~"
    config.error_reset_delay = 0.5
    rendered = []
    calc = Calculator(render=rendered.append, scheduler=scheduler, config=config)

    press(calc, list("123456"))
    assert rendered[-1] == "1234~"

    press(calc, ["/", "0", "="])
    clock.advance(0.5)
    scheduler.run_pending()
    assert rendered[-1] == "0"


def test_default_collaborators():
    calc = Calculator()
    calc.input_digit("3")
    assert calc.display_text == "3"
