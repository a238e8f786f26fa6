import pytest

from calculadora_cientifica.core import events
from calculadora_cientifica.core.calculator import (
    Calculator,
    EquationState,
    ExpressionState,
    Mode,
)
from calculadora_cientifica.core.events import Slot
from calculadora_cientifica.core.tokenizer import Operator, TrigFunction


def type_keys(calc, text):
    """Teclea una expresión carácter a carácter como lo haría la UI."""
    glyphs = {g.glyph: g for g in Operator}
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isdigit():
            calc.press_digit(ch)
        elif ch == ".":
            calc.press_decimal_point()
        elif ch in glyphs:
            calc.press_operator(glyphs[ch])
        elif ch == "(":
            calc.press_open_paren()
        elif ch == ")":
            calc.press_close_paren()
        else:
            calc.press_function(text[i:i + 3])
            i += 3
        i += 1


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def equation(calc):
    calc.toggle_mode()
    return calc


class TestExpressionMode:

    def test_initial_state(self, calc):
        assert calc.snapshot() == ExpressionState("0")
        assert calc.snapshot().mode is Mode.EXPRESSION

    def test_digits_replace_placeholder(self, calc):
        for d in "9071":
            calc.press_digit(d)
        assert calc.display_text == "9071"

    def test_integer_digit_accepted(self, calc):
        calc.press_digit(7)
        assert calc.display_text == "7"

    def test_invalid_digit(self, calc):
        with pytest.raises(ValueError):
            calc.press_digit("12")
        with pytest.raises(ValueError):
            calc.press_digit("a")

    def test_decimal_point_keeps_placeholder(self, calc):
        calc.press_decimal_point()
        calc.press_digit(5)
        assert calc.display_text == "0.5"

    def test_operator_appends_glyph(self, calc):
        calc.press_operator(Operator.MULTIPLY)
        assert calc.display_text == "0×"

    def test_function_and_open_paren_replace_placeholder(self, calc):
        calc.press_function(TrigFunction.SIN)
        assert calc.display_text == "sin("
        calc.clear()
        calc.press_open_paren()
        assert calc.display_text == "("

    def test_function_by_name(self, calc):
        calc.press_digit(2)
        calc.press_operator(Operator.ADD)
        calc.press_function("cos")
        assert calc.display_text == "2+cos("
        with pytest.raises(ValueError):
            calc.press_function("log")

    def test_delete(self, calc):
        type_keys(calc, "12")
        calc.delete()
        assert calc.display_text == "1"
        calc.delete()
        assert calc.display_text == "0"
        calc.delete()
        assert calc.display_text == "0"

    def test_clear(self, calc):
        type_keys(calc, "5+5")
        calc.clear()
        assert calc.display_text == "0"

    @pytest.mark.parametrize("text, shown", [
        ("2+3×4", "14"),
        ("(2+3)×4", "20"),
        ("7÷2", "3.5"),
        ("(−5)+3", "-2"),
        ("sin(0)", "0"),
    ])
    def test_commit(self, calc, text, shown):
        type_keys(calc, text)
        assert calc.display_text == text
        assert calc.commit() == (True, shown)
        assert calc.display_text == shown

    def test_commit_division_by_zero(self, calc):
        type_keys(calc, "10÷0")
        assert calc.commit() == (False, "Error")
        assert calc.display_text == "Error"

    def test_commit_syntax_error(self, calc):
        type_keys(calc, "5−−3")
        assert calc.commit() == (False, "Error")

    def test_commit_minus_after_operator(self, calc):
        type_keys(calc, "2×−3")
        assert calc.commit() == (True, "-6")

    def test_commit_deeply_nested_expression(self, calc):
        type_keys(calc, "(" * 400 + "1" + ")" * 400)
        assert calc.commit() == (False, "Error")
        assert calc.display_text == "Error"

    def test_commit_literal_is_idempotent(self, calc):
        calc.press_digit(5)
        calc.commit()
        calc.commit()
        assert calc.display_text == "5"

    def test_recommit_negative_result(self, calc):
        type_keys(calc, "1−4")
        calc.commit()
        assert calc.display_text == "-3"
        calc.commit()
        assert calc.display_text == "-3"

    def test_recover_from_error(self, calc):
        type_keys(calc, "1÷0")
        calc.commit()
        calc.delete()
        assert calc.display_text == "Erro"
        calc.clear()
        calc.press_digit(4)
        assert calc.display_text == "4"

    def test_focus_ignored(self, calc):
        calc.cycle_focus()
        calc.focus_slot(Slot.C)
        assert calc.active_slot is Slot.A
        assert not hasattr(calc.snapshot(), "active_slot")


class TestEquationMode:

    def test_toggle(self, equation):
        state = equation.snapshot()
        assert isinstance(state, EquationState)
        assert state.mode is Mode.EQUATION
        assert state.active_slot is Slot.A
        assert dict(state.coefficients) == {Slot.A: "", Slot.B: "", Slot.C: ""}
        assert state.display_text == "0"

    def test_input_goes_to_active_slot(self, equation):
        equation.press_digit(1)
        equation.cycle_focus()
        equation.press_operator(Operator.SUBTRACT)
        equation.press_digit(3)
        equation.focus_slot(Slot.C)
        equation.press_digit(2)
        assert dict(equation.snapshot().coefficients) == {
            Slot.A: "1", Slot.B: "−3", Slot.C: "2"}
        assert equation.display_text == "0"

    def test_placeholder_not_replaced_in_slot(self, equation):
        equation.press_digit(0)
        equation.press_digit(5)
        assert equation.coefficients[Slot.A] == "05"

    def test_parens_ignored(self, equation):
        equation.press_open_paren()
        equation.press_close_paren()
        assert equation.coefficients[Slot.A] == ""

    def test_function_appends_to_slot(self, equation):
        equation.press_function(TrigFunction.TAN)
        assert equation.coefficients[Slot.A] == "tan("

    def test_delete_can_empty_slot(self, equation):
        equation.press_digit(4)
        equation.delete()
        equation.delete()
        assert equation.coefficients[Slot.A] == ""

    def test_clear_resets_coefficients_only(self, equation):
        equation.press_digit(1)
        equation.cycle_focus()
        equation.press_digit(2)
        equation.clear()
        assert dict(equation.snapshot().coefficients) == {
            Slot.A: "", Slot.B: "", Slot.C: ""}
        assert equation.active_slot is Slot.B
        assert equation.mode is Mode.EQUATION

    def test_cycle_focus_three_times(self, equation):
        seen = []
        for _ in range(3):
            equation.cycle_focus()
            seen.append(equation.active_slot)
        assert seen == [Slot.B, Slot.C, Slot.A]

    @pytest.mark.parametrize("a, b, c, shown", [
        ("1", "−3", "2", "x₁ = 2.0000, x₂ = 1.0000"),
        ("1", "2", "1", "x = -1.0000"),
        ("1", "0", "1", "x₁ = 0.0000 + 1.0000i, x₂ = 0.0000 - 1.0000i"),
        ("1", "", "1", "x₁ = 0.0000 + 1.0000i, x₂ = 0.0000 - 1.0000i"),
        ("0", "4", "1", "Not a quadratic equation (a = 0)"),
        ("", "", "", "Not a quadratic equation (a = 0)"),
    ])
    def test_commit(self, equation, a, b, c, shown):
        equation.coefficients.update({Slot.A: a, Slot.B: b, Slot.C: c})
        equation.commit()
        assert equation.display_text == shown
        assert dict(equation.snapshot().coefficients) == {Slot.A: a, Slot.B: b, Slot.C: c}

    def test_commit_solver_error(self, equation):
        equation.coefficients[Slot.A] = "1" + "0" * 400
        assert equation.commit() == (False, "Error solving equation")
        assert equation.coefficients[Slot.A] == "1" + "0" * 400


class TestModeRoundTrip:

    def test_toggle_twice_preserves_buffers(self, calc):
        type_keys(calc, "12+3")
        calc.toggle_mode()
        calc.press_digit(7)
        calc.cycle_focus()
        calc.toggle_mode()
        assert calc.snapshot() == ExpressionState("12+3")

        calc.toggle_mode()
        equation_state = calc.snapshot()
        assert equation_state.active_slot is Slot.B
        assert equation_state.coefficients[Slot.A] == "7"

        calc.toggle_mode()
        calc.toggle_mode()
        assert calc.snapshot() == equation_state

    def test_display_is_shared_between_modes(self, calc):
        calc.toggle_mode()
        calc.press_digit(1)
        calc.focus_slot(Slot.C)
        calc.press_operator(Operator.SUBTRACT)
        calc.press_digit(1)
        calc.commit()
        calc.toggle_mode()
        assert calc.display_text == "x₁ = 1.0000, x₂ = -1.0000"


class TestHandle:

    def test_event_sequence(self, calc):
        for event in [
            events.PressDigit("2"),
            events.PressOperator(Operator.ADD),
            events.PressDigit("3"),
            events.PressOperator(Operator.MULTIPLY),
            events.PressOpenParen(),
            events.PressDigit("1"),
            events.PressDecimalPoint(),
            events.PressDigit("5"),
            events.PressCloseParen(),
        ]:
            calc.handle(event)
        assert calc.display_text == "2+3×(1.5)"
        assert calc.handle(events.Commit()) == (True, "6.5")

    def test_mode_and_focus_events(self, calc):
        calc.handle(events.ToggleMode())
        calc.handle(events.FocusSlot(Slot.C))
        calc.handle(events.PressFunction(TrigFunction.COS))
        calc.handle(events.CycleFocus())
        assert calc.active_slot is Slot.A
        assert calc.coefficients[Slot.C] == "cos("
        calc.handle(events.Delete())
        calc.handle(events.Clear())
        assert calc.coefficients[Slot.C] == ""

    def test_unknown_event(self, calc):
        with pytest.raises(TypeError):
            calc.handle("Commit")

    def test_snapshot_is_read_only(self, equation):
        state = equation.snapshot()
        with pytest.raises(TypeError):
            state.coefficients[Slot.A] = "9"
