import numpy as np
import pytest

from calculadora_cientifica.core.calculator import Calculator
from calculadora_cientifica.ui.renderer import BACKGROUND, UIRenderer, to_ascii


@pytest.fixture
def renderer(config):
    return UIRenderer(config.window_width, config.window_height, config)


def test_render_expression_state(renderer, config):
    calc = Calculator()
    calc.press_function("sin")
    img = renderer.render(calc.snapshot())
    assert img.shape == (config.window_height, config.window_width, 3)
    assert img.dtype == np.uint8
    # Algo se dibujó sobre el fondo
    assert (img != np.array(BACKGROUND, dtype=np.uint8)).any()


def test_render_equation_state_draws_slots(renderer):
    calc = Calculator()
    calc.toggle_mode()
    expression_only = renderer.render(Calculator().snapshot())
    calc.press_digit(3)
    with_slots = renderer.render(calc.snapshot())
    # La franja de los coeficientes solo se pinta en modo ecuación
    band = slice(260, 370)
    assert not np.array_equal(expression_only[band], with_slots[band])


def test_render_long_and_error_text(renderer):
    calc = Calculator()
    for _ in range(60):
        calc.press_digit(9)
    renderer.render(calc.snapshot())
    calc.toggle_mode()
    calc.commit()
    img = renderer.render(calc.snapshot())
    assert img.shape[2] == 3


def test_render_without_key_guide(config):
    config.show_key_guide = False
    renderer = UIRenderer(640, 480, config)
    img = renderer.render(Calculator().snapshot())
    assert img.shape == (480, 640, 3)


def test_feedback_counts_down(renderer):
    renderer.show_feedback("OK 7", duration=2)
    renderer.render(Calculator().snapshot())
    assert renderer.feedback_timer == 1
    renderer.render(Calculator().snapshot())
    renderer.render(Calculator().snapshot())
    assert renderer.feedback_timer == 0


def test_feedback_default_duration(renderer, config):
    renderer.show_feedback("TODO BORRADO")
    assert renderer.feedback_timer == config.feedback_frames


def test_to_ascii():
    assert to_ascii("x₁ = 2×3÷1−4") == "x1 = 2x3/1-4"
