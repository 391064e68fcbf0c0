"""Fixtures compartidas: reloj manual, scheduler y calculadora con render grabado."""

import pytest

from core.calculator import Calculator
from core.scheduler import FrameScheduler


class FakeClock:
    """Reloj controlado manualmente por las pruebas."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock)


@pytest.fixture
def rendered():
    """Lista con cada texto que la calculadora envía al display."""
    return []


@pytest.fixture
def calc(scheduler, rendered):
    return Calculator(render=rendered.append, scheduler=scheduler)


def press(calc, keys):
    """Pulsa una secuencia de botones ("5", "+", "=", "C", "←", ".")."""
    from ui.keymap import action_for_button

    for key in keys:
        calc.dispatch(action_for_button(key))
