"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados, las operaciones y el planificador de timers.
"""

from .actions import Action, ActionKind
from .calculator import Calculator, CalculatorState
from .display import format_display
from .operations import CalculatorError, DivisionByZeroError, Operator
from .scheduler import FrameScheduler, TimerHandle

__all__ = [
    'Action',
    'ActionKind',
    'Calculator',
    'CalculatorError',
    'CalculatorState',
    'DivisionByZeroError',
    'FrameScheduler',
    'Operator',
    'TimerHandle',
    'format_display',
]
