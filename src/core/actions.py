"""
Acciones abstractas que consume la calculadora.

Los adaptadores (teclado, botones) traducen eventos crudos en una Action;
la validación de dígitos y operadores ocurre aquí, al construirla, y no
dentro de la máquina de estados.
"""

from enum import Enum

from core.operations import Operator


DIGITS = "0123456789"


class ActionKind(Enum):
    DIGIT = "digit"
    DECIMAL = "decimal"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    BACKSPACE = "backspace"


def parse_digit(value):
    """
    Valida un dígito decimal.

    Args:
        value (int | str): Entero 0-9 o carácter "0"-"9"

    Returns:
        str: El dígito como carácter

    Raises:
        ValueError: Si no es un único dígito decimal
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid digit: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= 9:
            return str(value)
        raise ValueError(f"Invalid digit: {value!r}")
    if isinstance(value, str) and len(value) == 1 and value in DIGITS:
        return value
    raise ValueError(f"Invalid digit: {value!r}")


def parse_operator(value):
    """Acepta un Operator o su símbolo ("+", "-", "*", "/")."""
    if isinstance(value, Operator):
        return value
    try:
        return Operator(value)
    except ValueError:
        raise ValueError(f"Invalid operator: {value!r}") from None


class Action:
    """
    Acción validada: un tipo (ActionKind) y un valor opcional.

    El valor solo existe para DIGIT (carácter del dígito) y OPERATOR
    (miembro de Operator). Se construye con los métodos de clase.
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    @classmethod
    def digit(cls, value):
        return cls(ActionKind.DIGIT, parse_digit(value))

    @classmethod
    def decimal(cls):
        return cls(ActionKind.DECIMAL)

    @classmethod
    def operator(cls, value):
        return cls(ActionKind.OPERATOR, parse_operator(value))

    @classmethod
    def equals(cls):
        return cls(ActionKind.EQUALS)

    @classmethod
    def clear(cls):
        return cls(ActionKind.CLEAR)

    @classmethod
    def backspace(cls):
        return cls(ActionKind.BACKSPACE)

    def __eq__(self, other):
        if not isinstance(other, Action):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Action({self.kind.name})"
        return f"Action({self.kind.name}, {self.value!r})"
