"""
Operaciones aritméticas y conversión entre texto y números.

Este módulo contiene el enum cerrado de operadores, la jerarquía de errores
de la calculadora y las funciones que convierten la entrada textual en
números de punto flotante (y viceversa).
"""

import math
import re
from enum import Enum


class CalculatorError(Exception):
    """Error base de la calculadora."""


class DivisionByZeroError(CalculatorError):
    """Se intentó dividir entre cero."""


# ============================================================================
# ENUM: Operator
# Propósito: Conjunto cerrado de operadores binarios
# Responsabilidades:
#   - Representar +, -, *, / sin cadenas sueltas
#   - Aplicar la operación sobre dos operandos float
#   - Señalar la división entre cero como error propio (no infinito)
# ============================================================================
class Operator(Enum):
    """
    Operadores binarios soportados.

    El valor de cada miembro es el símbolo que usan el teclado y los botones,
    de modo que Operator("+") devuelve Operator.ADD.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self):
        return self.value

    def apply(self, a, b):
        """
        Aplica el operador a dos operandos.

        Args:
            a (float): Operando izquierdo (valor previo)
            b (float): Operando derecho (entrada actual)

        Returns:
            float: Resultado de la operación

        Raises:
            DivisionByZeroError: Si el operador es DIVIDE y b == 0
        """
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        if b == 0:
            raise DivisionByZeroError(f"Cannot divide {a} by zero")
        return a / b


def parse_number(text):
    """
    Convierte la entrada textual en float.

    La entrada se construye carácter a carácter, así que "0.", "12" o el
    texto de un resultado previo ("Infinity", "1e+21") son siempre válidos.
    """
    return float(text)


def format_number(value):
    """
    Obtiene la forma textual de un resultado.

    Args:
        value (float): Resultado de una operación

    Returns:
        str: Texto a guardar como entrada actual

    Formateo:
        - 8.0 → "8" (enteros sin decimales)
        - 0.1 + 0.2 → "0.30000000000000004" (repr más corto)
        - 1e21 → "1e+21" (notación científica a partir de 21 dígitos)
        - 1e-7 → "1e-7"
        - inf / nan → "Infinity" / "NaN"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    # Exponente sin ceros a la izquierda: 1e-07 → 1e-7
    return re.sub(r"e([+-])0+(\d)", r"e\1\2", repr(value))
