"""
Módulo de configuración para la calculadora de teclado.
Contiene la clase con los valores por defecto del display y la ventana.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
