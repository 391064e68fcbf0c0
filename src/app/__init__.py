"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes.
"""

from .keypad_app import KeypadCalculatorApp

__all__ = ['KeypadCalculatorApp']
