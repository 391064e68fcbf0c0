"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase KeypadRenderer que dibuja el display y el
teclado de la calculadora, y resuelve qué botón hay bajo un clic.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig
from core.operations import format_number
from ui.keymap import BACKSPACE_BUTTON, CLEAR_BUTTON


# ============================================================================
# DISTRIBUCIÓN DEL TECLADO
# (valor, columna, fila, columnas ocupadas, filas ocupadas)
# ============================================================================
KEYPAD_LAYOUT = [
    (CLEAR_BUTTON, 0, 0, 1, 1), (BACKSPACE_BUTTON, 1, 0, 1, 1), ("/", 2, 0, 1, 1), ("*", 3, 0, 1, 1),
    ("7", 0, 1, 1, 1), ("8", 1, 1, 1, 1), ("9", 2, 1, 1, 1), ("-", 3, 1, 1, 1),
    ("4", 0, 2, 1, 1), ("5", 1, 2, 1, 1), ("6", 2, 2, 1, 1), ("+", 3, 2, 1, 1),
    ("1", 0, 3, 1, 1), ("2", 1, 3, 1, 1), ("3", 2, 3, 1, 1), ("=", 3, 3, 1, 2),
    ("0", 0, 4, 2, 1), (".", 2, 4, 1, 1),
]
KEYPAD_COLUMNS = 4
KEYPAD_ROWS = 5

# Las fuentes Hershey de OpenCV solo dibujan ASCII
BUTTON_LABELS = {BACKSPACE_BUTTON: "<-", "*": "x"}

MARGIN = 15
GAP = 10
DISPLAY_HEIGHT = 120


class Button:
    """Botón del teclado: valor, etiqueta dibujable y rectángulo en píxeles."""

    def __init__(self, value, x, y, w, h):
        self.value = value
        self.label = BUTTON_LABELS.get(value, value)
        self.x, self.y, self.w, self.h = x, y, w, h

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def kind(self):
        if value_is_digit(self.value):
            return "digit"
        if self.value in ("+", "-", "*", "/", "="):
            return "operator"
        return "control"


def value_is_digit(value):
    return value.isdigit() or value == "."


def drawable(text):
    """Reemplaza los caracteres que cv2.putText no puede dibujar."""
    return text.replace("…", "...").replace("←", "<-")


# ============================================================================
# CLASE: KeypadRenderer
# Propósito: Dibujar la calculadora sobre una imagen numpy
# Responsabilidades:
#   - Dibujar el display (operación pendiente y número actual)
#   - Dibujar el teclado de 4x5 botones
#   - Resaltar durante unos frames el último botón pulsado
#   - Resolver coordenadas de clic a valores de botón
# ============================================================================
class KeypadRenderer:
    """
    Renderizador de la calculadora de teclado.

    Componentes visuales:
        1. Display: operación pendiente (pequeño) y número actual (grande)
        2. Teclado: dígitos, operadores, C y retroceso

    Colores del display:
        - Blanco: Número en edición
        - Verde: Resultado de cálculo
        - Rojo: Error
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador y calcula la geometría de los botones.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.flash_value = None      # Botón resaltado actualmente
        self.flash_timer = 0         # Frames restantes de resaltado
        self.buttons = self._build_buttons()

    def _build_buttons(self):
        top = MARGIN + DISPLAY_HEIGHT + GAP
        cell_w = (self.width - 2 * MARGIN - (KEYPAD_COLUMNS - 1) * GAP) / KEYPAD_COLUMNS
        cell_h = (self.height - top - MARGIN - (KEYPAD_ROWS - 1) * GAP) / KEYPAD_ROWS

        buttons = []
        for value, col, row, colspan, rowspan in KEYPAD_LAYOUT:
            x = MARGIN + col * (cell_w + GAP)
            y = top + row * (cell_h + GAP)
            w = colspan * cell_w + (colspan - 1) * GAP
            h = rowspan * cell_h + (rowspan - 1) * GAP
            buttons.append(Button(value, int(x), int(y), int(w), int(h)))
        return buttons

    def button_at(self, x, y):
        """
        Obtiene el valor del botón bajo unas coordenadas.

        Returns:
            str | None: Valor del botón o None si el punto cae fuera
        """
        for button in self.buttons:
            if button.contains(x, y):
                return button.value
        return None

    def flash(self, value):
        """Resalta un botón durante config.flash_frames frames."""
        self.flash_value = value
        self.flash_timer = self.config.flash_frames

    def render(self, text, calc):
        """
        Dibuja un frame completo.

        Args:
            text (str): Último texto recibido por el callback render
            calc (Calculator): Calculadora (para colores y operación pendiente)

        Returns:
            np.ndarray: Imagen BGR de height x width
        """
        img = np.full((self.height, self.width, 3), self.config.background_color, dtype=np.uint8)
        self.draw_display(img, text, calc)
        self.draw_keypad(img)
        return img

    def draw_display(self, img, text, calc):
        x, y = MARGIN, MARGIN
        w, h = self.width - 2 * MARGIN, DISPLAY_HEIGHT
        cv2.rectangle(img, (x, y), (x + w, y + h), self.config.display_color, -1)

        # Operación pendiente (parte superior del display)
        expression = pending_expression(calc)
        if expression:
            size = cv2.getTextSize(expression, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 1)[0]
            cv2.putText(img, expression, (x + w - 15 - size[0], y + 35),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, (180, 180, 180), 1)

        # Determinar color según estado
        color = self.config.text_color
        if calc.error_pending:
            color = self.config.error_color
        elif calc.state.result_displayed:
            color = self.config.result_color

        # Número principal alineado a la derecha; la fuente se reduce hasta que quepa
        label = drawable(text)
        scale = 2.0
        size = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, scale, 2)[0]
        while size[0] > w - 30 and scale > 0.8:
            scale -= 0.1
            size = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, scale, 2)[0]
        cv2.putText(img, label, (x + w - 15 - size[0], y + h - 25),
                    cv2.FONT_HERSHEY_DUPLEX, scale, color, 2)

    def draw_keypad(self, img):
        if self.flash_timer > 0:
            self.flash_timer -= 1
        else:
            self.flash_value = None

        for button in self.buttons:
            if button.value == self.flash_value:
                fill = self.config.flash_color
            elif button.kind == "digit":
                fill = self.config.digit_button_color
            elif button.kind == "operator":
                fill = self.config.operator_button_color
            else:
                fill = self.config.control_button_color

            x, y, w, h = button.x, button.y, button.w, button.h
            cv2.rectangle(img, (x, y), (x + w, y + h), fill, -1)
            cv2.rectangle(img, (x, y), (x + w, y + h), (20, 20, 20), 2)

            size = cv2.getTextSize(button.label, cv2.FONT_HERSHEY_DUPLEX, 1.0, 2)[0]
            cv2.putText(img, button.label, (x + (w - size[0]) // 2, y + (h + size[1]) // 2),
                        cv2.FONT_HERSHEY_DUPLEX, 1.0, self.config.text_color, 2)


def pending_expression(calc):
    """
    Texto de la operación pendiente, ej: "12 +".

    Vacío si no hay operador pendiente o si se está mostrando un error.
    """
    state = calc.state
    if calc.error_pending or state.operator is None or state.previous_value is None:
        return ""
    return f"{format_number(state.previous_value)} {state.operator.symbol}"
