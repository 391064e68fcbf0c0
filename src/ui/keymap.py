"""
Traducción de teclas y botones a acciones de la calculadora.

Las teclas llegan como códigos de cv2.waitKeyEx(); primero se convierten
en un nombre de tecla ("5", "+", "Enter", "Backspace"...) y después en
una Action. Todo lo que no se reconoce devuelve None.
"""

from core.actions import DIGITS, Action


# ============================================================================
# CÓDIGOS DE TECLA
# cv2.waitKeyEx devuelve ASCII para teclas normales y keysyms de X11 (GTK)
# o códigos extendidos (Windows) para el resto
# ============================================================================
SPECIAL_KEYS = {
    8: "Backspace",
    127: "Backspace",           # macOS envía DEL para la tecla de borrar
    0xFF08: "Backspace",
    10: "Enter",
    13: "Enter",
    0xFF0D: "Enter",
    0xFF8D: "Enter",            # Intro del teclado numérico
    27: "Escape",
    0xFF1B: "Escape",
    0xFFFF: "Delete",
    0x2E0000: "Delete",         # Windows
}

# Teclado numérico (keysyms KP_*)
KEYPAD_KEYS = {0xFFB0 + n: str(n) for n in range(10)}
KEYPAD_KEYS.update({
    0xFFAB: "+",
    0xFFAD: "-",
    0xFFAA: "*",
    0xFFAF: "/",
    0xFFAE: ".",
    0xFFBD: "=",
})

OPERATOR_KEYS = "+-*/"

# Valores de los botones del teclado en pantalla
CLEAR_BUTTON = "C"
BACKSPACE_BUTTON = "←"


def key_name(code):
    """
    Obtiene el nombre de una tecla a partir de su código.

    Args:
        code (int): Valor devuelto por cv2.waitKeyEx (-1 si no hubo tecla)

    Returns:
        str | None: Nombre de la tecla o None si no se reconoce
    """
    if code is None or code < 0:
        return None
    if code in SPECIAL_KEYS:
        return SPECIAL_KEYS[code]
    if code in KEYPAD_KEYS:
        return KEYPAD_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None


def action_for_key(key, accept_comma=True):
    """
    Traduce un nombre de tecla en una acción.

    Mapeo:
        - "0"-"9": dígito
        - "." (y "," si accept_comma): decimal
        - "+", "-", "*", "/": operador
        - "Enter", "=": igual
        - "Backspace": retroceso
        - "Delete", "Escape": borrar todo
    """
    if key is None:
        return None
    if len(key) == 1 and key in DIGITS:
        return Action.digit(key)
    if key == "." or (key == "," and accept_comma):
        return Action.decimal()
    if len(key) == 1 and key in OPERATOR_KEYS:
        return Action.operator(key)
    if key in ("Enter", "="):
        return Action.equals()
    if key == "Backspace":
        return Action.backspace()
    if key in ("Delete", "Escape"):
        return Action.clear()
    return None


def action_for_button(value):
    """Traduce el valor de un botón en pantalla en una acción."""
    if not value:
        return None
    if len(value) == 1 and value in DIGITS:
        return Action.digit(value)
    if value == ".":
        return Action.decimal()
    if len(value) == 1 and value in OPERATOR_KEYS:
        return Action.operator(value)
    if value == "=":
        return Action.equals()
    if value == CLEAR_BUTTON:
        return Action.clear()
    if value == BACKSPACE_BUTTON:
        return Action.backspace()
    return None
