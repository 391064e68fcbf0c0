"""Formateo del texto que se muestra en el display."""

MAX_DISPLAY_LENGTH = 12
OVERFLOW_MARKER = "…"


def format_display(current_input, max_length=MAX_DISPLAY_LENGTH, marker=OVERFLOW_MARKER):
    """
    Obtiene el texto a mostrar para una entrada.

    Args:
        current_input (str): Entrada actual (puede estar vacía)
        max_length (int): Caracteres máximos antes de truncar
        marker (str): Marca añadida al truncar

    Returns:
        str: Entrada, "0" si está vacía, o sus primeros max_length
             caracteres seguidos de la marca si es más larga

    El truncado es solo visual: current_input no se modifica.
    """
    text = current_input or "0"
    if len(text) > max_length:
        return text[:max_length] + marker
    return text
