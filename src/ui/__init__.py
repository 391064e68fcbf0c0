"""
Módulo de interfaz de usuario.
Contiene la traducción de teclas y botones a acciones; el renderizador
(ui.renderer) requiere OpenCV y se importa directamente.
"""

from .keymap import action_for_button, action_for_key, key_name

__all__ = ['action_for_button', 'action_for_key', 'key_name']
