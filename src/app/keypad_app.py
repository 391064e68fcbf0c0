"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase KeypadCalculatorApp.
"""

import cv2

from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.scheduler import FrameScheduler
from ui.keymap import action_for_button, action_for_key, key_name
from ui.renderer import KeypadRenderer


QUIT_KEYS = ("q", "Q")


# ============================================================================
class KeypadCalculatorApp:
    """
    Aplicación de calculadora con teclado en pantalla.

    Arquitectura:
        - Calculator: Máquina de estados y aritmética
        - FrameScheduler: Borrado automático tras un error
        - KeypadRenderer: Dibujo del display y del teclado
        - KeypadCalculatorApp: Coordinador y bucle principal

    Entrada:
        - Clic izquierdo sobre un botón
        - Teclado: dígitos, . , + - * /, Enter/=, Backspace, Delete/Escape
    """

    def __init__(self, config=None, clock=None):
        """
        Inicializa los componentes. La ventana se abre en run().

        Args:
            config (CalculatorConfig): Configuración (opcional)
            clock (callable): Reloj del scheduler (opcional, para pruebas)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height

        self.display_text = "0"                      # Último texto recibido
        self.scheduler = FrameScheduler(clock)       # Timers del bucle
        self.calc = Calculator(render=self.show, scheduler=self.scheduler, config=self.config)
        self.ui = KeypadRenderer(self.width, self.height, self.config)
        self.running = False

        # Estado inicial en el display
        self.calc.clear()

    def show(self, text):
        """Callback render de la calculadora."""
        self.display_text = text

    def handle_key(self, code):
        """
        Procesa un código de tecla de cv2.waitKeyEx.

        Returns:
            bool: True si la tecla produjo una acción
        """
        name = key_name(code)
        if name in QUIT_KEYS:
            self.running = False
            return False
        action = action_for_key(name, self.config.accept_comma_decimal)
        if action is None:
            return False
        self.calc.dispatch(action)
        return True

    def handle_click(self, x, y):
        """
        Procesa un clic sobre la ventana.

        Returns:
            bool: True si el clic cayó sobre un botón
        """
        value = self.ui.button_at(x, y)
        action = action_for_button(value)
        if action is None:
            return False
        self.ui.flash(value)
        self.calc.dispatch(action)
        return True

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def tick(self):
        """Un frame: timers vencidos y dibujo. Retorna la imagen."""
        self.scheduler.run_pending()
        return self.ui.render(self.display_text, self.calc)

    def _window_closed(self):
        return cv2.getWindowProperty(self.config.window_title, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ejecutar timers vencidos (borrado tras error)
            2. Dibujar display y teclado
            3. Mostrar frame y procesar teclado
            4. Repetir hasta 'q' o cerrar la ventana
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nClic en los botones o usa el teclado:")
        print("  0-9 . ,    Números y decimal")
        print("  + - * /    Operaciones")
        print("  Enter =    Calcular")
        print("  Backspace  Borrar último")
        print("  Supr Esc   Borrar todo")
        print("\nPresiona 'q' o cierra la ventana para salir")
        print("=" * 50 + "\n")

        cv2.namedWindow(self.config.window_title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(self.config.window_title, self._on_mouse)
        print(f"OK Ventana: {self.width}x{self.height}")

        self.running = True
        try:
            while self.running:
                frame = self.tick()
                cv2.imshow(self.config.window_title, frame)

                key = cv2.waitKeyEx(self.config.frame_delay_ms)
                if key != -1:
                    self.handle_key(key)

                if self._window_closed():
                    break
        finally:
            cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
