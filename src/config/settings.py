"""
Configuración de la calculadora de teclado.

Este módulo contiene los valores por defecto del display, del reinicio
automático tras un error y de la ventana de OpenCV.
"""


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración centralizada de la calculadora
# Responsabilidades:
#   - Almacenar límites del display (longitud máxima, marca de truncado)
#   - Definir el retardo del borrado automático tras un error
#   - Configurar tamaño, colores y ritmo de la ventana
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Opciones disponibles:
        - Display: longitud máxima, marca de truncado, texto de error
        - Error: segundos hasta el borrado automático
        - Teclado: aceptar "," como separador decimal
        - Ventana: tamaño, colores y espera entre frames
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.max_display_length = 12        # Caracteres visibles antes de truncar
        self.overflow_marker = "…"          # Marca añadida al truncar
        self.error_text = "Error"           # Texto mostrado al dividir entre cero

        # ====================================================================
        # ERROR
        # ====================================================================
        self.error_reset_delay = 1.2        # Segundos hasta el borrado automático

        # ====================================================================
        # TECLADO
        # ====================================================================
        self.accept_comma_decimal = True    # "," también introduce el decimal

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.window_width = 360
        self.window_height = 540
        self.frame_delay_ms = 30            # Espera de waitKey (~30 FPS)
        self.flash_frames = 6               # Frames que se resalta un botón pulsado

        # Colores BGR
        self.background_color = (30, 30, 30)
        self.display_color = (45, 45, 45)
        self.text_color = (255, 255, 255)
        self.result_color = (100, 255, 100)
        self.error_color = (100, 100, 255)
        self.digit_button_color = (70, 70, 70)
        self.operator_button_color = (0, 140, 255)
        self.control_button_color = (110, 110, 110)
        self.flash_color = (200, 200, 200)
