# ============================================================================
# PUNTO DE ENTRADA - Calculadora de teclado
# ============================================================================
import traceback

from app.keypad_app import KeypadCalculatorApp
from config.settings import CalculatorConfig


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python3 src/main.py

    Returns:
        int: Código de salida
    """
    try:
        app = KeypadCalculatorApp(CalculatorConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
