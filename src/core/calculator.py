"""
Lógica de calculadora aritmética básica.

Este módulo contiene la máquina de estados que gestiona la entrada de
dígitos, el encadenamiento de operadores, el igual, el borrado y el
retroceso, y que notifica el texto del display tras cada acción.
"""

from config.settings import CalculatorConfig
from core.actions import ActionKind
from core.display import format_display
from core.operations import DivisionByZeroError, format_number, parse_number
from core.scheduler import FrameScheduler


class CalculatorState:
    """
    Estado de la calculadora.

    Variables de estado:
        - current_input: Número que se está escribiendo o último resultado
        - previous_value: Operando izquierdo pendiente (float o None)
        - operator: Operator pendiente o None
        - result_displayed: True si current_input es un resultado recién calculado
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.current_input = ""
        self.previous_value = None
        self.operator = None
        self.result_displayed = False

    def snapshot(self):
        return (self.current_input, self.previous_value, self.operator, self.result_displayed)

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self):
        return (
            f"CalculatorState(current_input={self.current_input!r}, "
            f"previous_value={self.previous_value!r}, operator={self.operator!r}, "
            f"result_displayed={self.result_displayed!r})"
        )


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir números dígito a dígito (un solo punto decimal)
#   - Evaluar operaciones de izquierda a derecha, sin precedencia
#   - Mostrar "Error" al dividir entre cero y borrar tras un retardo
#   - Notificar el texto del display mediante el callback render
# ============================================================================
class Calculator:
    """
    Calculadora de cuatro operaciones con encadenamiento.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_input
        2. Usuario pulsa un operador → current_input pasa a previous_value
           (si ya había operador pendiente, se evalúa primero)
        3. Usuario ingresa el segundo operando
        4. Usuario pulsa = → se calcula y el resultado queda en current_input

    Tras cada acción que cambia el estado se invoca render(texto). Un error
    de división entre cero muestra "Error" y programa un borrado completo
    en el scheduler; cualquier acción posterior cancela ese borrado, lo
    ejecuta en el momento y después se procesa con normalidad.
    """

    def __init__(self, render=None, scheduler=None, config=None):
        """
        Args:
            render (callable): Recibe el texto del display tras cada acción
            scheduler (FrameScheduler): Planificador del borrado automático
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.scheduler = scheduler if scheduler else FrameScheduler()
        self.render = render if render else (lambda text: None)
        self.state = CalculatorState()
        self._reset_timer = None  # Único borrado automático pendiente

        self._handlers = {
            ActionKind.DIGIT: self.input_digit,
            ActionKind.DECIMAL: self.input_decimal,
            ActionKind.OPERATOR: self.input_operator,
            ActionKind.EQUALS: self.equals,
            ActionKind.CLEAR: self.clear,
            ActionKind.BACKSPACE: self.backspace,
        }

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------
    def dispatch(self, action):
        """Ejecuta una Action construida por un adaptador."""
        handler = self._handlers[action.kind]
        if action.value is None:
            handler()
        else:
            handler(action.value)

    def input_digit(self, digit):
        """
        Añade un dígito a la entrada actual.

        Args:
            digit (str): Carácter "0"-"9" ya validado (ver Action.digit)

        Comportamiento:
            - Si hay resultado mostrado: empieza una entrada nueva
            - Si la entrada es exactamente "0": se reemplaza (sin ceros a la izquierda)
            - En otro caso: se añade al final
        """
        self._recover_from_error()
        state = self.state
        self._start_new_entry_if_result()
        if state.current_input == "0":
            state.current_input = digit
        else:
            state.current_input += digit
        self._refresh()

    def input_decimal(self):
        """
        Añade el punto decimal a la entrada actual.

        Comportamiento:
            - Si la entrada está vacía: queda "0."
            - Si ya tiene punto: no cambia (un solo decimal permitido)
        """
        self._recover_from_error()
        state = self.state
        self._start_new_entry_if_result()
        if "." not in state.current_input:
            state.current_input = (state.current_input or "0") + "."
        self._refresh()

    def input_operator(self, op):
        """
        Fija el operador pendiente.

        Args:
            op (Operator): Operador a aplicar

        Comportamiento:
            1. Operador pendiente y nuevo operando: evalúa la operación
               pendiente y guarda el resultado en previous_value
            2. Sin operador pendiente y con entrada: la entrada pasa a
               previous_value
            3. Sin entrada: solo se guarda o cambia el operador (sin valor
               previo, = no hará nada hasta que se encadene otro operador)

        Ejemplo de flujo:
            "2" → + → "3" → * → previous_value=5.0, operator=MULTIPLY
        """
        self._recover_from_error()
        state = self.state
        if state.operator is not None and state.current_input:
            try:
                state.previous_value = self._evaluate()
            except DivisionByZeroError:
                self._show_error()
                return
        elif state.current_input:
            state.previous_value = parse_number(state.current_input)
        state.operator = op
        state.current_input = ""
        state.result_displayed = False
        self._refresh()

    def equals(self):
        """
        Calcula el resultado de la operación pendiente.

        Sin operador, sin valor previo o sin segundo operando no hace
        nada (tampoco refresca el display).
        """
        self._recover_from_error()
        state = self.state
        if state.operator is None or state.previous_value is None or not state.current_input:
            return
        try:
            result = self._evaluate()
        except DivisionByZeroError:
            self._show_error()
            return
        state.current_input = format_number(result)
        state.previous_value = None
        state.operator = None
        state.result_displayed = True
        self._refresh()

    def clear(self):
        """Borra todo el estado (C) y muestra "0"."""
        self._cancel_reset_timer()
        self.state.reset()
        self._refresh()

    def backspace(self):
        """
        Borra el último carácter de la entrada (←).

        Un resultado no se borra a medias: si hay resultado mostrado,
        equivale a clear(). Con la entrada vacía no hace nada.
        """
        self._recover_from_error()
        state = self.state
        if state.result_displayed:
            self.clear()
            return
        if state.current_input:
            state.current_input = state.current_input[:-1]
            self._refresh()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    @property
    def display_text(self):
        """Texto del display derivado del estado (sin contar el error)."""
        return format_display(
            self.state.current_input,
            self.config.max_display_length,
            self.config.overflow_marker,
        )

    @property
    def error_pending(self):
        """True mientras se muestra "Error" a la espera del borrado."""
        return self._reset_timer is not None and self._reset_timer.active

    def _refresh(self):
        self.render(self.display_text)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _start_new_entry_if_result(self):
        if self.state.result_displayed:
            self.state.current_input = ""
            self.state.result_displayed = False

    def _evaluate(self):
        state = self.state
        # Sin valor previo (operador pulsado antes de escribir) el operando izquierdo es 0
        left = 0.0 if state.previous_value is None else state.previous_value
        return state.operator.apply(left, parse_number(state.current_input))

    def _show_error(self):
        """Muestra el error y programa el borrado automático."""
        self.render(self.config.error_text)
        self._cancel_reset_timer()
        self._reset_timer = self.scheduler.call_later(
            self.config.error_reset_delay, self._auto_clear
        )

    def _auto_clear(self):
        self._reset_timer = None
        self.clear()

    def _recover_from_error(self):
        # Una acción durante el error adelanta el borrado pendiente
        if self.error_pending:
            self.clear()

    def _cancel_reset_timer(self):
        if self._reset_timer is not None:
            self._reset_timer.cancel()
            self._reset_timer = None
