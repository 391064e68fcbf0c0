"""
Temporizadores de un solo disparo para el bucle principal.

La aplicación es de un solo hilo: no hay hilos de temporizador. El bucle
principal llama a FrameScheduler.run_pending() en cada frame y ahí se
ejecutan los callbacks cuyo plazo ya venció.
"""

import time


class TimerHandle:
    """
    Referencia a un callback programado.

    cancel() es idempotente; un handle cancelado o ya disparado nunca
    vuelve a ejecutarse.
    """

    def __init__(self, scheduler, deadline, callback):
        self._scheduler = scheduler
        self.deadline = deadline
        self._callback = callback
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self):
        return self._cancelled

    @property
    def fired(self):
        return self._fired

    @property
    def active(self):
        return not (self._cancelled or self._fired)

    def cancel(self):
        if self.active:
            self._cancelled = True
            self._scheduler._discard(self)

    def _fire(self):
        self._fired = True
        self._callback()


# ============================================================================
# CLASE: FrameScheduler
# Propósito: Programar callbacks diferidos dentro del bucle de frames
# Responsabilidades:
#   - Registrar callbacks con un retardo en segundos
#   - Ejecutar los vencidos cuando el bucle llama a run_pending()
#   - Permitir cancelar cualquier callback pendiente
# ============================================================================
class FrameScheduler:
    """
    Planificador cooperativo dirigido por el bucle de frames.

    Modelo de operación:
        1. call_later(delay, callback) → devuelve TimerHandle
        2. El bucle llama run_pending() una vez por frame (~30 FPS)
        3. Los callbacks vencidos se ejecutan en orden de plazo

    El reloj es inyectable para poder avanzar el tiempo en las pruebas.
    """

    def __init__(self, clock=None):
        """
        Args:
            clock (callable): Función sin argumentos que devuelve segundos
                              (por defecto time.monotonic)
        """
        self.clock = clock if clock else time.monotonic
        self._handles = []

    def call_later(self, delay, callback):
        """
        Programa un callback.

        Args:
            delay (float): Segundos hasta el disparo
            callback (callable): Función sin argumentos

        Returns:
            TimerHandle: Handle para cancelar el disparo
        """
        handle = TimerHandle(self, self.clock() + delay, callback)
        self._handles.append(handle)
        return handle

    def run_pending(self):
        """
        Ejecuta los callbacks vencidos.

        Returns:
            int: Número de callbacks ejecutados
        """
        now = self.clock()
        due = [h for h in self._handles if h.deadline <= now]
        if not due:
            return 0
        due.sort(key=lambda h: h.deadline)
        for handle in due:
            self._discard(handle)
        fired = 0
        for handle in due:
            # Un callback anterior pudo cancelar este handle
            if handle.active:
                handle._fire()
                fired += 1
        return fired

    @property
    def pending(self):
        """Número de callbacks programados que aún no se ejecutaron."""
        return len(self._handles)

    def _discard(self, handle):
        if handle in self._handles:
            self._handles.remove(handle)
