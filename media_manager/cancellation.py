"""
Cooperative cancellation shared between the interrupt handler and the walker.
"""
import logging
import signal
import threading
from typing import Callable


class CancellationToken:
    """
    One-way flag: once cancelled it stays cancelled.
    Safe to set from a signal handler or another thread.
    """
    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


def install_interrupt_handler(token: CancellationToken) -> Callable[[], None]:
    """
    Routes SIGINT (Ctrl-C) to `token` instead of raising KeyboardInterrupt.
    Returns a callable that restores the previous handler.
    """
    def _on_interrupt(signum, frame):
        logging.info("Shutting down...")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _on_interrupt)

    def restore():
        signal.signal(signal.SIGINT, previous)

    return restore
