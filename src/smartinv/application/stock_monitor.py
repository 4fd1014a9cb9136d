"""Background low-stock monitor.

Runs on a daemon thread next to the interactive command loop. Every
``interval`` seconds it asks the InventoryService for a low-stock scan
and, when anything is low, hands the count to ``on_alert``.

The wait happens on a ``threading.Event`` outside any lock, so
``stop()`` interrupts a sleeping monitor immediately and the foreground
thread is never blocked by it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum

from smartinv.domain.exceptions import ValidationError
from smartinv.domain.service.inventory_service import (
    LOW_STOCK_THRESHOLD,
    InventoryService,
)

logger = logging.getLogger(__name__)

DEFAULT_MONITOR_INTERVAL = 30.0


class MonitorState(Enum):
    CREATED = "CREATED"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"


def log_alert(count: int) -> None:
    logger.warning("[Background Alert] %d product(s) running low on stock!", count)


class StockMonitor:
    """Periodic reader bound to one InventoryService.

    States: CREATED -> RUNNING -> STOPPED. Stopping is one-way; a
    stopped monitor cannot be started again.
    """

    def __init__(
        self,
        service: InventoryService,
        interval: float = DEFAULT_MONITOR_INTERVAL,
        threshold: int = LOW_STOCK_THRESHOLD,
        on_alert: Callable[[int], None] = log_alert,
    ) -> None:
        if interval <= 0:
            raise ValidationError("Monitor interval must be positive")
        self._service = service
        self._interval = interval
        self._threshold = threshold
        self._on_alert = on_alert
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._state = MonitorState.CREATED
        self._state_lock = threading.Lock()
        self.checks = 0

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == MonitorState.RUNNING

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> None:
        with self._state_lock:
            if self._state != MonitorState.CREATED:
                raise ValidationError(
                    f"Cannot start monitor — current state is {self._state.value}"
                )
            self._thread = threading.Thread(
                target=self._run, name="stock-monitor", daemon=True
            )
            self._state = MonitorState.RUNNING
            self._thread.start()
        logger.info(
            "Stock monitor started (every %ss, threshold %d)",
            self._interval, self._threshold,
        )

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to end and wait for the thread.

        Safe to call more than once, and on a monitor that never started.
        """
        with self._state_lock:
            if self._state == MonitorState.STOPPED:
                return
            self._state = MonitorState.STOPPED
            self._stop_event.set()
            thread = self._thread

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.info("Stock monitor stopped after %d check(s)", self.checks)

    def __enter__(self) -> StockMonitor:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    # --- Loop -----------------------------------------------------------------

    def check_once(self) -> int:
        """Run one scan and alert if needed. Returns the low-stock count."""
        low = self._service.low_stock_scan(self._threshold)
        self.checks += 1
        if low:
            self._on_alert(len(low))
        return len(low)

    def _run(self) -> None:
        # wait() returns True as soon as stop() sets the event
        while not self._stop_event.wait(self._interval):
            try:
                self.check_once()
            except Exception:
                logger.exception("Stock monitor check failed")
