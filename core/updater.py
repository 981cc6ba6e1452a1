"""Background updater that keeps the is_master gauge current.

Runs VIP detection once immediately and then at a fixed interval on a
dedicated daemon thread. Detection failures never stop the loop and never
change the gauge.
"""

import logging
import threading
from typing import Callable, Optional

from core.metrics import MasterGauge
from core.vip import VipCheckError, check_vip


logger = logging.getLogger(__name__)


class VipUpdater:
    """Periodically publishes VIP ownership to a MasterGauge."""

    def __init__(
        self,
        vip: str,
        gauge: MasterGauge,
        interval: float,
        check: Callable[[str], bool] = check_vip,
    ):
        self.vip = vip
        self.gauge = gauge
        self.interval = interval
        self._check = check
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def update(self) -> Optional[bool]:
        """Run one detection and publish the result.

        Returns:
            True/False when the VIP was found/not found, None when
            detection is disabled or failed (gauge left unchanged)
        """
        if not self.vip:
            return None

        try:
            has_vip = self._check(self.vip)
        except VipCheckError as e:
            logger.warning("VIP check failed, keeping previous state: %s", e)
            return None

        self.gauge.set_master(has_vip)
        logger.debug("VIP %s %s", self.vip, "present" if has_vip else "absent")
        return has_vip

    def _run(self) -> None:
        while True:
            try:
                self.update()
            except Exception:
                logger.exception("Unexpected error during VIP update")
            if self._stop.wait(min(self.interval, threading.TIMEOUT_MAX)):
                break

    def start(self) -> None:
        """Start the update thread; the first update runs immediately."""
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="vip-updater", daemon=True)
        self._thread.start()
        logger.info("VIP updater started (interval=%ss, vip=%r)", self.interval, self.vip)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the update thread to exit and wait for it."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
            logger.info("VIP updater stopped")
