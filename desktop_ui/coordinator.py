"""
Qt bridge for the view switcher.

Drives the switcher's animation clock from a QTimer on the GUI thread and
turns switcher events into Qt signals. Only needs QtCore, so it also runs
under a QCoreApplication.
"""
import logging
from typing import Any, Optional

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal, Slot

from switcher_core.data_models import InvalidationKind, LayoutParameters, SwitcherEvent
from switcher_core.view_switcher import ViewSwitcher
from config.base import BaseConfiguration

logger = logging.getLogger(__name__)


class SwitcherCoordinator(QObject):
    """
    Coordinates a ViewSwitcher with the Qt event loop.

    Starts the frame timer when a switch begins and stops it as soon as the
    switcher reports the transition finished.
    """

    # Qt signals for UI communication
    layoutRequested = Signal()
    repaintRequested = Signal()
    frontIndexChanged = Signal(int)
    switchFinished = Signal(int)  # front index after the switch

    def __init__(self, config: Optional[BaseConfiguration] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.config = config

        if config is not None:
            self.switcher = ViewSwitcher(
                config.layout_parameters,
                switch_duration_ms=config.switch_duration_ms,
                easing=config.easing
            )
            frame_interval = config.frame_interval_ms
        else:
            self.switcher = ViewSwitcher(LayoutParameters())
            frame_interval = 16

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(frame_interval)
        self._frame_timer.timeout.connect(self._on_frame)
        self._clock = QElapsedTimer()

        self.switcher.add_listener(self._on_switcher_event)

        logger.info("Switcher coordinator initialized (frame interval %d ms)", frame_interval)

    @property
    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    @property
    def frontIndex(self) -> int:
        return self.switcher.get_front_index()

    @Slot(result=bool)
    def switchForward(self) -> bool:
        """Start a forward switch; False if rejected."""
        if not self.switcher.switch_forward():
            logger.debug("Forward switch rejected at front index %d", self.frontIndex)
            return False
        self._start_clock()
        return True

    @Slot(result=bool)
    def switchBack(self) -> bool:
        """Start a backward switch; False if rejected."""
        if not self.switcher.switch_back():
            logger.debug("Backward switch rejected at front index %d", self.frontIndex)
            return False
        self._start_clock()
        return True

    @Slot(int)
    def setFrontIndex(self, index: int) -> None:
        self._frame_timer.stop()
        self.switcher.set_front_index(index)

    def advance(self, delta_ms: float) -> bool:
        """
        Advance the running switch by an explicit amount of time.

        Args:
            delta_ms: Milliseconds to advance

        Returns:
            True while the switch is still running
        """
        if not self.switcher.is_switching:
            self._frame_timer.stop()
            return False

        running = self.switcher.tick(delta_ms)
        if not running:
            self._frame_timer.stop()
            self.switchFinished.emit(self.frontIndex)
        return running

    def _start_clock(self) -> None:
        self._clock.start()
        self._frame_timer.start()

    def _on_frame(self) -> None:
        delta_ms = self._clock.restart()
        self.advance(delta_ms)

    def _on_switcher_event(self, event: SwitcherEvent) -> None:
        """Translate switcher events into Qt signals."""
        if event.kind == InvalidationKind.RELAYOUT:
            self.layoutRequested.emit()
        elif event.kind == InvalidationKind.REPAINT:
            self.repaintRequested.emit()
        elif event.kind == InvalidationKind.FRONT_CHANGED:
            self.frontIndexChanged.emit(event.front_index)

    def get_state_summary(self) -> dict[str, Any]:
        summary = self.switcher.get_state_summary()
        summary['frame_timer_active'] = self.is_animating
        return summary

    def cleanup(self) -> None:
        """Stop the frame clock and detach from the switcher."""
        logger.info("Cleaning up switcher coordinator")
        self._frame_timer.stop()
        self.switcher.remove_listener(self._on_switcher_event)
