"""
Transition state machine for the view switcher.

Owns the front index, the progress ratio and the single active animation
clock. The clock is advanced by the host through ``tick`` so no timers or
threads live in here.
"""
import logging
import math
from enum import Enum
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SWITCH_DURATION_MS = 500


def linear(fraction: float) -> float:
    return fraction


def accelerate_decelerate(fraction: float) -> float:
    """Cosine ease that starts and ends slowly."""
    return math.cos((fraction + 1) * math.pi) / 2 + 0.5


# Easing curves applied to the clock fraction before it becomes progress
EASING_CURVES: Dict[str, Callable[[float], float]] = {
    "linear": linear,
    "accelerate_decelerate": accelerate_decelerate,
}

DEFAULT_EASING = "accelerate_decelerate"


class TransitionState(Enum):
    """Lifecycle of the switch animation."""
    IDLE = "idle"
    ANIMATING_FORWARD = "animating_forward"
    ANIMATING_BACKWARD = "animating_backward"


class SwitchTransition:
    """
    Front index and progress bookkeeping across switch requests.

    Only one transition runs at a time; requests made while one is active
    are rejected rather than queued. A forward switch advances the front
    index when it completes, a backward switch moves it back up front and
    then plays the animation in reverse.
    """

    def __init__(
        self,
        duration_ms: float = DEFAULT_SWITCH_DURATION_MS,
        easing: str = DEFAULT_EASING
    ) -> None:
        """
        Initialize the state machine in the idle state.

        Args:
            duration_ms: Length of one switch animation
            easing: Name of an entry in EASING_CURVES
        """
        self.duration_ms = duration_ms
        self.easing = easing
        self.front_index = 0
        self.progress = 0.0
        self._state = TransitionState.IDLE
        self._elapsed_ms = 0.0
        self._start_progress = 0.0
        self._end_progress = 0.0

    @property
    def easing(self) -> str:
        return self._easing_name

    @easing.setter
    def easing(self, name: str) -> None:
        if name not in EASING_CURVES:
            logger.warning("Unknown easing curve '%s', using %s", name, DEFAULT_EASING)
            name = DEFAULT_EASING
        self._easing_name = name
        self._easing: Callable[[float], float] = EASING_CURVES[name]

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is not TransitionState.IDLE

    def switch_forward(self, card_count: int) -> bool:
        """
        Start sliding the front card to the back of the stack.

        Args:
            card_count: Number of cards currently stacked

        Returns:
            True if the transition started
        """
        if self.is_running:
            return False

        if self.front_index >= card_count - 1:
            return False

        self._start(TransitionState.ANIMATING_FORWARD, 0.0, 1.0)
        logger.debug("Forward switch started from front index %d", self.front_index)
        return True

    def switch_back(self) -> bool:
        """
        Bring the previous card back to the front.

        The front index moves immediately and the progress jumps to 1, so
        the animation plays the forward transition in reverse.

        Returns:
            True if the transition started
        """
        if self.is_running:
            return False

        if self.front_index <= 0:
            return False

        self.front_index -= 1
        self.progress = 1.0
        self._start(TransitionState.ANIMATING_BACKWARD, 1.0, 0.0)
        logger.debug("Backward switch started to front index %d", self.front_index)
        return True

    def set_front_index(self, index: int) -> None:
        """
        Jump straight to a front index, dropping any running animation.

        Args:
            index: New front index
        """
        if self.is_running:
            logger.debug("Cancelling %s transition", self._state.value)
        self._state = TransitionState.IDLE
        self.front_index = index
        self.progress = 0.0

    def tick(self, delta_ms: float) -> bool:
        """
        Advance the animation clock.

        Args:
            delta_ms: Milliseconds elapsed since the previous tick

        Returns:
            True while a transition is still running
        """
        if not self.is_running:
            return False

        self._elapsed_ms += max(0.0, delta_ms)

        if self.duration_ms <= 0:
            fraction = 1.0
        else:
            fraction = min(1.0, self._elapsed_ms / self.duration_ms)

        eased = self._easing(fraction)
        self.progress = self._start_progress + (self._end_progress - self._start_progress) * eased

        if fraction >= 1.0:
            self._finish()
            return False

        return True

    def _start(self, state: TransitionState, start: float, end: float) -> None:
        self._state = state
        self._elapsed_ms = 0.0
        self._start_progress = start
        self._end_progress = end

    def _finish(self) -> None:
        forward = self._state is TransitionState.ANIMATING_FORWARD
        self._state = TransitionState.IDLE
        self.progress = 0.0

        if forward:
            self.front_index += 1

        logger.debug("Switch finished, front index %d", self.front_index)

    def get_state_summary(self) -> dict[str, str | int | float]:
        """
        Get summary of the transition state for debugging.

        Returns:
            Dictionary with transition state information
        """
        return {
            'state': self._state.value,
            'front_index': self.front_index,
            'progress': self.progress,
            'elapsed_ms': self._elapsed_ms,
            'duration_ms': self.duration_ms,
            'easing': self._easing_name
        }
