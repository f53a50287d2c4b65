"""
Host-facing view switcher.

Ties the card collection, layout parameters, layout planner, transition
state machine and transform engine together behind one instance-scoped
object. No UI framework dependencies - hosts listen for invalidation events
and query transforms and paint order at paint time.
"""
import logging
from typing import Any, Callable, List, Optional, Tuple

from .data_models import (
    CardDrawInfo, CardPlacement, CardSurface, CardTransform, InvalidationKind,
    LayoutParameters, SwitcherEvent
)
from .ui_logic.stack_layout import StackLayout
from .ui_logic.stack_order import draw_order, paint_sequence, stack_order
from .ui_logic.transform_engine import TransformInputs, compute_card_transform
from .ui_logic.transition import DEFAULT_EASING, DEFAULT_SWITCH_DURATION_MS, SwitchTransition

logger = logging.getLogger(__name__)

# Type alias for switcher event callbacks
SwitcherCallback = Callable[[SwitcherEvent], None]


class ViewSwitcher:
    """
    Stack of cards with an animated front card.

    Cards are stacked in insertion order: the front card is drawn on top
    and the cards after it recede to the right, wrapping around the end of
    the collection.
    """

    def __init__(
        self,
        parameters: Optional[LayoutParameters] = None,
        switch_duration_ms: float = DEFAULT_SWITCH_DURATION_MS,
        easing: str = DEFAULT_EASING
    ) -> None:
        """
        Initialize an empty switcher.

        Args:
            parameters: Layout ratios (defaults if None)
            switch_duration_ms: Length of one switch animation
            easing: Easing curve name for the switch animation
        """
        self.parameters = parameters or LayoutParameters()
        self.stack_layout = StackLayout(self.parameters)
        self.transition = SwitchTransition(switch_duration_ms, easing)
        self._draw_infos: List[CardDrawInfo] = []
        self._callbacks: List[SwitcherCallback] = []
        self._placements: List[CardPlacement] = []

    # ------------------------------------------------------------------
    # Listeners

    def add_listener(self, callback: SwitcherCallback) -> None:
        """
        Register callback for invalidation events.

        Args:
            callback: Function to call when the host has to relayout or repaint
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove_listener(self, callback: SwitcherCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify(self, kind: InvalidationKind, **details: Any) -> None:
        event = SwitcherEvent(
            kind=kind,
            front_index=self.transition.front_index,
            progress=self.transition.progress,
            details=details
        )

        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception as e:
                # Listener failures must not break the animation
                logger.error("Switcher listener error: %s", e)

    def request_layout(self) -> None:
        self._notify(InvalidationKind.RELAYOUT)

    def invalidate(self) -> None:
        self._notify(InvalidationKind.REPAINT)

    # ------------------------------------------------------------------
    # Collection

    @property
    def cards(self) -> List[CardSurface]:
        return [info.card for info in self._draw_infos]

    @property
    def card_count(self) -> int:
        return len(self._draw_infos)

    def get_draw_info(self, index: int) -> CardDrawInfo:
        return self._draw_infos[index]

    def add_card(self, card: CardSurface, index: Optional[int] = None) -> int:
        """
        Add a card to the stack.

        Args:
            card: Card to add, must provide ``height_for_width``
            index: Position to insert at, appended if None

        Returns:
            Collection index of the new card
        """
        if index is None or index >= len(self._draw_infos):
            index = len(self._draw_infos)
        index = max(0, index)

        self._draw_infos.insert(index, CardDrawInfo(card=card, index=index))
        self._reindex()

        logger.debug("Card added at index %d (%d cards)", index, self.card_count)
        self.request_layout()
        return index

    def remove_card(self, card: Any) -> bool:
        """
        Remove a card and discard its draw info.

        Args:
            card: Card to remove

        Returns:
            True if the card was stacked
        """
        for info in self._draw_infos:
            if info.card is card:
                self.remove_card_at(info.index)
                return True
        return False

    def remove_card_at(self, index: int) -> Optional[Any]:
        """
        Remove the card at a collection index.

        Out-of-range indices, negative ones included, are ignored.

        Args:
            index: Collection index of the card

        Returns:
            The removed card, or None if nothing was stacked at ``index``
        """
        if index < 0 or index >= self.card_count:
            logger.warning("Cannot remove card at index %d (%d cards)", index, self.card_count)
            return None

        info = self._draw_infos.pop(index)
        self._reindex()
        previous = self._clamp_front_index()

        logger.debug("Card removed from index %d (%d cards)", index, self.card_count)
        self.request_layout()
        if self.transition.front_index != previous:
            self._notify(InvalidationKind.FRONT_CHANGED, previous=previous)
        return info.card

    def clear_cards(self) -> None:
        self._draw_infos.clear()
        self._placements = []
        self.transition.set_front_index(0)
        self.request_layout()

    def _reindex(self) -> None:
        for index, info in enumerate(self._draw_infos):
            info.index = index

    def _clamp_front_index(self) -> int:
        """Pull the front index back into the collection, returning the old one."""
        previous = self.transition.front_index
        last = max(0, self.card_count - 1)
        if previous > last:
            self.transition.front_index = last
        return previous

    # ------------------------------------------------------------------
    # Measurement and layout

    def measure(self, available_width: float, available_height: float) -> Tuple[float, float]:
        """
        Measure the switcher and every card.

        Cards are measured at exactly the card width with an unconstrained
        height.

        Args:
            available_width: Width offered by the host
            available_height: Height offered by the host

        Returns:
            Tuple of (width, height) the switcher occupies
        """
        size = self.stack_layout.measure(available_width, available_height)
        card_width = self.stack_layout.geometry.card_width

        for info in self._draw_infos:
            info.measured_width = card_width
            info.measured_height = info.card.height_for_width(card_width)

        return size

    def layout(self) -> List[CardPlacement]:
        """
        Place the measured cards and recompute the stack offset.

        Returns:
            List of CardPlacement objects by collection index
        """
        heights = [info.measured_height for info in self._draw_infos]
        self._placements = self.stack_layout.layout(heights)

        for info, placement in zip(self._draw_infos, self._placements):
            info.placement = placement

        logger.debug(
            "Layout: %d cards, card width %.1f, stack offset %.1f",
            self.card_count, self.stack_layout.geometry.card_width, self.stack_offset
        )
        return list(self._placements)

    @property
    def placements(self) -> List[CardPlacement]:
        return list(self._placements)

    @property
    def card_width(self) -> float:
        return self.stack_layout.geometry.card_width

    @property
    def stack_offset(self) -> float:
        return self.stack_layout.geometry.stack_offset

    # ------------------------------------------------------------------
    # Parameters

    def set_vertical_position_ratio(self, ratio: float) -> None:
        self.parameters.vertical_position_ratio = ratio
        self.request_layout()

    def set_horizontal_padding_ratio(self, ratio: float) -> None:
        self.parameters.horizontal_padding_ratio = ratio
        self.request_layout()

    def set_stack_placement_area_portion(self, portion: float) -> None:
        self.parameters.stack_placement_area_portion = portion
        self.stack_layout.refresh_stack_offset(self.card_count)
        self.invalidate()

    def set_stack_smallest_size_ratio(self, ratio: float) -> None:
        self.parameters.stack_smallest_size_ratio = ratio
        self.invalidate()

    def set_stack_alpha(self, alpha: float) -> None:
        self.parameters.stack_alpha = alpha
        self.invalidate()

    # ------------------------------------------------------------------
    # Switching

    @property
    def progress(self) -> float:
        return self.transition.progress

    @property
    def is_switching(self) -> bool:
        return self.transition.is_running

    def get_front_index(self) -> int:
        return self.transition.front_index

    def set_front_index(self, index: int) -> None:
        """
        Make a card the front card without animating.

        Any running switch is cancelled and its completion skipped.
        Out-of-range indices are clamped.

        Args:
            index: Collection index of the new front card
        """
        last = max(0, self.card_count - 1)
        if index < 0 or index > last:
            logger.warning("Front index %d out of range, clamping to [0, %d]", index, last)
            index = min(max(index, 0), last)

        previous = self.transition.front_index
        self.transition.set_front_index(index)

        self.invalidate()
        if index != previous:
            self._notify(InvalidationKind.FRONT_CHANGED, previous=previous)

    def switch_forward(self) -> bool:
        """
        Animate the front card to the back of the stack.

        Returns:
            False if a switch is running or the front card is the last one
        """
        if not self.transition.switch_forward(self.card_count):
            return False
        self.invalidate()
        return True

    def switch_back(self) -> bool:
        """
        Animate the previous card back to the front.

        Returns:
            False if a switch is running or the front card is the first one
        """
        previous = self.transition.front_index
        if not self.transition.switch_back():
            return False
        self.invalidate()
        self._notify(InvalidationKind.FRONT_CHANGED, previous=previous)
        return True

    def tick(self, delta_ms: float) -> bool:
        """
        Advance a running switch by one frame.

        Args:
            delta_ms: Milliseconds elapsed since the previous frame

        Returns:
            True while the switch is still running
        """
        if not self.transition.is_running:
            return False

        previous = self.transition.front_index
        running = self.transition.tick(delta_ms)
        self._clamp_front_index()

        self.invalidate()
        if self.transition.front_index != previous:
            self._notify(InvalidationKind.FRONT_CHANGED, previous=previous)
        return running

    # ------------------------------------------------------------------
    # Paint queries

    def get_order(self, index: int) -> int:
        return stack_order(self.card_count, index, self.transition.front_index)

    def draw_order(self, count: int, slot: int) -> int:
        """
        Card index to paint at a slot, back to front.

        Args:
            count: Number of cards being painted
            slot: Paint slot, 0 painted first

        Returns:
            Collection index of the card to paint at ``slot``
        """
        return draw_order(count, slot, self.transition.front_index, self.transition.progress)

    def paint_sequence(self) -> List[int]:
        return paint_sequence(self.card_count, self.transition.front_index, self.transition.progress)

    def transform_for(self, index: int) -> CardTransform:
        """
        Transform to paint a card with at the current progress.

        Args:
            index: Collection index of the card

        Returns:
            CardTransform relative to the card's resting placement
        """
        info = self._draw_infos[index]
        inputs = TransformInputs(
            count=self.card_count,
            progress=self.transition.progress,
            card_width=self.card_width,
            stack_offset=self.stack_offset,
            stack_alpha=self.parameters.stack_alpha,
            stack_smallest_size_ratio=self.parameters.stack_smallest_size_ratio
        )

        if info.placement is not None:
            width, height = info.placement.width, info.placement.height
        else:
            width, height = info.measured_width, info.measured_height

        return compute_card_transform(self.get_order(index), inputs, width, height)

    def get_state_summary(self) -> dict[str, Any]:
        """
        Get summary of switcher state for debugging.

        Returns:
            Dictionary with switcher state information
        """
        summary = {
            'card_count': self.card_count,
            'card_width': self.card_width,
            'stack_offset': self.stack_offset,
            'listener_count': len(self._callbacks),
        }
        summary.update(self.transition.get_state_summary())
        return summary
