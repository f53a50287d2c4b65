"""
Layout mathematics for the receding card stack.

Calculate the card width, the resting rectangle of every card and the
horizontal stagger between stacked ranks. No UI framework dependencies -
the host supplies the available size and each card's natural height.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..data_models import CardPlacement, LayoutParameters


@dataclass(slots=True)
class StackGeometry:
    """Result of the last layout pass."""
    available_width: float = 0.0
    available_height: float = 0.0
    card_width: float = 0.0
    card_left: float = 0.0
    stack_offset: float = 0.0


class StackLayout:
    """
    Manages layout calculations for stacked cards.

    Every card shares the same width and horizontal position; cards only
    differ by their measured height. Stacked ranks are spread over a portion
    of the free margin beside the cards.
    """

    def __init__(self, parameters: LayoutParameters) -> None:
        """
        Initialize stack layout with the given parameters.

        Args:
            parameters: Layout ratios, shared with the owning switcher
        """
        self.parameters = parameters
        self.geometry = StackGeometry()

    def get_card_width(self, available_width: float) -> float:
        """
        Width every card is measured and laid out at.

        Args:
            available_width: Width offered by the host

        Returns:
            Card width after horizontal padding
        """
        return available_width * (1 - 2 * self.parameters.horizontal_padding_ratio)

    def measure(self, available_width: float, available_height: float) -> Tuple[float, float]:
        """
        Run the measurement pass.

        Args:
            available_width: Width offered by the host
            available_height: Height offered by the host

        Returns:
            Tuple of (width, height) the switcher occupies
        """
        self.geometry.available_width = available_width
        self.geometry.available_height = available_height
        self.geometry.card_width = self.get_card_width(available_width)
        return (available_width, available_height)

    def get_card_top(self, card_height: float) -> float:
        """
        Vertical position of a card of the given height.

        Args:
            card_height: Measured height of the card

        Returns:
            Top coordinate inside the switcher
        """
        return (self.geometry.available_height - card_height) * self.parameters.vertical_position_ratio

    def get_stack_offset(self, card_count: int) -> float:
        """
        Horizontal stagger between two consecutive stack ranks.

        Args:
            card_count: Number of cards in the stack

        Returns:
            Offset in pixels, 0 for fewer than two cards
        """
        if card_count <= 1:
            return 0.0
        return self.geometry.card_left * self.parameters.stack_placement_area_portion / (card_count - 1)

    def layout(self, heights: Sequence[float]) -> List[CardPlacement]:
        """
        Place every card and refresh the stack offset.

        Args:
            heights: Measured height of each card, by collection index

        Returns:
            List of CardPlacement objects, one per card
        """
        card_width = self.geometry.card_width
        card_left = (self.geometry.available_width - card_width) / 2
        self.geometry.card_left = card_left

        placements = []
        for index, height in enumerate(heights):
            placements.append(CardPlacement(
                index=index,
                left=card_left,
                top=self.get_card_top(height),
                width=card_width,
                height=height
            ))

        self.geometry.stack_offset = self.get_stack_offset(len(heights))
        return placements

    def refresh_stack_offset(self, card_count: int) -> float:
        """
        Recompute the stagger after a parameter change without relayout.

        Args:
            card_count: Number of cards in the stack

        Returns:
            The new stack offset
        """
        self.geometry.stack_offset = self.get_stack_offset(card_count)
        return self.geometry.stack_offset
