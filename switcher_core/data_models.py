"""Core data structures for the view switcher.

Contains the fundamental data models shared by the stacking engine and the
UI hosts that render it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, Tuple


class CardSurface(Protocol):
    """Anything the switcher can stack: it only needs a natural height."""

    def height_for_width(self, width: float) -> float:
        ...


@dataclass
class Card:
    """A plain rectangular card with a fixed aspect ratio."""
    id: str
    title: str
    color: str = "#3d5afe"
    aspect_ratio: float = 1.33

    def height_for_width(self, width: float) -> float:
        return width * self.aspect_ratio


@dataclass
class LayoutParameters:
    """Host-tunable ratios controlling card placement and stack look."""
    vertical_position_ratio: float = 0.4
    horizontal_padding_ratio: float = 0.1
    stack_placement_area_portion: float = 0.66
    stack_smallest_size_ratio: float = 0.75
    stack_alpha: float = 1.0


@dataclass(slots=True)
class CardPlacement:
    """Resting rectangle of a card inside the switcher."""
    index: int
    left: float
    top: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class CardDrawInfo:
    """Per-card bookkeeping; lives exactly as long as the card is stacked."""
    card: Any
    index: int
    measured_width: float = 0.0
    measured_height: float = 0.0
    placement: Optional[CardPlacement] = None


@dataclass(frozen=True)
class CardTransform:
    """
    Paint-time transform of a single card.

    The translation is applied first, then a uniform scale about
    ``(pivot_x, pivot_y)`` in the card's own coordinates.
    """
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    opacity: float = 1.0
    pivot_x: float = 0.0
    pivot_y: float = 0.0

    @property
    def is_identity(self) -> bool:
        return (self.translate_x == 0 and self.translate_y == 0
                and self.scale_x == 1 and self.scale_y == 1)

    def to_affine(self) -> Tuple[float, float, float, float, float, float]:
        """
        Flatten to a 2x3 affine matrix.

        Returns:
            Tuple ``(a, b, c, d, e, f)`` mapping ``(x, y)`` to
            ``(a*x + c*y + e, b*x + d*y + f)``
        """
        e = self.scale_x * self.translate_x + self.pivot_x * (1 - self.scale_x)
        f = self.scale_y * self.translate_y + self.pivot_y * (1 - self.scale_y)
        return (self.scale_x, 0.0, 0.0, self.scale_y, e, f)

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        a, b, c, d, e, f = self.to_affine()
        return (a * x + c * y + e, b * x + d * y + f)


class InvalidationKind(Enum):
    """What the host has to redo after a switcher change."""
    RELAYOUT = "relayout"
    REPAINT = "repaint"
    FRONT_CHANGED = "front_changed"


@dataclass
class SwitcherEvent:
    """Notification sent to switcher listeners."""
    kind: InvalidationKind
    front_index: int
    progress: float
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"SwitcherEvent({self.kind.value}, front={self.front_index}, progress={self.progress:.3f})"
