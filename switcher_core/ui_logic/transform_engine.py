"""
Per-card transform computation.

Given a card's stack order and the switcher's progress ratio, compute the
translation, scale and opacity the card is painted with. The first half of
a transition slides the front card out to the left; the second half brings
it back behind the stack while every other card moves up one rank.
"""
from dataclasses import dataclass

from ..data_models import CardTransform

# Fraction of the transition spent sliding the front card out
SWITCH_SLIDE_TIME_PORTION = 0.5
# How far the front card slides out, as a fraction of the card width
SWITCH_SLIDE_AMOUNT_PORTION = 0.75


@dataclass(frozen=True)
class TransformInputs:
    """Everything the engine needs besides the card's order."""
    count: int
    progress: float
    card_width: float
    stack_offset: float
    stack_alpha: float
    stack_smallest_size_ratio: float


def interpolate(start: float, end: float, progress: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start * (1 - progress) + end * progress


def second_half_progress(progress: float) -> float:
    """Map the second half of a transition onto 0..1."""
    return (progress - SWITCH_SLIDE_TIME_PORTION) / (1 - SWITCH_SLIDE_TIME_PORTION)


def _stack_scale(rank: float, inputs: TransformInputs) -> float:
    if inputs.count <= 1:
        return 1.0
    return interpolate(1, inputs.stack_smallest_size_ratio, rank / (inputs.count - 1))


def _front_transform(inputs: TransformInputs) -> tuple[float, float, float]:
    """(translate, scale, opacity) of the card at order 0."""
    progress = inputs.progress
    slide_distance = -inputs.card_width * SWITCH_SLIDE_AMOUNT_PORTION

    if progress <= 0:
        return (0.0, 1.0, 1.0)

    if progress <= SWITCH_SLIDE_TIME_PORTION:
        slide_progress = progress / SWITCH_SLIDE_TIME_PORTION
        return (slide_progress * slide_distance, 1.0, 1.0)

    slide_progress = second_half_progress(progress)
    translate = interpolate(slide_distance, (inputs.count - 1) * inputs.stack_offset, slide_progress)
    scale = interpolate(1, inputs.stack_smallest_size_ratio, slide_progress)
    opacity = interpolate(1, inputs.stack_alpha, slide_progress)
    return (translate, scale, opacity)


def _stacked_transform(order: int, inputs: TransformInputs) -> tuple[float, float, float]:
    """(translate, scale, opacity) of a card behind the front one."""
    if inputs.progress < SWITCH_SLIDE_TIME_PORTION:
        return (order * inputs.stack_offset, _stack_scale(order, inputs), inputs.stack_alpha)

    slide_progress = second_half_progress(inputs.progress)
    rank = order - slide_progress

    if order - 1 > 0:
        opacity = inputs.stack_alpha
    else:
        # becomes the new front card
        opacity = interpolate(inputs.stack_alpha, 1, slide_progress)

    return (rank * inputs.stack_offset, _stack_scale(rank, inputs), opacity)


def compute_card_transform(
    order: int,
    inputs: TransformInputs,
    card_width: float = 0.0,
    card_height: float = 0.0
) -> CardTransform:
    """
    Compute the paint transform of one card.

    Args:
        order: Stack order of the card, 0 for the front card
        inputs: Switcher-wide state shared by all cards
        card_width: Width of the card, used as the scale pivot
        card_height: Height of the card, half of it is the scale pivot

    Returns:
        CardTransform to apply when painting the card
    """
    if order == 0:
        translate, scale, opacity = _front_transform(inputs)
    else:
        translate, scale, opacity = _stacked_transform(order, inputs)

    return CardTransform(
        translate_x=translate,
        translate_y=0.0,
        scale_x=scale,
        scale_y=scale,
        opacity=opacity,
        pivot_x=card_width,
        pivot_y=card_height / 2
    )
