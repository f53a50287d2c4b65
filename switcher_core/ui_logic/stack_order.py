"""
Stack ordering and paint ordering.

Pure functions mapping card indices to stack ranks and paint slots. No UI
framework dependencies.
"""
from typing import List

# Past this point of a transition the incoming card paints on top
DRAW_ORDER_SWAP_PROGRESS = 0.5


def stack_order(count: int, index: int, front_index: int) -> int:
    """
    Rank of a card behind the front card.

    Args:
        count: Number of cards in the collection
        index: Collection index of the card
        front_index: Collection index of the front card

    Returns:
        0 for the front card, increasing towards the back, wrapping
        around the end of the collection
    """
    if count <= 1:
        return 0
    return ((index - front_index) % count + count) % count


def draw_order(count: int, slot: int, front_index: int, progress: float) -> int:
    """
    Card index to paint at a given slot, back to front.

    During the second half of a transition the order is taken relative to
    the card after the front one so the incoming card ends up on top.

    Args:
        count: Number of cards in the collection
        slot: Paint slot, 0 painted first
        front_index: Collection index of the front card
        progress: Current progress ratio

    Returns:
        Collection index of the card painted at ``slot``
    """
    if progress > DRAW_ORDER_SWAP_PROGRESS:
        order = stack_order(count, slot, front_index + 1)
    else:
        order = stack_order(count, slot, front_index)
    return count - order - 1


def paint_sequence(count: int, front_index: int, progress: float) -> List[int]:
    """All card indices in back-to-front paint order."""
    return [draw_order(count, slot, front_index, progress) for slot in range(count)]
