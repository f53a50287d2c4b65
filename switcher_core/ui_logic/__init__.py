"""
UI logic package - portable across platforms.

Stack ordering, layout calculations, transition state and per-card
transforms. No UI framework dependencies.
"""
from .stack_layout import StackLayout, StackGeometry
from .stack_order import stack_order, draw_order, paint_sequence
from .transform_engine import TransformInputs, compute_card_transform, interpolate
from .transition import SwitchTransition, TransitionState, EASING_CURVES

__all__ = [
    'StackLayout',
    'StackGeometry',
    'stack_order',
    'draw_order',
    'paint_sequence',
    'TransformInputs',
    'compute_card_transform',
    'interpolate',
    'SwitchTransition',
    'TransitionState',
    'EASING_CURVES'
]
