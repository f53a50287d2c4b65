"""
Framework-free view switching engine.

Stacks cards behind a front card and computes the transforms that animate
switching between them.
"""
from .data_models import (
    Card, CardSurface, CardDrawInfo, CardPlacement, CardTransform,
    InvalidationKind, LayoutParameters, SwitcherEvent
)
from .view_switcher import ViewSwitcher

__all__ = [
    'Card',
    'CardSurface',
    'CardDrawInfo',
    'CardPlacement',
    'CardTransform',
    'InvalidationKind',
    'LayoutParameters',
    'SwitcherEvent',
    'ViewSwitcher'
]
