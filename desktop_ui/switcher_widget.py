"""
QWidget host for the view switcher.

Measures and lays out the switcher on resize and paints every card with the
transform and opacity the engine computes, in the engine's draw order.
"""
import logging
from typing import List, Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent, QResizeEvent, QTransform
from PySide6.QtWidgets import QWidget

from switcher_core.data_models import Card, CardTransform
from config.base import BaseConfiguration
from .coordinator import SwitcherCoordinator

logger = logging.getLogger(__name__)

CARD_CORNER_RADIUS = 12.0


def to_qtransform(transform: CardTransform, left: float, top: float) -> QTransform:
    """
    Convert an engine transform into a QTransform in widget coordinates.

    Args:
        transform: Card transform relative to the card's own origin
        left: Resting left edge of the card
        top: Resting top edge of the card

    Returns:
        QTransform mapping card coordinates to widget coordinates
    """
    a, b, c, d, e, f = transform.to_affine()
    return QTransform(a, b, c, d, e + left, f + top)


class StackSwitcherWidget(QWidget):
    """Paints a stack of cards and animates switching between them."""

    def __init__(self, config: Optional[BaseConfiguration] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.coordinator = SwitcherCoordinator(config, self)
        self.switcher = self.coordinator.switcher

        self.coordinator.layoutRequested.connect(self._relayout)
        self.coordinator.repaintRequested.connect(self.update)

        logger.info("Stack switcher widget created")

    def set_cards(self, cards: List[Card]) -> None:
        self.switcher.clear_cards()
        for card in cards:
            self.switcher.add_card(card)

    def add_card(self, card: Card) -> int:
        return self.switcher.add_card(card)

    def remove_card(self, card: Card) -> bool:
        return self.switcher.remove_card(card)

    def switch_forward(self) -> bool:
        return self.coordinator.switchForward()

    def switch_back(self) -> bool:
        return self.coordinator.switchBack()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._relayout()

    def _relayout(self) -> None:
        self.switcher.measure(self.width(), self.height())
        self.switcher.layout()
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        count = self.switcher.card_count
        if count == 0:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        try:
            for slot in range(count):
                index = self.switcher.draw_order(count, slot)
                info = self.switcher.get_draw_info(index)
                if info.placement is None:
                    continue

                transform = self.switcher.transform_for(index)
                painter.setTransform(to_qtransform(transform, info.placement.left, info.placement.top))
                painter.setOpacity(transform.opacity)
                self._paint_card(painter, info.card, info.placement.width, info.placement.height)
        finally:
            painter.end()

    def _paint_card(self, painter: QPainter, card: Card, width: float, height: float) -> None:
        rect = QRectF(0, 0, width, height)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(card.color))
        painter.drawRoundedRect(rect, CARD_CORNER_RADIUS, CARD_CORNER_RADIUS)

        font = QFont(self.font())
        font.setPointSizeF(max(8.0, width / 14))
        painter.setFont(font)
        painter.setPen(QColor("#ffffff"))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, card.title)
