import logging
import sys
from typing import List

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from config import ConfigurationError, DesktopConfiguration
from switcher_core.data_models import Card
from .switcher_widget import StackSwitcherWidget

logger = logging.getLogger(__name__)

CARD_COLORS = ["#e53935", "#8e24aa", "#3949ab", "#00897b", "#fdd835", "#fb8c00", "#6d4c41"]


def build_sample_cards(count: int) -> List[Card]:
    return [
        Card(id=f"card-{i}", title=f"Card {i + 1}", color=CARD_COLORS[i % len(CARD_COLORS)])
        for i in range(count)
    ]


class AutoSwitcher:
    """Switches forward until that fails, then back until that fails, forever."""

    def __init__(self, widget: StackSwitcherWidget, interval_ms: int) -> None:
        self.widget = widget
        self.going_forward = True
        self.timer = QTimer(widget)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.step)

    def start(self) -> None:
        self.timer.start()

    def step(self) -> None:
        if self.going_forward:
            if not self.widget.switch_forward():
                self.going_forward = False
        else:
            if not self.widget.switch_back():
                self.going_forward = True


def main() -> int:
    try:
        config = DesktopConfiguration.load()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    logger.info("Starting view switcher demo: %s", config.get_summary())

    app = QApplication(sys.argv)

    widget = StackSwitcherWidget(config)
    widget.setWindowTitle("View Switcher")
    widget.resize(config.window_width, config.window_height)
    widget.set_cards(build_sample_cards(config.card_count))
    widget.show()

    auto_switcher = AutoSwitcher(widget, config.auto_switch_interval_ms)
    auto_switcher.start()

    try:
        return app.exec()
    finally:
        widget.coordinator.cleanup()
