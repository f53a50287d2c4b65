"""
Unit tests for stack layout calculations.
"""
import pytest

from switcher_core.data_models import LayoutParameters
from switcher_core.ui_logic.stack_layout import StackLayout


@pytest.fixture
def stack_layout():
    return StackLayout(LayoutParameters())


class TestMeasure:

    def test_measure_returns_available_size(self, stack_layout):
        assert stack_layout.measure(500, 1000) == (500, 1000)

    def test_card_width_removes_padding_on_both_sides(self, stack_layout):
        stack_layout.measure(500, 1000)
        assert stack_layout.geometry.card_width == pytest.approx(400)

    def test_zero_padding_uses_full_width(self):
        layout = StackLayout(LayoutParameters(horizontal_padding_ratio=0.0))
        layout.measure(320, 480)
        assert layout.geometry.card_width == pytest.approx(320)


class TestLayout:

    def test_cards_are_centred_horizontally(self, stack_layout):
        stack_layout.measure(500, 1000)
        placements = stack_layout.layout([100, 200, 300])

        assert all(p.left == pytest.approx(50) for p in placements)
        assert all(p.width == pytest.approx(400) for p in placements)

    def test_card_top_follows_vertical_ratio(self, stack_layout):
        stack_layout.measure(500, 1000)
        placements = stack_layout.layout([532, 200])

        assert placements[0].top == pytest.approx((1000 - 532) * 0.4)
        assert placements[1].top == pytest.approx(800 * 0.4)
        assert placements[1].bottom == pytest.approx(320 + 200)

    def test_stack_offset_spreads_over_margin(self, stack_layout):
        stack_layout.measure(500, 1000)
        stack_layout.layout([100, 100, 100])

        assert stack_layout.geometry.stack_offset == pytest.approx(50 * 0.66 / 2)

    @pytest.mark.parametrize("count", [0, 1])
    def test_stack_offset_is_zero_without_stack(self, stack_layout, count):
        stack_layout.measure(500, 1000)
        stack_layout.layout([100] * count)

        assert stack_layout.geometry.stack_offset == 0

    def test_layout_is_idempotent(self, stack_layout):
        stack_layout.measure(500, 1000)
        first = stack_layout.layout([100, 150, 200])
        offset = stack_layout.geometry.stack_offset
        second = stack_layout.layout([100, 150, 200])

        assert first == second
        assert stack_layout.geometry.stack_offset == offset

    def test_refresh_stack_offset_uses_new_portion(self, stack_layout):
        stack_layout.measure(500, 1000)
        stack_layout.layout([100, 100, 100])

        stack_layout.parameters.stack_placement_area_portion = 1.0
        assert stack_layout.refresh_stack_offset(3) == pytest.approx(25)
