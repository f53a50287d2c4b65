"""
Unit tests for per-card transforms.
"""
import pytest

from switcher_core.data_models import CardTransform
from switcher_core.ui_logic.transform_engine import (
    TransformInputs, compute_card_transform, interpolate
)


def make_inputs(progress=0.0, count=3):
    return TransformInputs(
        count=count,
        progress=progress,
        card_width=100,
        stack_offset=20,
        stack_alpha=0.8,
        stack_smallest_size_ratio=0.75
    )


class TestIdleStack:

    def test_front_card_is_untouched(self):
        t = compute_card_transform(0, make_inputs())
        assert t.translate_x == 0
        assert t.scale_x == 1
        assert t.opacity == 1

    def test_second_card(self):
        t = compute_card_transform(1, make_inputs())
        assert t.translate_x == pytest.approx(20)
        assert t.scale_x == pytest.approx(0.875)
        assert t.scale_y == pytest.approx(0.875)
        assert t.opacity == pytest.approx(0.8)

    def test_last_card_reaches_smallest_size(self):
        t = compute_card_transform(2, make_inputs())
        assert t.translate_x == pytest.approx(40)
        assert t.scale_x == pytest.approx(0.75)
        assert t.opacity == pytest.approx(0.8)

    def test_translation_is_horizontal_only(self):
        for order in range(3):
            assert compute_card_transform(order, make_inputs()).translate_y == 0


class TestFirstHalf:

    def test_front_card_slides_left(self):
        t = compute_card_transform(0, make_inputs(0.25))
        assert t.translate_x == pytest.approx(-37.5)
        assert t.opacity == 1
        assert t.scale_x == 1

    def test_front_card_fully_out_at_half(self):
        t = compute_card_transform(0, make_inputs(0.5))
        assert t.translate_x == pytest.approx(-75)
        assert t.opacity == 1

    def test_stacked_cards_do_not_move(self):
        t = compute_card_transform(1, make_inputs(0.25))
        assert t.translate_x == pytest.approx(20)
        assert t.opacity == pytest.approx(0.8)


class TestSecondHalf:

    def test_front_card_moves_behind_stack(self):
        t = compute_card_transform(0, make_inputs(0.75))
        assert t.opacity == pytest.approx(0.9)
        assert t.translate_x == pytest.approx(interpolate(-75, 40, 0.5))
        assert t.scale_x == pytest.approx(0.875)

    def test_front_card_ends_at_back_rank(self):
        t = compute_card_transform(0, make_inputs(1.0))
        assert t.translate_x == pytest.approx(40)
        assert t.scale_x == pytest.approx(0.75)
        assert t.opacity == pytest.approx(0.8)

    def test_incoming_card_fades_in(self):
        t = compute_card_transform(1, make_inputs(0.75))
        assert t.translate_x == pytest.approx(10)
        assert t.opacity == pytest.approx(0.9)

        t = compute_card_transform(1, make_inputs(1.0))
        assert t.translate_x == pytest.approx(0)
        assert t.scale_x == pytest.approx(1)
        assert t.opacity == pytest.approx(1)

    def test_deeper_cards_keep_stack_alpha(self):
        t = compute_card_transform(2, make_inputs(0.75))
        assert t.translate_x == pytest.approx(30)
        assert t.scale_x == pytest.approx(interpolate(1, 0.75, 1.5 / 2))
        assert t.opacity == pytest.approx(0.8)


class TestSingleCard:

    def test_single_card_is_identity(self):
        inputs = TransformInputs(
            count=1, progress=0.0, card_width=100, stack_offset=0,
            stack_alpha=0.8, stack_smallest_size_ratio=0.75
        )
        t = compute_card_transform(0, inputs)
        assert t.is_identity
        assert t.opacity == 1


class TestAffine:

    def test_pivot_is_right_edge_middle(self):
        t = compute_card_transform(1, make_inputs(), card_width=100, card_height=60)
        assert t.pivot_x == 100
        assert t.pivot_y == 30

    def test_scale_keeps_pivot_fixed(self):
        t = CardTransform(scale_x=0.5, scale_y=0.5, pivot_x=100, pivot_y=30)
        assert t.map_point(100, 30) == pytest.approx((100, 30))
        assert t.map_point(0, 30) == pytest.approx((50, 30))

    def test_translate_applies_before_scale(self):
        t = CardTransform(translate_x=20, scale_x=0.5, scale_y=0.5, pivot_x=100, pivot_y=30)
        a, b, c, d, e, f = t.to_affine()
        assert (a, b, c, d) == (0.5, 0.0, 0.0, 0.5)
        assert e == pytest.approx(0.5 * 20 + 100 * 0.5)
        assert f == pytest.approx(15)
