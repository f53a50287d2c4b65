"""
Unit tests for the switch transition state machine.
"""
import pytest

from switcher_core.ui_logic.transition import (
    SwitchTransition, TransitionState, accelerate_decelerate, linear
)


@pytest.fixture
def transition():
    return SwitchTransition(duration_ms=500, easing="linear")


class TestSwitchForward:

    def test_forward_runs_progress_up(self, transition):
        assert transition.switch_forward(3)
        assert transition.state is TransitionState.ANIMATING_FORWARD
        assert transition.progress == 0

        assert transition.tick(125)
        assert transition.progress == pytest.approx(0.25)
        assert transition.front_index == 0

    def test_forward_completion_advances_front(self, transition):
        transition.switch_forward(3)
        transition.tick(250)

        assert not transition.tick(250)
        assert transition.front_index == 1
        assert transition.progress == 0
        assert transition.state is TransitionState.IDLE

    def test_forward_rejected_at_last_card(self, transition):
        transition.set_front_index(2)
        assert not transition.switch_forward(3)
        assert transition.front_index == 2
        assert not transition.is_running

    def test_forward_rejected_while_running(self, transition):
        transition.switch_forward(3)
        transition.tick(100)
        progress = transition.progress

        assert not transition.switch_forward(3)
        assert not transition.switch_back()
        assert transition.progress == progress
        assert transition.front_index == 0

    def test_overshooting_tick_finishes(self, transition):
        transition.switch_forward(3)
        assert not transition.tick(10_000)
        assert transition.front_index == 1


class TestSwitchBack:

    def test_back_moves_front_immediately(self, transition):
        transition.set_front_index(2)

        assert transition.switch_back()
        assert transition.front_index == 1
        assert transition.progress == 1
        assert transition.state is TransitionState.ANIMATING_BACKWARD

    def test_back_runs_progress_down(self, transition):
        transition.set_front_index(1)
        transition.switch_back()

        transition.tick(250)
        assert transition.progress == pytest.approx(0.5)

        assert not transition.tick(250)
        assert transition.progress == 0
        assert transition.front_index == 0

    def test_back_rejected_at_first_card(self, transition):
        assert not transition.switch_back()
        assert transition.front_index == 0

    def test_forward_then_back_restores_front(self, transition):
        transition.set_front_index(1)
        transition.switch_forward(4)
        transition.tick(500)
        assert transition.front_index == 2

        transition.switch_back()
        transition.tick(500)
        assert transition.front_index == 1
        assert transition.progress == 0


class TestCancellation:

    def test_set_front_index_skips_completion(self, transition):
        transition.switch_forward(3)
        transition.tick(400)

        transition.set_front_index(0)
        assert not transition.is_running
        assert transition.progress == 0

        assert not transition.tick(500)
        assert transition.front_index == 0

    def test_tick_when_idle_does_nothing(self, transition):
        assert not transition.tick(16)
        assert transition.progress == 0


class TestEasing:

    def test_curves_hit_endpoints(self):
        for curve in (linear, accelerate_decelerate):
            assert curve(0.0) == pytest.approx(0.0)
            assert curve(1.0) == pytest.approx(1.0)

    def test_accelerate_decelerate_starts_slowly(self):
        transition = SwitchTransition(duration_ms=500)
        transition.switch_forward(2)

        transition.tick(125)
        assert transition.progress == pytest.approx(0.1464, abs=1e-4)
        transition.tick(125)
        assert transition.progress == pytest.approx(0.5)

    def test_unknown_easing_falls_back(self):
        transition = SwitchTransition(easing="bounce")
        assert transition.easing == "accelerate_decelerate"

    def test_zero_duration_finishes_on_first_tick(self):
        transition = SwitchTransition(duration_ms=0)
        transition.switch_forward(2)

        assert not transition.tick(0)
        assert transition.front_index == 1
