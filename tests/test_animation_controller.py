import logging

import pytest

from sort_viz import AnimationController, DataStructureModel, PausedState, PlayingState
from sort_viz.animation import AnimationState


def test_controller_is_a_singleton():
    model = DataStructureModel()
    first = AnimationController(model)
    second = AnimationController()

    assert first is second
    assert second.model is model
    assert AnimationController.instance() is first


def test_later_model_is_adopted_only_when_missing():
    controller = AnimationController()
    model = DataStructureModel()

    assert AnimationController(model) is controller
    assert controller.model is model
    assert AnimationController(DataStructureModel()).model is model


def test_starts_paused_at_normal_speed():
    controller = AnimationController()

    assert isinstance(controller.state, PausedState)
    assert not controller.is_playing
    assert controller.speed == 1.0


def test_play_and_pause_switch_state(caplog):
    controller = AnimationController()

    with caplog.at_level(logging.INFO, logger="sort_viz.animation"):
        controller.play()
        assert isinstance(controller.state, PlayingState)
        controller.pause()

    assert isinstance(controller.state, PausedState)
    assert "Animation playing..." in caplog.text
    assert "Animation paused..." in caplog.text


def test_repeated_play_keeps_state_and_skips_listeners():
    controller = AnimationController()
    events = []
    controller.add_listener(lambda c: events.append(c.state.name))

    controller.play()
    controller.play()
    controller.pause()
    controller.pause()

    assert events == ["playing", "paused"]


def test_toggle_flips_state():
    controller = AnimationController()

    controller.toggle()
    assert controller.is_playing
    controller.toggle()
    assert not controller.is_playing


def test_set_speed_scales_interval():
    controller = AnimationController()
    events = []
    controller.add_listener(events.append)

    controller.set_speed(2)

    assert controller.speed == 2.0
    assert controller.interval_ms(300) == 150
    assert events == [controller]


@pytest.mark.parametrize("speed", [0, -1.5])
def test_set_speed_rejects_non_positive(speed):
    controller = AnimationController()

    with pytest.raises(ValueError):
        controller.set_speed(speed)
    assert controller.speed == 1.0


def test_interval_never_drops_below_one_ms():
    controller = AnimationController()
    controller.set_speed(1000)

    assert controller.interval_ms(10) == 1


def test_removed_listener_is_not_called():
    controller = AnimationController()
    events = []
    controller.add_listener(events.append)
    controller.remove_listener(events.append)

    controller.play()

    assert events == []


def test_state_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AnimationState()
