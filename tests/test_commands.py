import pytest

from sort_viz import (
    AnimationController,
    Command,
    DataStructureModel,
    InsertCommand,
    InsertionSort,
    PauseCommand,
    PlayCommand,
    ResetCommand,
    SetSpeedCommand,
    SortCommand,
)


def test_command_base_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_data_commands_act_on_model():
    model = DataStructureModel()

    for value in (5, 3, 8):
        InsertCommand(model, value).execute()
    assert model.data == (5, 3, 8)

    SortCommand(model, InsertionSort()).execute()
    assert model.data == (3, 5, 8)

    ResetCommand(model).execute()
    assert model.data == ()


def test_animation_commands_act_on_controller():
    controller = AnimationController()

    PlayCommand(controller).execute()
    assert controller.is_playing

    SetSpeedCommand(controller, 0.5).execute()
    assert controller.speed == 0.5

    PauseCommand(controller).execute()
    assert not controller.is_playing
