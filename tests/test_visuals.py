import logging

import pytest

from sort_viz import (
    BarVisual,
    DataStructureModel,
    SortStep,
    TextVisual,
    VisualFactory,
    VisualRepresentation,
)


def test_factory_builds_registered_visuals():
    model = DataStructureModel()

    bar = VisualFactory.create_visual("bar", model)
    text = VisualFactory.create_visual("text", model)

    assert isinstance(bar, BarVisual)
    assert isinstance(text, TextVisual)
    assert model.observers == (bar, text)
    assert VisualFactory.available_types() == ("bar", "text")


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError, match="Invalid visual type"):
        VisualFactory.create_visual("pie", DataStructureModel())


def test_text_visual_renders_list(caplog):
    model = DataStructureModel()
    visual = TextVisual(model)

    with caplog.at_level(logging.INFO, logger="sort_viz.visuals"):
        model.insert(5)
        model.insert(3)

    assert visual.last_rendered == "Rendering text: [5, 3]"
    assert visual.render_count == 2
    assert "Rendering text: [5, 3]" in caplog.text


def test_text_visual_mentions_step():
    visual = TextVisual(DataStructureModel())

    rendered = visual.render((1, 2), SortStep("swap", (0, 1)))

    assert rendered == "Rendering text: [1, 2] (swap [0, 1])"


def test_bar_visual_draws_one_bar_per_value():
    visual = BarVisual(DataStructureModel())

    rendered = visual.render((5, 10, 3))

    assert rendered.splitlines() == [
        "Rendering bars:",
        " 5 | #####",
        "10 | ##########",
        " 3 | ###",
    ]


def test_bar_visual_highlights_touched_indices():
    visual = BarVisual(DataStructureModel())

    rendered = visual.render((2, 3), SortStep("swap", (1,)))

    assert rendered.splitlines()[1:] == ["2 | ##", "3 | ***"]


def test_bar_visual_handles_empty_model():
    model = DataStructureModel([1])
    visual = BarVisual(model)

    model.reset()

    assert visual.last_rendered == "Rendering bars: (empty)"


def test_detach_unsubscribes():
    model = DataStructureModel()
    visual = TextVisual(model)

    visual.detach()
    model.insert(1)

    assert visual.last_rendered is None


def test_visual_base_requires_render():
    model = DataStructureModel([1])

    with pytest.raises(TypeError):
        VisualRepresentation(model)

    assert model.observers == ()
