"""Tests for the placeholder roadmap generator."""

import pytest

from app.roadmaps.generator import make_stub_roadmap
from app.roadmaps.schemas import RoadmapDocument


@pytest.mark.parametrize("goal_text", ["Release an EP", "", "ünïcödé 🎸", "x" * 5000])
def test_shape_is_fixed_for_any_goal(goal_text):
    document = make_stub_roadmap(goal_text)

    assert document["goal"] == goal_text
    assert len(document["activities"]) == 2
    for activity in document["activities"]:
        assert activity["title"]
        assert activity["description"]
        assert len(activity["tasks"]) == 2
        for task in activity["tasks"]:
            assert task["title"]
            assert len(task["steps"]) == 3


def test_is_deterministic():
    assert make_stub_roadmap("Tour Europe") == make_stub_roadmap("Tour Europe")


def test_only_goal_varies():
    first = make_stub_roadmap("a")
    second = make_stub_roadmap("b")

    assert first["activities"] == second["activities"]
    assert first["goal"] != second["goal"]


def test_returns_fresh_object():
    first = make_stub_roadmap("a")
    first["activities"][0]["tasks"].clear()

    assert len(make_stub_roadmap("a")["activities"][0]["tasks"]) == 2


def test_known_content():
    document = make_stub_roadmap("Release an EP")

    assert [a["title"] for a in document["activities"]] == [
        "Define Your Project Identity",
        "Establish Release Plan",
    ]
    assert document["activities"][0]["tasks"][0] == {
        "title": "Write 3-sentence artist statement",
        "steps": ["Draft", "Edit", "Save"],
    }
    assert document["activities"][1]["tasks"][1]["steps"] == ["Frequency", "Formats", "Dates"]


def test_matches_response_schema():
    RoadmapDocument.model_validate(make_stub_roadmap("Release an EP"))
