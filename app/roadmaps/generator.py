from typing import Any, Dict


def make_stub_roadmap(goal_text: str) -> Dict[str, Any]:
    """
    Builds the placeholder roadmap document for a goal.

    The structure is fixed: two activities, each with two tasks of three
    steps. Only the top-level ``goal`` echoes the input. A new object is
    returned on every call so callers may mutate it freely.

    Args:
        goal_text (str): The goal the roadmap is for.

    Returns:
        dict: ``{"goal": str, "activities": [...]}``.
    """
    # Placeholder until roadmaps come from a generation service.
    return {
        "goal": goal_text,
        "activities": [
            {
                "title": "Define Your Project Identity",
                "description": "Clarify sound and audience",
                "tasks": [
                    {"title": "Write 3-sentence artist statement", "steps": ["Draft", "Edit", "Save"]},
                    {"title": "Pick 3 reference artists", "steps": ["List", "Why each", "Notes"]},
                ],
            },
            {
                "title": "Establish Release Plan",
                "description": "Sketch next 30 days",
                "tasks": [
                    {"title": "Choose single to promote", "steps": ["Shortlist", "Pick", "Metadata"]},
                    {"title": "Outline content calendar", "steps": ["Frequency", "Formats", "Dates"]},
                ],
            },
        ],
    }
