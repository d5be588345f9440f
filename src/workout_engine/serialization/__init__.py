"""Serialization: wire dicts, canonical JSON, and text rendering."""

from workout_engine.serialization.plan_json import (
    choices_to_dict,
    format_seconds,
    plan_to_dict,
    plan_to_json,
    prescription_to_dict,
    render_plan_text,
    request_to_dict,
    result_to_dict,
    suggestion_to_dict,
)

__all__ = [
    "choices_to_dict",
    "format_seconds",
    "plan_to_dict",
    "plan_to_json",
    "prescription_to_dict",
    "render_plan_text",
    "request_to_dict",
    "result_to_dict",
    "suggestion_to_dict",
]
