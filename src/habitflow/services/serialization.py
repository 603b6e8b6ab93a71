"""JSON codec for the three persisted tracker records.

The wire layout matches the keys the tracker has always written:

- ``habits``: ``[{"id", "name", "color", "icon", "createdAt"}, ...]``
- ``completions``: ``{"YYYY-MM-DD": {"<habit id>": true|false}}``
- ``userProfile``: ``{"name", "photo", "weight", "height"}``
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from pydantic import ValidationError

from ..models.habit import Habit
from ..models.profile import UserProfile

HABITS_KEY = "habits"
COMPLETIONS_KEY = "completions"
PROFILE_KEY = "userProfile"

CompletionMap = dict[str, dict[str, bool]]


class RecordDecodeError(ValueError):
    """Raised when stored text cannot be turned back into a tracker record."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not decode '{key}': {reason}")
        self.key = key
        self.reason = reason


def _loads(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise RecordDecodeError(key, str(exc)) from exc


def encode_habits(habits: list[Habit]) -> str:
    payload = [
        {
            "id": habit.id,
            "name": habit.name,
            "color": habit.color,
            "icon": habit.icon,
            "createdAt": habit.created_at,
        }
        for habit in habits
    ]
    return json.dumps(payload, ensure_ascii=False)


def decode_habits(raw: str) -> list[Habit]:
    data = _loads(HABITS_KEY, raw)
    if not isinstance(data, list):
        raise RecordDecodeError(HABITS_KEY, "expected a list of habits")
    habits: list[Habit] = []
    for item in data:
        if not isinstance(item, dict):
            raise RecordDecodeError(HABITS_KEY, "habit entries must be objects")
        try:
            habits.append(
                Habit.model_validate(
                    {
                        "id": item["id"],
                        "name": item["name"],
                        "color": item["color"],
                        "icon": item["icon"],
                        "created_at": item["createdAt"],
                    }
                )
            )
        except KeyError as exc:
            raise RecordDecodeError(HABITS_KEY, f"missing field {exc}") from exc
        except ValidationError as exc:
            raise RecordDecodeError(HABITS_KEY, str(exc)) from exc
    return habits


def encode_completions(completions: CompletionMap) -> str:
    return json.dumps(completions, sort_keys=True)


def _is_date_key(day: str) -> bool:
    try:
        return date.fromisoformat(day).isoformat() == day
    except (TypeError, ValueError):
        return False


def decode_completions(raw: str) -> CompletionMap:
    data = _loads(COMPLETIONS_KEY, raw)
    if not isinstance(data, dict):
        raise RecordDecodeError(COMPLETIONS_KEY, "expected an object keyed by date")
    completions: CompletionMap = {}
    for day, flags in data.items():
        if not _is_date_key(day):
            raise RecordDecodeError(COMPLETIONS_KEY, f"{day!r} is not a YYYY-MM-DD date")
        if not isinstance(flags, dict):
            raise RecordDecodeError(COMPLETIONS_KEY, f"entry for {day} is not an object")
        # Flags are stored as JSON booleans; anything else is coerced by truthiness.
        completions[day] = {habit_id: bool(flag) for habit_id, flag in flags.items()}
    return completions


def encode_profile(profile: UserProfile) -> str:
    return json.dumps(
        {
            "name": profile.name,
            "photo": profile.photo,
            "weight": profile.weight,
            "height": profile.height,
        },
        ensure_ascii=False,
    )


def decode_profile(raw: str) -> UserProfile:
    data = _loads(PROFILE_KEY, raw)
    if not isinstance(data, dict):
        raise RecordDecodeError(PROFILE_KEY, "expected a profile object")
    fields = {name: data.get(name, "") for name in ("name", "photo", "weight", "height")}
    # Older saves may hold numbers for weight/height.
    fields = {name: "" if value is None else str(value) for name, value in fields.items()}
    return UserProfile(**fields)


__all__ = [
    "COMPLETIONS_KEY",
    "CompletionMap",
    "HABITS_KEY",
    "PROFILE_KEY",
    "RecordDecodeError",
    "decode_completions",
    "decode_habits",
    "decode_profile",
    "encode_completions",
    "encode_habits",
    "encode_profile",
]
