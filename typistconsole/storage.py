"""Aggregate statistics kept across sessions."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


@dataclass
class StoredStats:
    """Totals and averages over all practice sessions."""

    total_sessions: int
    total_chars: int
    total_mistakes: int
    avg_wpm: float
    avg_accuracy: float

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, text: str) -> "StoredStats":
        """Parse stats from JSON; raises ValueError on malformed input."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("stored stats must be a JSON object")
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ValueError(f"missing field {missing[0]!r}")
        limits = {
            "total_sessions": _U32_MAX,
            "total_chars": _U64_MAX,
            "total_mistakes": _U64_MAX,
        }
        for name, limit in limits.items():
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= limit:
                raise ValueError(f"{name} must be an integer in 0..{limit}")
        for name in ("avg_wpm", "avg_accuracy"):
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")
        return cls(
            total_sessions=data["total_sessions"],
            total_chars=data["total_chars"],
            total_mistakes=data["total_mistakes"],
            avg_wpm=float(data["avg_wpm"]),
            avg_accuracy=float(data["avg_accuracy"]),
        )