"""Statistics for a single typing session."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass
class TypingStats:
    """Characters typed, mistakes made and words per minute."""

    total_chars: int = 0
    mistakes: int = 0
    wpm: float = 0.0

    def accuracy(self) -> float:
        """Percentage of characters typed correctly; 100 when nothing was typed."""
        if self.total_chars == 0:
            return 100.0
        correct = max(self.total_chars - self.mistakes, 0)
        return 100.0 * correct / self.total_chars

    def update_wpm(self, seconds: float) -> None:
        """Recompute words per minute for the given elapsed time, if positive."""
        if seconds > 0.0:
            self.wpm = (self.total_chars / 5.0) / (seconds / 60.0)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypingStats":
        """Build stats from a mapping; raises ValueError on missing or bad fields."""
        try:
            total_chars = data["total_chars"]
            mistakes = data["mistakes"]
            wpm = data["wpm"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        for name, value in (("total_chars", total_chars), ("mistakes", mistakes)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")
        if isinstance(wpm, bool) or not isinstance(wpm, (int, float)):
            raise ValueError("wpm must be a number")
        return cls(total_chars=total_chars, mistakes=mistakes, wpm=float(wpm))