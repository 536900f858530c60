"""Byte ranges for partial downloads."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Range:
    """A byte range; a missing start means 0 and a missing end means open-ended."""

    resume_from: int | None = None
    finish_at: int | None = None

    def __post_init__(self) -> None:
        if self.resume_from is None:
            self.resume_from = 0
        if self.finish_at is None:
            self.finish_at = -1

    def __str__(self) -> str:
        start = "" if self.resume_from < 0 else str(self.resume_from)
        end = "" if self.finish_at < 0 else str(self.finish_at)
        return f"{start}-{end}"


class MultiRange:
    """Several byte ranges requested at once."""

    def __init__(self, *ranges: Range) -> None:
        self.ranges = list(ranges)

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self.ranges)

    def __repr__(self) -> str:
        return f"MultiRange({', '.join(repr(r) for r in self.ranges)})"