"""Rectangle model: a plain width/height value with JSON round-tripping."""

from __future__ import annotations

from dataclasses import dataclass

from katas.objects.json_codec import from_json, get_json


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    # --- persistence ----------------------------------------------------------

    def to_json(self, indent: int | None = None) -> str:
        return get_json(self, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> Rectangle:
        """Deserialise a rectangle from ``{"width": ..., "height": ...}``."""
        return from_json(cls, text)
