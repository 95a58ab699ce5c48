"""JSON helpers: compact serialisation and typed deserialisation of dataclasses."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact (``[1,2,3]``) unless *indent* is given. Dataclass
    instances are written as an object of their fields in declaration order.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        obj,
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        default=_encode_default,
    )


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and construct a fresh *cls* instance from its fields.

    *cls* must be a dataclass. The payload must be a JSON object whose keys
    are fields of *cls*; fields with defaults may be omitted.
    """
    if not (dataclasses.is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"{cls!r} is not a dataclass type")

    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    fields = {f.name: f for f in dataclasses.fields(cls) if f.init}
    unknown = sorted(set(data) - set(fields))
    if unknown:
        raise ValueError(f"Unknown field(s) for {cls.__name__}: {', '.join(unknown)}")
    missing = sorted(
        name
        for name, f in fields.items()
        if name not in data
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    )
    if missing:
        raise ValueError(f"Missing field(s) for {cls.__name__}: {', '.join(missing)}")
    return cls(**data)
