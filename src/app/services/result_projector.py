from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


def unique_by(records: Iterable[T], key: Callable[[T], str]) -> tuple[T, ...]:
    """Keep the first record seen for each identity, in encounter order."""

    seen: dict[str, T] = {}
    for record in records:
        seen.setdefault(key(record), record)
    return tuple(seen.values())


def to_payload(records: Iterable[Any]) -> list[dict[str, str]]:
    """Project records to plain rows carrying every original column untouched."""

    return [dict(record.fields) for record in records]
