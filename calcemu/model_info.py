"""Typed access to a calculator model definition table."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


class ModelError(Exception):
    """A model definition key is missing or has the wrong type."""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class SpriteInfo:
    """A sprite's source rectangle in the interface image and its destination."""

    src: Rect
    dest: Rect


@dataclass(frozen=True)
class ColourInfo:
    r: int
    g: int
    b: int


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_integer(value: int | float) -> int:
    # Numbers without an exact integer value convert to 0.
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    return int(value)


def _is_table(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _table_item(table: Any, index: int) -> Any:
    """Return the item at 1-based ``index`` of a table, or None when absent."""
    if isinstance(table, Mapping):
        return table.get(index)
    return table[index - 1] if 0 < index <= len(table) else None


class ModelInfo:
    """Reads strings, integers, sprites and colours from a model table."""

    def __init__(self, table: Mapping[str, Any]) -> None:
        self.table = table

    def get_string(self, key: str) -> str:
        value = self.table.get(key)
        if not isinstance(value, str):
            raise ModelError(f"key '{key}' is not a string")
        return value

    def get_int(self, key: str) -> int:
        value = self.table.get(key)
        if not _is_number(value):
            raise ModelError(f"key '{key}' is not a number")
        return _to_integer(value)

    def _numbers(self, key: str, count: int) -> list[int]:
        table = self.table.get(key)
        if not _is_table(table):
            raise ModelError(f"key '{key}' is not a table")
        numbers = []
        for index in range(1, count + 1):
            item = _table_item(table, index)
            if not _is_number(item):
                raise ModelError(f"key '{key}'[{index}] is not a number")
            numbers.append(_to_integer(item))
        return numbers

    def get_sprite(self, key: str) -> SpriteInfo:
        """Read ``{src_x, src_y, w, h, dest_x, dest_y}``; dest has the source size."""
        sx, sy, w, h, dx, dy = self._numbers(key, 6)
        return SpriteInfo(src=Rect(sx, sy, w, h), dest=Rect(dx, dy, w, h))

    def get_colour(self, key: str) -> ColourInfo:
        r, g, b = self._numbers(key, 3)
        return ColourInfo(r, g, b)