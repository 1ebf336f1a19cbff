"""Models for the XML documents returned by GetSoundlist and GetCategories."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator

from .errors import ProtocolError


@dataclass(frozen=True)
class Sound:
    index: int
    title: str
    url: str
    duration: timedelta = timedelta(0)
    artist: str | None = None
    added_on: date | None = None
    last_played_on: date | None = None
    play_count: int = 0


@dataclass
class Category:
    index: int
    name: str
    type: int = 0
    hidden: bool = False
    icon: str | None = None
    sounds: list[Sound] = field(default_factory=list)
    categories: list["Category"] = field(default_factory=list)

    def walk(self) -> Iterator["Category"]:
        """Yield this category and all of its subcategories, depth first."""
        yield self
        for child in self.categories:
            yield from child.walk()


def parse_sound_list(text: str) -> list[Sound]:
    root = _parse_xml(text)
    return [parse_sound(element) for element in _children(root, "Sound", "Sounds")]


def parse_categories(text: str) -> list[Category]:
    root = _parse_xml(text)
    if root.tag == "Category":
        return [parse_category(root)]
    return [parse_category(element) for element in _children(root, "Category", "Categories")]


def parse_category(element: ET.Element) -> Category:
    return Category(
        index=_int(element.get("index")),
        name=element.get("name", ""),
        type=_int(element.get("type")),
        hidden=element.get("hidden", "").lower() == "true",
        icon=element.get("icon") or None,
        sounds=[parse_sound(child) for child in _children(element, "Sound", "Sounds")],
        categories=[parse_category(child) for child in _children(element, "Category", "Categories")],
    )


def parse_sound(element: ET.Element) -> Sound:
    return Sound(
        index=_int(element.get("index")),
        title=element.get("title", ""),
        url=element.get("url", ""),
        duration=parse_duration(element.get("duration", "")),
        artist=element.get("artist") or None,
        added_on=_date(element.get("addedOn")),
        last_played_on=_date(element.get("lastPlayedOn")),
        play_count=_int(element.get("playCount")),
    )


def parse_duration(value: str) -> timedelta:
    """Parse ``[[h:]m:]s``; missing or malformed parts count as zero."""
    parts = value.split(":") if value else []
    seconds = 0
    for part in parts[-3:]:
        seconds = seconds * 60 + _int(part)
    return timedelta(seconds=seconds)


def _parse_xml(text: str) -> ET.Element:
    try:
        # ElementTree rejects str input that still carries an encoding declaration
        return ET.fromstring(text.strip().encode("utf-8"))
    except ET.ParseError as exc:
        raise ProtocolError(f"Invalid XML response: {exc}", context=text[:200]) from exc


def _children(element: ET.Element, tag: str, wrapper: str) -> Iterator[ET.Element]:
    for child in element:
        if child.tag == tag:
            yield child
        elif child.tag == wrapper:
            yield from child.findall(tag)


def _int(value: str | None) -> int:
    try:
        return int(value or 0)
    except ValueError:
        return 0


def _date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ProtocolError(f"Invalid date: {value}", context=value) from exc


__all__ = [
    "Category",
    "Sound",
    "parse_categories",
    "parse_category",
    "parse_duration",
    "parse_sound",
    "parse_sound_list",
]
