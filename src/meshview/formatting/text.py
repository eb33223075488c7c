"""Word splitting and casing helpers shared by the resource and class-name formatters."""

import re
from typing import List

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def split_words(text: str) -> List[str]:
    """Split on separators and case boundaries: "replicaSet_v2" -> ["replica", "Set", "v", "2"]."""
    return _WORD.findall(text)


def start_case(text: str) -> str:
    """Capitalize the first letter of every word and join them with spaces."""
    return " ".join(word[0].upper() + word[1:] for word in split_words(text))


def lower_case(text: str) -> str:
    return " ".join(word.lower() for word in split_words(text))


def to_class_name(name: str) -> str:
    """Convert a string to a valid css class name."""
    if not name:
        return ""
    return _NON_ALNUM.sub("_", lower_case(name))
