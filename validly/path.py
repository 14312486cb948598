from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import require


@dataclass(frozen=True)
class Path:
    text: str = ""
    index: Optional[int] = None

    @staticmethod
    def of(name: str) -> "Path":
        return Path(require(name, "Path name cannot be None"))

    @staticmethod
    def at_index(index: int) -> "Path":
        return Path("", index)

    def is_index_only(self) -> bool:
        return self.text == "" and self.index is not None

    def is_name_only(self) -> bool:
        return self.text != "" and self.index is None

    def render(self) -> str:
        suffix = f"[{self.index}]" if self.index is not None else ""
        return self.text + suffix

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ErrorMessage:
    """One failure: a base message plus where it happened.

    ``paths`` is ordered by recency: the head is the segment prepended last,
    which is the outermost location since names are added from the inside
    out. ``render()`` walks it head to tail::

        ErrorMessage.of("too.short").prepend(Path.at_index(1)).prepend(Path.of("name"))
        # -> "name[1].too.short"
        ErrorMessage.of("m").prepend(Path.of("street")).prepend(Path.of("address"))
        # -> "address.street.m"
    """

    message: str
    paths: Tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        require(self.message, "Message cannot be None")
        object.__setattr__(self, "paths", tuple(require(self.paths, "Paths cannot be None")))

    @staticmethod
    def of(message: str) -> "ErrorMessage":
        return ErrorMessage(message)

    def prepend(self, path: Path) -> "ErrorMessage":
        require(path, "Path cannot be None")
        if self.paths and self.paths[0].is_index_only() and path.is_name_only():
            # "items" + "[2]" collapse into a single "items[2]" segment
            merged = Path(path.text, self.paths[0].index)
            return ErrorMessage(self.message, (merged,) + self.paths[1:])
        return ErrorMessage(self.message, (path,) + self.paths)

    def at_index(self, index: int) -> "ErrorMessage":
        if not self.paths:
            return ErrorMessage(self.message, (Path.at_index(index),))
        head = Path(self.paths[0].text, index)
        return ErrorMessage(self.message, (head,) + self.paths[1:])

    def render(self) -> str:
        segments = [p.render() for p in self.paths]
        return ".".join([s for s in segments if s] + [self.message])

    def __str__(self) -> str:
        return self.render()
