"""Data structures describing the parts of a PDF file that are inspected."""

from __future__ import annotations

from dataclasses import dataclass, field


class PdfError(Exception):
    """Raised when a file cannot be read as a PDF document."""


@dataclass
class Font:
    """A font resource referenced by a page."""

    ref_num: int
    name: str = ""
    base_font: str = ""


@dataclass
class ImageInfo:
    """An image XObject referenced by a page."""

    ref_num: int
    width: int = 0
    height: int = 0
    length: int = 0
    bits_per_component: int = 0
    color_space: str = ""
    filtered: bool = False


@dataclass(frozen=True)
class XrefEntry:
    """One row of the cross-reference table."""

    offset: int
    generation: int
    kind: str

    @property
    def in_use(self) -> bool:
        """True for entries of type 'n' (objects in use)."""
        return self.kind == "n"


@dataclass
class Page:
    """A page of the document together with its resources."""

    number: int
    ref_num: int
    generation: int = 0
    fonts: list[Font] = field(default_factory=list)
    images: list[ImageInfo] = field(default_factory=list)