"""A PDF document opened for inspection of its pages, fonts and images."""

from __future__ import annotations

import io
import re
from pathlib import Path

from .images import extract_images
from .model import Font, Page, PdfError
from .rawio import find_eof_marker, find_startxref, load_xref, read_object

_ROOT_REF = re.compile(rb"/Root\s+(\d+)\s+\d+\s+R")
_PAGES_REF = re.compile(r"/Pages\s+(\d+)\s+\d+\s+R")
_KIDS = re.compile(r"/Kids\s*\[(.*?)\]", re.S)
_REF = re.compile(r"(\d+)\s+(\d+)\s+R")
_FONT_DICT = re.compile(r"/Font\s*<<(.*?)>>", re.S)
_NAMED_REF = re.compile(r"/[^\s/<>\[\]()]+\s*(\d+)\s+\d+\s+R")
_DESCRIPTOR_REF = re.compile(r"/FontDescriptor\s+(\d+)\s+\d+\s+R")


def _name_after(text: str, key: str) -> str:
    match = re.search(rf"/{key}\s*/([^\s/<>\[\]()]+)", text)
    return match.group(1) if match else ""


class PdfDocument:
    """An uncompressed PDF file with its page tree and page fonts loaded."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise PdfError(f"No PDF found at {self.path}.") from exc
        self._stream = io.BytesIO(data)
        self.version = data[:8].decode("latin-1")
        eof_offset = find_eof_marker(self._stream)
        self.xref = load_xref(self._stream, find_startxref(self._stream, eof_offset))
        self.catalog_ref = self._find_root(data, len(data) + eof_offset)
        self.pages = self._extract_pages()
        for page in self.pages:
            page.fonts = self._extract_fonts(page)

    def _read(self, ref_num: int) -> str:
        return read_object(self._stream, self.xref, ref_num)

    @staticmethod
    def _find_root(data: bytes, end: int) -> int:
        matches = list(_ROOT_REF.finditer(data, 0, end))
        if not matches:
            raise PdfError("Unable to find the document catalog (/Root).")
        return int(matches[-1].group(1))

    def _extract_pages(self) -> list[Page]:
        match = _PAGES_REF.search(self._read(self.catalog_ref))
        if match is None:
            raise PdfError("The catalog has no /Pages entry.")
        self.pages_ref = int(match.group(1))
        kids = _KIDS.search(self._read(self.pages_ref))
        if kids is None:
            raise PdfError("The page tree has no /Kids entry.")
        return [
            Page(number, int(ref), int(generation))
            for number, (ref, generation) in enumerate(
                _REF.findall(kids.group(1)), start=1
            )
        ]

    def _uses_font_descriptor(self) -> bool:
        return len(self.version) > 7 and self.version[7] in "67"

    def _extract_fonts(self, page: Page) -> list[Font]:
        match = _FONT_DICT.search(self._read(page.ref_num))
        if match is None:
            return []
        fonts = []
        for ref in _NAMED_REF.findall(match.group(1)):
            ref_num = int(ref)
            text = self._read(ref_num)
            name = ""
            if self._uses_font_descriptor():
                descriptor = _DESCRIPTOR_REF.search(text)
                if descriptor is not None:
                    name = _name_after(self._read(int(descriptor.group(1))), "FontName")
            if not name:
                name = _name_after(text, "Name")
            fonts.append(Font(ref_num, name, _name_after(text, "BaseFont")))
        return fonts

    def _page(self, page_number: int) -> Page:
        if not 1 <= page_number <= len(self.pages):
            raise PdfError(f"Page {page_number} does not exist.")
        return self.pages[page_number - 1]

    def total_pages(self) -> int:
        """Number of pages listed in the page tree."""
        return len(self.pages)

    def fonts(self, page_number: int) -> list[Font]:
        """Fonts used by the page with the given 1-based number."""
        return list(self._page(page_number).fonts)

    def save_images(self, page_number: int, target_dir: str | Path = ".") -> list[Path]:
        """Save the page's images as PNG files and return their paths."""
        return extract_images(self._stream, self.xref, self._page(page_number), target_dir)

    def describe_resources(self, page_number: int, target_dir: str | Path = ".") -> str:
        """Report the page's fonts and save its images, returning the report."""
        parts = [f"PAGE {page_number} :\n\n\n"]
        for font in self.fonts(page_number):
            parts.append(f"Font Name: {font.name}\nBase Font: {font.base_font}\n\n")
        if self.save_images(page_number, target_dir):
            parts.append("\n\nIMAGES OF THIS PAGE HAVE BEEN SUCCESSFULLY SAVED IN THE ROOT DIRECTORY.")
        else:
            parts.append("\n\nNO IMAGES FOUND IN THIS PAGE.")
        return "".join(parts)