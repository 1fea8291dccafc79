"""Image XObjects of a page: parsing their dictionaries and saving them as PNG."""

from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO, Sequence

from PIL import Image

from .model import ImageInfo, Page, PdfError, XrefEntry
from .rawio import read_line, read_object

_XOBJECT_DICT = re.compile(r"/XObject\s*<<(.*?)>>", re.S)
_NAMED_REF = re.compile(r"/[^\s/<>\[\]()]+\s*(\d+)\s+\d+\s+R")
_COLOR_SPACE = re.compile(r"/ColorSpace\s*/([^\s/<>\[\]()]+)")

_MODES = {
    "DeviceRGB": "RGB",
    "RGB": "RGB",
    "DeviceGray": "L",
    "G": "L",
    "DeviceCMYK": "CMYK",
    "CMYK": "CMYK",
}
_COMPONENTS = {"L": 1, "RGB": 3, "CMYK": 4}


def _int_field(text: str, key: str, ref_num: int) -> int:
    match = re.search(rf"/{key}\s+(\d+)", text)
    if match is None:
        raise PdfError(f"Image object {ref_num} has no /{key} entry.")
    return int(match.group(1))


def parse_image_info(text: str, ref_num: int) -> ImageInfo:
    """Build an ImageInfo from the dictionary text of an image object."""
    color = _COLOR_SPACE.search(text)
    return ImageInfo(
        ref_num=ref_num,
        width=_int_field(text, "Width", ref_num),
        height=_int_field(text, "Height", ref_num),
        length=_int_field(text, "Length", ref_num),
        bits_per_component=_int_field(text, "BitsPerComponent", ref_num),
        color_space=color.group(1) if color else "",
        filtered="/Decode" in text,
    )


def swap_red_blue(image: Image.Image) -> Image.Image:
    """Return a copy of an RGB or RGBA image with red and blue exchanged."""
    if image.mode not in ("RGB", "RGBA"):
        raise ValueError(f"cannot swap red and blue in a {image.mode} image")
    bands = list(image.split())
    bands[0], bands[2] = bands[2], bands[0]
    return Image.merge(image.mode, bands)


def _stream_data(stream: BinaryIO, entry: XrefEntry, length: int) -> bytes:
    stream.seek(entry.offset)
    while True:
        line = read_line(stream)
        if not line:
            raise PdfError("Image object has no stream.")
        if "stream" in line:
            return stream.read(length)


def _decode(info: ImageInfo, data: bytes) -> Image.Image:
    if info.bits_per_component != 8:
        raise PdfError(
            f"Unsupported bits per component: {info.bits_per_component}."
        )
    mode = _MODES.get(info.color_space, "RGB")
    expected = info.width * info.height * _COMPONENTS[mode]
    if len(data) < expected:
        raise PdfError(
            f"Image stream of object {info.ref_num} is too short "
            f"({len(data)} of {expected} bytes)."
        )
    image = Image.frombytes(mode, (info.width, info.height), data[:expected])
    if mode == "CMYK":
        image = image.convert("RGB")
    if info.filtered and image.mode == "RGB":
        image = swap_red_blue(image)
    return image


def extract_images(
    stream: BinaryIO,
    xref: Sequence[XrefEntry],
    page: Page,
    target_dir: str | Path,
) -> list[Path]:
    """Save every image of ``page`` as a PNG in ``target_dir``.

    Fills ``page.images`` and returns the paths written; an empty list
    means the page has no image resources.
    """
    page_text = read_object(stream, xref, page.ref_num)
    match = _XOBJECT_DICT.search(page_text)
    if match is None:
        page.images = []
        return []

    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)
    page.images = []
    saved = []
    for ref in _NAMED_REF.findall(match.group(1)):
        ref_num = int(ref)
        info = parse_image_info(read_object(stream, xref, ref_num), ref_num)
        page.images.append(info)
        data = _stream_data(stream, xref[ref_num], info.length)
        path = target / f"IMAGE{info.length}.png"
        _decode(info, data).save(path, format="PNG")
        saved.append(path)
    return saved