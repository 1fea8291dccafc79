import pytest
from PIL import Image

from pdfpeek.document import PdfDocument
from pdfpeek.model import PdfError

RAW = bytes([1, 2, 3, 4, 5, 6])


def _build_pdf(objects, version=b"1.4"):
    out = bytearray(b"%PDF-" + version + b"\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_pos = len(out)
    count = len(objects) + 1
    out += f"xref\n0 {count}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {count} /Root 1 0 R >>\nstartxref\n{xref_pos}\n%%EOF\n".encode()
    return bytes(out)


def _objects(font):
    return [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R 4 0 R] /Count 2 >>",
        b"<< /Type /Page /Parent 2 0 R /Resources << /Font << /F1 5 0 R >> /XObject << /Im1 6 0 R >> >> >>",
        b"<< /Type /Page /Parent 2 0 R >>",
        font,
        b"<< /Type /XObject /Subtype /Image /Width 2 /Height 1 /ColorSpace /DeviceRGB "
        b"/BitsPerComponent 8 /Length 6 >>\nstream\n" + RAW + b"\nendstream",
        b"<< /Type /FontDescriptor /FontName /ABCDEF+Arial >>",
    ]


@pytest.fixture
def pdf_path(tmp_path):
    path = tmp_path / "sample.pdf"
    path.write_bytes(_build_pdf(_objects(b"<< /Type /Font /Subtype /Type1 /Name /F1 /BaseFont /Helvetica >>")))
    return path


def test_total_pages_and_version(pdf_path):
    document = PdfDocument(pdf_path)
    assert document.total_pages() == 2
    assert document.version == "%PDF-1.4"
    assert [page.ref_num for page in document.pages] == [3, 4]
    assert [page.number for page in document.pages] == [1, 2]


def test_fonts_of_pages(pdf_path):
    document = PdfDocument(pdf_path)
    fonts = document.fonts(1)
    assert [(f.name, f.base_font, f.ref_num) for f in fonts] == [("F1", "Helvetica", 5)]
    assert document.fonts(2) == []


def test_font_descriptor_used_for_newer_versions(tmp_path):
    path = tmp_path / "new.pdf"
    font = b"<< /Type /Font /Subtype /TrueType /BaseFont /ABCDEF+Arial /FontDescriptor 7 0 R >>"
    path.write_bytes(_build_pdf(_objects(font), version=b"1.7"))
    fonts = PdfDocument(path).fonts(1)
    assert [(f.name, f.base_font) for f in fonts] == [("ABCDEF+Arial", "ABCDEF+Arial")]


def test_save_images(pdf_path, tmp_path):
    out_dir = tmp_path / "out"
    paths = PdfDocument(pdf_path).save_images(1, out_dir)
    assert len(paths) == 1
    with Image.open(paths[0]) as image:
        assert image.convert("RGB").tobytes() == RAW
    assert PdfDocument(pdf_path).save_images(2, out_dir) == []


def test_describe_resources(pdf_path, tmp_path):
    document = PdfDocument(pdf_path)
    first = document.describe_resources(1, tmp_path)
    assert first.startswith("PAGE 1 :\n\n\n")
    assert "Font Name: F1\nBase Font: Helvetica\n\n" in first
    assert first.endswith("IMAGES OF THIS PAGE HAVE BEEN SUCCESSFULLY SAVED IN THE ROOT DIRECTORY.")
    second = document.describe_resources(2, tmp_path)
    assert second.endswith("NO IMAGES FOUND IN THIS PAGE.")


def test_invalid_page_number(pdf_path):
    document = PdfDocument(pdf_path)
    with pytest.raises(PdfError):
        document.fonts(3)
    with pytest.raises(PdfError):
        document.save_images(0)


def test_missing_file(tmp_path):
    with pytest.raises(PdfError):
        PdfDocument(tmp_path / "absent.pdf")


def test_missing_eof_marker(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"%PDF-1.4\nnothing here\n")
    with pytest.raises(PdfError):
        PdfDocument(path)