# pdfpeek

A small interactive tool for looking inside simple PDF files. It reads the
uncompressed cross-reference table of a PDF, finds its pages, and reports:

- the total number of pages;
- the fonts used on a page (font name and base font);
- the images on a page, which are built from their raw stream bytes and
  saved as PNG files.

## Installation

```
pip install .
```

## Command line

```
pdfpeek [path] [-o OUTPUT_DIR]
```

If `path` is not given, the program asks for the full path of a PDF file.
It then shows a menu:

```
1 for viewing total number of Pages
2 for viewing Resources of a Page ( Fonts & Images)
3 for Exit.
```

Choosing `2` asks for a page number, prints the fonts on that page and saves
its images as `IMAGE<length>.png` files, where `<length>` is the image
stream's `/Length`. Images go to the directory given with `-o` /
`--output-dir` (the current directory by default). After each screen the
program waits for Enter; it ends on `3` or at the end of input.

If the file cannot be opened as a PDF, the error is printed and the command
exits with status 1.

## Library use

```python
from pdfpeek.document import PdfDocument

doc = PdfDocument("report.pdf")
print(doc.total_pages())

for font in doc.fonts(1):
    print(font.name, font.base_font)

saved = doc.save_images(1, "out")
print(saved)
```

- `PdfDocument(path)` reads the file, its cross-reference table, its page
  list and the fonts of every page.
- `total_pages()` returns the number of pages.
- `fonts(page_number)` returns `pdfpeek.model.Font` objects (`ref_num`,
  `name`, `base_font`) for a 1-based page number. For PDF 1.6 and 1.7 files
  the name is taken from the font descriptor's `/FontName`, otherwise (or if
  that is missing) from the font's `/Name`.
- `save_images(page_number, target_dir=".")` writes the page's images as PNG
  files, creating the directory if needed, and returns their paths; an empty
  list means the page has no images.
- `describe_resources(page_number, target_dir=".")` saves the images and
  returns the same text report the command line prints.

Lower-level helpers live in `pdfpeek.rawio` (`read_line`, `find_eof_marker`,
`find_startxref`, `load_xref`, `read_object`) and `pdfpeek.images`
(`parse_image_info`, `swap_red_blue`, `extract_images`).

Problems with the file, such as a missing `%%EOF` marker, a missing
cross-reference table or a page number out of range, raise
`pdfpeek.model.PdfError`.

## Limitations

- Pages are not rendered; only page counts, fonts and images are shown.
- Only a classic, uncompressed cross-reference table is read, and only its
  first subsection. Cross-reference streams and object streams are not
  understood.
- Only the direct `/Kids` of the root page-tree node are taken as pages;
  nested page trees are not followed.
- Image streams are taken as raw samples and are not decompressed. Only
  8 bits per component is supported, in DeviceRGB, DeviceGray or DeviceCMYK
  (CMYK is converted to RGB); an RGB image whose dictionary mentions
  `/Decode` has its red and blue channels exchanged.

## Running the tests

```
pip install .[test]
pytest
```