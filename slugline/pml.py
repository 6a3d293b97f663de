# PML is short for Page Modeling Language, our own neat little PDF-wannabe
# format for expressing a script's complete contents in a neutral way
# that's easy to render to almost anything.
#

# A PML document is a collection of pages plus possibly some metadata.
# Each page is a collection of simple drawing commands, executed
# sequentially in the order given.

# All measurements in PML are in (floating point) points, with the origin
# at the lower left corner of the page and y growing upwards, exactly like
# in PDF. TextOp's y is the text's baseline.

from typing import List, Optional

import slugline.misc as misc
import slugline.pdf as pdf

# text flags. don't change these unless you know what you're doing.
NORMAL = 0
BOLD   = 1

# A single document.
class Document:

    # (w, h) is the size of each page.
    def __init__(self, w: float, h: float):
        self.w: float = w
        self.h: float = h

        self.pages: List[Page] = []

        self.tocs: List[TOCItem] = []

        # whether to show TOC by default on document open
        self.showTOC: bool = False

        self.version: str = misc.version

        # document title, stored in the PDF's metadata if not empty
        self.title: str = ""

    def add(self, page: 'Page') -> None:
        self.pages.append(page)

    def addTOC(self, toc: 'TOCItem') -> None:
        self.tocs.append(toc)

class Page:
    def __init__(self, doc: Document):

        # link to containing document
        self.doc: Document = doc

        # a collection of TextOp objects
        self.ops: List['TextOp'] = []

    def add(self, op: 'TextOp') -> None:
        self.ops.append(op)

# Table of content item (Outline item, in PDF lingo)
class TOCItem:
    def __init__(self, text: str, op: 'TextOp'):
        # text to show in TOC
        self.text: str = text

        # pointer to the TextOp that this item links to (used to get the
        # correct positioning information)
        self.op: TextOp = op

# Draw text string 'text' with its baseline starting at (x, y). Font used
# is 'size' points Courier, bold if flags says so.
class TextOp:
    pdfOp = pdf.PDFTextOp()

    def __init__(self, text: str, x: float, y: float, size: int,
                 flags: int = NORMAL):
        self.text: str = text
        self.x: float = x
        self.y: float = y
        self.size: int = size
        self.flags: int = flags

        # TOCItem, by default we have none
        self.toc: Optional[TOCItem] = None

    @property
    def isBold(self) -> bool:
        return bool(self.flags & BOLD)

    def __repr__(self) -> str:
        return "TextOp(%r, %.2f, %.2f, %d, %d)" % (
            self.text, self.x, self.y, self.size, self.flags)
