import uuid
from typing import TYPE_CHECKING

from reportlab.pdfgen.canvas import Canvas

import slugline.util as util

if TYPE_CHECKING:
    import slugline.pml as pml

# users should only use this.
def generate(doc: 'pml.Document') -> bytes:
    tmp = PDFExporter(doc)
    return tmp.generate()

# An abstract base class for all PDF drawing operations.
class PDFDrawOp:

    # draw the PML object pmlOp on canvas. pe = PDFExporter.
    def draw(self, pmlOp, pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        raise NotImplementedError("draw not implemented")

class PDFTextOp(PDFDrawOp):
    def draw(self, pmlOp: 'pml.TextOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        canvas.setFont(util.getFontName(pmlOp.isBold), pmlOp.size)
        canvas.drawString(pmlOp.x, pmlOp.y, pmlOp.text)

        # create bookmark for table of contents if applicable
        if pmlOp.toc and pe.doc.tocs:
            bookmarkKey = "scene-%d-%s" % (pageNr + 1, uuid.uuid4().hex)
            canvas.bookmarkHorizontal(bookmarkKey, pmlOp.x,
                                      pmlOp.y + pmlOp.size)
            canvas.addOutlineEntry(pmlOp.toc.text, bookmarkKey)

class PDFExporter:
    def __init__(self, doc: 'pml.Document'):
        self.doc: 'pml.Document' = doc

    # generate PDF document and return it as bytes
    def generate(self) -> bytes:
        doc = self.doc
        canvas = Canvas(
            '',
            pdfVersion=(1, 5),
            pagesize=(doc.w, doc.h),
            initialFontName=util.getFontName(False),
        )

        # set PDF info
        version = self.doc.version
        canvas.setCreator('Slugline ' + version)
        canvas.setProducer('Slugline ' + version)

        if doc.title:
            canvas.setTitle(doc.title)

        numberOfPages: int = len(doc.pages)

        # draw pages
        for i in range(numberOfPages):
            pg = self.doc.pages[i]
            for op in pg.ops:
                op.pdfOp.draw(op, i, self, canvas)

            if i < numberOfPages - 1:
                canvas.showPage()

        if doc.showTOC and doc.tocs:
            canvas.showOutline()

        return canvas.getpdfdata()
