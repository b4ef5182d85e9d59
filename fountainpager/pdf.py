import uuid
from typing import Dict

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen.canvas import Canvas

import fountainpager.error as error
import fountainpager.pml as pml

# the Adobe standard Courier family font metrics give 157 units in 1/1000
# point units as the Descender value, thus giving (1000 - 157) = 843
# units from baseline to top of text.
ASCENT = 0.843

# built-in font used when the document has no custom font
DEFAULT_FONT = "Courier"

# users should only use this.
def generate(doc: 'pml.Document', producer: str = "fountainpager") -> bytes:
    tmp = PDFExporter(doc, producer)
    return tmp.generate()

# An abstract base class for all PDF drawing operations.
class PDFDrawOp:

    # draw the PML object pmlOp onto canvas. pe = PDFExporter.
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        raise NotImplementedError("draw not implemented")

class PDFTextOp(PDFDrawOp):
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        if not isinstance(pmlOp, pml.TextOp):
            raise error.WriterError("PDFTextOp is only compatible with pml.TextOp, got " + type(pmlOp).__name__)

        # we need to adjust y position since PDF uses baseline of text as
        # the y pos, but pml uses top of the text as y pos.
        x = pe.x(pmlOp.x)
        y = pe.y(pmlOp.y) - ASCENT * pmlOp.size

        newFont = pe.getFont()
        canvas.setFont(newFont, pmlOp.size)
        canvas.drawString(x, y, pmlOp.text)

        # create bookmark for table of contents if applicable
        if pmlOp.toc:
            bookmarkKey = uuid.uuid4().hex
            canvas.bookmarkHorizontal(bookmarkKey, pe.x(pmlOp.x), pe.y(pmlOp.y))
            canvas.addOutlineEntry(pmlOp.toc.text, bookmarkKey)

class PDFExporter:
    # how to draw each kind of PML operation
    drawOps: Dict[type, PDFDrawOp] = {
        pml.TextOp: PDFTextOp(),
    }

    def __init__(self, doc: 'pml.Document', producer: str):
        self.doc: pml.Document = doc
        self.producer: str = producer

    # generate PDF document and return it as bytes
    def generate(self) -> bytes:
        doc = self.doc
        canvas = Canvas(
            '',
            pdfVersion=(1, 5),
            pagesize=(doc.w, doc.h),
            initialFontName=self.getFont(),
        )

        # set PDF info
        canvas.setCreator(self.producer)
        canvas.setProducer(self.producer)

        numberOfPages: int = len(doc.pages)

        # draw pages
        for i in range(numberOfPages):
            pg = doc.pages[i]
            for op in pg.ops:
                self.drawOps[type(op)].draw(op, i, self, canvas)

            if i < numberOfPages - 1:
                canvas.showPage()

        if doc.showTOC:
            canvas.showOutline()

        return canvas.getpdfdata()

    # get the name of the font all text is drawn in. also registers the
    # document's custom font in reportlab if it does not yet exist.
    def getFont(self) -> str:
        customFontInfo = self.doc.font

        if not customFontInfo:
            return DEFAULT_FONT

        if not customFontInfo.name in pdfmetrics.getRegisteredFontNames():
            if not customFontInfo.fontFileName:
                raise error.WriterError('Font name "%s" is not known and no font file name provided.' % customFontInfo.name)
            pdfmetrics.registerFont(TTFont(customFontInfo.name, customFontInfo.fontFileName))

        return customFontInfo.name

    # convert x coordinate
    def x(self, x: float) -> float:
        return x

    # convert y coordinate
    def y(self, y: float) -> float:
        return self.doc.h - y
