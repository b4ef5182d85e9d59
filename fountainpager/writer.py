import os
import re
from typing import List, Optional

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

import fountainpager.error as error
import fountainpager.log as log
import fountainpager.pdf as pdf
import fountainpager.pml as pml
import fountainpager.util as util

logger = log.getLogger("writer")

# The capability set the pager needs from whatever draws the pages. All
# positions and sizes are in points, y growing downwards from the top of
# the page. The pager never asks a writer where it is; it keeps its own
# cursor and passes explicit positions in, so a writer only has to draw,
# measure and allocate pages.
class DocumentWriter:

    # use the TrueType font in 'path', or the built-in font if empty.
    def font(self, path: str) -> None:
        raise NotImplementedError

    def fontSize(self, size: float) -> None:
        raise NotImplementedError

    # extra space between lines, in points
    def setLineGap(self, gap: float) -> None:
        raise NotImplementedError

    # height of one line of text
    def lineHeight(self) -> float:
        raise NotImplementedError

    # height 'text' takes when wrapped to 'width'
    def heightOfString(self, text: str, width: float) -> float:
        raise NotImplementedError

    # draw 'text' wrapped to 'width' with its top at (x, y) and return the
    # height used. 'outline' is a document outline entry to attach to the
    # text, or None.
    def drawText(self, text: str, x: float, y: float, width: float,
                 align: int = util.ALIGN_LEFT,
                 outline: Optional[str] = None) -> float:
        raise NotImplementedError

    def newPage(self) -> None:
        raise NotImplementedError

    # y position just below the last thing drawn on the current page
    @property
    def currentY(self) -> float:
        raise NotImplementedError

    # finish the document and return its output location.
    def finalize(self) -> str:
        raise NotImplementedError

# writer that builds a PML document and renders it to a PDF file with
# reportlab on finalize.
class PMLWriter(DocumentWriter):
    def __init__(self, geom, outPath: str, producer: str = "fountainpager"):
        self.geom = geom
        self.outPath: str = outPath
        self.producer: str = producer

        self.doc: pml.Document = pml.Document(geom.pageWidth, geom.pageHeight)

        self.fontName: str = "Courier"
        self.size: float = 12
        self.lineGap: float = 0.0

        self.pg: Optional[pml.Page] = None
        self.y: float = geom.marginTop

        self.newPage()

    def font(self, path: str) -> None:
        if not path:
            self.fontName = "Courier"

            return

        # reportlab font names can't have spaces etc.
        name = re.sub(r"[^A-Za-z0-9\-]", "", os.path.splitext(
            os.path.basename(path))[0]) or "CustomFont"

        if name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(name, path))
            except (TTFError, OSError) as e:
                raise error.WriterError("Cannot load font '%s': %s" % (path, e))

        logger.debug("using font %s from %s", name, path)

        self.fontName = name
        self.doc.setFont(pml.PDFFontInfo(name, path))

    def fontSize(self, size: float) -> None:
        self.size = size

    def setLineGap(self, gap: float) -> None:
        self.lineGap = gap

    def lineHeight(self) -> float:
        return self.size + self.lineGap

    # split text into the lines it would be drawn as
    def wrap(self, text: str, width: float) -> List[str]:
        return simpleSplit(text or " ", self.fontName, self.size, width) or [" "]

    def heightOfString(self, text: str, width: float) -> float:
        return len(self.wrap(text, width)) * self.lineHeight()

    def drawText(self, text: str, x: float, y: float, width: float,
                 align: int = util.ALIGN_LEFT,
                 outline: Optional[str] = None) -> float:
        if align == util.ALIGN_CENTER:
            tx = x + width / 2.0
        elif align == util.ALIGN_RIGHT:
            tx = x + width
        else:
            tx = x

        lh = self.lineHeight()
        startY = y

        for i, line in enumerate(self.wrap(text, width)):
            to = pml.TextOp(line, tx, y, self.size, align,
                            self.fontName)

            if (i == 0) and outline:
                to.toc = pml.TOCItem(outline, to)
                self.doc.addTOC(to.toc)

            self.pg.add(to)
            y += lh

        self.y = y

        return y - startY

    def newPage(self) -> None:
        self.pg = pml.Page(self.doc)
        self.doc.add(self.pg)
        self.y = self.geom.marginTop

    @property
    def currentY(self) -> float:
        return self.y

    @property
    def pageCount(self) -> int:
        return len(self.doc.pages)

    def finalize(self) -> str:
        self.doc.showTOC = len(self.doc.tocs) > 0

        data = pdf.generate(self.doc, self.producer)

        try:
            util.writeToFile(self.outPath, data)
        except OSError as e:
            raise error.WriterError("Error writing file '%s': %s" % (
                self.outPath, e.strerror or e))

        logger.info("wrote %d pages to %s", self.pageCount, self.outPath)

        return self.outPath
