# PML is short for Page Modeling Language, our own neat little PDF-wannabe
# format for expressing a paginated script's complete contents in a
# neutral way that's easy to render to almost anything.
#

# A PML document is a collection of pages plus possibly some metadata.
# Each page is a collection of simple drawing commands, executed
# sequentially in the order given, assuming "complete overdraw" semantics
# on the output device, i.e. whatever is drawn completely covers things it
# is painted on top of.

# All measurements in PML are in (floating point) PostScript points,
# measured from the upper left corner of the page.

from typing import Optional, List

import fountainpager.util as util

# A single document.
class Document:

    # (w, h) is the size of each page.
    def __init__(self, w: float, h: float):
        self.w: float = w
        self.h: float = h

        self.pages: List[Page] = []

        self.tocs: List[TOCItem] = []

        # user-specified font all text is drawn in, or None for the
        # built-in Courier
        self.font: Optional['PDFFontInfo'] = None

        # whether to show TOC by default on document open
        self.showTOC: bool = False

    def add(self, page: 'Page') -> None:
        self.pages.append(page)

    def addTOC(self, toc: 'TOCItem') -> None:
        self.tocs.append(toc)

    def setFont(self, pfi: 'PDFFontInfo') -> None:
        self.font = pfi

class Page:
    def __init__(self, doc: Document):

        # link to containing document
        self.doc: Document = doc

        # a collection of Operation objects
        self.ops: List['DrawOp'] = []

    def add(self, op: 'DrawOp') -> None:
        self.ops.append(op)

# Table of content item (Outline item, in PDF lingo)
class TOCItem:
    def __init__(self, text: str, op: 'TextOp'):
        # text to show in TOC
        self.text: str = text

        # pointer to the TextOp that this item links to (used to get the
        # correct positioning information)
        self.op: TextOp = op

# information about one PDF font
class PDFFontInfo:
    def __init__(self, name: str, fontFileName: Optional[str]):
        # name the font is registered under in reportlab ("CourierPrime",
        # etc.). if empty, use the default PDF font.
        self.name: str = name

        # the TrueType file the font was registered from, or None for
        # built-in fonts.
        self.fontFileName: Optional[str] = fontFileName

# An abstract base class for all drawing operations.
class DrawOp:
    pass

# Draw text string 'text', at position (x, y) from the upper left corner
# of the page, at 'size' points.
class TextOp(DrawOp):

    def __init__(self, text: str, x: float, y: float, size: float,
                 align: int = util.ALIGN_LEFT,
                 fontName: str = "Courier"):
        """
        :param align: x is the left edge, the center or the right edge of
            the text, for ALIGN_LEFT, ALIGN_CENTER and ALIGN_RIGHT.
        :param fontName: the font used to measure the text for alignment
        """
        self.text: str = text
        self.x: float = x
        self.y: float = y
        self.size: float = size

        # TOCItem, by default we have none
        self.toc: Optional[TOCItem] = None

        if align != util.ALIGN_LEFT:
            w = util.getTextWidth(text, fontName, size)

            if align == util.ALIGN_CENTER:
                self.x -= w / 2.0
            elif align == util.ALIGN_RIGHT:
                self.x -= w

