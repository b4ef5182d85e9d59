# see README.md for a description of every setting found here.

from typing import NamedTuple

from reportlab.lib import pagesizes

import fountainpager.mypickle as mypickle
import fountainpager.util as util

# named page sizes, value = (width, height) in points
PAGE_SIZES = {
    "LETTER" : pagesizes.LETTER,
    "LEGAL" : pagesizes.LEGAL,
    "A4" : pagesizes.A4,
    "A5" : pagesizes.A5,
    }

# scene number placement
SCENE_NR_INLINE = "inline"
SCENE_NR_MARGIN = "margin"

# scene number style
SCENE_NR_PLAIN = "plain"
SCENE_NR_PARENTHESES = "parentheses"

# immutable per-document page geometry, all values in points. y grows
# downwards from the top edge of the page.
class PageGeometry(NamedTuple):
    pageWidth: float
    pageHeight: float
    marginTop: float
    marginBottom: float
    marginLeft: float
    marginRight: float
    indentParenthetical: float
    indentDialogue: float
    dualGutter: float

    @property
    def printableWidth(self) -> float:
        return self.pageWidth - self.marginLeft - self.marginRight

    @property
    def printableTopY(self) -> float:
        return self.marginTop

    @property
    def printableBottomY(self) -> float:
        return self.pageHeight - self.marginBottom

# immutable layout policy for one export
class LayoutOptions(NamedTuple):
    sceneNumbers: bool
    sceneNumberPosition: str
    sceneNumberStyle: str
    showMore: bool
    showContd: bool
    minBlockLines: int
    strMore: str
    strContd: str
    showPageNumbers: bool
    pdfIncludeTOC: bool

# per-export config. loaded from caller-supplied settings, fixed up by
# recalc() and then turned into a PageGeometry and LayoutOptions for the
# pager.
class Config:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        self.recalc()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # paper size
        v.addChoice("pageSize", "LETTER", tuple(PAGE_SIZES))

        # margins, in inches
        v.addFloat("marginTopIn", 1.0, 0.0, 10.0)
        v.addFloat("marginBottomIn", 1.0, 0.0, 10.0)
        v.addFloat("marginLeftIn", 1.0, 0.0, 10.0)
        v.addFloat("marginRightIn", 1.0, 0.0, 10.0)

        # TrueType font file to use instead of the built-in Courier, or
        # empty
        v.addStr("fontPath", "")

        # font size, in points
        v.addInt("fontSize", 12, 4, 72)

        # extra space between lines, in points
        v.addFloat("lineGap", 0.0, 0.0, 72.0)

        # column geometry, in inches
        v.addFloat("indentParentheticalIn", 0.5, 0.0, 6.0)
        v.addFloat("indentDialogueIn", 1.5, 0.0, 6.0)
        v.addFloat("dualGutterIn", 1.0 / 3.0, 0.0, 3.0)

        # scene numbers
        v.addBool("sceneNumbers", False)
        v.addChoice("sceneNumberPosition", SCENE_NR_INLINE,
                    (SCENE_NR_INLINE, SCENE_NR_MARGIN))
        v.addChoice("sceneNumberStyle", SCENE_NR_PLAIN,
                    (SCENE_NR_PLAIN, SCENE_NR_PARENTHESES))

        # dialogue continuation markers
        v.addBool("showMore", True)
        v.addBool("showContd", True)

        # leave at least this many dialogue lines together around a page
        # break
        v.addInt("minBlockLines", 2, 1, 30)

        # various strings we add to the script
        v.addStr("strMore", "(MORE)")
        v.addStr("strContd", "(CONT'D)")

        # whether to print "N." page numbers on body pages after the first
        v.addBool("showPageNumbers", False)

        # whether to add scene headings to the PDF outline
        v.addBool("pdfIncludeTOC", True)

        v.makeDicts()

    # load config from string 's' in "name:value" lines. does not throw
    # any exceptions, silently ignores any errors, and always leaves
    # config in an ok state. returns the names that were not recognized.
    def load(self, s):
        return self.loadVals(self.cvars.makeVals(s))

    # like load, but from a mapping of setting name -> value, e.g. parsed
    # JSON settings.
    def loadDict(self, d):
        vals = {}

        for k, v in d.items():
            vals[str(k)] = str(v)

        return self.loadVals(vals)

    def loadVals(self, vals):
        self.cvars.load(vals, self)
        self.recalc()

        return sorted(vals)

    # save config into a string and return that.
    def save(self):
        return self.cvars.save(self)

    # fix up all invalid config values and recalculate all variables
    # dependent on other variables.
    def recalc(self):
        for it in self.cvars.numeric.values():
            util.clampObj(self, it.name, it.minVal, it.maxVal)

        for it in self.cvars.choice.values():
            if getattr(self, it.name) not in it.choices:
                setattr(self, it.name, it.defVal)

        self.pageWidth, self.pageHeight = PAGE_SIZES[self.pageSize]

        # make sure usable space on the page isn't too small
        if util.inches2points(self.marginTopIn + self.marginBottomIn) >= \
               (self.pageHeight - util.POINTS_PER_INCH):
            self.marginTopIn = 0.0
            self.marginBottomIn = 0.0

        if util.inches2points(self.marginLeftIn + self.marginRightIn) >= \
               (self.pageWidth - util.POINTS_PER_INCH):
            self.marginLeftIn = 0.0
            self.marginRightIn = 0.0

    def getGeometry(self):
        p = util.inches2points

        return PageGeometry(
            pageWidth = self.pageWidth,
            pageHeight = self.pageHeight,
            marginTop = p(self.marginTopIn),
            marginBottom = p(self.marginBottomIn),
            marginLeft = p(self.marginLeftIn),
            marginRight = p(self.marginRightIn),
            indentParenthetical = p(self.indentParentheticalIn),
            indentDialogue = p(self.indentDialogueIn),
            dualGutter = p(self.dualGutterIn))

    def getOptions(self):
        return LayoutOptions(
            sceneNumbers = self.sceneNumbers,
            sceneNumberPosition = self.sceneNumberPosition,
            sceneNumberStyle = self.sceneNumberStyle,
            showMore = self.showMore,
            showContd = self.showContd,
            minBlockLines = self.minBlockLines,
            strMore = self.strMore,
            strContd = self.strContd,
            showPageNumbers = self.showPageNumbers,
            pdfIncludeTOC = self.pdfIncludeTOC)
