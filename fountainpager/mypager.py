from typing import NamedTuple

import fountainpager.blocks as blocks
import fountainpager.dual as dual
import fountainpager.error as error
import fountainpager.height as height
import fountainpager.log as log
import fountainpager.pagebreak as pagebreak
import fountainpager.scenes as scenes
import fountainpager.screenplay as screenplay
import fountainpager.titles as titles
import fountainpager.util as util

logger = log.getLogger("pager")

# one scene heading as it ended up in the paginated document
class SceneEntry(NamedTuple):
    nr: int
    text: str

    # body page number the heading is on
    page: int

# lays out a script onto a DocumentWriter in a single forward pass over
# its lines. every line is classified when it is visited, in the context
# of the line before it.
class Pager:
    def __init__(self, writer, geom, opts,
                 classify = screenplay.classifyLine):
        self.writer = writer
        self.geom = geom
        self.opts = opts
        self.classify = classify

        self.est = height.HeightEstimator(writer, geom)
        self.collector = blocks.BlockCollector(classify)
        self.decider = pagebreak.PageBreakDecider(writer, self.est, geom,
                                                  opts)
        self.dual = dual.DualDialogueLayout(writer, self.est, self.decider,
            self.collector, geom, opts)
        self.numberer = scenes.SceneNumberer(opts)

        # title page, or None if the script has none
        self.titlePage = None

        # list of SceneEntry objects, in script order
        self.scenes = []

        # number of body pages written
        self.pageCount = 0

        # key = line type, value = function(cursor, lines, idx) that
        # writes the element at lines[idx] and returns the index of the
        # next line to visit.
        self.handlers = {
            screenplay.SCENE : self.doScene,
            screenplay.ACTION : self.doAction,
            screenplay.CHARACTER : self.doCharacter,
            screenplay.PAREN : self.doSpeechLine,
            screenplay.DIALOGUE : self.doSpeechLine,
            screenplay.TRANSITION : self.doTransition,
            screenplay.LYRICS : self.doLyrics,
            screenplay.UNKNOWN : self.doAction,
            }

        missing = [lt.value for lt in screenplay.ElementType
                   if lt not in self.handlers]

        if missing:
            raise error.LayoutError("No layout for element types: %s" %
                                    ", ".join(missing))

    # lay out the whole script 'text', title page included, and finalize
    # the document. returns whatever the writer's finalize returns.
    def generate(self, text):
        lines = util.fixNL(text).split("\n")

        parsed = titles.parseTitlePage(text)
        start = parsed.consumed

        if start:
            self.titlePage = titles.TitlePage(parsed.metadata)
            self.titlePage.generate(self.writer, self.geom)
            self.writer.newPage()

            # the blank line ending the title page is not part of the
            # body
            if (start < len(lines)) and util.isBlank(lines[start]):
                start += 1

        cursor = self.paginate(lines[start:])

        self.pageCount = cursor.page

        logger.debug("%d lines laid out on %d pages, %d scenes",
                     len(lines) - start, cursor.page, len(self.scenes))

        return self.writer.finalize()

    # lay out body 'lines' starting at the top of the writer's current
    # page, returning the final cursor.
    def paginate(self, lines):
        cursor = pagebreak.Cursor(self.geom.printableTopY)

        prevType = None
        idx = 0

        while idx < len(lines):
            text = lines[idx]

            if util.isBlank(text):
                self.writeBlank(cursor)
                prevType = None
                idx += 1

                continue

            lt = self.classify(text, prevType)
            idx = self.handlers[lt](cursor, lines, idx)
            prevType = lt

        return cursor

    # write 'text' as a single unit, on the next page if it doesn't fit
    # on this one.
    def writeElement(self, cursor, text, lt, align = util.ALIGN_LEFT,
                     outline = None):
        pw = self.geom.printableWidth
        indent, width = self.est.textBox(lt, pw)

        self.decider.ensureSpace(cursor, self.est.heightOf(text, lt, pw))

        y = cursor.y
        cursor.advance(self.writer.drawText(text, self.geom.marginLeft +
            indent, y, width, align, outline))

        return y

    def writeBlank(self, cursor):
        self.writeElement(cursor, " ", screenplay.ACTION)

    def doScene(self, cursor, lines, idx):
        nr = self.numberer.next()
        text = screenplay.sceneText(lines[idx])

        outline = None
        if self.opts.pdfIncludeTOC:
            if self.opts.sceneNumbers:
                outline = "%d %s" % (nr, text)
            else:
                outline = text

        y = self.writeElement(cursor, self.numberer.headingText(nr, text),
                              screenplay.SCENE, outline = outline)
        self.numberer.drawMargins(self.writer, self.geom, nr, y)

        self.scenes.append(SceneEntry(nr, text, cursor.page))

        return idx + 1

    def doCharacter(self, cursor, lines, idx):
        left = self.collector.collect(lines, idx + 1)
        res = self.dual.detect(lines, idx, left)

        if res:
            pair, nextIdx = res
            self.dual.write(cursor, pair)

            return nextIdx

        self.decider.writeDialogue(cursor, screenplay.cueName(lines[idx]),
                                   left.block)

        return left.nextIndex

    def doAction(self, cursor, lines, idx):
        self.writeElement(cursor, lines[idx].rstrip(), screenplay.ACTION)

        return idx + 1

    # a dialogue or parenthetical line outside of a speech
    def doSpeechLine(self, cursor, lines, idx):
        text = lines[idx].strip()

        if screenplay.isParen(text):
            lt = screenplay.PAREN
        else:
            lt = screenplay.DIALOGUE

        self.writeElement(cursor, text, lt)

        return idx + 1

    def doTransition(self, cursor, lines, idx):
        self.writeElement(cursor, screenplay.transitionText(lines[idx]),
                          screenplay.TRANSITION, util.ALIGN_RIGHT)

        return idx + 1

    def doLyrics(self, cursor, lines, idx):
        self.writeElement(cursor, lines[idx].strip().lstrip("~").strip(),
                          screenplay.LYRICS)

        return idx + 1
