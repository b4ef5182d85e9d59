import fountainpager.log as log
import fountainpager.screenplay as screenplay
import fountainpager.util as util

logger = log.getLogger("pagebreak")

# current write position. owned by the pager and handed to whatever
# component is writing at the moment; only code that draws advances it.
class Cursor:
    def __init__(self, top):
        # y of the first printable line on every page
        self.top = top

        # current y position on the current page
        self.y = top

        # body page number, 1-based
        self.page = 1

    def advance(self, height):
        self.y += height

    # True if nothing has been written on the current page yet
    def isAtTop(self):
        return self.y <= self.top

    def nextPage(self):
        self.y = self.top
        self.page += 1

# decides where pages break, and writes dialogue blocks honoring the
# minimum number of lines that have to stay together around a break.
class PageBreakDecider:
    def __init__(self, writer, estimator, geom, opts):
        self.writer = writer
        self.est = estimator
        self.geom = geom
        self.opts = opts

    # True if 'height' more points fit on the current page
    def fits(self, cursor, height):
        return (cursor.y + height) <= self.geom.printableBottomY

    def breakPage(self, cursor):
        logger.debug("page %d ends at y=%.1f", cursor.page, cursor.y)

        self.writer.newPage()
        cursor.nextPage()

        if self.opts.showPageNumbers and (cursor.page > 1):
            g = self.geom
            lh = self.writer.lineHeight()

            self.writer.drawText("%d." % cursor.page, g.marginLeft,
                max(g.marginTop - 2 * lh, 0.0), g.printableWidth,
                util.ALIGN_RIGHT)

    # start a new page unless a unit of 'height' fits on this one. a unit
    # that doesn't fit even on an empty page is written anyway. returns
    # True if the page was broken.
    def ensureSpace(self, cursor, height):
        if self.fits(cursor, height):
            return False

        if cursor.isAtTop():
            logger.debug("unit of %.1f points overflows page %d", height,
                         cursor.page)

            return False

        self.breakPage(cursor)

        return True

    # character name as printed on a continuation page
    def contdName(self, name):
        if self.opts.showContd:
            return "%s %s" % (name, self.opts.strContd)

        return name

    # draw (MORE) right-aligned in the given column, just below the last
    # line written. does not move the cursor.
    def drawMore(self, cursor, x, width):
        self.writer.drawText(self.opts.strMore, x, cursor.y, width,
                             util.ALIGN_RIGHT)

    def writeHeader(self, cursor, name, x, width):
        h = self.writer.drawText(name, x, cursor.y, width, util.ALIGN_CENTER)
        cursor.advance(h)

    def writeLine(self, cursor, elem, x, width):
        indent, w = self.est.textBox(elem.lt, width)

        h = self.writer.drawText(elem.text.strip() or " ", x + indent,
                                 cursor.y, w)
        cursor.advance(h)

    # return the index one past the last line of the block, starting at
    # 'start', to write on the current page. 'heights' are the measured
    # heights of all the block's lines.
    def planPage(self, cursor, heights, start):
        bottom = self.geom.printableBottomY
        minLines = self.opts.minBlockLines
        count = len(heights)

        y = cursor.y
        end = start

        while (end < count) and ((y + heights[end]) <= bottom):
            y += heights[end]
            end += 1

        if end == count:
            return end

        if end == start:
            # header is at the top of the page and even one line doesn't
            # fit under it
            logger.debug("dialogue line overflows page %d", cursor.page)

            return start + 1

        # don't leave fewer than minLines to the next page if we can
        # move lines over without going under minLines on this one.
        if (count - end) < minLines:
            shifted = count - minLines

            if (shifted - start) >= minLines:
                end = shifted

        return end

    # write character cue 'name' and its dialogue block, breaking pages
    # as needed.
    def writeDialogue(self, cursor, name, block):
        g = self.geom
        pw = g.printableWidth
        minLines = self.opts.minBlockLines

        heights = [self.est.heightOf(e.text.strip(), e.lt, pw) for e in block]
        headerHeight = self.est.heightOf(name, screenplay.CHARACTER, pw)
        firstN = sum(heights[:min(minLines, len(heights))])

        # a cue that can't be followed by its minimum number of lines
        # goes to the next page
        if not self.fits(cursor, headerHeight + firstN) and \
               not cursor.isAtTop():
            self.breakPage(cursor)

        self.writeHeader(cursor, name, g.marginLeft, pw)

        moreIndent, moreWidth = self.est.textBox(screenplay.DIALOGUE, pw)

        i = 0
        while i < len(heights):
            end = self.planPage(cursor, heights, i)

            for j in range(i, end):
                self.writeLine(cursor, block[j], g.marginLeft, pw)

            linesOnPage = end - i
            i = end

            if i < len(heights):
                if (linesOnPage >= minLines) and self.opts.showMore:
                    self.drawMore(cursor, g.marginLeft + moreIndent,
                                  moreWidth)

                self.breakPage(cursor)
                self.writeHeader(cursor, self.contdName(name),
                                 g.marginLeft, pw)
