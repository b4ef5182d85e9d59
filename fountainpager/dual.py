from typing import Optional

import fountainpager.blocks as blocks
import fountainpager.log as log
import fountainpager.pagebreak as pagebreak
import fountainpager.screenplay as screenplay
import fountainpager.util as util

logger = log.getLogger("dual")

# two speeches printed side by side. the right side is missing when a
# cue marked for dual dialogue has no partner.
class DualPair:
    def __init__(self, leftName: str, leftBlock: blocks.DialogueBlock,
                 rightName: Optional[str] = None,
                 rightBlock: Optional[blocks.DialogueBlock] = None):
        self.leftName = leftName
        self.leftBlock = leftBlock
        self.rightName = rightName
        self.rightBlock = rightBlock

    def hasRight(self):
        return self.rightName is not None

# lays out dual dialogue as two columns sharing one gutter. the pair is
# measured up front and written as a single unit, so both columns always
# start at the same y on the same page.
class DualDialogueLayout:
    def __init__(self, writer, estimator, decider, collector, geom, opts):
        self.writer = writer
        self.est = estimator
        self.decider = decider
        self.collector = collector
        self.geom = geom
        self.opts = opts

    def colWidth(self):
        return (self.geom.printableWidth - self.geom.dualGutter) / 2.0

    # check whether the cue at lines[idx], whose block has already been
    # collected as 'left', starts dual dialogue, either by carrying the
    # marker itself or by being followed by a cue carrying it. returns
    # (DualPair, index of first line after the pair), or None.
    def detect(self, lines, idx, left):
        k = left.nextIndex

        while (k < len(lines)) and util.isBlank(lines[k]):
            k += 1

        hasPartner = (k < len(lines)) and (self.collector.classify(
            lines[k]) == screenplay.CHARACTER)

        leftMarked = screenplay.isDualCue(lines[idx])
        rightMarked = hasPartner and screenplay.isDualCue(lines[k])

        if not (leftMarked or rightMarked):
            return None

        leftName = screenplay.cueName(lines[idx])

        if not hasPartner:
            return (DualPair(leftName, left.block), left.nextIndex)

        right = self.collector.collect(lines, k + 1)

        return (DualPair(leftName, left.block,
                         screenplay.cueName(lines[k]), right.block),
                right.nextIndex)

    def columnHeight(self, name, block, width):
        return self.est.heightOf(name, screenplay.CHARACTER, width) + \
            self.est.heightOfLines(block, width)

    # write one column starting at y, return the y below it.
    def writeColumn(self, y, x, width, name, block):
        col = pagebreak.Cursor(y)

        self.decider.writeHeader(col, name, x, width)

        for elem in block:
            self.decider.writeLine(col, elem, x, width)

        return col.y

    def write(self, cursor, pair):
        g = self.geom
        cw = self.colWidth()

        needed = self.columnHeight(pair.leftName, pair.leftBlock, cw)

        if pair.hasRight():
            needed = max(needed, self.columnHeight(pair.rightName,
                                                   pair.rightBlock, cw))

        leftName = pair.leftName
        rightName = pair.rightName

        if not self.decider.fits(cursor, needed) and not cursor.isAtTop():
            if self.opts.showMore:
                self.decider.drawMore(cursor, g.marginLeft, g.printableWidth)

            self.decider.breakPage(cursor)

            leftName = self.decider.contdName(leftName)

            if pair.hasRight():
                rightName = self.decider.contdName(rightName)

        startY = cursor.y
        endY = self.writeColumn(startY, g.marginLeft, cw, leftName,
                                pair.leftBlock)

        if pair.hasRight():
            endY = max(endY, self.writeColumn(
                startY, g.marginLeft + cw + g.dualGutter, cw, rightName,
                pair.rightBlock))

        if endY > g.printableBottomY:
            logger.debug("dual dialogue overflows page %d", cursor.page)

        cursor.advance(endY - startY)
