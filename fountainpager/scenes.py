import fountainpager.config as config
import fountainpager.util as util

# hands out scene numbers and places them. numbering only depends on how
# many scene headings came before, never on pagination.
class SceneNumberer:
    def __init__(self, opts):
        self.opts = opts

        # last number handed out
        self.scene = 0

    def next(self):
        self.scene += 1

        return self.scene

    # number as printed, e.g. "12" or "(12)"
    def label(self, nr):
        if self.opts.sceneNumberStyle == config.SCENE_NR_PARENTHESES:
            return "(%d)" % nr

        return "%d" % nr

    # heading text to draw for scene 'nr'
    def headingText(self, nr, text):
        if self.opts.sceneNumbers and \
               (self.opts.sceneNumberPosition == config.SCENE_NR_INLINE):
            if self.opts.sceneNumberStyle == config.SCENE_NR_PARENTHESES:
                return "%s %s" % (self.label(nr), text)

            return "%d. %s" % (nr, text)

        return text

    # draw the number into both side margins at y, for margin placement.
    def drawMargins(self, writer, geom, nr, y):
        if not (self.opts.sceneNumbers and
                (self.opts.sceneNumberPosition == config.SCENE_NR_MARGIN)):
            return

        s = self.label(nr)

        # keep a quarter inch between the numbers and the text area
        pad = util.POINTS_PER_INCH / 4.0

        writer.drawText(s, 0.0, y, max(geom.marginLeft - pad, 1.0),
                        util.ALIGN_RIGHT)
        writer.drawText(s, geom.pageWidth - geom.marginRight + pad, y,
                        max(geom.marginRight - pad, 1.0))
