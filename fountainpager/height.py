import fountainpager.screenplay as screenplay

# measures how tall script text will be once drawn. every width passed
# in here must be the same one the text is later drawn with, so the
# indentation applied here is also what draw code uses (see textBox).
class HeightEstimator:
    def __init__(self, writer, geom):
        self.writer = writer
        self.geom = geom

    # indentation for an element type inside a column 'width' points
    # wide. the configured indents are for the full printable width and
    # shrink proportionally for narrower columns, e.g. dual dialogue.
    def indentOf(self, lt, width):
        if lt == screenplay.PAREN:
            indent = self.geom.indentParenthetical
        elif lt == screenplay.DIALOGUE:
            indent = self.geom.indentDialogue
        else:
            return 0.0

        return indent * (width / self.geom.printableWidth)

    # return (x offset, text width) for drawing an element of type 'lt'
    # in a column 'width' points wide.
    def textBox(self, lt, width):
        indent = self.indentOf(lt, width)

        return (indent, max(width - indent, 1.0))

    def heightOf(self, text, lt, width):
        return self.writer.heightOfString(text or " ",
                                          self.textBox(lt, width)[1])

    # total height of a sequence of Elements in a column 'width' wide
    def heightOfLines(self, elems, width):
        return sum(self.heightOf(e.text.strip(), e.lt, width) for e in elems)
