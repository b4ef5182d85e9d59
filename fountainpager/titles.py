import re
from typing import Dict, List, NamedTuple

import fountainpager.util as util

# "Key: value" line of a title page
_keyRe = re.compile(r"^([A-Za-z][^:]*):[ \t]*(.*)$")

# line begins with 3 or more spaces or a tab, continuing the previous key
_continueRe = re.compile(r"^(   |\t)\s*\S")

# keys printed centered, in this order, below the title
CENTER_KEYS = ("credit", "author", "authors", "source")

# keys printed at the bottom left, in this order
CORNER_KEYS = ("draft date", "contact")

class ParsedTitle(NamedTuple):
    # number of lines at the start of the text that belong to the title
    # page
    consumed: int

    # key (lower-cased) -> list of value lines, in input order
    metadata: Dict[str, List[str]]

# strip emphasis markup around a title page value
def _cleanValue(s):
    return s.strip("_* \t")

# scan 'text' for a leading title page block. a block that never
# declares a Title is not a title page, in which case nothing is
# consumed and the whole text is script body.
def parseTitlePage(text):
    lines = util.fixNL(text).split("\n")

    meta = {}

    # key whose value continues on the following indented lines. only a
    # key line with an empty value starts one.
    contKey = None

    i = 0

    while i < len(lines):
        s = lines[i]

        if util.isBlank(s):
            break

        if (contKey is not None) and _continueRe.match(s):
            meta[contKey].append(_cleanValue(s))
            i += 1

            continue

        mo = _keyRe.match(s)

        if not mo:
            break

        key = mo.group(1).strip().lower()
        val = _cleanValue(mo.group(2))

        meta.setdefault(key, [])

        if val:
            meta[key].append(val)
            contKey = None
        else:
            contKey = key

        i += 1

    if "title" not in meta:
        return ParsedTitle(0, {})

    return ParsedTitle(i, meta)

# a script's title page.
class TitlePage:
    def __init__(self, metadata):
        self.metadata = metadata

    def get(self, key):
        return self.metadata.get(key, [])

    @property
    def title(self):
        return " ".join(self.get("title"))

    # draw the title page onto the writer's current page.
    def generate(self, writer, geom):
        lh = writer.lineHeight()
        x = geom.marginLeft
        w = geom.printableWidth

        y = geom.pageHeight / 3.0

        for s in self.get("title"):
            y += writer.drawText(s, x, y, w, util.ALIGN_CENTER)

        for key in CENTER_KEYS:
            items = self.get(key)

            if items:
                y += lh

            for s in items:
                y += writer.drawText(s, x, y, w, util.ALIGN_CENTER)

        corner = []

        for key in CORNER_KEYS:
            if corner and self.get(key):
                corner.append("")

            corner.extend(self.get(key))

        y = geom.printableBottomY - len(corner) * lh

        for s in corner:
            y += writer.drawText(s or " ", x, y, w / 2.0)
