from typing import List, NamedTuple

import fountainpager.screenplay as screenplay
import fountainpager.util as util

# the lines of one speech following a character cue, each one either
# DIALOGUE or PAREN.
class DialogueBlock:
    def __init__(self, elems: List[screenplay.Element]):
        self.lines: List[screenplay.Element] = elems

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, i):
        return self.lines[i]

    def texts(self) -> List[str]:
        return [e.text.strip() for e in self.lines]

class Collected(NamedTuple):
    block: DialogueBlock

    # index of the first line not part of the block
    nextIndex: int

# gathers the speech following a character cue. lines are classified as
# they are visited, each one in the context of the line before it.
class BlockCollector:
    def __init__(self, classify = screenplay.classifyLine):
        self.classify = classify

    def collect(self, lines, startIndex, prevType = screenplay.CHARACTER):
        elems = []
        i = startIndex

        while i < len(lines):
            text = lines[i]

            if util.isBlank(text):
                break

            lt = self.classify(text, prevType)

            # indented action is how plain-text scripts mark dialogue
            if (lt == screenplay.ACTION) and text[0].isspace():
                lt = screenplay.DIALOGUE
            elif lt not in (screenplay.DIALOGUE, screenplay.PAREN):
                break

            elems.append(screenplay.Element(lt, text))
            prevType = lt
            i += 1

        return Collected(DialogueBlock(elems), i)
