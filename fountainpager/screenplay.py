# -*- coding: utf-8 -*-

import enum
import re

# line types. this is a closed set: the pager keeps exactly one handler
# per member.
class ElementType(enum.Enum):
    SCENE = "Scene"
    ACTION = "Action"
    CHARACTER = "Character"
    PAREN = "Parenthetical"
    DIALOGUE = "Dialogue"
    TRANSITION = "Transition"
    LYRICS = "Lyrics"
    UNKNOWN = "Unknown"

SCENE = ElementType.SCENE
ACTION = ElementType.ACTION
CHARACTER = ElementType.CHARACTER
PAREN = ElementType.PAREN
DIALOGUE = ElementType.DIALOGUE
TRANSITION = ElementType.TRANSITION
LYRICS = ElementType.LYRICS
UNKNOWN = ElementType.UNKNOWN

# types that make the following line part of a speech
SPEECH_TYPES = (CHARACTER, DIALOGUE, PAREN)

# marker at the end of a character cue that links it with its neighbour
# into dual dialogue
DUAL_MARKER = "^"

_sceneRe = re.compile(r"^(INT\.?/EXT\.?|I/E|INT|EXT|EST)[ .]", re.IGNORECASE)
_characterRe = re.compile(r"^[A-Z][A-Z0-9 '\-.]+(\s*\(.*\))?\s*\^?$")
_transitionRe = re.compile(r"^[A-Z \-]+TO:$")

# one classified line of a script. immutable once created.
class Element:
    __slots__ = ("lt", "text")

    def __init__(self, lt, text):
        object.__setattr__(self, "lt", lt)
        object.__setattr__(self, "text", text)

    def __setattr__(self, name, value):
        raise AttributeError("Element is immutable")

    def __str__(self):
        return "%s: %s" % (self.lt.value, self.text)

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented

        return (self.lt == other.lt) and (self.text == other.text)

    def __hash__(self):
        return hash((self.lt, self.text))

def isParen(s):
    return s.startswith("(") and s.endswith(")")

def isScene(s):
    if s.startswith(".") and not s.startswith(".."):
        return True

    return bool(_sceneRe.match(s))

def isTransition(s):
    if s.startswith(">") and not s.endswith("<"):
        return True

    return bool(_transitionRe.match(s)) or s in ("FADE IN:", "FADE OUT.")

def isCharacter(s):
    if s.startswith("@"):
        return len(s) > 1

    return bool(_characterRe.match(s)) and not isScene(s)

def isNote(s):
    return s.startswith("[[") and s.endswith("]]")

def isSection(s):
    return s.startswith("#")

def isSynopsis(s):
    return s.startswith("=") and not s.startswith("==")

# classify one raw script line. 'prevType' is the type of the line
# visited just before this one, or None at the start of the script or
# after a blank line; lines following a character cue, dialogue or a
# parenthetical belong to that speech.
def classifyLine(text, prevType = None):
    s = text.strip()

    if not s:
        return ACTION

    if prevType in SPEECH_TYPES:
        if isParen(s):
            return PAREN

        return DIALOGUE

    if isScene(s):
        return SCENE

    if isTransition(s):
        return TRANSITION

    if isCharacter(s):
        return CHARACTER

    if isParen(s):
        return PAREN

    if s.startswith("~"):
        return LYRICS

    if isNote(s) or isSection(s) or isSynopsis(s):
        return UNKNOWN

    return ACTION

# build an Element for a line, classifying it in the given context
def classify(text, prevType = None):
    return Element(classifyLine(text, prevType), text)

# returns True if the character cue carries the dual dialogue marker
def isDualCue(text):
    return text.rstrip().endswith(DUAL_MARKER)

# return the printable name of a character cue: forcing '@' and the dual
# marker removed, upper-cased.
def cueName(text):
    s = text.strip()

    if s.startswith("@"):
        s = s[1:]

    if s.endswith(DUAL_MARKER):
        s = s[:-1]

    return s.strip().upper()

# return the printable text of a scene heading
def sceneText(text):
    s = text.strip()

    if s.startswith(".") and not s.startswith(".."):
        s = s[1:]

    return s.strip().upper()

# return the printable text of a transition
def transitionText(text):
    s = text.strip()

    if s.startswith(">"):
        s = s[1:]

    return s.strip().upper()
