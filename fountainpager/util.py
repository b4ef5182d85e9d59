# -*- coding: utf-8 -*-

import math
import os
import tempfile

from reportlab.pdfbase import pdfmetrics

# alignment values
ALIGN_LEFT    = 0
ALIGN_CENTER  = 1
ALIGN_RIGHT   = 2

# points per inch
POINTS_PER_INCH = 72.0

def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")

# returns True if s contains nothing but whitespace
def isBlank(s):
    return not s.strip()

# clamps the given value to a specific range. both limits are optional.
def clamp(val, minVal = None, maxVal = None):
    ret = val

    if minVal != None:
        ret = max(ret, minVal)

    if maxVal != None:
        ret = min(ret, maxVal)

    return ret

# like clamp, but gets/sets value directly from given object
def clampObj(obj, name, minVal = None, maxVal = None):
    setattr(obj, name, clamp(getattr(obj, name), minVal, maxVal))

# convert given string to float, clamping it to the given range
# (optional). never throws any exceptions, return defVal (possibly clamped
# as well) on any errors, nan and infinity included.
def str2float(s, defVal, minVal = None, maxVal = None):
    val = defVal

    try:
        val = float(s)
    except (ValueError, OverflowError):
        pass

    if not math.isfinite(val):
        val = defVal

    return clamp(val, minVal, maxVal)

# like str2float, but for ints.
def str2int(s, defVal, minVal = None, maxVal = None, radix = 10):
    val = defVal

    try:
        val = int(s, radix)
    except ValueError:
        pass

    return clamp(val, minVal, maxVal)

# "True", "true", "yes", "1" -> True, anything else -> False
def str2bool(s):
    return str(s).strip().lower() in ("true", "yes", "on", "1")

def inches2points(inches):
    return inches * POINTS_PER_INCH

# return how many points wide given text is in the given (registered)
# font at the given size.
def getTextWidth(text, fontName, size):
    return pdfmetrics.stringWidth(text, fontName, size)

# load the whole of 'filename' as text. raises OSError on errors and
# UnicodeDecodeError if the file is not UTF-8.
def loadFile(filename):
    with open(filename, "r", encoding = "UTF-8") as f:
        return f.read()

# write 'data' to 'filename'. the data goes to a temporary file in the
# same directory first and is renamed over the target only once it has
# been completely written, so a failed write never leaves a truncated
# file behind. raises OSError on errors.
def writeToFile(filename, data):
    if isinstance(data, str):
        data = data.encode("UTF-8")

    dirName = os.path.dirname(os.path.abspath(filename))
    fd, tmpName = tempfile.mkstemp(prefix = ".fountainpager-", dir = dirName)

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)

        os.replace(tmpName, filename)
    except OSError:
        if os.path.exists(tmpName):
            os.remove(tmpName)

        raise
