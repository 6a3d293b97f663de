# -*- coding: utf-8 -*-

import re

from reportlab.pdfbase import pdfmetrics

import slugline.error as error

# standard PDF font names for our two text weights. all layout is done in
# these, so text widths measured here match what ends up in the PDF.
FONT_NORMAL = "Courier"
FONT_BOLD = "Courier-Bold"

# returns True if kc (key-code) is a valid character to add to the script.
def isValidInputChar(kc):
    # [0x80, 0x9F] = C1 control characters, 0x7F = delete.
    return (kc >= 32) and not ((kc >= 0x7F) and (kc < 0xA0))

# return True if 's' is a single, printable character, i.e. something the
# user actually typed as opposed to a paste, a newline or a tab.
def isTypedChar(s):
    return bool(s) and (len(s) == 1) and isValidInputChar(ord(s))

# returns s with all possible different types of newlines converted to
# unix newlines, i.e. a single "\n"
def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")

# clamps the given value to a specific range. both limits are optional.
def clamp(val, minVal = None, maxVal = None):
    ret = val

    if minVal is not None:
        ret = max(ret, minVal)

    if maxVal is not None:
        ret = min(ret, maxVal)

    return ret

# like clamp, but gets/sets value directly from given object
def clampObj(obj, name, minVal = None, maxVal = None):
    setattr(obj, name, clamp(getattr(obj, name), minVal, maxVal))

# convert given string to float, clamping it to the given range
# (optional). never throws any exceptions, return defVal (possibly clamped
# as well) on any errors.
def str2float(s, defVal, minVal = None, maxVal = None):
    val = defVal

    try:
        val = float(s)
    except (ValueError, OverflowError):
        pass

    return clamp(val, minVal, maxVal)

# like str2float, but for ints.
def str2int(s, defVal, minVal = None, maxVal = None, radix = 10):
    val = defVal

    try:
        val = int(s, radix)
    except ValueError:
        pass

    return clamp(val, minVal, maxVal)

# return s encoded so that "\\" and all control characters (newlines
# mostly) are escaped as \XX, where XX is the hex code of the character.
# the result never contains a newline, so it can be stored one-per-line.
def encodeStr(s):
    ret = ""

    for ch in s:
        c = ord(ch)

        # ord("\\") == 92 == 0x5C
        if c == 92:
            ret += "\\5C"
        elif c < 32:
            ret += "\\%02X" % c
        else:
            ret += ch

    return ret

# reverse of encodeStr. if string contains invalid escapes, they're
# silently and arbitrarily replaced by something.
def decodeStr(s):
    return re.sub(r"\\..", _decodeRepl, s)

# converts "\0A" style matches to their character values.
def _decodeRepl(mo):
    val = str2int(mo.group(0)[1:], 256, 0, 256, 16)

    if val != 256:
        return chr(val)
    else:
        return ""

# width of 'text' in points when drawn with the given weight and size.
def getTextWidth(text, isBold, size):
    return pdfmetrics.stringWidth(text, getFontName(isBold), size)

def getFontName(isBold):
    if isBold:
        return FONT_BOLD
    else:
        return FONT_NORMAL

# turn a document title into something usable as a file name: everything
# outside of [a-z0-9] becomes "_", and the result is lowercased.
def safeFilename(title, ext = ".pdf"):
    return re.sub(r"[^a-z0-9]", "_", title, flags = re.IGNORECASE).lower() \
           + ext

# load 'filename' and return its contents as a string. raises
# error.MiscError on errors. if maxSize is not -1, at most that many
# characters are read.
def loadFile(filename, maxSize = -1):
    try:
        with open(filename, "r", encoding = "UTF-8") as f:
            return f.read(maxSize)
    except (IOError, UnicodeDecodeError) as e:
        raise error.MiscError("Error loading file '%s': %s" % (filename, e))

# write 'data' (str or bytes) to 'filename'. raises error.MiscError on
# errors.
def writeToFile(filename, data):
    if isinstance(data, str):
        data = data.encode("UTF-8")

    try:
        with open(filename, "wb") as f:
            f.write(data)
    except IOError as e:
        raise error.MiscError("Error writing file '%s': %s" % (filename, e))
