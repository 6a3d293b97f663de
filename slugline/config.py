# configuration: per-script page layout (Config) and program-wide editing
# behaviour (ConfigGlobal), plus static information about element types.

from slugline.error import ConfigError
import slugline.mypickle as mypickle
import slugline.screenplay as screenplay

# horizontal alignment of an element type's lines on the page. do not
# change these values as they're saved to the config.
ALIGN_LEFT = 0
ALIGN_CENTER = 1
ALIGN_RIGHT = 2

# contains a TypeInfo for each element type
_ti = []

# mapping from character to TypeInfo
_char2ti = {}

# mapping from line type to TypeInfo
_lt2ti = {}

# mapping from element name to TypeInfo
_name2ti = {}

# mapping from external (JSON) name to TypeInfo
_extName2ti = {}

# non-changing information about an element type
class TypeInfo:
    def __init__(self, lt, char, name, extName, fdxName):

        # line type, e.g. screenplay.ACTION
        self.lt = lt

        # character used in saved scripts, e.g. "."
        self.char = char

        # textual name, e.g. "Action"
        self.name = name

        # name used in exchanged JSON documents, e.g. "action"
        self.extName = extName

        # paragraph type name in Final Draft files, e.g. "Action"
        self.fdxName = fdxName

# script-specific information about an element type
class Type:
    cvars = None

    def __init__(self, lt):

        # line type
        self.lt = lt

        # pointer to TypeInfo
        self.ti = lt2ti(lt)

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # offset from the left margin, in points. ignored unless
            # alignment is ALIGN_LEFT.
            v.addFloat("indent", 108.0, "Indent", 0.0, 900.0)

            v.addInt("align", ALIGN_LEFT, "Align", ALIGN_LEFT, ALIGN_RIGHT)
            v.addBool("isBold", False, "Bold")

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        prefix += "%s/" % self.ti.name

        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        prefix += "%s/" % self.ti.name

        self.cvars.load(vals, prefix, self)

# global information about an element type
class TypeGlobal:
    cvars = None

    def __init__(self, lt):

        # line type
        self.lt = lt

        # pointer to TypeInfo
        self.ti = lt2ti(lt)

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # what type of element to insert when user presses enter or tab.
            v.addBlockType("newTypeEnter", screenplay.ACTION, "NewTypeEnter")
            v.addBlockType("newTypeTab", screenplay.CHARACTER, "NewTypeTab")

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        prefix += "%s/" % self.ti.name

        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        prefix += "%s/" % self.ti.name

        self.cvars.load(vals, prefix, self)

# per-script configuration: page geometry and element layout. all
# measurements are in points (1/72 inch).
class Config:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        # type configs, key = line type, value = Type
        self.types = {}

        for lt, indent, align, isBold in (
            (screenplay.PARAGRAPH, 108.0, ALIGN_LEFT, False),
            (screenplay.SCENE, 0.0, ALIGN_CENTER, True),
            (screenplay.ACTION, 108.0, ALIGN_LEFT, False),
            (screenplay.CHARACTER, 144.0, ALIGN_LEFT, True),
            (screenplay.DIALOGUE, 108.0, ALIGN_LEFT, False),
            (screenplay.PAREN, 144.0, ALIGN_LEFT, False),
            (screenplay.TRANSITION, 0.0, ALIGN_RIGHT, True)):

            t = Type(lt)
            t.indent = indent
            t.align = align
            t.isBold = isBold
            self.types[t.lt] = t

        self.recalc()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # paper size, US Letter by default
        v.addFloat("paperWidth", 612.0, "Paper/Width", 144.0, 2880.0)
        v.addFloat("paperHeight", 792.0, "Paper/Height", 144.0, 2880.0)

        # margins
        v.addFloat("marginTop", 72.0, "Margin/Top", 0.0, 900.0)
        v.addFloat("marginBottom", 72.0, "Margin/Bottom", 0.0, 900.0)
        v.addFloat("marginLeft", 72.0, "Margin/Left", 0.0, 900.0)
        v.addFloat("marginRight", 72.0, "Margin/Right", 0.0, 900.0)

        # vertical distance between consecutive lines
        v.addFloat("lineHeight", 14.0, "LineHeight", 4.0, 144.0)

        # font size used for body text and the title page's small print
        v.addInt("fontSize", 12, "FontSize", 4, 72)

        # font size of the title on the title page
        v.addInt("titleFontSize", 24, "TitleFontSize", 4, 288)

        # whether to add scene headings to the PDF outline
        v.addBool("pdfIncludeTOC", True, "IncludeTOC")

        # whether to show the PDF outline by default
        v.addBool("pdfShowTOC", False, "ShowTOC")

    # load config from string 's'. does not throw any exceptions, silently
    # ignores any errors, and always leaves config in an ok state.
    def load(self, s):
        vals = self.cvars.makeVals(s)

        self.cvars.load(vals, "", self)

        for t in self.types.values():
            t.load(vals, "Element/")

        self.recalc()

    # save config into a string and return that.
    def save(self):
        s = self.cvars.save("", self)

        for t in self.types.values():
            s += t.save("Element/")

        return s

    # fix up all invalid config values and recalculate all variables
    # dependent on other variables.
    def recalc(self):
        self.cvars.clamp(self)

        for t in self.types.values():
            t.cvars.clamp(t)

        # make sure there's room for at least one line on a page
        if (self.marginTop + self.marginBottom) >= \
               (self.paperHeight - self.lineHeight):
            self.marginTop = 0.0
            self.marginBottom = 0.0

        # usable vertical space on a page
        self.usableHeight = self.paperHeight - self.marginTop - \
                            self.marginBottom

        # how many lines on a page
        self.linesOnPage = int(self.usableHeight / self.lineHeight)

    def getType(self, lt):
        return self.types[lt]

# global config. there is only ever one of these active.
class ConfigGlobal:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        # type configs, key = line type, value = TypeGlobal
        self.types = {}

        for lt in getLineTypes():
            self.types[lt] = TypeGlobal(lt)

        # after a character cue comes what the character says, after
        # everything else we go back to describing the action.
        self.types[screenplay.CHARACTER].newTypeEnter = screenplay.DIALOGUE

        self.recalc()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # whether typing a known prefix ("INT. ", "CUT ") changes the
        # element's type
        v.addBool("autoFormat", True, "AutoFormat")

        # trim undo history once its estimated size goes over this
        v.addInt("undoMemoryLimit", 5000000, "UndoMemoryLimit", 10000,
                 500000000)

    # load config from string 's'. does not throw any exceptions, silently
    # ignores any errors, and always leaves config in an ok state.
    def load(self, s):
        vals = self.cvars.makeVals(s)

        self.cvars.load(vals, "", self)

        for t in self.types.values():
            t.load(vals, "Element/")

        self.recalc()

    # save config into a string and return that.
    def save(self):
        s = self.cvars.save("", self)

        for t in self.types.values():
            s += t.save("Element/")

        return s

    def recalc(self):
        self.cvars.clamp(self)

    def getType(self, lt):
        return self.types[lt]

def _conv(dict, key, raiseException = True):
    val = dict.get(key)
    if (val is None) and raiseException:
        raise ConfigError("key '%s' not found from '%s'" % (key, dict))

    return val

# get TypeInfos
def getTIs():
    return _ti

# all line types, in the order they are presented to the user
def getLineTypes():
    return [ti.lt for ti in _ti]

def char2lt(char, raiseException = True):
    ti = _conv(_char2ti, char, raiseException)

    if ti:
        return ti.lt
    else:
        return None

def lt2char(lt):
    return _conv(_lt2ti, lt).char

def name2ti(name, raiseException = True):
    return _conv(_name2ti, name, raiseException)

def lt2ti(lt):
    return _conv(_lt2ti, lt)

# "scene-heading" -> screenplay.SCENE, None for unknown names if
# raiseException is False.
def extName2lt(name, raiseException = True):
    ti = _conv(_extName2ti, name, raiseException)

    if ti:
        return ti.lt
    else:
        return None

def lt2extName(lt):
    return _conv(_lt2ti, lt).extName

def _init():

    for lt, char, name, extName, fdxName in (
        (screenplay.PARAGRAPH,  "-",  "Paragraph",     "paragraph",     "General"),
        (screenplay.SCENE,      "\\", "Scene",         "scene-heading", "Scene Heading"),
        (screenplay.ACTION,     ".",  "Action",        "action",        "Action"),
        (screenplay.CHARACTER,  "_",  "Character",     "character",     "Character"),
        (screenplay.DIALOGUE,   ":",  "Dialogue",      "dialogue",      "Dialogue"),
        (screenplay.PAREN,      "(",  "Parenthetical", "parenthetical", "Parenthetical"),
        (screenplay.TRANSITION, "/",  "Transition",    "transition",    "Transition")
        ):

        ti = TypeInfo(lt, char, name, extName, fdxName)

        _ti.append(ti)
        _lt2ti[lt] = ti
        _char2ti[char] = ti
        _name2ti[name] = ti
        _extName2ti[extName] = ti

_init()
