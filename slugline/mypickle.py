import copy

import slugline.config as config
import slugline.util as util

# the set of typed variables one class keeps in its instances. each
# variable has a default value, and, if it has a save name, is stored as a
# single "Name:value" line.
class Vars:
    def __init__(self):
        self.cvars = []

        # name -> variable, for all variables / for numeric ones only
        self.all = {}
        self.numeric = {}

    # get default value of a setting
    def getDefault(self, name):
        return self.all[name].defVal

    # get minimum and maximum value of a numeric setting as a (min,max)
    # tuple.
    def getMinMax(self, name):
        it = self.numeric[name]

        return (it.minVal, it.maxVal)

    def setDefaults(self, obj):
        for it in self.cvars:
            setattr(obj, it.name, copy.deepcopy(it.defVal))

    # force all numeric variables of 'obj' into their allowed ranges.
    def clamp(self, obj):
        for it in self.numeric.values():
            util.clampObj(obj, it.name, it.minVal, it.maxVal)

    # split string 's' (loaded from file) into a save name -> value
    # dictionary suitable for load() to take. lines without a ':' are
    # ignored.
    @staticmethod
    def makeVals(s):
        vals = {}

        for line in util.fixNL(str(s)).split("\n"):
            name, sep, v = line.partition(":")

            if sep:
                vals[name] = v

        return vals

    def save(self, prefix, obj):
        s = ""

        for it in self.cvars:
            if it.name2:
                s += "%s%s:%s\n" % (prefix, it.name2,
                                    it.encode(getattr(obj, it.name)))

        return s

    # set every variable of 'obj' that has a value in 'vals'. used values
    # are removed from 'vals', so whatever is left afterwards was not
    # recognized by anyone.
    def load(self, vals, prefix, obj):
        for it in self.cvars:
            if not it.name2:
                continue

            key = prefix + it.name2

            if key in vals:
                setattr(obj, it.name, it.decode(vals.pop(key)))

    def addVar(self, var):
        self.cvars.append(var)
        self.all[var.name] = var

        if isinstance(var, NumericVar):
            self.numeric[var.name] = var

    def addBool(self, *params):
        self.addVar(BoolVar(*params))

    def addFloat(self, *params):
        self.addVar(FloatVar(*params))

    def addInt(self, *params):
        self.addVar(IntVar(*params))

    def addStr(self, *params):
        self.addVar(StrVar(*params))

    def addBlockType(self, *params):
        self.addVar(BlockTypeVar(*params))

class ConfVar:
    # name2 is the name to use while saving/loading the variable. if it's
    # empty, the variable is not loaded/saved, i.e. is used only
    # internally.
    def __init__(self, name, defVal, name2):
        self.name = name
        self.defVal = defVal
        self.name2 = name2

    def encode(self, val):
        return str(val)

    def decode(self, s):
        return s

class BoolVar(ConfVar):
    def encode(self, val):
        return str(bool(val))

    def decode(self, s):
        return s == "True"

class NumericVar(ConfVar):
    def __init__(self, name, defVal, name2, minVal, maxVal):
        ConfVar.__init__(self, name, defVal, name2)
        self.minVal = minVal
        self.maxVal = maxVal

class FloatVar(NumericVar):
    def __init__(self, name, defVal, name2, minVal, maxVal, precision = 2):
        NumericVar.__init__(self, name, defVal, name2, minVal, maxVal)
        self.precision = precision

    def encode(self, val):
        return "%.*f" % (self.precision, val)

    def decode(self, s):
        return util.str2float(s, self.defVal, self.minVal, self.maxVal)

class IntVar(NumericVar):
    def encode(self, val):
        return "%d" % val

    def decode(self, s):
        return util.str2int(s, self.defVal, self.minVal, self.maxVal)

# newlines and backslashes are escaped.
class StrVar(ConfVar):
    def encode(self, val):
        return util.encodeStr(str(val))

    def decode(self, s):
        return util.decodeStr(s)

# block type, stored by name: screenplay.ACTION <-> "Action". unknown
# names give the default.
class BlockTypeVar(ConfVar):
    def encode(self, val):
        return config.lt2ti(val).name

    def decode(self, s):
        ti = config.name2ti(s, False)

        if ti:
            return ti.lt
        else:
            return self.defVal
