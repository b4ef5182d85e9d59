import copy

import fountainpager.util as util

# typed settings of one object. every setting is an attribute of the
# object, saved and loaded under the same name as a "name:value" line.
class Vars:
    def __init__(self):
        self.cvars = []

    # build the lookup tables. call once after all variables are added.
    def makeDicts(self):
        self.numeric = self.getDict(NumericVar)
        self.choice = self.getDict(ChoiceVar)

    # name -> variable, for variables of class 'typeObj' (all if None)
    def getDict(self, typeObj = None):
        return dict((v.name, v) for v in self.cvars
                    if (typeObj is None) or isinstance(v, typeObj))

    def setDefaults(self, obj):
        for v in self.cvars:
            setattr(obj, v.name, copy.deepcopy(v.defVal))

    # parse "name:value" lines of 's' into a {name: value} dict of strings
    # for load(). lines starting with '#' and lines without a ':' are
    # skipped.
    @staticmethod
    def makeVals(s):
        vals = {}

        for line in util.fixNL(str(s)).split("\n"):
            if line.startswith("#") or (":" not in line):
                continue

            name, val = line.split(":", 1)
            vals[name.strip()] = val.strip()

        return vals

    def save(self, obj):
        return "".join("%s:%s\n" % (v.name, v.toStr(getattr(obj, v.name)))
                       for v in self.cvars)

    # set attributes of 'obj' from 'vals'. every value used is removed
    # from 'vals', so whatever is left afterwards was not recognized.
    def load(self, vals, obj):
        for v in self.cvars:
            if v.name in vals:
                setattr(obj, v.name, v.fromStr(vals.pop(v.name)))

    def addVar(self, var):
        self.cvars.append(var)

    def addBool(self, *params):
        self.addVar(BoolVar(*params))

    def addFloat(self, *params):
        self.addVar(FloatVar(*params))

    def addInt(self, *params):
        self.addVar(IntVar(*params))

    def addStr(self, *params):
        self.addVar(StrVar(*params))

    def addChoice(self, *params):
        self.addVar(ChoiceVar(*params))

class ConfVar:
    def __init__(self, name, defVal):
        self.name = name
        self.defVal = defVal

    def toStr(self, val):
        return str(val)

    def fromStr(self, s):
        return s

class BoolVar(ConfVar):
    def toStr(self, val):
        return str(bool(val))

    def fromStr(self, s):
        return util.str2bool(s)

# a number limited to [minVal, maxVal]
class NumericVar(ConfVar):
    def __init__(self, name, defVal, minVal, maxVal):
        ConfVar.__init__(self, name, defVal)
        self.minVal = minVal
        self.maxVal = maxVal

class FloatVar(NumericVar):
    def __init__(self, name, defVal, minVal, maxVal, precision = 3):
        NumericVar.__init__(self, name, defVal, minVal, maxVal)
        self.precision = precision

    def toStr(self, val):
        return "%.*f" % (self.precision, val)

    def fromStr(self, s):
        return util.str2float(s, self.defVal, self.minVal, self.maxVal)

class IntVar(NumericVar):
    def toStr(self, val):
        return "%d" % val

    def fromStr(self, s):
        return util.str2int(s, self.defVal, self.minVal, self.maxVal)

class StrVar(ConfVar):
    pass

# one string out of a fixed set. unknown values load as the default.
# comparison is case-insensitive, the stored value is always the one
# from 'choices'.
class ChoiceVar(ConfVar):
    def __init__(self, name, defVal, choices):
        ConfVar.__init__(self, name, defVal)
        self.choices = choices

    def fromStr(self, s):
        for c in self.choices:
            if c.lower() == s.strip().lower():
                return c

        return self.defVal
