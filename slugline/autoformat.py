import re

import slugline.screenplay as screenplay
import slugline.util as util

# a text prefix that, once typed, turns the block into a given type.
class AutoFormatRule:
    def __init__(self, pattern, lt):

        # compiled regular expression, matched against the start of the
        # block's text, case-insensitively
        self.pattern = re.compile(pattern, re.IGNORECASE)

        # line type to change the block to
        self.lt = lt

    def matches(self, text):
        return bool(self.pattern.match(text))

    def __repr__(self):
        return "AutoFormatRule(%r, %d)" % (self.pattern.pattern, self.lt)

# default rules, in priority order. the first matching rule decides.
RULES = [
    AutoFormatRule(r"INT(\.|\s)", screenplay.SCENE),
    AutoFormatRule(r"EXT(\.|\s)", screenplay.SCENE),
    AutoFormatRule(r"FADE\s", screenplay.TRANSITION),
    AutoFormatRule(r"CUT\s", screenplay.TRANSITION),
    AutoFormatRule(r"DISSOLVE\s", screenplay.TRANSITION),
]

# return the line type the first matching rule gives 'text', or None if
# no rule matches.
def check(text, rules = None):
    if rules is None:
        rules = RULES

    for rule in rules:
        if rule.matches(text):
            return rule.lt

    return None

# called after 's' has been inserted into 'buf'. if 's' was a single typed
# character and the current block's text now starts with a known prefix,
# change the block's type. returns True if the type was changed.
def afterInsert(buf, s, rules = None):
    if not util.isTypedChar(s) or not buf.querySelectionCollapsed():
        return False

    lt = check(buf.queryCurrentBlockText(), rules)

    if (lt is None) or (lt == buf.queryCurrentBlockType()):
        return False

    buf.setCurrentBlockType(lt)

    return True
