# -*- coding: utf-8 -*-

import slugline.config as config
import slugline.screenplay as screenplay
import slugline.util as util

# characters recording whether a block is wrapped in a structural
# element, i.e. whether it was explicitly formatted from the toolbar.
WRAP_CHARS = {
    False : ".",
    True : ">",
}

# one block of a screenplay: a typed, single run of plain text. the text
# may contain "\n" characters, but never a block boundary.
class Block:
    def __init__(self, lt = screenplay.ACTION, text = "", wrapped = False):

        # block (line) type
        self.lt = lt

        # text
        self.text = text

        # True if the block has been wrapped by toggleBlock
        self.wrapped = wrapped

    def __str__(self):
        return WRAP_CHARS[self.wrapped] + config.lt2char(self.lt) + \
               util.encodeStr(self.text)

    def __repr__(self):
        return "Block(%s, %r)" % (config.lt2ti(self.lt).name, self.text)

    def __ne__(self, other):
        return ((self.lt != other.lt) or (self.text != other.text) or
                (self.wrapped != other.wrapped))

    def __eq__(self, other):
        return not self.__ne__(other)

    def copy(self):
        return Block(self.lt, self.text, self.wrapped)

    # opposite of __str__. NOTE: only meant for storing data internally by
    # the program! NOT USABLE WITH EXTERNAL INPUT DUE TO COMPLETE LACK OF
    # ERROR CHECKING!
    @staticmethod
    def fromStr(s):
        return Block(config.char2lt(s[1]), util.decodeStr(s[2:]), s[0] == ">")

# a position in the document. used for the cursor, and for the other end
# of a selection, the current position being the other.
class Mark:
    def __init__(self, block, column):
        self.block = block
        self.column = column

    def __eq__(self, other):
        return (self.block == other.block) and (self.column == other.column)

    def __repr__(self):
        return "Mark(%d, %d)" % (self.block, self.column)
