import slugline.block as block
import slugline.config as config
import slugline.screenplay as screenplay
import slugline.undo as undo
import slugline.util as util

# the primitive operations the editing core needs from a text buffer.
# the controller and the auto-formatter only ever talk to a buffer through
# these, so anything implementing them can be plugged in.
class Buffer:

    # insert 's' at the cursor position.
    def insertText(self, s):
        raise NotImplementedError

    # delete 'n' characters before the cursor.
    def deleteBackward(self, n = 1):
        raise NotImplementedError

    # delete 'n' characters after the cursor.
    def deleteForward(self, n = 1):
        raise NotImplementedError

    # change type of the block(s) containing the cursor / selection.
    def setCurrentBlockType(self, lt):
        raise NotImplementedError

    # split the current block at the cursor, giving the part after the
    # cursor type 'lt', prefixed with 'text'. returns the index of the new
    # block. the cursor is not moved.
    def insertBlockAfterCursor(self, lt, text = ""):
        raise NotImplementedError

    # wrap the block(s) containing the cursor / selection in a structural
    # element of type 'lt'.
    def wrapCurrentBlock(self, lt):
        raise NotImplementedError

    # remove the structural wrapping of the block(s) containing the cursor
    # / selection.
    def unwrapCurrentBlock(self):
        raise NotImplementedError

    def moveCursorInto(self, index, column = 0):
        raise NotImplementedError

    def queryCurrentBlockType(self):
        raise NotImplementedError

    def queryCurrentBlockText(self):
        raise NotImplementedError

    def querySelectionCollapsed(self):
        raise NotImplementedError

    # return (first, last) indexes of the blocks touched by the selection.
    # with a collapsed selection both are the cursor's block.
    def querySelectedBlocks(self):
        raise NotImplementedError

    def queryBlockType(self, index):
        raise NotImplementedError

    def collapseSelection(self):
        raise NotImplementedError

# in-memory buffer holding a screenplay as a list of blocks, with a
# cursor, an optional selection mark and undo history.
class TextBuffer(Buffer):
    def __init__(self, cfgGl = None):
        if cfgGl is None:
            cfgGl = config.ConfigGlobal()

        self.cfgGl = cfgGl

        self.blocks = [block.Block(screenplay.ACTION)]

        # cursor position: block and column
        self.block = 0
        self.column = 0

        # Mark object if selection active, or None.
        self.mark = None

        # True if the buffer has had changes done to it after creation or
        # the last setBlocks / markChanged(False).
        self.hasChanged = False

        self.history = undo.History(cfgGl.undoMemoryLimit)

    def isModified(self):
        if not self.hasChanged:
            return False

        # an empty document is never worth a warning about unsaved changes
        return (len(self.blocks) > 1) or bool(self.blocks[0].text)

    def markChanged(self, state = True):
        self.hasChanged = state

    def cursorAsMark(self):
        return block.Mark(self.block, self.column)

    # replace all content with copies of 'blocks'. resets cursor, selection
    # and undo history.
    def setBlocks(self, blocks):
        self.blocks = [b.copy() for b in blocks]

        if not self.blocks:
            self.blocks = [block.Block(screenplay.ACTION)]

        self.block = 0
        self.column = 0
        self.mark = None
        self.hasChanged = False
        self.history = undo.History(self.cfgGl.undoMemoryLimit)

    # return a snapshot of the document: copies of all blocks.
    def getBlocks(self):
        return [b.copy() for b in self.blocks]

    # make sure current block and column are within the valid bounds.
    def validatePos(self):
        self.block = util.clamp(self.block, 0, len(self.blocks) - 1)
        self.column = util.clamp(self.column, 0,
                                 len(self.blocks[self.block].text))

    def gotoPos(self, index, column, mark = False):
        if mark and not self.mark:
            self.setMark(self.block, self.column)

        self.block = index
        self.column = column
        self.validatePos()

    # set mark at given position
    def setMark(self, index, column):
        self.mark = block.Mark(index, column)

    def clearMark(self):
        self.mark = None

    def insertText(self, s):
        if not s:
            return

        self.clearMark()

        isTyped = util.isTypedChar(s)
        isSpace = s == " "

        # to get word-level undo, not block-level undo, we want to merge
        # all spaces with the word preceding them, but stop merging when a
        # new word begins:
        #
        # lastUndo    char       merge
        # --------    -------    -----
        # non-space   non-space  Y
        # non-space   space      Y      <- change type of lastUndo to space
        # space       space      Y
        # space       non-space  N
        u = None

        if isTyped:
            u = self.history.getMergeable(
                (undo.CMD_ADD_CHAR, undo.CMD_ADD_CHAR_SPACE),
                self.cursorAsMark())

            if u and (u.getType() == undo.CMD_ADD_CHAR_SPACE) and \
                   not isSpace:
                u = None

        mergeUndo = u is not None

        if mergeUndo:
            if isSpace:
                u.cmdType = undo.CMD_ADD_CHAR_SPACE
        else:
            if not isTyped:
                cmdType = undo.CMD_MISC
            elif isSpace:
                cmdType = undo.CMD_ADD_CHAR_SPACE
            else:
                cmdType = undo.CMD_ADD_CHAR

            u = undo.SingleBlock(self, cmdType, self.block)

        b = self.blocks[self.block]
        b.text = b.text[:self.column] + s + b.text[self.column:]
        self.column += len(s)

        self.markChanged()
        self.addUndo(u, mergeUndo)

    def deleteBackward(self, n = 1):
        self.clearMark()

        for i in range(n):
            self._deleteBackward()

    def _deleteBackward(self):
        if self.column != 0:
            u = self.history.getMergeable((undo.CMD_DEL_BACKWARD,),
                                          self.cursorAsMark())
            mergeUndo = u is not None

            if not mergeUndo:
                u = undo.SingleBlock(self, undo.CMD_DEL_BACKWARD, self.block)

            b = self.blocks[self.block]
            b.text = b.text[:self.column - 1] + b.text[self.column:]
            self.column -= 1

        elif self.block != 0:
            # delete at the start of a block means "join up with previous
            # block", so is a 2->1 change.
            u = undo.ManyBlocks(self, undo.CMD_MISC, self.block - 1, 2, 1)
            mergeUndo = False

            self.joinBlocks(self.block - 1)

        else:
            return

        self.markChanged()
        self.addUndo(u, mergeUndo)

    def deleteForward(self, n = 1):
        self.clearMark()

        for i in range(n):
            self._deleteForward()

    def _deleteForward(self):
        b = self.blocks[self.block]

        if self.column != len(b.text):
            u = self.history.getMergeable((undo.CMD_DEL_FORWARD,),
                                          self.cursorAsMark())
            mergeUndo = u is not None

            if not mergeUndo:
                u = undo.SingleBlock(self, undo.CMD_DEL_FORWARD, self.block)

            b.text = b.text[:self.column] + b.text[self.column + 1:]

        elif self.block != (len(self.blocks) - 1):
            u = undo.ManyBlocks(self, undo.CMD_MISC, self.block, 2, 1)
            mergeUndo = False

            self.joinBlocks(self.block)

        else:
            return

        self.markChanged()
        self.addUndo(u, mergeUndo)

    # join blocks 'index' and 'index + 1' and position cursor at the join
    # position. the joined block keeps the first block's type.
    def joinBlocks(self, index):
        b = self.blocks[index]

        pos = len(b.text)
        b.text += self.blocks[index + 1].text
        del self.blocks[index + 1]

        self.block = index
        self.column = pos

    def setCurrentBlockType(self, lt):
        self._changeBlocks(lambda b: setattr(b, "lt", lt))

    def wrapCurrentBlock(self, lt):
        def wrap(b):
            b.lt = lt
            b.wrapped = True

        self._changeBlocks(wrap)

    def unwrapCurrentBlock(self):
        self._changeBlocks(lambda b: setattr(b, "wrapped", False))

    # call func on every block touched by the selection, as one undoable
    # action.
    def _changeBlocks(self, func):
        first, last = self.querySelectedBlocks()
        count = last - first + 1

        u = undo.ManyBlocks(self, undo.CMD_MISC, first, count, count)

        for i in range(first, last + 1):
            func(self.blocks[i])

        self.markChanged()
        self.addUndo(u)

    def insertBlockAfterCursor(self, lt, text = ""):
        self.clearMark()

        u = undo.ManyBlocks(self, undo.CMD_MISC, self.block, 1, 2)

        b = self.blocks[self.block]
        postStr = b.text[self.column:]
        b.text = b.text[:self.column]

        index = self.block + 1
        self.blocks.insert(index, block.Block(lt, text + postStr))

        self.markChanged()
        self.addUndo(u)

        return index

    def moveCursorInto(self, index, column = 0):
        self.clearMark()
        self.gotoPos(index, column)

    def queryCurrentBlockType(self):
        return self.blocks[self.block].lt

    def queryCurrentBlockText(self):
        return self.blocks[self.block].text

    def queryBlockType(self, index):
        return self.blocks[index].lt

    def querySelectionCollapsed(self):
        return (self.mark is None) or (self.mark == self.cursorAsMark())

    def querySelectedBlocks(self):
        if self.mark is None:
            return (self.block, self.block)

        return (min(self.mark.block, self.block),
                max(self.mark.block, self.block))

    def collapseSelection(self):
        self.clearMark()

    # record undo object 'u' in the history. if 'mergeUndo' is True, 'u'
    # is the last item in the history and just gets its after state
    # refreshed.
    def addUndo(self, u, mergeUndo = False):
        if mergeUndo:
            self.history.addMerged(u, self)
        else:
            u.setAfter(self)
            self.history.add(u)

    def canUndo(self):
        return self.history.canUndo()

    def canRedo(self):
        return self.history.canRedo()

    def undo(self):
        if self.history.undo(self):
            self.clearMark()
            self.validatePos()
            self.markChanged()

    def redo(self):
        if self.history.redo(self):
            self.clearMark()
            self.validatePos()
            self.markChanged()

    # check buffer for internal consistency. raises an AssertionError on
    # errors. ONLY MEANT TO BE USED IN TEST CODE.
    def _validate(self):
        assert len(self.blocks) > 0

        for b in self.blocks:
            assert b is not None
            assert config.lt2ti(b.lt)

        assert 0 <= self.block < len(self.blocks)
        assert 0 <= self.column <= len(self.blocks[self.block].text)
