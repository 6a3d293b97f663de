import zlib

import slugline.block as block

# Which buffer primitive uses which undo object:
#
# primitive                type
# ---------                ------
#
# insertText (typed char)  SingleBlock (possibly merged)
# insertText (paste)       SingleBlock
# deleteBackward:
#   (not start of block)   SingleBlock (possibly merged)
#   (start of block)       ManyBlocks(2, 1)
# deleteForward:
#   (not end of block)     SingleBlock (possibly merged)
#   (end of block)         ManyBlocks(2, 1)
# insertBlockAfterCursor   ManyBlocks(1, 2)
# setCurrentBlockType      ManyBlocks(N, N)
# wrap/unwrapCurrentBlock  ManyBlocks(N, N)


# extremely rough estimate for the base memory usage of a single undo
# object, WITHOUT counting the actual textual differences stored inside
# it. so this figure accounts for the Python object overhead, member
# variable overhead, memory allocation overhead, etc.
#
# this figure does not need to be very accurate.
BASE_MEMORY_USAGE = 1500

# possible command types. only used for possibly merging consecutive
# edits.
(CMD_ADD_CHAR,
 CMD_ADD_CHAR_SPACE,
 CMD_DEL_FORWARD,
 CMD_DEL_BACKWARD,
 CMD_MISC) = list(range(5))

# convert a list of Block objects into an unspecified, but compact, form
# of storage. storage2blocks will convert this back to the original form.
#
# the return type is a tuple: (numberOfBlocks, ...). the number and type
# of elements after the first is of no concern to the caller.
#
# implementation notes:
#
#   tuple[1]: bool; True if tuple[2] is zlib-compressed
#
#   tuple[2]: bytes; the block objects converted to their string
#   representation and joined by the "\n" character
#
def blocks2storage(blocks):
    if not blocks:
        return (0,)

    blocks = [str(b) for b in blocks]
    blocksStr = "\n".join(blocks).encode()

    # instead of having an arbitrary cutoff figure ("compress if < X
    # bytes"), always compress, but only use the compressed version if
    # it's shorter than the non-compressed one.

    blocksStrCompressed = zlib.compress(blocksStr, 6)

    if len(blocksStrCompressed) < len(blocksStr):
        return (len(blocks), True, blocksStrCompressed)
    else:
        return (len(blocks), False, blocksStr)

# see blocks2storage.
def storage2blocks(storage):
    if storage[0] == 0:
        return []

    if storage[1]:
        blocksStr = zlib.decompress(storage[2]).decode()
    else:
        blocksStr = storage[2].decode()

    return [block.Block.fromStr(s) for s in blocksStr.split("\n")]

# how much memory is used by the given storage object
def memoryUsed(storage):
    # 16 is a rough estimate for the first two tuple members' memory usage

    if storage[0] == 0:
        return 16

    return 16 + len(storage[2])

# abstract base class for storing undo history. concrete subclasses
# implement undo/redo for specific actions taken on a buffer.
class Base:
    def __init__(self, buf, cmdType):
        # cursor position before the action
        self.startPos = buf.cursorAsMark()

        # type of action; one of the CMD_ values
        self.cmdType = cmdType

        # prev/next undo objects in the history
        self.prev = None
        self.next = None

    # set cursor position after the action
    def setEndPos(self, buf):
        self.endPos = buf.cursorAsMark()

    def getType(self):
        return self.cmdType

    # rough estimate of how much memory is used by this undo object.
    def memoryUsed(self):
        return (BASE_MEMORY_USAGE + memoryUsed(self.blocksBefore) +
                memoryUsed(self.blocksAfter))

    def undo(self, buf):
        buf.block, buf.column = self.startPos.block, self.startPos.column

        buf.blocks[self.startBlock : self.startBlock + self.blocksAfter[0]] = \
            storage2blocks(self.blocksBefore)

    def redo(self, buf):
        buf.block, buf.column = self.endPos.block, self.endPos.column

        buf.blocks[self.startBlock : self.startBlock + self.blocksBefore[0]] = \
            storage2blocks(self.blocksAfter)

# stores a single modified block
class SingleBlock(Base):
    # index is the block being modified. there is no requirement for the
    # cursor to be in this block.
    def __init__(self, buf, cmdType, index):
        Base.__init__(self, buf, cmdType)

        self.startBlock = index
        self.blocksBefore = blocks2storage(buf.blocks[index : index + 1])

    # called after editing action is over to snapshot the "after" state
    def setAfter(self, buf):
        self.blocksAfter = blocks2storage(
            buf.blocks[self.startBlock : self.startBlock + 1])

        self.setEndPos(buf)

# stores N modified consecutive blocks
class ManyBlocks(Base):
    # index is the first modified block. nrOfBlocksStart is how many
    # blocks there are before the edit operation and nrOfBlocksEnd is how
    # many there are after. so an edit operation splitting a block would
    # pass in (1, 2) while an edit operation joining two blocks would pass
    # in (2, 1).
    def __init__(self, buf, cmdType, index, nrOfBlocksStart, nrOfBlocksEnd):
        Base.__init__(self, buf, cmdType)

        self.nrOfBlocksEnd = nrOfBlocksEnd

        self.startBlock = index
        self.blocksBefore = blocks2storage(
            buf.blocks[index : index + nrOfBlocksStart])

    def setAfter(self, buf):
        self.blocksAfter = blocks2storage(
            buf.blocks[self.startBlock : self.startBlock + self.nrOfBlocksEnd])

        self.setEndPos(buf)

# doubly linked list of undo objects, with the position we're at when
# walking it with undo/redo.
class History:
    def __init__(self, memoryLimit = 5000000):
        # first/last undo objects (undo.Base)
        self.firstUndo = None
        self.lastUndo = None

        # value of this, depending on the user's last action:
        #  undo: the undo object that was used
        #  redo: the next undo object from the one that was used
        #  anything else: None
        self.currentUndo = None

        # estimated amount of memory used by undo objects, in bytes
        self.undoMemoryUsed = 0

        # history is trimmed from the start when it grows past this
        self.memoryLimit = memoryLimit

    # return True if we can undo
    def canUndo(self):
        return bool(
            # undo history exists
            self.lastUndo

            # and we either:
            and (
                # are not in the middle of undo/redo
                not self.currentUndo or

                # or are, but can still undo more
                self.currentUndo.prev))

    # return True if we can redo
    def canRedo(self):
        return bool(self.currentUndo)

    # return the last undo object if 'cmdType' edits at the cursor position
    # 'pos' can be merged into it, None otherwise.
    def getMergeable(self, cmdTypes, pos):
        # only merge with the previous item in undo history if:
        #   -we are not in middle of undo/redo
        #   -previous item is of a compatible type
        #   -cursor is exactly where it was left off by the previous item
        if (not self.currentUndo and self.lastUndo and
            (self.lastUndo.getType() in cmdTypes) and
            (self.lastUndo.endPos == pos)):
            return self.lastUndo

        return None

    def add(self, u):
        if self.currentUndo:
            # new edit action while navigating undo history; throw away
            # any undo history after current point

            if self.currentUndo.prev:
                # not at beginning of undo history; cut off the rest
                self.currentUndo.prev.next = None
                self.lastUndo = self.currentUndo.prev
            else:
                # beginning of undo history; throw everything away
                self.firstUndo = None
                self.lastUndo = None

            self.currentUndo = None

            # we threw away an unknown number of undo items, so we must go
            # through all of the remaining ones and recalculate how much
            # memory is used
            self.undoMemoryUsed = 0

            tmp = self.firstUndo

            while tmp:
                self.undoMemoryUsed += tmp.memoryUsed()
                tmp = tmp.next

        if not self.lastUndo:
            # no undo history at all yet
            self.firstUndo = u
            self.lastUndo = u
        else:
            self.lastUndo.next = u
            u.prev = self.lastUndo
            self.lastUndo = u

        self.undoMemoryUsed += u.memoryUsed()

        # trim undo history until the estimated memory usage is small
        # enough
        while ((self.firstUndo is not self.lastUndo) and
               (self.undoMemoryUsed >= self.memoryLimit)):

            tmp = self.firstUndo
            tmp.next.prev = None
            self.firstUndo = tmp.next
            tmp.next = None

            self.undoMemoryUsed -= tmp.memoryUsed()

        self.currentUndo = None

    def addMerged(self, u, buf):
        assert u is self.lastUndo

        memoryUsedBefore = u.memoryUsed()
        u.setAfter(buf)
        memoryUsedAfter = u.memoryUsed()

        self.undoMemoryUsed += memoryUsedAfter - memoryUsedBefore

    # undo the last action on 'buf'. returns False if there was nothing to
    # undo.
    def undo(self, buf):
        if not self.canUndo():
            return False

        # the action to undo
        if self.currentUndo:
            u = self.currentUndo.prev
        else:
            u = self.lastUndo

        u.undo(buf)
        self.currentUndo = u

        return True

    def redo(self, buf):
        if not self.canRedo():
            return False

        self.currentUndo.redo(buf)
        self.currentUndo = self.currentUndo.next

        return True

    # number of undo objects in the history
    def __len__(self):
        n = 0
        tmp = self.firstUndo

        while tmp:
            n += 1
            tmp = tmp.next

        return n
