import pytest

import u
import slugline.block as block
import slugline.buffer as buffer
import slugline.config as config
import slugline.screenplay as scr
import slugline.undo as undo

def testInterface():
    buf = buffer.Buffer()

    with pytest.raises(NotImplementedError):
        buf.insertText("a")

    with pytest.raises(NotImplementedError):
        buf.querySelectedBlocks()

def testNewBuffer():
    buf = buffer.TextBuffer()

    assert u.contents(buf) == [(scr.ACTION, "")]
    assert buf.querySelectionCollapsed()
    assert not buf.isModified()
    assert not buf.canUndo()

    buf._validate()

def testInsertText():
    buf, ctrl = u.newCtrl((scr.ACTION, "ac"))
    buf.gotoPos(0, 1)

    buf.insertText("b")
    assert u.contents(buf) == [(scr.ACTION, "abc")]
    assert buf.column == 2
    assert buf.isModified()

    buf.insertText("XYZ")
    assert u.contents(buf) == [(scr.ACTION, "abXYZc")]
    assert buf.column == 5

def testDeleteBackwardJoins():
    buf, ctrl = u.newCtrl((scr.CHARACTER, "BOB"), (scr.DIALOGUE, "Hi"))
    buf.gotoPos(1, 0)

    buf.deleteBackward()

    assert u.contents(buf) == [(scr.CHARACTER, "BOBHi")]
    assert (buf.block, buf.column) == (0, 3)

    buf.deleteBackward(2)
    assert u.contents(buf) == [(scr.CHARACTER, "BHi")]

    # nothing to delete at the very start
    buf.gotoPos(0, 0)
    buf.deleteBackward(5)
    assert u.contents(buf) == [(scr.CHARACTER, "BHi")]

def testDeleteForwardJoins():
    buf, ctrl = u.newCtrl((scr.ACTION, "ab"), (scr.DIALOGUE, "cd"))
    buf.gotoPos(0, 1)

    buf.deleteForward(2)
    assert u.contents(buf) == [(scr.ACTION, "acd")]

    buf.gotoPos(0, 3)
    buf.deleteForward()
    assert u.contents(buf) == [(scr.ACTION, "acd")]

def testInsertBlockAfterCursor():
    buf, ctrl = u.newCtrl((scr.ACTION, "abcd"))
    buf.gotoPos(0, 2)

    index = buf.insertBlockAfterCursor(scr.PAREN, "(")

    assert index == 1
    assert u.contents(buf) == [(scr.ACTION, "ab"), (scr.PAREN, "(cd")]
    assert (buf.block, buf.column) == (0, 2)

    buf.moveCursorInto(index, 1)
    assert buf.queryCurrentBlockType() == scr.PAREN
    assert buf.queryCurrentBlockText() == "(cd"
    assert buf.column == 1

def testSelection():
    buf, ctrl = u.newCtrl((scr.ACTION, "a"), (scr.ACTION, "b"),
                          (scr.ACTION, "c"))

    assert buf.querySelectedBlocks() == (2, 2)

    buf.gotoPos(0, 0, mark = True)
    assert not buf.querySelectionCollapsed()
    assert buf.querySelectedBlocks() == (0, 2)

    buf.setCurrentBlockType(scr.TRANSITION)
    assert [b.lt for b in buf.blocks] == [scr.TRANSITION] * 3

    buf.collapseSelection()
    assert buf.querySelectionCollapsed()
    assert buf.querySelectedBlocks() == (0, 0)

    # mark at the cursor position is a collapsed selection
    buf.setMark(0, 0)
    assert buf.querySelectionCollapsed()

def testWrap():
    buf, ctrl = u.newCtrl((scr.ACTION, "a"))

    buf.wrapCurrentBlock(scr.SCENE)
    assert buf.blocks[0] == block.Block(scr.SCENE, "a", True)

    buf.unwrapCurrentBlock()
    assert buf.blocks[0] == block.Block(scr.SCENE, "a", False)

def testGetBlocksIsSnapshot():
    buf, ctrl = u.newCtrl((scr.ACTION, "a"))

    blocks = buf.getBlocks()
    buf.insertText("b")

    assert blocks[0].text == "a"
    assert buf.blocks[0].text == "ab"

# consecutive typed characters undo a word at a time
def testUndoWords():
    buf, ctrl = u.newCtrl((scr.ACTION, ""))

    ctrl.cmdChars("hello world")
    assert len(buf.history) == 2

    buf.undo()
    assert u.contents(buf) == [(scr.ACTION, "hello ")]

    buf.undo()
    assert u.contents(buf) == [(scr.ACTION, "")]
    assert not buf.canUndo()
    assert buf.canRedo()

    buf.redo()
    assert u.contents(buf) == [(scr.ACTION, "hello ")]
    assert buf.column == 6

    # a new edit throws away what could have been redone
    buf.insertText("X")
    assert not buf.canRedo()

    buf.undo()
    assert u.contents(buf) == [(scr.ACTION, "hello ")]

def testUndoJoin():
    buf, ctrl = u.newCtrl((scr.CHARACTER, "BOB"), (scr.DIALOGUE, "Hi"))
    buf.gotoPos(1, 0)

    buf.deleteBackward()
    buf.undo()

    assert u.contents(buf) == [(scr.CHARACTER, "BOB"), (scr.DIALOGUE, "Hi")]
    assert (buf.block, buf.column) == (1, 0)

    buf._validate()

def testUndoMemoryLimit():
    cfgGl = config.ConfigGlobal()
    cfgGl.undoMemoryLimit = 10000

    buf, ctrl = u.newCtrl((scr.ACTION, ""), cfgGl = cfgGl)

    for i in range(20):
        buf.insertBlockAfterCursor(scr.ACTION)
        buf.moveCursorInto(buf.block + 1)

    assert len(buf.blocks) == 21
    assert len(buf.history) < 20
    assert buf.history.undoMemoryUsed < 10000 + undo.BASE_MEMORY_USAGE * 2

def testStorage():
    blocks = [block.Block(scr.SCENE, "INT. HOUSE"),
              block.Block(scr.DIALOGUE, "line\nwith \\ backslash", True)]

    storage = undo.blocks2storage(blocks)
    assert storage[0] == 2
    assert undo.storage2blocks(storage) == blocks

    assert undo.blocks2storage([]) == (0,)
    assert undo.storage2blocks((0,)) == []
