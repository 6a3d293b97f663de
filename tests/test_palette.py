import pytest

import slugline.palette as palette
import slugline.screenplay as scr

def testCatalog():
    ids = [c.id for c in palette.COMMANDS]

    assert ids == ["scene", "action", "character", "dialogue",
                   "parenthetical", "transition", "shot", "text", "note",
                   "outline", "newact", "endact", "lyrics", "image",
                   "sequence", "dual"]

    for c in palette.COMMANDS:
        assert c.lt == palette.id2lt(c.id)

def testMapping():
    assert palette.id2lt("scene") == scr.SCENE
    assert palette.id2lt("action") == scr.ACTION
    assert palette.id2lt("character") == scr.CHARACTER
    assert palette.id2lt("dialogue") == scr.DIALOGUE
    assert palette.id2lt("parenthetical") == scr.PAREN
    assert palette.id2lt("transition") == scr.TRANSITION
    assert palette.id2lt("dual") == scr.DIALOGUE

    for id in ("shot", "text", "note", "outline", "newact", "endact",
               "lyrics", "image", "sequence"):
        assert palette.id2lt(id) == scr.ACTION

    assert palette.id2lt("no-such-command") == scr.ACTION

def testOpenResetsSelection():
    p = palette.CommandPalette()
    assert not p.isOpen()

    p.open((10, 20))
    assert p.isOpen()
    assert p.anchor == (10, 20)

    p.moveSelection(3)
    assert p.selected == 3

    p.close()
    assert not p.isOpen()

    p.open()
    assert p.selected == 0

def testMoveSelectionWraps():
    p = palette.CommandPalette()
    n = len(p.commands)
    p.open()

    p.moveSelection(-1)
    assert p.selected == n - 1

    p.moveSelection(1)
    assert p.selected == 0

    p.moveSelection(5)
    p.moveSelection(n)
    assert p.selected == 5

    p.moveSelection(-(2 * n + 1))
    assert p.selected == 4

def testConfirm():
    p = palette.CommandPalette()
    p.open()

    p.select(15)
    cmd = p.confirmSelection()

    assert cmd.id == "dual"
    assert cmd.lt == scr.DIALOGUE
    assert not p.isOpen()

def testContractViolations():
    p = palette.CommandPalette()

    with pytest.raises(AssertionError):
        p.confirmSelection()

    with pytest.raises(AssertionError):
        p.moveSelection(1)

    with pytest.raises(AssertionError):
        p.select(0)

    p.open()

    with pytest.raises(AssertionError):
        p.select(16)

    with pytest.raises(AssertionError):
        p.select(-1)
