import logging

import slugline.autoformat as autoformat
import slugline.config as config
import slugline.palette as palette
import slugline.screenplay as screenplay

log = logging.getLogger(__name__)

# controller states
EDITING = 0
PALETTE_OPEN = 1

# key name -> command name, while editing. single character keys not
# listed here are handled by addCharCmd.
EDITING_KEYS = {
    "Enter" : "splitElement",
    "Tab" : "tab",
    "Escape" : "abort",
    "Backspace" : "deleteBackward",
    "Delete" : "deleteForward",
    "/" : "openPalette",
}

# key name -> command name, while the command palette is open. all other
# keys are ignored.
PALETTE_KEYS = {
    "ArrowUp" : "paletteUp",
    "ArrowDown" : "paletteDown",
    "Enter" : "paletteConfirm",
    "Escape" : "paletteAbort",
}

# stuff we need when handling commands in Controller.
class CommandState:
    def __init__(self):

        # only used for inserting characters, in which case this is the
        # character to insert in a string form.
        self.char = None

        # position to open the command palette at. passed through as is.
        self.anchor = None

# turns key events into changes of the block sequence. all document
# access goes through the buffer primitives; nothing about the buffer is
# remembered between events.
class Controller:
    def __init__(self, buf, cfgGl = None, cmdPalette = None):
        if cfgGl is None:
            cfgGl = config.ConfigGlobal()

        if cmdPalette is None:
            cmdPalette = palette.CommandPalette()

        self.buf = buf
        self.cfgGl = cfgGl
        self.palette = cmdPalette

    def getState(self):
        if self.palette.isOpen():
            return PALETTE_OPEN
        else:
            return EDITING

    # handle a key event. 'key' is either a single character or one of the
    # key names in EDITING_KEYS / PALETTE_KEYS. 'anchor' is passed on to
    # the command palette if this key opens it.
    def handleKey(self, key, anchor = None):
        if self.palette.isOpen():
            name = PALETTE_KEYS.get(key)
        else:
            name = EDITING_KEYS.get(key)

            if not name and (len(key) == 1):
                name = "addChar"

        if not name:
            log.debug("ignoring key %r in state %d" % (key, self.getState()))

            return

        cs = CommandState()
        cs.char = key
        cs.anchor = anchor

        getattr(self, name + "Cmd")(cs)

    # send each character in s as a separate key event. ONLY MEANT TO BE
    # USED IN TEST CODE.
    def cmdChars(self, s):
        for char in s:
            self.handleKey(char)

    # insert 's' as one unit, e.g. from the clipboard. never auto-formats.
    def paste(self, s):
        if self.palette.isOpen() or not s:
            return

        self.buf.insertText(s)

    # add character cs.char and run it through the auto-formatter.
    def addCharCmd(self, cs):
        char = cs.char

        self.buf.insertText(char)

        if self.cfgGl.autoFormat:
            autoformat.afterInsert(self.buf, char)

    def deleteBackwardCmd(self, cs):
        self.buf.deleteBackward(1)

    def deleteForwardCmd(self, cs):
        self.buf.deleteForward(1)

    def abortCmd(self, cs):
        pass

    # insert a block of type 'lt' at the cursor and move into it.
    def insertBlock(self, lt):
        index = self.buf.insertBlockAfterCursor(lt)
        self.buf.moveCursorInto(index)

    # start a new block, whose type depends on the current block's type.
    def splitElementCmd(self, cs):
        if not self.buf.querySelectionCollapsed():
            return

        tcfg = self.cfgGl.getType(self.buf.queryCurrentBlockType())
        self.insertBlock(tcfg.newTypeEnter)

    def tabCmd(self, cs):
        if not self.buf.querySelectionCollapsed():
            return

        tcfg = self.cfgGl.getType(self.buf.queryCurrentBlockType())
        self.insertBlock(tcfg.newTypeTab)

    # "/" is typed into the text like any character, and then the palette
    # opens. both confirming and aborting the palette remove it again.
    def openPaletteCmd(self, cs):
        self.buf.insertText("/")
        self.palette.open(cs.anchor)

    def paletteUpCmd(self, cs):
        self.palette.moveSelection(-1)

    def paletteDownCmd(self, cs):
        self.palette.moveSelection(1)

    def paletteConfirmCmd(self, cs):
        command = self.palette.confirmSelection()

        self.buf.deleteBackward(1)
        self.insertBlock(command.lt)

    def paletteAbortCmd(self, cs):
        self.palette.close()
        self.buf.deleteBackward(1)

    # pointer click on palette entry 'index'. same as highlighting it and
    # pressing Enter.
    def clickCommand(self, index):
        self.palette.select(index)
        self.paletteConfirmCmd(CommandState())

    # toolbar toggle: make every block touched by the selection a wrapped
    # block of type 'lt', or back into plain paragraphs if any of them
    # already is one.
    def toggleBlock(self, lt):
        if self.palette.isOpen():
            return

        buf = self.buf
        first, last = buf.querySelectedBlocks()

        isSet = False
        for i in range(first, last + 1):
            if buf.queryBlockType(i) == lt:
                isSet = True

                break

        buf.unwrapCurrentBlock()

        if isSet:
            buf.setCurrentBlockType(screenplay.PARAGRAPH)
        else:
            buf.wrapCurrentBlock(lt)

        buf.collapseSelection()
