import slugline.screenplay as screenplay

# an entry in the command palette.
class Command:
    def __init__(self, id, label, shortcut, lt):

        # identifier, e.g. "scene"
        self.id = id

        # text shown to the user, e.g. "Scene Heading"
        self.label = label

        # textual shortcut hint shown next to the label, or ""
        self.shortcut = shortcut

        # line type of the block inserted when this command is chosen
        self.lt = lt

    def __repr__(self):
        return "Command(%r)" % self.id

# every command id maps to one of the supported block types. ids for
# which no dedicated type exists insert an action block.
commandMap = {
    "scene" : screenplay.SCENE,
    "action" : screenplay.ACTION,
    "character" : screenplay.CHARACTER,
    "dialogue" : screenplay.DIALOGUE,
    "parenthetical" : screenplay.PAREN,
    "transition" : screenplay.TRANSITION,
    "shot" : screenplay.ACTION,
    "text" : screenplay.ACTION,
    "note" : screenplay.ACTION,
    "outline" : screenplay.ACTION,
    "newact" : screenplay.ACTION,
    "endact" : screenplay.ACTION,
    "lyrics" : screenplay.ACTION,
    "image" : screenplay.ACTION,
    "sequence" : screenplay.ACTION,
    "dual" : screenplay.DIALOGUE,
}

# line type for command 'id'. unknown ids give ACTION.
def id2lt(id):
    return commandMap.get(id, screenplay.ACTION)

def _cmd(id, label, shortcut = ""):
    return Command(id, label, shortcut, id2lt(id))

# the palette's catalog, in display order.
COMMANDS = [
    _cmd("scene", "Scene Heading", "INT./EXT."),
    _cmd("action", "Action"),
    _cmd("character", "Character", "Tab"),
    _cmd("dialogue", "Dialogue"),
    _cmd("parenthetical", "Parenthetical"),
    _cmd("transition", "Transition", "CUT TO:"),
    _cmd("shot", "Shot"),
    _cmd("text", "Text"),
    _cmd("note", "Note"),
    _cmd("outline", "Outline"),
    _cmd("newact", "New Act"),
    _cmd("endact", "End of Act"),
    _cmd("lyrics", "Lyrics"),
    _cmd("image", "Image"),
    _cmd("sequence", "Sequence"),
    _cmd("dual", "Dual Dialogue"),
]

# modal list of commands opened by typing "/". tracks whether it's open,
# which entry is highlighted and where it was opened.
class CommandPalette:
    def __init__(self, commands = None):
        if commands is None:
            commands = COMMANDS

        self.commands = commands

        self.active = False

        # index of the highlighted command
        self.selected = 0

        # opaque position the palette was opened at, as given by the
        # caller. only stored, never interpreted.
        self.anchor = None

    def isOpen(self):
        return self.active

    def open(self, anchor = None):
        self.active = True
        self.selected = 0
        self.anchor = anchor

    def close(self):
        self.active = False
        self.anchor = None

    # move the highlight by 'delta' entries, wrapping around at both ends.
    def moveSelection(self, delta):
        assert self.active, "moveSelection on a closed palette"

        self.selected = (self.selected + delta) % len(self.commands)

    def select(self, index):
        assert self.active, "select on a closed palette"
        assert 0 <= index < len(self.commands), \
               "command index %d out of range" % index

        self.selected = index

    def getSelected(self):
        return self.commands[self.selected]

    # close the palette and return the highlighted command.
    def confirmSelection(self):
        assert self.active, "confirmSelection on a closed palette"

        cmd = self.commands[self.selected]
        self.close()

        return cmd
