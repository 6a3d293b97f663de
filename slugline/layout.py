import slugline.config as config
import slugline.pml as pml
import slugline.screenplay as screenplay
import slugline.util as util

# one printable line, derived from a block.
class PageLine:
    def __init__(self, text, lt, isBold, size):
        self.text = text

        # type of the block this line came from
        self.lt = lt

        self.isBold = isBold

        # font size in points
        self.size = size

    def __repr__(self):
        return "PageLine(%r, %d)" % (self.text, self.lt)

# a scene heading and the (body) page it's printed on.
class SceneInfo:
    def __init__(self, number, heading, page):
        # 1-based running number
        self.number = number

        self.heading = heading

        # 1-based page number, title page not counted
        self.page = page

    def __eq__(self, other):
        return (self.number, self.heading, self.page) == \
               (other.number, other.heading, other.page)

    def __repr__(self):
        return "SceneInfo(%d, %r, %d)" % (self.number, self.heading,
                                          self.page)

# heading listed for a scene whose heading has no text
UNTITLED_SCENE = "Untitled Scene"

# split block into printable lines. lines that are empty after stripping
# whitespace are dropped.
def blockLines(b, cfg):
    isBold = cfg.getType(b.lt).isBold

    return [PageLine(s, b.lt, isBold, cfg.fontSize)
            for s in b.text.split("\n") if s.strip()]

# horizontal position of line's left edge.
def getX(line, cfg):
    tcfg = cfg.getType(line.lt)

    if tcfg.align == config.ALIGN_LEFT:
        return cfg.marginLeft + tcfg.indent

    w = util.getTextWidth(line.text, line.isBold, line.size)

    if tcfg.align == config.ALIGN_CENTER:
        return (cfg.paperWidth - w) / 2.0
    else:
        return cfg.paperWidth - cfg.marginRight - w

# used to iteratively add PML pages to a document
class Pager:
    def __init__(self, cfg):
        self.cfg = cfg

        self.doc = pml.Document(cfg.paperWidth, cfg.paperHeight)
        self.doc.showTOC = cfg.pdfShowTOC

        # number of body pages generated so far
        self.pageNr = 0

        # list of SceneInfo
        self.scenes = []

        self.pg = None
        self.y = 0.0

    # add new empty page, select it as current, reset y pos
    def createPage(self):
        self.pg = pml.Page(self.doc)
        self.doc.add(self.pg)

        self.pageNr += 1
        self.y = self.cfg.paperHeight - self.cfg.marginTop

    def addLine(self, line):
        cfg = self.cfg

        if (self.y - cfg.lineHeight) < cfg.marginBottom:
            self.createPage()

        flags = pml.NORMAL
        if line.isBold:
            flags |= pml.BOLD

        op = pml.TextOp(line.text, getX(line, cfg), self.y, line.size, flags)
        self.pg.add(op)

        if (line.lt == screenplay.SCENE) and cfg.pdfIncludeTOC:
            op.toc = pml.TOCItem(line.text, op)
            self.doc.addTOC(op.toc)

        self.y -= cfg.lineHeight

    # add all lines of block 'b'. every scene heading block gets a
    # SceneInfo, even one with nothing to print, in which case it's on the
    # current page.
    def addBlock(self, b):
        lines = blockLines(b, self.cfg)
        page = self.pageNr

        for i, line in enumerate(lines):
            self.addLine(line)

            if i == 0:
                page = self.pageNr

        if b.lt == screenplay.SCENE:
            if lines:
                heading = lines[0].text
            else:
                heading = UNTITLED_SCENE

            self.scenes.append(SceneInfo(len(self.scenes) + 1, heading,
                                         page))

    # lay out the body text. the body always has at least one page.
    def addBody(self, blocks):
        self.createPage()

        for b in blocks:
            self.addBlock(b)

# lay out 'blocks' onto pages and return the Pager holding the resulting
# pml.Document and scene list. if titlePage is given and has content, it
# comes first.
def paginate(blocks, cfg, titlePage = None):
    pager = Pager(cfg)

    if titlePage and titlePage.hasContent():
        titlePage.generatePages(pager.doc, cfg)

    pager.addBody(blocks)

    return pager

def generate(blocks, cfg, titlePage = None):
    return paginate(blocks, cfg, titlePage).doc
