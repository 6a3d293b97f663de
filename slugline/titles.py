import slugline.mypickle as mypickle
import slugline.pml as pml
import slugline.util as util

# vertical positions of the title page's strings, as distances from the top
# of the paper.
TITLE_OFFSET = 200.0
AUTHOR_OFFSET = 300.0
BASED_ON_OFFSET = 350.0

# a script's title page.
class TitlePage:
    cvars = None

    def __init__(self, title = "", author = "", contact = "", basedOn = ""):

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            v.addStr("title", "", "Title")
            v.addStr("author", "", "Author")
            v.addStr("contact", "", "Contact")
            v.addStr("basedOn", "", "BasedOn")

        self.__class__.cvars.setDefaults(self)

        self.title = title
        self.author = author
        self.contact = contact
        self.basedOn = basedOn

    def __eq__(self, other):
        return self.toDict() == other.toDict()

    # True if there's anything worth putting on a title page.
    def hasContent(self):
        return bool(self.title or self.author)

    def toDict(self):
        return {
            "title" : self.title,
            "author" : self.author,
            "contact" : self.contact,
            "basedOn" : self.basedOn,
        }

    # build from a dictionary created by toDict. missing keys are left
    # empty.
    @staticmethod
    def fromDict(d):
        return TitlePage(str(d.get("title") or ""),
                         str(d.get("author") or ""),
                         str(d.get("contact") or ""),
                         str(d.get("basedOn") or ""))

    # save into a string of "#Title-String Name:value" lines.
    def save(self):
        s = ""

        for line in self.cvars.save("", self).splitlines():
            s += "#Title-String %s\n" % line

        return s

    # load one "Name:value" line. unknown names are ignored.
    def load(self, s):
        self.cvars.load(self.cvars.makeVals(s), "", self)

    # add the title page to doc. 'cfg' is the script's Config.
    def generatePages(self, doc, cfg):
        pg = pml.Page(doc)

        def centered(text, y, size, flags):
            w = util.getTextWidth(text, flags & pml.BOLD, size)
            pg.add(pml.TextOp(text, (cfg.paperWidth - w) / 2.0, y, size,
                              flags))

        if self.title:
            centered(self.title.upper(), cfg.paperHeight - TITLE_OFFSET,
                     cfg.titleFontSize, pml.BOLD)

        if self.author:
            centered("Written by %s" % self.author,
                     cfg.paperHeight - AUTHOR_OFFSET, cfg.fontSize,
                     pml.NORMAL)

        if self.basedOn:
            centered('Based on "%s"' % self.basedOn,
                     cfg.paperHeight - BASED_ON_OFFSET, cfg.fontSize,
                     pml.NORMAL)

        if self.contact:
            pg.add(pml.TextOp(self.contact, cfg.marginLeft, cfg.marginBottom,
                              cfg.fontSize))

        doc.add(pg)
