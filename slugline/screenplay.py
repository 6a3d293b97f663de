# -*- coding: utf-8 -*-

# line types. these need to be defined before the imports below, as most
# of the modules imported use them at module level.
PARAGRAPH = 0
SCENE = 1
ACTION = 2
CHARACTER = 3
DIALOGUE = 4
PAREN = 5
TRANSITION = 6

import logging
import re

from lxml import etree

import slugline.block as block
import slugline.buffer as buffer
import slugline.config as config
import slugline.controller as controller
import slugline.error as error
import slugline.layout as layout
import slugline.pdf as pdf
import slugline.titles as titles
import slugline.util as util

log = logging.getLogger(__name__)

# native file format version
FILE_VERSION = 1

DEFAULT_TITLE = "Untitled Screenplay"

# content of a new screenplay
def getSampleBlocks():
    return [
        block.Block(TRANSITION, "FADE IN:"),
        block.Block(SCENE, "INT. EXAMPLE ROOM - DAY"),
        block.Block(ACTION, "A quiet room. Morning light falls across a"
                    " cluttered desk."),
        block.Block(CHARACTER, "WRITER"),
        block.Block(DIALOGUE, "Every story starts with a single line."),
        block.Block(TRANSITION, "FADE OUT."),
    ]

# convert blocks into a list of {"type", "text"} dictionaries.
def blocks2list(blocks):
    return [{ "type" : config.lt2extName(b.lt), "text" : b.text }
            for b in blocks]

# convert a list of content nodes into blocks. a node is either
# {"type", "text"} or {"type", "children": [{"text"}, ...]}, in which case
# the children's texts are joined. returns a (blocks, unknownTypes) tuple.
# raises error.MiscError on malformed input.
def list2blocks(nodes):
    if not isinstance(nodes, list):
        raise error.MiscError("Content is not a list.")

    blocks = []
    unknownTypes = False

    for i, node in enumerate(nodes):
        if not isinstance(node, dict):
            raise error.MiscError("Content item %d is not an object." % i)

        if "text" in node:
            text = node["text"]
        elif "children" in node:
            children = node["children"]

            if not isinstance(children, list):
                raise error.MiscError("Content item %d has invalid"
                                      " children." % i)

            text = "".join(str(c.get("text", "")) for c in children
                           if isinstance(c, dict))
        else:
            text = ""

        if not isinstance(text, str):
            raise error.MiscError("Content item %d has invalid text." % i)

        lt = config.extName2lt(str(node.get("type", "")), False)

        # convert unknown types into ACTION
        if lt is None:
            lt = ACTION
            unknownTypes = True

        blocks.append(block.Block(lt, util.fixNL(text)))

    return (blocks, unknownTypes)

# screenplay: the document being edited together with everything that
# goes with it, i.e. title, title page, page layout config, the buffer
# holding the text and the controller driving it.
class Screenplay:
    def __init__(self, cfgGl = None):
        if cfgGl is None:
            cfgGl = config.ConfigGlobal()

        self.cfgGl = cfgGl
        self.cfg = config.Config()

        # document title, also used to name exported files and stored
        # documents
        self.title = DEFAULT_TITLE

        self.titles = titles.TitlePage()

        # whether to print the title page
        self.showTitlePage = False

        self.buf = buffer.TextBuffer(cfgGl)
        self.buf.setBlocks(getSampleBlocks())

        self.ctrl = controller.Controller(self.buf, cfgGl)

    def isModified(self):
        return self.buf.isModified()

    def markChanged(self, state = True):
        self.buf.markChanged(state)

    # shortcut to the buffer's blocks
    @property
    def blocks(self):
        return self.buf.blocks

    # save script to a string and return that
    def save(self):
        output = ""

        output += "#Version %d\n" % FILE_VERSION

        output += "#Begin-Config \n"
        output += self.cfg.save()
        output += "#End-Config \n"

        output += "#Title %s\n" % util.encodeStr(self.title)
        output += "#Show-Title-Page %s\n" % str(bool(self.showTitlePage))
        output += self.titles.save()

        output += "#Start-Script \n"

        for b in self.buf.blocks:
            output += str(b) + "\n"

        return output

    # load script from string s and return a (Screenplay, msg) tuple,
    # where msgs is string (possibly empty) of warnings about the loading
    # process. fatal errors are indicated by raising a MiscError. note
    # that this is a static function.
    @staticmethod
    def load(s, cfgGl = None):
        lines = util.fixNL(s).lstrip("\ufeff").split("\n")

        # a trailing newline does not start a new block
        if lines and not lines[-1]:
            lines.pop()

        sp = Screenplay(cfgGl)

        if len(lines) < 2:
            raise error.MiscError("File has too few lines to be a valid\n"
                                  "screenplay file.")

        key, version = Screenplay.parseConfigLine(lines[0])
        if not key or (key != "Version"):
            raise error.MiscError("File doesn't seem to be a proper\n"
                                  "screenplay file.")

        if version != str(FILE_VERSION):
            raise error.MiscError("File uses fileformat version '%s',\n"
                                  "which is not supported by this version\n"
                                  "of the program." % version)

        # current position at 'lines'
        index = 1

        s, index = Screenplay.getConfigPart(lines, "Config", index)
        if s:
            sp.cfg.load(s)

        blocks = []

        # did we encounter unknown element types
        unknownTypes = False

        # did we encounter unknown config lines
        unknownConfigs = False

        # have we seen the Start-Script line
        startSeen = False

        for i in range(index, len(lines)):
            s = lines[i]

            if len(s) < 2:
                raise error.MiscError("Line %d is too short." % (i + 1))

            if not startSeen:
                key, val = Screenplay.parseConfigLine(s)
                if not key:
                    raise error.MiscError("Line %d has invalid syntax for\n"
                                          "config line." % (i + 1))

                if key == "Title":
                    sp.title = util.decodeStr(val)

                elif key == "Show-Title-Page":
                    sp.showTitlePage = val == "True"

                elif key == "Title-String":
                    sp.titles.load(val)

                elif key == "Start-Script":
                    startSeen = True

                else:
                    unknownConfigs = True

            else:
                if s[0] not in block.WRAP_CHARS.values():
                    raise error.MiscError("Line %d has an invalid wrap"
                                          " marker." % (i + 1))

                lt = config.char2lt(s[1], False)

                # convert unknown types into ACTION
                if lt is None:
                    lt = ACTION
                    unknownTypes = True

                blocks.append(block.Block(lt, util.decodeStr(s[2:]),
                                          s[0] == block.WRAP_CHARS[True]))

        if not startSeen:
            raise error.MiscError("Start-Script line not found.")

        if len(blocks) == 0:
            raise error.MiscError("File doesn't contain any screenplay"
                                  " lines.")

        sp.buf.setBlocks(blocks)

        msgs = []

        if unknownTypes:
            msgs.append("Screenplay contained unknown element types. These"
                        " have been converted to Action elements.")

        if unknownConfigs:
            msgs.append("Screenplay contained unknown information. This"
                        " probably means that the file was created with a"
                        " newer version of this program.\n\n"
                        "  You'll lose that information if you save over"
                        " the existing file.")

        for msg in msgs:
            log.warning(msg)

        return (sp, "\n\n".join(msgs))

    # lines is an array of strings. if lines[startIndex] == "Begin-$name
    # ", this searches for a string of "End-$name ", takes all the strings
    # between those two, joins the lines into a single string (lines
    # separated by a "\n") and returns (string,
    # line-index-after-the-end-line). returns ("", startIndex) if
    # startIndex does not contain the start line or startIndex is too big
    # for 'lines'. raises error.MiscError on errors.
    @staticmethod
    def getConfigPart(lines, name, startIndex):
        if (startIndex >= len(lines)) or\
               (lines[startIndex] != ("#Begin-%s " % name)):
            return ("", startIndex)

        try:
            endIndex = lines.index("#End-%s " % name, startIndex)
        except ValueError:
            raise error.MiscError("#End-%s not found" % name)

        return ("\n".join(lines[startIndex + 1:endIndex]), endIndex + 1)

    # parse a line containing a config-value. returns a (key, value)
    # tuple. if line doesn't match the format, (None, None) is returned.
    @staticmethod
    def parseConfigLine(s):
        m = re.match(r"#([a-zA-Z0-9\-]+) (.*)", s)
        if m:
            return (m.group(1), m.group(2))
        else:
            return (None, None)

    # return the document as a dictionary suitable for JSON encoding.
    def toDict(self):
        return {
            "title" : self.title,
            "content" : blocks2list(self.buf.blocks),
            "title_page" : self.titles.toDict(),
            "show_title_page" : self.showTitlePage,
        }

    # create a screenplay from a dictionary in the format toDict produces.
    # returns a (Screenplay, msg) tuple like load does.
    @staticmethod
    def fromDict(d, cfgGl = None):
        if not isinstance(d, dict):
            raise error.MiscError("Document is not an object.")

        sp = Screenplay(cfgGl)

        blocks, unknownTypes = list2blocks(d.get("content", []))
        sp.buf.setBlocks(blocks)

        sp.title = str(d.get("title") or DEFAULT_TITLE)

        tp = d.get("title_page")
        if tp is not None:
            if not isinstance(tp, dict):
                raise error.MiscError("Title page is not an object.")

            sp.titles = titles.TitlePage.fromDict(tp)

        sp.showTitlePage = bool(d.get("show_title_page", False))

        msg = ""

        if unknownTypes:
            msg = "Screenplay contained unknown element types. These" \
                  " have been converted to Action elements."
            log.warning(msg)

        return (sp, msg)

    # lay out the script and return the layout.Pager holding the result.
    def paginate(self, withTitlePage = None):
        if withTitlePage is None:
            withTitlePage = self.showTitlePage

        tp = None
        if withTitlePage:
            tp = self.titles

        pager = layout.paginate(self.buf.getBlocks(), self.cfg, tp)
        pager.doc.title = self.title

        return pager

    # generate a pml.Document of the script.
    def generatePML(self):
        return self.paginate().doc

    # generate PDF and return it as bytes.
    def generatePDF(self):
        doc = self.generatePML()

        log.debug("generating PDF of '%s': %d pages" % (
            self.title, len(doc.pages)))

        return pdf.generate(doc)

    # write PDF to 'filename', or a file named after the title in the
    # current directory if not given. returns the file name used.
    def exportPDF(self, filename = None):
        if filename is None:
            filename = util.safeFilename(self.title)

        util.writeToFile(filename, self.generatePDF())
        log.info("exported '%s' to %s" % (self.title, filename))

        return filename

    # return a list of layout.SceneInfo objects, one for each scene
    # heading, with the body page it's on.
    def getScenes(self):
        return self.paginate(False).scenes

    # generate Final Draft XML and return it as bytes.
    def generateFDX(self):
        fd = etree.Element("FinalDraft")
        fd.set("DocumentType", "Script")
        fd.set("Template", "No")
        fd.set("Version", "1")
        content = etree.SubElement(fd, "Content")

        for b in self.buf.blocks:
            para = etree.SubElement(content, "Paragraph")
            para.set("Type", config.lt2ti(b.lt).fdxName)

            paratxt = etree.SubElement(para, "Text")
            paratxt.text = b.text

        if self.titles.hasContent():
            tp = etree.SubElement(fd, "TitlePage")
            tpContent = etree.SubElement(tp, "Content")

            for text in (self.titles.title, self.titles.author,
                         self.titles.basedOn, self.titles.contact):
                if text:
                    para = etree.SubElement(tpContent, "Paragraph")
                    paratxt = etree.SubElement(para, "Text")
                    paratxt.text = text

        return etree.tostring(
            fd, xml_declaration=True, encoding='UTF-8', pretty_print=True)

    # check script for internal consistency. raises an AssertionError on
    # errors. ONLY MEANT TO BE USED IN TEST CODE.
    def _validate(self):
        self.buf._validate()
