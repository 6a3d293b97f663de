import json
import logging
import sys

import slugline.error as error
import slugline.opts as opts
import slugline.screenplay as screenplay
import slugline.util as util

log = logging.getLogger(__name__)

# load a document from 'filename', either JSON (by extension) or the
# native format. raises error.MiscError on errors.
def loadScreenplay(filename):
    s = util.loadFile(filename)

    if filename.lower().endswith(".json"):
        try:
            d = json.loads(s)
        except ValueError as e:
            raise error.MiscError("Invalid JSON in '%s': %s" % (filename, e))

        sp, msg = screenplay.Screenplay.fromDict(d)
    else:
        sp, msg = screenplay.Screenplay.load(s)

    return sp

def run():
    inFile, outFile = opts.filenames

    sp = loadScreenplay(inFile)

    if opts.command == "export":
        if opts.showTitlePage:
            sp.showTitlePage = True

        sp.exportPDF(outFile)

    elif opts.command == "fdx":
        util.writeToFile(outFile, sp.generateFDX())
        log.info("wrote Final Draft file %s" % outFile)

def main(argv = None):
    errMsg = opts.init(argv)

    if opts.showHelp:
        print(opts.USAGE)

        return 0

    if errMsg:
        print("slugline: %s\n\n%s" % (errMsg, opts.USAGE), file = sys.stderr)

        return 2

    if opts.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(level = level,
                        format = "%(levelname)s %(name)s: %(message)s")

    try:
        run()
    except error.SluglineError as e:
        log.error(str(e))

        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
