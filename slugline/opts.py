import sys

USAGE = """usage: slugline export INPUT OUTPUT [--title-page] [--verbose]
       slugline fdx INPUT OUTPUT [--verbose]

INPUT is a .json document or a native screenplay file."""

COMMANDS = ("export", "fdx")

# parse command line arguments into module-level variables. returns an
# error message, or None if the arguments are fine.
def init(argv = None):
    global command, filenames, showTitlePage, verbose, showHelp

    if argv is None:
        argv = sys.argv[1:]

    # one of COMMANDS, or None
    command = None

    # input and output filenames
    filenames = []

    # print the title page before the script
    showTitlePage = False

    # log debug messages
    verbose = False

    showHelp = False

    for arg in argv:
        if arg == "--title-page":
            showTitlePage = True
        elif arg == "--verbose":
            verbose = True
        elif arg in ("-h", "--help"):
            showHelp = True
        elif arg.startswith("--"):
            return "unknown option '%s'" % arg
        elif command is None:
            command = arg
        else:
            filenames.append(arg)

    if showHelp:
        return None

    if command is None:
        return "no command given"

    if command not in COMMANDS:
        return "unknown command '%s'" % command

    if len(filenames) != 2:
        return "expected INPUT and OUTPUT filenames"

    return None
