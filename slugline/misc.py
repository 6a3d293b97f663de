import os
import os.path

version = "0.4-dev"

# where the document database and the global config live by default
confPath = os.path.join(os.path.expanduser("~"), ".slugline")

# create configuration directory if it doesn't exist yet and return its
# path.
def makeConfDir(path = None):
    if path is None:
        path = confPath

    if not os.path.isdir(path):
        os.makedirs(path, mode = 0o755)

    return path
