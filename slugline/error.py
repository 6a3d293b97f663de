# exception classes


class SluglineError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ConfigError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


class MiscError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


# anything that goes wrong while talking to a document store
class StorageError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


# the requested document does not exist in the store
class NotFoundError(StorageError):
    def __init__(self, docId):
        StorageError.__init__(self, "Screenplay '%s' not found" % docId)
        self.docId = docId
