import json
import logging
import os.path
import random
import sqlite3
import string
import time

import slugline.block as block
import slugline.error as error
import slugline.misc as misc
import slugline.screenplay as screenplay
import slugline.titles as titles

log = logging.getLogger(__name__)

DB_FILENAME = "screenplays.db"

SAMPLE_ID = "sample-1"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS screenplays (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    title_page TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_screenplays_updated_at
    ON screenplays(updated_at DESC);
CREATE INDEX IF NOT EXISTS idx_screenplays_title ON screenplays(title);
"""

# record stored in an empty database
def getSampleRecord():
    blocks = [
        block.Block(screenplay.SCENE, "INT. SAMPLE ROOM - DAY"),
        block.Block(screenplay.ACTION, "A writer sits at a computer, working"
                    " on a screenplay."),
        block.Block(screenplay.CHARACTER, "WRITER"),
        block.Block(screenplay.DIALOGUE, "This is a sample screenplay to get"
                    " you started!"),
    ]

    tp = titles.TitlePage("Sample Screenplay", "Your Name", "your@email.com")

    return ("Sample Screenplay", blocks, tp)

# new unique record id
def makeId():
    chars = string.ascii_lowercase + string.digits
    suffix = "".join(random.choice(chars) for i in range(9))

    return "screenplay-%d-%s" % (int(time.time() * 1000), suffix)

# whole-document store backed by a single SQLite database file. records
# are returned as dictionaries in the same shape Screenplay.toDict uses,
# plus "id", "created_at" and "updated_at".
class Storage:
    def __init__(self, path = None):
        if path is None:
            path = os.path.join(misc.makeConfDir(), DB_FILENAME)

        self.path = path

        with self.connect() as conn:
            conn.executescript(_SCHEMA)

            count = conn.execute(
                "SELECT COUNT(*) FROM screenplays").fetchone()[0]

            if count == 0:
                title, blocks, tp = getSampleRecord()
                self._insert(conn, SAMPLE_ID, title, blocks, tp)

                log.info("seeded empty database %s with a sample" % path)

    # context manager giving an open connection that is committed on
    # success, rolled back on errors and always closed. sqlite3 errors are
    # turned into error.StorageError.
    def connect(self):
        return _Connection(self.path)

    def list(self):
        with self.connect() as conn:
            rows = conn.execute(
                "SELECT * FROM screenplays ORDER BY updated_at DESC,"
                " rowid DESC").fetchall()

        return [self._row2dict(r) for r in rows]

    # get record 'id'. raises error.NotFoundError if there's no such
    # record.
    def get(self, id):
        with self.connect() as conn:
            row = self._getRow(conn, id)

        return self._row2dict(row)

    # store a new record and return it.
    def create(self, title, blocks, titlePage):
        if not title or not blocks:
            raise error.StorageError("Title and content are required")

        id = makeId()

        with self.connect() as conn:
            self._insert(conn, id, title, blocks, titlePage)
            row = self._getRow(conn, id)

        log.debug("created screenplay %s" % id)

        return self._row2dict(row)

    # replace content and title page of record 'id', and its title if
    # given. returns the updated record.
    def update(self, id, blocks, titlePage, title = None):
        with self.connect() as conn:
            row = self._getRow(conn, id)

            if title is None:
                title = row["title"]

            conn.execute(
                "UPDATE screenplays SET title = ?, content = ?,"
                " title_page = ?, updated_at = CURRENT_TIMESTAMP"
                " WHERE id = ?",
                (title, self._dumpBlocks(blocks), self._dumpTitles(titlePage),
                 id))

            row = self._getRow(conn, id)

        log.debug("updated screenplay %s" % id)

        return self._row2dict(row)

    def delete(self, id):
        with self.connect() as conn:
            cur = conn.execute("DELETE FROM screenplays WHERE id = ?", (id,))

            if cur.rowcount == 0:
                raise error.NotFoundError(id)

        log.debug("deleted screenplay %s" % id)

    # update the record whose id is 'title' if there is one, otherwise
    # create a new record. created records get a generated id, not the
    # title, so saving under the same title again adds another record.
    def saveCurrent(self, title, blocks, titlePage):
        try:
            self.get(title)
        except error.NotFoundError:
            return self.create(title, blocks, titlePage)

        return self.update(title, blocks, titlePage)

    def _getRow(self, conn, id):
        row = conn.execute("SELECT * FROM screenplays WHERE id = ?",
                           (id,)).fetchone()

        if row is None:
            raise error.NotFoundError(id)

        return row

    def _insert(self, conn, id, title, blocks, titlePage):
        conn.execute(
            "INSERT INTO screenplays (id, title, content, title_page)"
            " VALUES (?, ?, ?, ?)",
            (id, title, self._dumpBlocks(blocks), self._dumpTitles(titlePage)))

    def _dumpBlocks(self, blocks):
        return json.dumps(screenplay.blocks2list(blocks))

    def _dumpTitles(self, titlePage):
        if titlePage is None:
            return json.dumps({})

        return json.dumps(titlePage.toDict())

    def _row2dict(self, row):
        try:
            content = json.loads(row["content"])
            titlePage = json.loads(row["title_page"])
        except ValueError as e:
            raise error.StorageError("Screenplay '%s' is corrupt: %s" % (
                row["id"], e))

        return {
            "id" : row["id"],
            "title" : row["title"],
            "content" : content,
            "title_page" : titlePage,
            "created_at" : row["created_at"],
            "updated_at" : row["updated_at"],
        }

class _Connection:
    def __init__(self, path):
        self.path = path
        self.conn = None

    def __enter__(self):
        try:
            self.conn = sqlite3.connect(self.path)
        except sqlite3.Error as e:
            raise error.StorageError("Error opening database '%s': %s" % (
                self.path, e))

        self.conn.row_factory = sqlite3.Row

        return self.conn

    def __exit__(self, excType, excValue, tb):
        try:
            if excType is None:
                self.conn.commit()
            else:
                self.conn.rollback()
        except sqlite3.Error as e:
            log.error("database error on %s: %s" % (self.path, e))

            if excType is None:
                raise error.StorageError("Database error: %s" % e)
        finally:
            self.conn.close()

        if (excType is not None) and issubclass(excType, sqlite3.Error):
            raise error.StorageError("Database error: %s" % excValue) \
                  from excValue

        return False
