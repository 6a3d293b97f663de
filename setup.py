# setup.py
from setuptools import setup

import sys
import os.path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import slugline.misc as misc

setup(
    name = "Slugline",
    version = misc.version,
    description = "Screenplay editing engine with automatic formatting, "
        "pagination and PDF export",

    long_description = """\
Slugline is the core of a screenwriting program. It keeps a screenplay as
a list of typed blocks and takes care of the formatting rules for you.

Features:

 * Editing engine: Enter and Tab move between element types the way a
   screenwriter expects, and typing "INT." or "FADE " converts the current
   block automatically.
 * Command palette: Typing "/" opens a list of block types to insert.
 * Pagination: Lays out the screenplay on US Letter pages in Courier with
   the standard indents, plus an optional title page.
 * Export: PDF and Final Draft XML (.fdx).
 * Storage: Keeps screenplays in a local SQLite database.
""",
    author = "Slugline developers",
    license = "GPL",
    packages = ["slugline"],
    python_requires = ">=3.8",
    install_requires = [
        "reportlab",
        "lxml",
    ],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": ["slugline = slugline.main:main"],
    },
)
