# setup.py
from setuptools import setup

import os.path
import re

# read the version from the package without importing it, since its
# dependencies may not be installed yet
def getVersion():
    fn = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                      "fountainpager", "__init__.py")

    with open(fn, "r", encoding = "UTF-8") as f:
        mo = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)

    return mo.group(1)

setup(
    name = "fountainpager",
    version = getVersion(),
    description = "Screenplay pagination and PDF layout for Fountain scripts",

    long_description = """\
fountainpager lays out screenplays written in the Fountain plain text
format onto pages and renders them to PDF.

Features:

 * Industry standard pagination: dialogue is split across pages with
   (MORE) and (CONT'D) markers, and never leaves a lone character cue or
   a lone line of dialogue behind.
 * Dual dialogue: two speeches printed side by side, moved between pages
   as a unit.
 * Title page: Fountain title page keys laid out on their own page.
 * Scene numbers: inline or in both margins, plain or in parentheses.
 * PDF: built on reportlab, with a scene outline and optional embedding
   of a TrueType font.
""",
      license = "GPL",
      packages = ["fountainpager"],
      python_requires = ">=3.8",
      install_requires = ["reportlab"],
      extras_require = {
          "test": ["pytest"],
      },
      entry_points = {
          "console_scripts": [
              "fountainpager = fountainpager.main:main",
          ],
      },
)
