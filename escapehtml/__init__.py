"""
escapehtml - HTML-escape the contents of a file or directory tree.

Escaped text is printed to the console under a banner per file, or written
as one .txt file per source file into a destination directory.
"""

__version__ = "0.1.0"
__author__ = "Elias Bachaalany"
__email__ = "elias.bachaalany@gmail.com"

# Note: modules are not imported here so that `python -m escapehtml.cli`
# does not trigger a RuntimeWarning about the module already being loaded.

__all__ = [
    '__version__',
    '__author__',
    '__email__',
]
