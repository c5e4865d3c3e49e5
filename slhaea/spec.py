"""
SLHA Format Specification
=========================

Layout:
    # comment line                     <- Comment line (first non-blank char is #)
    BLOCK MASS   # Mass spectrum       <- Block header: keyword, block name, optional comment
       25     1.25000000E+02   # h0    <- Data line: whitespace-separated fields + comment
    DECAY  1000022  1.0E-03            <- Decay header: keyword, block name (PDG code), width
       1.0E-00   2   22   11          <- Data lines belong to the last header seen

Design Decisions:
    - Line oriented: one physical line is one SLHALine
    - Fields are opaque strings, never parsed as numbers
    - A trailing comment starts at the first # and is kept as the last field
    - Keywords BLOCK / DECAY are matched case-insensitively
    - Block names are matched case-insensitively but stored as written
    - Blank lines are dropped on read
    - Lines before the first header belong to a block named ""
    - Parsed lines keep their original columns; constructed lines are
      aligned on a 4-column grid

Structural keys:
    <block>;<k0>,<k1>,...;<field>      <- e.g. "MASS;25;1", "1000022;(any),2,11,24;0"
"""

# Keywords that open a new block (compared case-insensitively)
BLOCK_KEYWORDS = ("BLOCK", "DECAY")

# Start of a trailing comment
COMMENT_CHAR = "#"

# Query token matching any field value at its position
WILDCARD = "(any)"

# Structural key separators
KEY_SEPARATOR = ";"
LINE_KEY_SEPARATOR = ","

# Canonical layout: data lines are indented by one column and fields
# after the first are aligned on a 4-column grid
TAB_WIDTH = 4
DATA_INDENT = 1

ENCODING = "utf-8"
EXTENSION = ".slha"

# Safety limits
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB max file size for reader
