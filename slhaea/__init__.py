"""
SLHAea - SUSY Les Houches Accord input/output.

Read, query, edit and write SLHA files while keeping their layout.
"""

__version__ = "0.1.0"

from slhaea.spec import WILDCARD, BLOCK_KEYWORDS
from slhaea.errors import SLHAError, NotFoundError, MalformedKeyError, FieldIndexError
from slhaea.line import SLHALine
from slhaea.block import SLHABlock
from slhaea.document import SLHADocument
from slhaea.key import SLHAKey
from slhaea.reader import SLHAReader
from slhaea.writer import SLHAWriter
