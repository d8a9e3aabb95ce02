"""
# ABIF reader.

The Applied Biosystems Information Format is a self-describing container
used by the sequencing instruments: a header points to a directory, the
directory is a list of entries, each of one identifies a field via a tag
(a 4 characters name plus a number) and tells

 1. the type of the elements (integers, floats, dates, strings, ...)
 2. how many elements there are and how many bytes they take
 3. where the data is: directly into the entry if it fits in 4 bytes,
    otherwise at an offset from the start of the file

Opening a file reads only the header and the directory, each value is
read and decoded on demand

    >>> reader = abif.open('sample.ab1')
    >>> reader.value('PBAS:2')
    [71, 65, ...]

Only reading is supported.
"""
from .datatypes import Thumb
from .enum import ElementType, USER_DEFINED
from .exceptions import (
    ABIFException,
    FormatError,
    MagicException,
    NotFound,
    MalformedValue,
    UnsupportedType,
    ShortReadError,
)
from .reader import Reader, Value, open
from .tags import Tag
