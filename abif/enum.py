from enum import IntEnum


class ElementType(IntEnum):
    '''Element type codes of a reference; the names are taken from the
    format's documentation. For strings an element is a single byte.'''
    BYTE    = 1   # unsigned 8-bit integer
    CHAR    = 2   # 8-bit ASCII character or signed 8-bit integer
    WORD    = 3   # unsigned 16-bit integer
    SHORT   = 4   # signed 16-bit integer
    LONG    = 5   # signed 32-bit integer
    FLOAT   = 7   # 32-bit floating point value
    DOUBLE  = 8   # 64-bit floating point value
    DATE    = 10
    TIME    = 11
    THUMB   = 12  # legacy
    PSTRING = 18  # character count in the first byte followed by the characters
    CSTRING = 19  # characters followed by a null byte


# codes from this one on are user-defined data structures
USER_DEFINED = 1024
