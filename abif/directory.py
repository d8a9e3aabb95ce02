'''
# ABIF header and directory

The file starts with a header containing the magic "ABIF", the version of
the format and a directory entry describing where the directory lives

  .-----------------------------------.
  | magic | version | directory entry |
  '-----------------------------------'
             ...
  .-----------------------------------.
  | entry 0 | entry 1 | ... | entry N |
  '-----------------------------------'

Each directory entry is 28 bytes long: a tag (name and number) followed by
a reference to the data. All the integers are big-endian.

The format is documented at
<http://www6.appliedbiosystems.com/support/software_community/ABIF_File_Format.pdf>.
'''
import logging
import struct
from typing import Dict, Iterable

from .core import Chunk
from . import fields
from .properties import Inline, Offset
from .tags import Tag


logger = logging.getLogger(__name__)

MAGIC = b'ABIF'


class UInt16(fields.StructField):
    def __init__(self, **kwargs):
        super().__init__('H', **kwargs)


class SInt16(fields.StructField):
    def __init__(self, **kwargs):
        super().__init__('h', **kwargs)


class SInt32(fields.StructField):
    def __init__(self, **kwargs):
        super().__init__('i', **kwargs)


class Reference(Chunk):
    '''Metadata describing a stored field.

    For strings an element is a single byte, not the string itself.

    The field "data" is the data itself when data_size <= 4, otherwise
    it's the offset (big-endian signed) of the data from the start of the file.
    '''
    element_type = SInt16()
    element_size = SInt16()  # unused
    count        = SInt32()
    data_size    = SInt32()
    data         = fields.StringField(4)
    data_handle  = SInt32()  # unused

    @property
    def data_offset(self) -> int:
        return struct.unpack('>i', self.data.value)[0]

    @property
    def is_inline(self) -> bool:
        return self.data_size.value <= 4

    @property
    def location(self):
        size = self.data_size.value
        if self.is_inline:
            return Inline(self.data.value[:max(size, 0)])

        return Offset(self.data_offset, size)


class DirectoryEntry(Chunk):
    tag_name   = fields.StringField(4)
    tag_number = SInt32()
    reference  = Reference()

    @property
    def tag(self) -> Tag:
        return Tag(self.tag_name.value, self.tag_number.value)


class ABIFHeader(Chunk):
    magic     = fields.StringField(4, default=MAGIC, is_magic=True)
    version   = UInt16()
    directory = DirectoryEntry()

    @property
    def major_version(self) -> int:
        return self.version.value // 100


def build_index(entries: Iterable[DirectoryEntry]) -> Dict[Tag, Reference]:
    '''Fold the directory's entries into a mapping tag -> reference.

    When a tag is present more than once the last entry wins.'''
    index: Dict[Tag, Reference] = {}

    for entry in entries:
        tag = entry.tag
        if tag in index:
            logger.debug('tag %s is duplicated, using entry at offset %d' % (tag, entry.offset))
        index[tag] = entry.reference

    return index
