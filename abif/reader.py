'''
Reader for ABIF files.

No attempt is made at being either complete or strict: only the fields
needed to locate and decode the data are read.

    with abif.open('sample.ab1') as reader:
        for tag in sorted(reader.tags()):
            print(tag, reader.value(tag))

A Reader can be shared between threads: the directory is never modified
after the construction and the seek()/read() on the underlying source are
serialized by a lock. Decoded values are not cached, each call reads the
data again.
'''
import logging
import threading
from collections import namedtuple

from . import fields
from .datatypes import lookup
from .directory import ABIFHeader, DirectoryEntry, build_index
from .enum import ElementType, USER_DEFINED
from .exceptions import (
    FormatError,
    NotFound,
    MalformedValue,
    UnsupportedType,
)
from .properties import Offset
from .streams import Stream
from .tags import Tag


class Value(namedtuple('Value', ['tag', 'code', 'count', 'data'])):
    '''A decoded value together with what is needed to interpret it:
    the element type code and the number of elements.

    The data is

     - bytes as they are for user-defined types (code >= 1024)
     - a str for the string types
     - a single element if count is 1
     - a sequence of elements otherwise (bytes for the BYTE type)
    '''

    __slots__ = ()

    @property
    def element_type(self):
        try:
            return ElementType(self.code)
        except ValueError:
            return None

    @property
    def is_user_defined(self) -> bool:
        return self.code >= USER_DEFINED

    @property
    def is_sequence(self) -> bool:
        return not self.is_user_defined and self.count > 1


class Reader(object):

    def __init__(self, source):
        '''The source can be a path, some bytes or a binary file object
        opened for reading and seekable.'''
        self.logger = logging.getLogger(f'{self.__module__}.{self.__class__.__name__}')
        self.stream = Stream(source)
        self._lock = threading.Lock()

        try:
            self.header = self._read_header()
            self._refs = self._read_directory(self.header)
        except Exception:
            self.stream.close()
            raise

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.stream.obj!r}, version={self.header.version.value}, tags={len(self)})>'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __len__(self):
        return len(self._refs)

    def __iter__(self):
        return iter(self._refs)

    def __contains__(self, tag):
        return self._as_tag(tag) in self._refs

    def close(self):
        self.stream.close()

    def _read_header(self) -> ABIFHeader:
        self.stream.seek(0)
        header = ABIFHeader(self.stream)

        if header.major_version != 1:
            raise FormatError(f'unknown version {header.version.value}')

        self.logger.debug('header version %d' % header.version.value)

        return header

    def _read_directory(self, header):
        # the directory is always stored out of the header
        reference = header.directory.reference
        count = reference.count.value
        if count < 0:
            raise FormatError(f'negative number of directory entries ({count})')

        self.logger.debug('reading %d entries at offset %d' % (count, reference.data_offset))

        self.stream.seek(reference.data_offset)
        entries = fields.ArrayField(DirectoryEntry(), n=count, name='directory')
        entries.unpack(self.stream)

        return build_index(entries)

    @staticmethod
    def _as_tag(tag) -> Tag:
        return Tag.parse(tag) if isinstance(tag, str) else tag

    def tags(self):
        '''Return the set of tags available in the file, sort it if you
        want a deterministic order.'''
        return set(self._refs)

    def reference(self, tag):
        tag = self._as_tag(tag)
        try:
            return self._refs[tag]
        except KeyError:
            raise NotFound(tag) from None

    def raw(self, tag) -> bytes:
        '''Return the bytes of the data, from the reference itself or
        from the file.'''
        return self._read(self.reference(tag))

    def _read(self, reference) -> bytes:
        location = reference.location

        with self._lock:
            return location.resolve(self.stream)

    def decode(self, tag) -> Value:
        tag = self._as_tag(tag)
        reference = self.reference(tag)
        raw = self._read(reference)

        code = reference.element_type.value
        count = reference.count.value

        if code >= USER_DEFINED:
            # user-defined data structure, we don't know anything about it
            return Value(tag, code, count, raw)

        datatype = lookup(code)
        if datatype is None:
            raise UnsupportedType(tag, code)

        if count < 1 or count * datatype.size > len(raw):
            raise MalformedValue(tag)

        try:
            if count == 1:
                data = datatype.one(raw)
            else:
                data = datatype.many(count, raw[:count * datatype.size])
        except ValueError as e:
            raise MalformedValue(tag) from e

        return Value(tag, code, count, data)

    def value(self, tag):
        '''Read and decode the value identified by tag.'''
        return self.decode(tag).data

    def values(self, tags=None):
        '''Decode a bunch of tags (all of them by default) reading the file
        sequentially instead of jumping back and forth.'''
        tags = self.tags() if tags is None else [self._as_tag(_) for _ in tags]

        def position(tag):
            location = self.reference(tag).location
            return location.position if isinstance(location, Offset) else -1

        return {tag: self.value(tag) for tag in sorted(tags, key=position)}


def open(source) -> Reader:
    return Reader(source)
