"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream without knowing anything about its neighbours.
"""
import logging
import struct

from .meta import FieldBase
from .exceptions import MagicException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, offset=None, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def check_magic(self, value):
        if self.is_magic and value != self.default:
            raise MagicException(
                f'field \'{self.name}\' has value {value!r} instead of {self.default!r}')

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    big-endian integers from bytes, the only byte order used by ABIF.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        encoder = str if isinstance(self.value, bytes) else hex
        return '<%s(%s)>' % (self.__class__.__name__, encoder(self.value))

    def get_format(self):
        return '>%s' % self.format

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def unpack(self, stream):
        raw = stream.read_exactly(self.size)
        value = struct.unpack(self.get_format(), raw)[0]

        self.check_magic(value)
        self.value = value


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __len__(self):
        return self.length

    def value_from_default(self):
        return b'\x00' * self.length if not self.default else self.default

    def _get_size(self):
        return self.length

    def unpack(self, stream):
        value = stream.read_exactly(self.length)

        self.check_magic(value)
        self.value = value


class ArrayField(Field):
    '''Unpack an array of Fields/Chunks.

    You indicate the element's prototype and the number of elements via
    the parameter named "n"; each element is a copy of the prototype.

    This class must behave like a list in python, obviously cannot implement all the methods.
    '''

    def __init__(self, field, n=0, **kw):
        if not isinstance(n, int) or n < 0:
            raise ValueError('n is \'%r\' must be a non-negative integer' % (n,))

        self.field = field
        self.n = n

        super().__init__(**kw)

    def value_from_default(self):
        return []

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def _get_size(self):
        return self.field.size * self.n

    def instance_element(self):
        return self.field.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        self.value = []
        for idx in range(self.n):
            element = self.instance_element()
            element.offset = stream.tell()
            element.unpack(stream)
            self.value.append(element)

        self.logger.debug('unpacked %d elements for \'%s\'' % (len(self.value), self.name))
