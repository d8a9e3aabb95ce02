import errno
import io
import logging
import os

from .exceptions import ShortReadError
from .properties import Offset


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/File object to
    uniform its properties: mainly we need to have a seek() method
    that handles correctly Offset() instances and a read that doesn't
    return less data than asked.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj
        self._owned = False

        if isinstance(obj, (str, os.PathLike)):
            self.init_path()
        elif isinstance(obj, (bytes, bytearray, memoryview)):
            self.init_bytes()
        elif not (hasattr(obj, 'read') and hasattr(obj, 'seek')):
            raise TypeError(f'\'{self._type.__name__}\' is not a path, bytes or a seekable file object')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.obj!r})>'

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def init_path(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(bytes(self.obj))
        self._owned = True

    def seek(self, offset):
        real_offset = None

        if isinstance(offset, Offset):
            real_offset = offset.position
        elif isinstance(offset, int):
            real_offset = offset
        else:
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        # BytesIO raises ValueError for this, a real file OSError
        if real_offset < 0:
            raise OSError(errno.EINVAL, f'negative seek offset {real_offset}')

        self.obj.seek(real_offset)

        return self

    def read_exactly(self, size):
        data = self.obj.read(size)

        if len(data) != size:
            raise ShortReadError(
                f'short read: wanted {size} bytes, got {len(data)} (at offset {self.obj.tell()})')

        return data

    def close(self):
        '''Close the underlying object only if we opened it.'''
        if self._owned:
            self.obj.close()
