'''
Where the data of a field lives.

The 4 bytes of payload of a reference are the data themselves when these
fit (size <= 4), otherwise they are the offset (from the start of the file)
where the data can be found: the two cases are represented by Inline()
and Offset() so that the choice is made only once.
'''
from collections import namedtuple


class Inline(namedtuple('Inline', ['data'])):
    '''The data is stored directly into the reference.'''

    __slots__ = ()

    def resolve(self, stream):
        return self.data


# NOTE: we need the caller to serialize seek() and read() if the stream
#       is shared.
class Offset(namedtuple('Offset', ['position', 'size'])):
    '''The data is stored at "position" and it's "size" bytes long.'''

    __slots__ = ()

    def resolve(self, stream):
        stream.seek(self)
        return stream.read_exactly(self.size)
