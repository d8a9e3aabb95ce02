class ABIFException(Exception):
    '''Base class to extend in order to throw exception in abif.'''
    pass


class FormatError(ABIFException):
    '''The file is not something we know how to read (magic, version, ...).'''
    pass


class MagicException(FormatError):
    pass


class NotFound(ABIFException, KeyError):
    '''The tag is not present into the directory.'''

    def __init__(self, tag):
        self.tag = tag
        super().__init__(tag)

    def __str__(self):
        return f'tag not found: {self.tag}'


class MalformedValue(ABIFException):
    '''Element count and size don't agree with the data available, or a string
    has a wrong length byte/terminator.'''

    def __init__(self, tag):
        self.tag = tag
        super().__init__(tag)

    def __str__(self):
        return f'malformed value for tag: {self.tag}'


class UnsupportedType(ABIFException):
    '''This is useful when is not possible to let an unknown element type
    slip through the decoding.'''

    def __init__(self, tag, code):
        self.tag = tag
        self.code = code
        super().__init__(tag, code)

    def __str__(self):
        return f'unknown value type for tag {self.tag}: {self.code}'


class ShortReadError(OSError):
    '''The underlying source ended before the requested amount of bytes.'''
    pass
