from collections import namedtuple


class Tag(namedtuple('Tag', ['name', 'number'])):
    '''A Tag is a key used to look up data: a 4 bytes name and a signed
    32 bits number, e.g. PBAS:2 for the basecaller sequence.

    The name is not required to be valid text. The natural ordering (by name,
    then by number) is the one to use for display.
    '''

    __slots__ = ()

    def __str__(self):
        return '%s:%d' % (self.name.decode('latin1'), self.number)

    @classmethod
    def new(cls, name, number):
        if isinstance(name, str):
            name = name.encode('latin1')

        if len(name) != 4:
            raise ValueError(f'tag name must have len 4, {name!r} has {len(name)}')

        return cls(bytes(name), int(number))

    @classmethod
    def parse(cls, text):
        '''Inverse of str(): "NAME:number".'''
        name, sep, number = text.rpartition(':')
        if not sep:
            raise ValueError(f'\'{text}\' is not in the form NAME:number')

        try:
            number = int(number)
        except ValueError:
            raise ValueError(f'\'{text}\' has an invalid tag number') from None

        return cls.new(name, number)
