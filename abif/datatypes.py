'''
Table of the element types, indexed by code.

Each entry knows the size in bytes of a single element and how to decode
one element ("one") or an array of them ("many"). The codes not present
are reserved (or legacy) in the format and are not decodable: lookup()
returns None for them.

All the numeric values are big-endian. The decoders expect to receive at
least count * size bytes and raise ValueError when the data is not sensible.
'''
import datetime
import struct
from collections import namedtuple

from bitstring import Bits

from .enum import ElementType


DataType = namedtuple('DataType', ['code', 'name', 'size', 'one', 'many'])


class Thumb(namedtuple('Thumb', ['d', 'u', 'c', 'n'])):
    '''The "thumbprint" structure was intended to provide a unique file identifier
    that could be generated on a local (non-networked) computer and yet would be
    highly likely to be different from any other thumbprint structure generated
    on any other computer.'''

    __slots__ = ()


def iter_elements(data, size, count):
    for idx in range(count):
        yield data[idx * size:(idx + 1) * size]


def parse_date(raw):
    '''Packed structure to represent calendar date:

        SInt16 year;  // 4-digit year
        UInt8 month;  // month 1-12
        UInt8 day;    // day 1-31

    Out of range months and days are carried over, so that month 13 is
    January of the following year and day 0 is the last day of the
    previous month. Dates that fall outside of the years datetime.date
    can represent (like the all-zero date used for unset values) are
    returned as None.
    '''
    year, month, day = Bits(bytes=raw[:4]).unpack('intbe:16, uint:8, uint:8')

    year, month = divmod(year * 12 + month - 1, 12)
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        return None

    try:
        return datetime.date(year, month + 1, 1) + datetime.timedelta(days=day - 1)
    except OverflowError:
        return None


def parse_time(raw):
    '''Packed structure to represent time of day:

        UInt8 hour;     // hour 0-23
        UInt8 minute;   // minute 0-59
        UInt8 second;   // second 0-59
        UInt8 hsecond;  // 0.01 second 0-99

    Out of range components are carried over to the next unit; the
    time wraps around midnight since there is no date to carry to.
    '''
    hour, minute, second, hsecond = Bits(bytes=raw[:4]).unpack('uint:8, uint:8, uint:8, uint:8')

    elapsed = datetime.timedelta(hours=hour, minutes=minute, seconds=second, milliseconds=hsecond * 10)
    elapsed %= datetime.timedelta(days=1)

    return (datetime.datetime.min + elapsed).time()


def parse_thumb(raw):
    return Thumb(*Bits(bytes=raw[:10]).unpack('intbe:32, intbe:32, uint:8, uint:8'))


def _structured(parse, size):
    def many(count, data):
        return [parse(_) for _ in iter_elements(data, size, count)]

    return many


def _numeric(format):
    fmt = '>' + format

    def one(data):
        return struct.unpack_from(fmt, data)[0]

    def many(count, data):
        return list(struct.unpack_from('>%d%s' % (count, format), data))

    return one, many


def _string_one(data):
    if data[0] != 0:
        raise ValueError('a single element string must be empty')
    return ''


def pstring_many(count, data):
    if data[0] != len(data) - 1:
        raise ValueError(f'bad pString length {data[0]}, {len(data) - 1} characters available')

    return data[1:].decode('latin1')


def cstring_many(count, data):
    terminator = data.find(b'\x00')
    if terminator < 0:
        raise ValueError('cString without terminator')

    return data[:terminator].decode('latin1')


def _build_table():
    table = {}

    def add(code, size, one, many):
        table[int(code)] = DataType(code, code.name.lower(), size, one, many)

    add(ElementType.BYTE, 1, lambda data: data[0], lambda count, data: bytes(data[:count]))
    for code, format in (
        (ElementType.CHAR, 'b'),
        (ElementType.WORD, 'H'),
        (ElementType.SHORT, 'h'),
        (ElementType.LONG, 'i'),
        (ElementType.FLOAT, 'f'),
        (ElementType.DOUBLE, 'd'),
    ):
        add(code, struct.calcsize('>' + format), *_numeric(format))

    add(ElementType.DATE, 4, parse_date, _structured(parse_date, 4))
    add(ElementType.TIME, 4, parse_time, _structured(parse_time, 4))
    # supported legacy data types
    add(ElementType.THUMB, 10, parse_thumb, _structured(parse_thumb, 10))

    add(ElementType.PSTRING, 1, _string_one, pstring_many)
    add(ElementType.CSTRING, 1, _string_one, cstring_many)

    return table


DATA_TYPES = _build_table()


def lookup(code):
    '''Return the DataType for the code or None if it's not supported.'''
    return DATA_TYPES.get(code)
