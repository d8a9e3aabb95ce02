import pytest

from abif.fields import StructField, StringField, ArrayField
from abif.streams import Stream


def test_structfield_size():
    assert StructField('I').size == 4
    assert StructField('h').size == 2
    assert StructField('d').size == 8


def test_structfield_big_endian():
    """Like everything in ABIF."""
    field = StructField('H')
    assert field.get_format() == '>H'

    field.unpack(Stream(b'\x01\x02'))
    assert field.value == 0x0102

    field = StructField('I')
    field.unpack(Stream(b'\x00\x00\x0b\xad'))
    assert field.value == 0xbad


def test_structfield_signed():
    field = StructField('i')
    field.unpack(Stream(b'\xff\xff\xff\xfe'))

    assert field.value == -2


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert len(field) == 0x10
    assert field.value == b'\x00' * 0x10

    data = bytes(range(0x10))
    field.unpack(Stream(data + b'trailing'))

    assert field.value == data


def test_stringfield_needs_length():
    with pytest.raises(ValueError):
        StringField()

    assert StringField(default=b'kebab').size == 5


def test_arrayfield():
    array = ArrayField(StructField('H'), n=3)

    assert array.size == 6
    assert len(array) == 0

    array.unpack(Stream(b'\x00\x01\x00\x02\x00\x03'))

    assert len(array) == 3
    assert [_.value for _ in array] == [1, 2, 3]

    # check that the elements are not duplicated
    assert array[0] is not array[1]
    assert array[0].father is array

    # check the offsets make sense
    assert array[0].offset == 0
    assert array[1].offset == 2
    assert array[2].offset == 4


def test_arrayfield_n():
    with pytest.raises(ValueError):
        ArrayField(StructField('H'), n=-1)

    array = ArrayField(StructField('H'), n=0)
    array.unpack(Stream(b''))

    assert len(array) == 0
