import pytest

from abif.core import Chunk
from abif.exceptions import FormatError, MagicException, ShortReadError
from abif.fields import StructField, StringField


class Dummy(Chunk):
    a = StructField('I')
    b = StringField(4)
    c = StructField('H')


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    dummy = Dummy(b'\x00\x00\x0b\xad' + b'ABCD' + b'\xca\xfe')

    assert dummy.a.value == 0xbad
    assert dummy.a.offset == 0x00
    assert dummy.a.father == dummy

    assert dummy.b.value == b'ABCD'
    assert dummy.b.offset == 0x04

    assert dummy.c.value == 0xcafe
    assert dummy.c.offset == 0x08

    assert dummy.size == 10
    assert dummy.layout == {
        'a': (0, 4),
        'b': (4, 4),
        'c': (8, 2),
    }


def test_chunk_str():
    dummy = Dummy(b'\x00\x00\x0b\xad' + b'ABCD' + b'\xca\xfe')

    assert str(dummy) == (
        "a: <StructField(0xbad)>\n"
        "b: <StringField(b'ABCD')>\n"
        "c: <StructField(0xcafe)>\n"
    )
    assert repr(dummy) == "<Dummy(a=<StructField(0xbad)>,b=<StringField(b'ABCD')>,c=<StructField(0xcafe)>)>"


def test_chunk_value_is_read_only():
    dummy = Dummy()

    assert dummy.value is dummy

    with pytest.raises(AttributeError):
        dummy.value = 1


def test_chunk_defaults():
    dummy = Dummy()

    assert dummy.a.value == 0
    assert dummy.b.value == b'\x00' * 4
    assert dummy.get_ordered_fields_name() == ['a', 'b', 'c']


def test_chunk_instances_dont_share_fields():
    first = Dummy(b'\x00\x00\x00\x01AAAA\x00\x01')
    second = Dummy(b'\x00\x00\x00\x02BBBB\x00\x02')

    assert first.a is not second.a
    assert first.a.value == 1
    assert second.a.value == 2


def test_nested_chunk():
    class Outer(Chunk):
        first = StructField('B')
        inner = Dummy()

    outer = Outer(b'\x07' + b'\x01\x00\x00\x00' + b'WXYZ' + b'\x00\x10')

    assert outer.first.value == 7
    assert outer.inner.offset == 1
    assert outer.inner.b.offset == 5
    assert outer.inner.b.value == b'WXYZ'
    assert outer.inner.c.value == 0x10
    assert outer.inner.father is outer
    assert outer.size == 11


def test_chunk_inheritance():
    class Child(Dummy):
        d = StructField('b')

    child = Child(b'\x00' * 10 + b'\xff')

    assert child.get_ordered_fields_name() == ['a', 'b', 'c', 'd']
    assert child.d.value == -1


def test_field_with_explicit_offset():
    class Jump(Chunk):
        first = StructField('B')
        far = StructField('B', offset=4)

    jump = Jump(b'\x01\x00\x00\x00\x02')

    assert jump.first.value == 1
    assert jump.far.value == 2


def test_magic():
    class Magic(Chunk):
        magic = StringField(4, default=b'ABIF', is_magic=True)

    assert Magic(b'ABIF').magic.value == b'ABIF'

    with pytest.raises(MagicException):
        Magic(b'FIBA')

    # the magic is a format problem
    with pytest.raises(FormatError):
        Magic(b'FIBA')


def test_short_read():
    with pytest.raises(ShortReadError):
        Dummy(b'\x00' * 5)
