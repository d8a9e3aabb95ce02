import pytest

from abif.tags import Tag


def test_tag():
    tag = Tag.new('PBAS', 2)

    assert tag == Tag(b'PBAS', 2)
    assert tag != Tag(b'PBAS', 1)
    assert tag.name == b'PBAS'
    assert tag.number == 2
    assert str(tag) == 'PBAS:2'
    assert hash(tag) == hash(Tag(b'PBAS', 2))


def test_tag_name_length():
    with pytest.raises(ValueError):
        Tag.new('PBA', 1)

    with pytest.raises(ValueError):
        Tag.new(b'PBASS', 1)


def test_tag_name_is_not_text():
    tag = Tag.new(b'\xff\x00AB', 1)

    assert Tag.parse(str(tag)) == tag


def test_tag_parse():
    assert Tag.parse('FWO_:1') == Tag(b'FWO_', 1)
    assert Tag.parse('DATA:-3') == Tag(b'DATA', -3)

    for text in ('PBAS', 'PBAS:', 'PBAS:x', 'PBA:1'):
        with pytest.raises(ValueError):
            Tag.parse(text)


def test_tag_ordering():
    """By name and then by number."""
    tags = [
        Tag(b'PBAS', 2),
        Tag(b'DATA', 10),
        Tag(b'PBAS', 1),
        Tag(b'DATA', 9),
    ]

    assert [str(_) for _ in sorted(tags)] == [
        'DATA:9',
        'DATA:10',
        'PBAS:1',
        'PBAS:2',
    ]
