import struct

import pytest


HEADER_SIZE = 4 + 2 + 28


def pack_reference(code, count, data_size, payload, element_size=0):
    return struct.pack('>hhii4si', code, element_size, count, data_size, payload, 0)


def pack_entry(name, number, reference):
    return struct.pack('>4si', name, number) + reference


class ABIFBuilder(object):
    '''Build an ABIF image in memory: the header, then the data that
    doesn't fit in the entries, then the directory.'''

    def __init__(self, magic=b'ABIF', version=101):
        self.magic = magic
        self.version = version
        self.entries = []

    def add(self, name, number, code, count, data, data_size=None, offset=None):
        '''The data goes into the entry when it fits, otherwise into the
        body; offset replaces the position stored in the entry.'''
        self.entries.append((name, number, code, count, data, data_size, offset))
        return self

    def build(self):
        body = b''
        records = []
        for name, number, code, count, data, data_size, offset in self.entries:
            data_size = len(data) if data_size is None else data_size
            if data_size <= 4:
                payload = data.ljust(4, b'\x00')
            else:
                payload = struct.pack('>i', HEADER_SIZE + len(body) if offset is None else offset)
                body += data
            records.append(pack_entry(name, number, pack_reference(code, count, data_size, payload)))

        directory = b''.join(records)
        directory_offset = HEADER_SIZE + len(body)

        header = self.magic + struct.pack('>H', self.version) + pack_entry(
            b'tdir', 1,
            pack_reference(1023, len(records), len(directory), struct.pack('>i', directory_offset), element_size=28),
        )

        return header + body + directory


@pytest.fixture
def builder():
    return ABIFBuilder()
