#!/usr/bin/env python3
'''
Dump the tags of an ABIF file, in order, together with their values.

Some tags contain text stored as signed chars: by default these are
shown as strings.
'''
import os
import sys
import logging

import abif
from abif.exceptions import ABIFException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

# APrX: analysis protocol XML, PBAS: sequence characters,
# RMdX: results method XML, FWO_: base order
TEXT_TAGS = (b'APrX', b'PBAS', b'RMdX', b'FWO_')


def usage(progname):
    print(f'''usage: {progname} [-n] [-r] <file>

 -n  print only the type of the values
 -r  don't use known tags to interpret data''', file=sys.stderr)
    sys.exit(2)


def interpret(tag, value):
    if tag.name in TEXT_TAGS and isinstance(value, list):
        return bytes([_ & 0xff for _ in value]).decode('latin1')

    return value


def dump(reader, print_values=True, use_known_tags=True):
    for tag in sorted(reader.tags()):
        try:
            value = reader.value(tag)
        except ABIFException as e:
            print(f'{tag}: {e}')
            continue

        if not print_values:
            print(f'{tag}: {type(value).__name__}')
            continue

        if use_known_tags:
            value = interpret(tag, value)

        print(f'{tag}: {type(value).__name__}({value!r})')


if __name__ == '__main__':
    args = sys.argv[1:]
    options = [_ for _ in args if _.startswith('-')]
    paths = [_ for _ in args if not _.startswith('-')]

    if len(paths) != 1 or set(options) - {'-n', '-r'}:
        usage(sys.argv[0])

    try:
        reader = abif.open(paths[0])
    except (ABIFException, OSError) as e:
        logger.error(f'cannot read \'{paths[0]}\': {e}')
        sys.exit(1)

    with reader:
        dump(reader, print_values='-n' not in options, use_known_tags='-r' not in options)
