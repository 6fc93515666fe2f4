"""
Command-line interface for docx2md.
"""

import argparse
import logging
import os
import sys

from .core import process
from .exceptions import Docx2mdError

logger = logging.getLogger('docx2md')


def process_args(argv=None):
    """
    Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='docx2md',
        description='Convert DOCX files to markdown. Images are written '
                    'next to the current directory unless --embed is given.'
    )
    parser.add_argument('docx', nargs='*', help='path of a docx file')
    parser.add_argument(
        '-e', '--embed', '-embed',
        action='store_true',
        help='embed images as data URIs instead of extracting them'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='log debug information to stderr'
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point for CLI.

    Converts every given document in order and writes the markdown to
    stdout. The first failure is logged and ends the process with status 1.
    """
    args = process_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    output = getattr(sys.stdout, 'buffer', sys.stdout)
    for docx in args.docx:
        if not os.path.exists(docx):
            logger.error('File %s does not exist.', docx)
            sys.exit(1)
        try:
            text = process(docx, embed=args.embed)
        except Docx2mdError as e:
            logger.error('%s: %s', docx, e)
            sys.exit(1)
        output.write(text.encode('utf-8'))
        output.flush()


if __name__ == '__main__':
    main()
