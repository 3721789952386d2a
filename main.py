#!/usr/bin/env python3
"""
imastack - minimal stack language interpreter

Usage:
1. Interactive REPL:        python main.py repl
2. Evaluate a single line:  python main.py "1 2 + print"
   Add -v before the arguments for debug logging.

Compatible with:
- Any standard Python 3.x
- No external dependencies (IPython is used for the prompt when present)
"""

import logging
import sys

from imastack import InteractiveImastack, format_value
from imastack.core import ImastackException


def create_imastack():
    """Create a new interactive interpreter instance"""
    return InteractiveImastack()


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] == '-v':
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s %(levelname)s %(message)s")
        args = args[1:]

    if not args:
        print(__doc__)
        return 0

    if args[0] == 'repl':
        create_imastack().repl()
        return 0

    f = create_imastack()
    try:
        output = f(' '.join(args))
    except ImastackException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(' '.join(format_value(v) for v in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
