"""
CLI entry point for eaccess — query and transform JSON with access paths.
"""
import json
import logging
import signal
import sys

import structlog

import enhanced_access
from enhanced_access.api import ParseError

logger = structlog.get_logger(__name__)

OPERATIONS = {'get', 'put', 'pop'}


def configure_logging(verbose=False):
    """
    Send structlog output to stderr so stdout carries only results.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def parse_value(s):
    """
    Parse a string as JSON, falling back to plain string.
    """
    try:
        return json.loads(s)
    except (json.JSONDecodeError, TypeError):
        return s


def build_parser():
    """
    Build the argument parser.
    """
    import argparse
    parser = argparse.ArgumentParser(
        prog='eaccess',
        description='Query and transform nested JSON with access paths.',
        epilog="Paths: '*' all keys, '!(a,b)' all but a and b, 'k?' optional key, "
               "e.g. '*.settings.theme?'",
    )
    parser.add_argument(
        '-f', '--file',
        default=None,
        dest='input_file',
        metavar='FILE',
        help='Read input from FILE instead of stdin',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help='Log debug information to stderr',
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        metavar='N',
        help='Indent JSON output by N spaces',
    )
    parser.add_argument(
        'operation',
        nargs='?',
        default=None,
        help='Operation: get (default), put, pop',
    )
    parser.add_argument(
        'path',
        nargs='?',
        default=None,
        help='Access path',
    )
    parser.add_argument(
        'value',
        nargs='?',
        default=None,
        help='Value for put (JSON, or a plain string)',
    )
    return parser


def parse_args(argv=None):
    """
    Parse CLI arguments, handling implicit get operation.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Disambiguate: if 'operation' is not a known op, it's actually the path
    if args.operation is not None and args.operation not in OPERATIONS:
        if args.value is not None:
            parser.error(f'unknown operation {args.operation!r}')
        args.operation, args.path, args.value = 'get', args.operation, args.path

    if args.operation is None:
        args.operation = 'get'
    if args.path is None:
        args.path = ''
    if args.operation == 'put' and args.value is None:
        parser.error('put requires PATH and VALUE')
    if args.operation != 'put' and args.value is not None:
        parser.error(f'{args.operation} takes no VALUE')
    return args


def run(doc, args):
    """
    Apply the requested operation to one document.
    """
    logger.debug('running', operation=args.operation, path=args.path)
    if args.operation == 'get':
        return enhanced_access.get_in(doc, args.path)
    if args.operation == 'put':
        return enhanced_access.put_in(doc, args.path, parse_value(args.value))
    popped, doc = enhanced_access.pop_in(doc, args.path)
    logger.debug('popped', values=popped)
    return doc


def main(argv=None):
    """
    CLI entry point.
    """
    # Handle SIGPIPE gracefully on Unix
    try:
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    except AttributeError:
        pass  # Windows

    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.input_file:
            with open(args.input_file) as f:
                doc = json.load(f)
        else:
            doc = json.load(sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        logger.debug('cannot read input', error=str(e))
        print(f'eaccess: {e}', file=sys.stderr)
        sys.exit(1)

    try:
        result = run(doc, args)
    except (ParseError, TypeError, ValueError) as e:
        logger.debug('operation failed', operation=args.operation, error=str(e))
        print(f'eaccess: {e}', file=sys.stderr)
        sys.exit(1)

    json.dump(result, sys.stdout, indent=args.indent)
    sys.stdout.write('\n')


if __name__ == '__main__':
    main()
