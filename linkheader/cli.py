# -*- coding: utf-8; -*-

"""The command-line interface to linkheader."""

import argparse
import collections
import logging
import sys
import traceback

import linkheader
from linkheader import reports
from linkheader.header import LinkHeader, check_header
from linkheader.notice import Severity


logger = logging.getLogger(__name__)


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description=u'Parse and check HTTP Link header values.')
    parser.add_argument(u'--version', action='version',
                        version=u'linkheader %s' % linkheader.__version__)
    parser.add_argument(u'-o', u'--output', choices=reports.formats,
                        default=u'text', help=u'output format')
    parser.add_argument(u'-s', u'--silence', metavar=u'ID', type=int,
                        action='append', help=u'silence the given notice ID')
    parser.add_argument(u'--fail-on',
                        choices=[severity.name for severity in Severity],
                        help=u'exit with a non-zero status '
                             u'if any notices with this or higher severity '
                             u'have been reported')
    parser.add_argument(u'--full-traceback', action='store_true',
                        help=u'do not hide the traceback on exceptions')
    parser.add_argument(u'-v', u'--verbose', action='store_true',
                        help=u'log debugging information to stderr')
    parser.add_argument(u'value', nargs='*',
                        help=u'a Link header value (default: read one '
                             u'per line from standard input)')
    return parser.parse_args(argv[1:])


def _read_values(args, stdin):
    if args.value:
        return list(args.value)
    data = stdin.buffer.read().decode('utf-8')
    return [line for line in data.splitlines() if line.strip(u' \t')]


def run_cli(args, stdin, stdout, stderr):
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=stderr)
    report = reports.formats[args.output]
    n_notices = collections.Counter()
    n_errors = [0]

    def generate_headers(values):
        for value in values:
            header = LinkHeader(value)
            if args.silence:
                header.silence(args.silence)
            check_header(header)
            if header.error is not None:
                n_errors[0] += 1
            n_notices.update(complaint.severity
                             for complaint in header.complaints)
            yield header

    try:
        values = _read_values(args, stdin)
        logger.debug(u'checking %d header value(s)', len(values))
        # Reports are always written as UTF-8 bytes,
        # whatever the encoding of the terminal.
        report(generate_headers(values), stdout.buffer)
    except (EnvironmentError, UnicodeError) as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('linkheader: %s\n' % exc)
        return 1

    if n_errors[0] > 0:
        return 1
    if args.fail_on is not None:
        for severity in Severity:
            if severity >= Severity[args.fail_on] and n_notices[severity] > 0:
                return 1
    return 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('linkheader: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdin, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
