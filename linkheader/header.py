# -*- coding: utf-8; -*-

"""Parsing entire ``Link`` header values."""

import logging

from linkheader.parse import ParseError, parse
from linkheader.blackboard import Blackboard
from linkheader.syntax import rfc8288


logger = logging.getLogger(__name__)


def parse_header(value, complain=None):
    """Parse the value of a ``Link`` header into a list of links.

    :param value:
        The header value, as a Unicode string. A bytestring is decoded
        from UTF-8 first. If you have several ``Link`` headers, either join
        their values with commas or parse them one by one.
    :param complain:
        If not `None`, this function will be called with every notice
        about the header (see :mod:`linkheader.notice`), such as
        :meth:`linkheader.blackboard.Blackboard.complain`.
        It is only called if the value parses successfully.

    :return:
        A list of :class:`~linkheader.structure.Link` objects, in the order
        they appear in `value`. An empty (or all-whitespace) `value`
        gives an empty list.

    :raises:
        :exc:`~linkheader.parse.ParseError` if `value` is not a valid
        ``Link`` header value. There are no partial results.

    """
    if isinstance(value, bytes):
        try:
            value = value.decode('utf-8')
        except UnicodeError as e:
            raise ParseError(position=e.start, expected=[],
                             found=value[e.start:e.end], reason=e)

    if value.strip(u' \t') == u'':
        return []

    def log_and_complain(notice_id, **context):
        logger.debug(u'notice %d: %r', notice_id, context)
        if complain is not None:
            complain(notice_id, **context)

    try:
        links = parse(value, rfc8288.Link, log_and_complain)
    except ParseError as e:
        logger.debug(u'cannot parse %r: %s', value, e)
        raise
    return links


class LinkHeader(Blackboard):

    """A single ``Link`` header value, with the results of checking it.

    Before :func:`check_header`, only :attr:`value` is meaningful.
    After it, either :attr:`links` is a list
    or :attr:`error` is a :exc:`~linkheader.parse.ParseError`.
    """

    def __init__(self, value):
        super(LinkHeader, self).__init__()
        self.value = value
        self.links = None
        self.error = None

    def __repr__(self):
        return 'LinkHeader(%r)' % self.value


def check_header(header):
    """Parse a :class:`LinkHeader`, recording links, errors and complaints."""
    try:
        header.links = parse_header(header.value, complain=header.complain)
    except ParseError as e:
        header.error = e
    return header
