# -*- coding: utf-8; -*-

import io
import re
import string


CHAR_NAMES = {
    u'\t': u'tab',
    u'\n': u'LF',
    u'\r': u'CR',
    u' ': u'space',
    u'"': u'double quote (")',
    u"'": u"single quote (')",
    u',': u'comma (,)',
    u'.': u'period (.)',
    u';': u'semicolon (;)',
    u'-': u'dash (-)',
    u'<': u'less-than sign (<)',
    u'>': u'greater-than sign (>)',
}


def _char_ranges(chars, as_hex=False):
    intervals = []
    min_ = max_ = None
    for c in chars:
        point = ord(c)
        if max_ == point - 1:
            max_ = point
        else:
            if min_ is not None:
                intervals.append((min_, max_))
            min_ = max_ = point
    if min_ is not None:
        intervals.append((min_, max_))
    if as_hex:
        show = lambda point: u'%#04x' % point
    else:
        show = chr
    return [
        (u'%s' % show(p1)) if p1 == p2 else (u'%s–%s' % (show(p1), show(p2)))
        for (p1, p2) in intervals]


def format_chars(chars, wide=False):
    u"""
    >>> print(format_chars([u'\\x00', u'\\x04', u'\\x05', u'\\x06', u'\\x07',
    ...                     u' ', u'0', u'1', u'2', u'3', u'4', u'5', u'6',
    ...                     u'7', u'8', u'9', u'A', u'B', u'C', u'D', u'E',
    ...                     u'F']))
    A–F or 0–9 or space or 0x00 or 0x04–0x07

    >>> print(format_chars([u'\\t', u' ']))
    tab or space

    >>> print(format_chars([u'!', u'#', u'$', u'%', u'&', u"'", u'*', u'+',
    ...                     u'.', u'0', u'1', u'2', u'3', u'4', u'5', u'6',
    ...                     u'7', u'8', u'9', u'a', u'b', u'c', u'd', u'e']))
    a–e or 0–9 or single quote (') or period (.) or !#$%&*+

    >>> print(format_chars([u'V', u'W', u'X', u'Y', u'Z', u'a', u'b', u'c']))
    V–Z or a–c

    >>> print(format_chars([u'>'], wide=True))
    greater-than sign (>) or any character above 0xff
    """
    (letters, digits, named, visible, other) = ([], [], [], [], [])
    for c in chars:
        if c in string.ascii_letters:
            letters.append(c)
        elif c in string.digits:
            digits.append(c)
        elif c in CHAR_NAMES:
            named.append(c)
        elif 0x21 <= ord(c) < 0x7F:
            visible.append(c)
        else:
            other.append(c)
    pieces = (_char_ranges(letters) + _char_ranges(digits) +
              [CHAR_NAMES[c] for c in named] +
              [u''.join(visible)] +
              _char_ranges(other, as_hex=True))
    if wide:
        pieces.append(u'any character above 0xff')
    return u' or '.join(piece for piece in pieces if piece)


def printable(s):
    # Based on `XML 1.0 section 2.2 <https://www.w3.org/TR/xml/#charsets>`_,
    # with the addition of U+0085.
    return re.sub(
        pattern=(u'[\u0000-\u0008\u000B\u000C\u000E-\u001F'
                 u'\u007F-\u009F\uD800-\uDFFF\uFDD0-\uFDEF\uFFFE\uFFFF]'),
        repl=u'\N{REPLACEMENT CHARACTER}',
        string=s
    )


class MockStdio(object):

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self, data=b''):
        self.buffer = io.BytesIO(data)

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize(u'<http://example.com/>; rel=next', 40))
    <http://example.com/>; rel=next
    >>> print(ellipsize(u'<http://example.com/>; rel=next', 20))
    <http://example.c...
    """
    if len(s) > max_length:
        ellipsis = u'...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s
