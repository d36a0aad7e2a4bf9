# -*- coding: utf-8; -*-

"""Formatting links back into ``Link`` header values.

Every :class:`~linkheader.structure.Link` becomes a separate link-value
with at most one relation type, so parsing the result gives back
an equal list of links.
"""

import re
from urllib.parse import quote

from linkheader.structure import ExtValue


# Characters that cannot appear in a quoted value, as parsed
# by :mod:`linkheader.syntax.rfc8288`.
_unquotable = re.compile(u'[\u0000-\u0008\u000A-\u001F\u007F"]')

# Characters that can appear in a target.
_target = re.compile(u'^[^\u0000- \u007F>]*$')

# Characters that can appear in an unquoted value.
_token = re.compile(u'^[^\u0000- \u007F",;]+$')

# ``attr-char`` (RFC 8187) minus what :func:`quote` never escapes anyway.
_ATTR_CHAR_SAFE = u"!#$&+^`|"

# Parameters whose values read better unquoted.
_PREFER_TOKEN = [u'hreflang']


def format_ext_value(value):
    """
    >>> print(format_ext_value(ExtValue(u'GBP (£)', u'UTF-8', u'en')))
    UTF-8'en'GBP%20%28%C2%A3%29
    """
    return u"%s'%s'%s" % (value.charset, value.language or u'',
                          quote(value.encode('utf-8'), safe=_ATTR_CHAR_SAFE))


def format_param(name, value):
    """Format one parameter.

    >>> print(format_param(u'rel', u'next'))
    rel="next"
    >>> print(format_param(u'hreflang', u'de'))
    hreflang=de
    >>> print(format_param(u'crossorigin', None))
    crossorigin

    :raises: :exc:`ValueError` if `value` cannot be represented.
    """
    if value is None:
        return name
    if isinstance(value, ExtValue):
        if not name.endswith(u'*'):
            raise ValueError(u'extended value for %s, which is not '
                             u'a star parameter' % name)
        return u'%s=%s' % (name, format_ext_value(value))
    if name in _PREFER_TOKEN and _token.match(value):
        return u'%s=%s' % (name, value)
    if _unquotable.search(value):
        raise ValueError(u'cannot quote the value of %s: %r' % (name, value))
    return u'%s="%s"' % (name, value)


def format_link(link):
    """Format one :class:`~linkheader.structure.Link` as a link-value.

    :raises: :exc:`ValueError` if some part of `link` cannot be represented.
    """
    if not _target.match(link.target):
        raise ValueError(u'cannot format target %r' % link.target)
    params = []
    if link.context is not None:
        params.append((u'anchor', link.context))
    if link.relation_type is not None:
        params.append((u'rel', link.relation_type))
    if isinstance(link.title, ExtValue):
        params.append((u'title*', link.title))
    elif link.title is not None:
        params.append((u'title', link.title))
    params.extend((u'hreflang', lang) for lang in link.hreflang)
    if link.media_type is not None:
        params.append((u'type', link.media_type))
    if link.media is not None:
        params.append((u'media', link.media))
    params.extend(link.extensions.items())
    return u'; '.join([u'<%s>' % link.target] +
                      [format_param(name, value) for (name, value) in params])


def format_links(links):
    """Format a list of links as a ``Link`` header value."""
    return u', '.join(format_link(link) for link in links)
