# -*- coding: utf-8; -*-

"""Turning the parameters of a link-value into :class:`Link` objects.

By the time we get here, the grammar has already normalized
every parameter into a ``(name, value)`` pair, where `value` is `None`
(for a bare name), a string (whether it was quoted or not),
or an :class:`~linkheader.structure.ExtValue` (for a star parameter,
whose name then ends with ``*``).

What remains is to decide which parameters mean what.
Parameter names are matched exactly: ``Rel`` is not ``rel``,
it is just another extension.
"""

import re

from linkheader.structure import Link, MultiDict


# Parameters that map to a single attribute of :class:`Link`.
# Only their first occurrence with a value is used for that;
# any others are kept in the extensions.
SINGULAR = [u'rel', u'anchor', u'title', u'title*', u'type', u'media']


def _noop(*_, **__):
    pass


def build_links(target, params, complain=None):
    """Build the :class:`Link` objects for one link-value.

    :param target: The target URI-reference, as a string.
    :param params: A list of normalized ``(name, value)`` pairs.
    :param complain:
        If not `None`, called like
        :meth:`~linkheader.blackboard.Blackboard.complain`
        to report semantic oddities, which are never errors.

    :return:
        A list of one :class:`Link` per relation type in ``rel``,
        or of a single :class:`Link` if there are none.
    """
    complain = complain or _noop
    hreflang = []
    first = {}
    extensions = []
    for i, (name, value) in enumerate(params):
        if name == u'hreflang' and value is not None:
            hreflang.append(value)
        elif name in SINGULAR and value is not None and name not in first:
            first[name] = (i, value)
        else:
            if name in first:
                complain(1002, target=target, name=name)
            extensions.append((i, name, value))
        if name == u'rev':
            complain(1003, target=target)

    rels = []
    if u'rel' not in first:
        complain(1001, target=target)
    else:
        # SP and HTAB only: U+00A0 and the like are part of a relation type.
        rels = [rel for rel in re.split(u'[ \t]+', first[u'rel'][1]) if rel]
        if not rels:
            complain(1006, target=target)

    # "title*" takes precedence over "title", regardless of their order.
    if u'title*' in first and u'title' in first:
        complain(1008, target=target)
        (i, value) = first.pop(u'title')
        extensions.append((i, u'title', value))
        extensions.sort(key=lambda entry: entry[0])

    def value_of(*names):
        for name in names:
            if name in first:
                return first[name][1]
        return None

    common = dict(
        target=target,
        context=value_of(u'anchor'),
        title=value_of(u'title*', u'title'),
        hreflang=tuple(hreflang),
        media_type=value_of(u'type'),
        media=value_of(u'media'),
        extensions=MultiDict((name, value)
                             for (_, name, value) in extensions),
    )
    if not rels:
        return [Link(relation_type=None, **common)]
    return [Link(relation_type=rel, **common) for rel in rels]
