# -*- coding: utf-8; -*-

"""Access to the notices base.

Notices are written and stored in XML (``notices.xml``),
because their titles and explanations are free-form markup
that may refer to pieces of the complaint's context.
lxml makes it easy to map XML elements to custom classes,
which the reports then reduce to plain text.

This module exposes the :data:`all_notices` variable,
which is a map from notice ID (:class:`int`) to :class:`Notice`.
"""

import enum
import functools
import pkgutil

import lxml.etree

from linkheader import citation


lookup = lxml.etree.ElementNamespaceClassLookup()
ns = lookup.get_namespace(None)


@functools.total_ordering
class Severity(enum.Enum):

    """A notice's severity.

    Its members are ordered:

    >>> Severity.debug < Severity.comment
    True

    The underlying values of this enumeration are **not** part of the API.
    """

    comment = 1
    debug = 0

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented


@ns('comment')
@ns('debug')
class Notice(lxml.etree.ElementBase):

    """An element that represents a single notice, as template."""

    id = property(lambda self: int(self.get('id')))
    severity = property(lambda self: Severity[self.tag])
    severity_short = property(lambda self: self.severity.name[0].upper())
    title = property(lambda self: self.find('title').content)

    @property
    def explanation(self):
        for child in self:
            if isinstance(child, (Paragraph, Cite)):
                yield child


class Content(lxml.etree.ElementBase):

    """An element that has further content inside it."""

    @property
    def content(self):
        r = [self.text]
        for child in self:
            if child.tag is not lxml.etree.Comment:
                r.append(child)
            r.append(child.tail)
        r = [piece for piece in r if piece is not None and piece != u'']

        # Strip spaces from the first and last text children.
        if r:
            if isinstance(r[0], str):
                r[0] = r[0].lstrip()
            if isinstance(r[-1], str):
                r[-1] = r[-1].rstrip()

        return r


@ns('explain')
class Paragraph(Content):

    """A paragraph of explanation."""


@ns('title')
class Title(Content):

    """A notice's title."""


@ns('param')
class Param(Content):

    """The name of a link parameter."""


@ns('var')
class Var(lxml.etree.ElementBase):

    """A placeholder for a piece of data from a notice's context."""

    reference = property(lambda self: self.get('ref'))


@ns('rfc')
class Cite(Content):

    """A citation from an RFC, with an optional quote."""

    @property
    def info(self):
        return citation.RFC(self.get('num'), self.get('sect'))


def _load_notices():
    parser = lxml.etree.XMLParser()
    parser.set_element_class_lookup(lookup)
    notices_xml = pkgutil.get_data('linkheader', 'notices.xml')
    root = lxml.etree.fromstring(notices_xml, parser)
    r = {}
    for elem in root:
        if isinstance(elem, Notice):
            assert elem.id not in r
            r[elem.id] = elem
    return r

all_notices = _load_notices()
