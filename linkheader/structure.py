# -*- coding: utf-8; -*-

"""Classes for representing parsed ``Link`` header values."""

from collections import namedtuple


###############################################################################
# Commonly useful structures


class MultiDict(object):

    """A bunch of key-value pairs where keys are not unique.

    The pairs are kept in the order they were given, and cannot be changed
    after construction.
    """

    __slots__ = ('sequence',)

    def __init__(self, sequence=None):
        self.sequence = tuple(sequence or ())

    @property
    def dictionary(self):
        r = {}
        for k, v in self.sequence:
            r.setdefault(k, []).append(v)
        return r

    def __repr__(self):
        return 'MultiDict(%r)' % (list(self.sequence),)

    def __eq__(self, other):
        if isinstance(other, MultiDict):
            return self.sequence == other.sequence
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.sequence)

    def __getitem__(self, name):
        return self.dictionary[name][0]

    def __contains__(self, name):
        return any(k == name for k, _ in self.sequence)

    def __iter__(self):
        return iter(self.dictionary)

    def __len__(self):
        return len(self.sequence)

    def get(self, name, default=None):
        return self[name] if name in self else default

    def getall(self, name):
        return self.dictionary.get(name, [])

    def items(self):
        return list(self.sequence)

    def duplicates(self):
        return [k for k, v in self.dictionary.items() if len(v) > 1]


class ProtocolString(str):

    """Base class for various constant strings used in HTTP."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())


###############################################################################
# Representations of specific protocol elements


class Charset(CaseInsensitive):

    """The character encoding of an ``ext-value`` (RFC 8187 Section 3.2.1)."""

    __slots__ = ()


UTF_8 = Charset(u'UTF-8')


class ExtValue(str):

    """A decoded ``ext-value`` (RFC 8187), such as the value of ``title*``.

    This is the decoded text itself, so it can be used wherever
    a plain string value can, and it compares equal to that string.
    It also remembers the `charset` and the `language` it was tagged with.

    >>> title = ExtValue(u'letztes Kapitel', u'UTF-8', u'de')
    >>> title == u'letztes Kapitel'
    True
    >>> print(title.language)
    de
    """

    def __new__(cls, value, charset=UTF_8, language=None):
        self = super(ExtValue, cls).__new__(cls, value)
        self._charset = Charset(charset)
        self._language = language or None
        return self

    charset = property(lambda self: self._charset)
    language = property(lambda self: self._language)

    def __repr__(self):
        return 'ExtValue(%s, charset=%r, language=%r)' % (
            str.__repr__(self), str(self.charset), self.language)

    def __reduce__(self):
        return (ExtValue, (str(self), str(self.charset), self.language))


class Link(namedtuple('Link', ('target', 'context', 'relation_type', 'title',
                               'hreflang', 'media_type', 'media',
                               'extensions'))):

    """A single link from a ``Link`` header (RFC 8288 Section 3).

    A link-value with several relation types in its ``rel`` parameter
    becomes several :class:`Link` objects, one per relation type.
    They only differ in :attr:`relation_type`.

    .. attribute:: target

       The URI-reference between the angle brackets, exactly as written.
       It is not resolved against :attr:`context`.

    .. attribute:: context

       The value of the first ``anchor`` parameter, or `None`, in which case
       the context is whatever the caller considers the default.

    .. attribute:: relation_type

       One of the relation types from the ``rel`` parameter(s), as written,
       or `None` if there were none.

    .. attribute:: title

       The value of the ``title*`` parameter (an :class:`ExtValue`)
       or else of the ``title`` parameter, or `None`.

    .. attribute:: hreflang

       A tuple of the values of all ``hreflang`` parameters, in order.

    .. attribute:: media_type

       The value of the first ``type`` parameter, or `None`.

    .. attribute:: media

       The value of the first ``media`` parameter, or `None`.

    .. attribute:: extensions

       A :class:`MultiDict` of all other parameters, in order.

    """

    __slots__ = ()

    def __new__(cls, target, context=None, relation_type=None, title=None,
                hreflang=(), media_type=None, media=None, extensions=None):
        return super(Link, cls).__new__(
            cls, target, context, relation_type, title, tuple(hreflang),
            media_type, media,
            extensions if extensions is not None else MultiDict())
