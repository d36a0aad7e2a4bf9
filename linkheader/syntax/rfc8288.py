# -*- coding: utf-8; -*-

"""The ``Link`` header grammar.

This follows RFC 8288 Section 3 in structure, but is more lenient
in what it accepts as values, and stricter in what it accepts
as separators between them:

- any visible character (including any non-ASCII character) may appear
  in a target, a parameter name, or an unquoted value,
  except for the delimiters that end them;
- a quoted value runs to the next double quote, and backslashes
  have no special meaning in it;
- link-values are separated by exactly one comma, and there are
  no empty list elements.
"""

from linkheader.citation import RFC
from linkheader.link import build_links
from linkheader.parse import (auto, can_complain, char_range, fill_names,
                              many, mark, maybe, pivot, skip, string,
                              string1, wide)
from linkheader.syntax.common import DQUOTE, HTAB, SP, VCHAR
from linkheader.syntax.rfc8187 import ext_value


char = VCHAR | char_range(0x80, 0xFF) | wide()                          > auto

OWS = string(SP | HTAB)                                                 > auto
BWS = OWS                                                               > auto

target = string(char - '>')                                             > pivot

name = string1(char - '=' - '*' - ';' - ',' - DQUOTE)                   > pivot

quoted_value = (
    skip(DQUOTE) * string((char | SP | HTAB) - DQUOTE) * skip(DQUOTE))  > pivot
token_value = string(char - ',' - ';' - DQUOTE)                         > pivot
value = mark(quoted_value) | mark(token_value)                          > pivot

compound_value = ext_value(char)                                        > auto


@can_complain
def _normalize_plain(complain, name_, marked_value):
    if marked_value is None:
        return (name_, None)
    (parsed_as, text) = marked_value
    if name_ == u'title' and parsed_as is token_value:
        complain(1004)
    if name_ == u'hreflang' and parsed_as is quoted_value:
        complain(1005)
    return (name_, text)

@can_complain
def _normalize_star(complain, name_, ext):
    name_ = name_ + u'*'
    if ext is None:
        complain(1007, name=name_)
    return (name_, ext)

plain_param = _normalize_plain << (
    name * maybe(skip(BWS * '=' * OWS) * value))                        > pivot
star_param = _normalize_star << (
    name * skip('*') * maybe(skip(BWS * '=' * OWS) * compound_value))   > pivot
param = plain_param | star_param                                        > pivot


@can_complain
def _build_links(complain, target_, params):
    return build_links(target_, params, complain)

link_value = _build_links << (
    skip('<') * target * skip('>') *
    many(skip(OWS * ';' * OWS) * param))                                > pivot


def _flatten(groups):
    return [link for links in groups for link in links]

Link = _flatten << (
    skip(OWS) *
    (link_value % many(skip(OWS * ',' * OWS) * link_value)) *
    skip(OWS))                                                          > pivot


fill_names(globals(), RFC(8288))
