# -*- coding: utf-8; -*-

import pytest

from linkheader import ExtValue, Link, MultiDict, format_link, format_links
from linkheader import parse_header


@pytest.mark.parametrize('value', [
    u'<https://example.com/2>; rel="next"',
    u'<a>; rel="a b c"; anchor="#top", <b>',
    u'<a>; rel=alternate; hreflang=de; hreflang="fr"; type=text/html; '
    u'media="screen, print"',
    u"<https://example.com>; title*=UTF-8'en'Hello%20World",
    u"<a>; title=x; title*=utf-8'de'n%c3%a4chstes; title=y",
    u'<a>; anchor="/1"; anchor="/2"; rel=up; crossorigin; foo*; '
    u"bar*=UTF-8''%E2%82%AC",
    u'<https://пример.рф/>; rel=next; title="Дальше, «вперёд»"',
    u'<a>; Rel=next; REL="prev"; rev=made; title=""',
    u'<>',
])
def test_round_trip(value):
    links = parse_header(value)
    formatted = format_links(links)
    assert parse_header(formatted) == links


def test_format_link():
    link = Link(u'/chapter/2', context=u'/book', relation_type=u'next',
                title=ExtValue(u'Kapitel 2', u'UTF-8', u'de'),
                hreflang=[u'de'], media_type=u'text/html',
                extensions=MultiDict([(u'crossorigin', None),
                                      (u'title', u'Chapter 2')]))
    assert format_link(link) == (
        u'</chapter/2>; anchor="/book"; rel="next"; '
        u"title*=UTF-8'de'Kapitel%202; hreflang=de; type=\"text/html\"; "
        u'crossorigin; title="Chapter 2"')


def test_format_links():
    assert format_links([]) == u''
    assert format_links([Link(u'a', relation_type=u'x'),
                         Link(u'b', title=u'B')]) == \
        u'<a>; rel="x", <b>; title="B"'


@pytest.mark.parametrize('link', [
    Link(u'a b'),
    Link(u'a>b'),
    Link(u'a', title=u'say "hi"'),
    Link(u'a', media=u'screen\nprint'),
    Link(u'a', extensions=MultiDict([(u'foo', ExtValue(u'bar'))])),
])
def test_unrepresentable(link):
    with pytest.raises(ValueError):
        format_link(link)
