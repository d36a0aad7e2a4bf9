# -*- coding: utf-8; -*-

import pytest

from linkheader import (Blackboard, ExtValue, Link, LinkHeader, MultiDict,
                        ParseError, check_header, parse_header)


def notices(value):
    board = Blackboard()
    parse_header(value, complain=board.complain)
    return board.notices


def test_simple():
    assert parse_header(u'<https://example.com/2>; rel="next"') == \
        [Link(u'https://example.com/2', relation_type=u'next')]


def test_quoted_and_token_equivalent():
    assert parse_header(u'<a>; rel=alternate; hreflang=en') == \
        parse_header(u'<a>; rel=alternate; hreflang="en"')
    assert parse_header(u'<a>; rel=next; title=Next') == \
        parse_header(u'<a>; rel=next; title="Next"')


def test_explode():
    links = parse_header(u'<https://example.com/>; rel="a b c"; '
                         u'anchor="#top"')
    assert len(links) == 3
    assert [link.relation_type for link in links] == [u'a', u'b', u'c']
    assert {link.target for link in links} == {u'https://example.com/'}
    assert {link.context for link in links} == {u'#top'}


def test_no_rel():
    [link] = parse_header(u'<https://example.com/>; title="Home"')
    assert link.relation_type is None
    assert link.title == u'Home'


def test_title_star_decoded():
    [link] = parse_header(u"<https://example.com>; "
                          u"title*=UTF-8'en'Hello%20World")
    assert link.title == u'Hello World'
    assert isinstance(link.title, ExtValue)
    assert link.title.charset == u'UTF-8'
    assert link.title.language == u'en'


def test_title_star_beats_title():
    [link] = parse_header(u"<a>; rel=chapter; title*=UTF-8'de'n%c3%a4chstes; "
                          u'title="next"')
    assert link.title == u'nächstes'
    assert link.extensions == MultiDict([(u'title', u'next')])


def test_several_link_values():
    links = parse_header(u'<a>; rel="x y", <b>;rel=z ,<c>')
    assert [(link.target, link.relation_type) for link in links] == \
        [(u'a', u'x'), (u'a', u'y'), (u'b', u'z'), (u'c', None)]


def test_repeated_rel():
    board = Blackboard()
    [link] = parse_header(u'<a>; rel=next; rel=prev',
                          complain=board.complain)
    assert link.relation_type == u'next'
    assert link.extensions == MultiDict([(u'rel', u'prev')])
    assert board.notices == [1002]


def test_rel_with_no_break_space():
    [link] = parse_header(u'<a>; rel="a\u00a0b"')
    assert link.relation_type == u'a\u00a0b'


def test_quoted_comma():
    [link] = parse_header(u'<https://example.com>; title="a, b"')
    assert link.title == u'a, b'


def test_whitespace():
    [link] = parse_header(u' \t<a> ;rel = next ; type\t=\t"text/html"  ')
    assert link == Link(u'a', relation_type=u'next', media_type=u'text/html')


def test_verbatim_values():
    [link] = parse_header(u'<../Rel>; rel=NEXT; type="Text/HTML"; '
                          u'media="screen, print"; Title="x"')
    assert link.target == u'../Rel'
    assert link.relation_type == u'NEXT'
    assert link.media_type == u'Text/HTML'
    assert link.media == u'screen, print'
    assert link.title is None
    assert link.extensions == MultiDict([(u'Title', u'x')])


def test_non_ascii():
    [link] = parse_header(u'<https://пример.рф/>; rel=next; title="Дальше"')
    assert link.target == u'https://пример.рф/'
    assert link.title == u'Дальше'

    [link] = parse_header(u'<https://пример.рф/>; rel=next'.encode('utf-8'))
    assert link.target == u'https://пример.рф/'


def test_empty():
    assert parse_header(u'') == []
    assert parse_header(u'  \t ') == []
    assert parse_header(b'') == []


@pytest.mark.parametrize('value', [
    u'<https://example.com',
    u'https://example.com',
    u'<a>; rel="next',
    u'<a> rel=next',
    u'<a>;',
    u'<a>,',
    u', <a>',
    u'<a>, , <b>',
    u'<a>; =next',
    u'<a>; rel="next"x',
    u'<a>; title*=UTF-8\'en\'a b',
    u'<a b>',
    u'<a>; rel=next\n',
])
def test_malformed(value):
    with pytest.raises(ParseError):
        parse_header(value)


def test_bad_title_star_fails_everything():
    with pytest.raises(ParseError) as info:
        parse_header(u"<a>; rel=next, <b>; title*=ISO-8859-1'en'%A3%20rates")
    assert info.value.position == 27

    with pytest.raises(ParseError):
        parse_header(u"<a>; title*=UTF-8'en'%A3%20rates")


def test_invalid_utf8_bytes():
    with pytest.raises(ParseError) as info:
        parse_header(b'<a>; title="\xff"')
    assert info.value.position == 12


def test_no_complaints_on_error():
    board = Blackboard()
    with pytest.raises(ParseError):
        parse_header(u'<a>; rev=made; title=x, <', complain=board.complain)
    assert board.complaints == []


def test_notices():
    assert notices(u'<a>; rel=next') == []
    assert notices(u'<a>') == [1001]
    assert notices(u'<a>; rel=next; type=a; type=b') == [1002]
    assert notices(u'<a>; rel=next; rev=prev') == [1003]
    assert notices(u'<a>; rel=next; title=Next') == [1004]
    assert notices(u'<a>; rel=alternate; hreflang="de"') == [1005]
    assert notices(u'<a>; rel=""') == [1006]
    assert notices(u'<a>; rel=next; title*') == [1007]
    assert notices(u"<a>; rel=next; title=\"x\"; title*=UTF-8''y") == [1008]


def test_complaint_context():
    board = Blackboard()
    parse_header(u'<a>; rel=next; title*', complain=board.complain)
    [complaint] = board.complaints
    assert complaint.context == {u'name': u'title*'}

    board = Blackboard()
    parse_header(u'<a>, <b>', complain=board.complain)
    assert [c.context for c in board.complaints] == \
        [{u'target': u'a'}, {u'target': u'b'}]


def test_silence():
    header = LinkHeader(u'<a>; rev=made')
    header.silence([1001])
    check_header(header)
    assert header.notices == [1003]
    assert header.error is None
    assert header.links == [Link(u'a',
                                 extensions=MultiDict([(u'rev', u'made')]))]


def test_check_header_error():
    header = check_header(LinkHeader(u'<a'))
    assert header.links is None
    assert isinstance(header.error, ParseError)
    assert header.complaints == []
