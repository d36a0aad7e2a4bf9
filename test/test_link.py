# -*- coding: utf-8; -*-

from linkheader.blackboard import Blackboard
from linkheader.link import build_links
from linkheader.structure import ExtValue, Link, MultiDict


def build(params):
    board = Blackboard()
    links = build_links(u'/x', params, complain=board.complain)
    return (links, board.notices)


def test_no_rel():
    (links, notices) = build([(u'type', u'text/html')])
    assert links == [Link(u'/x', media_type=u'text/html')]
    assert notices == [1001]


def test_explode():
    (links, notices) = build([(u'rel', u' next\tprefetch '),
                              (u'anchor', u'/y')])
    assert [link.relation_type for link in links] == [u'next', u'prefetch']
    assert all(link.context == u'/y' for link in links)
    assert links[0]._replace(relation_type=None) == \
        links[1]._replace(relation_type=None)
    assert notices == []


def test_repeated_rel():
    (links, notices) = build([(u'rel', u'next'), (u'rel', u'prev up')])
    [link] = links
    assert link.relation_type == u'next'
    assert link.extensions == MultiDict([(u'rel', u'prev up')])
    assert notices == [1002]


def test_rel_after_empty_rel():
    (links, notices) = build([(u'rel', u''), (u'rel', u'next')])
    assert links == [Link(u'/x', extensions=MultiDict([(u'rel', u'next')]))]
    assert notices == [1002, 1006]


def test_rel_split_on_sp_and_htab_only():
    (links, _) = build([(u'rel', u'a\u00a0b \tc\u2003d')])
    assert [link.relation_type for link in links] == [u'a\u00a0b',
                                                      u'c\u2003d']


def test_empty_rel():
    (links, notices) = build([(u'rel', u'  ')])
    assert links == [Link(u'/x')]
    assert notices == [1006]


def test_valueless_rel():
    (links, notices) = build([(u'rel', None)])
    assert links == [Link(u'/x', extensions=MultiDict([(u'rel', None)]))]
    assert notices == [1001]


def test_first_wins():
    (links, notices) = build([(u'rel', u'next'),
                              (u'anchor', u'/a'), (u'type', u'text/plain'),
                              (u'anchor', u'/b'), (u'media', u'print'),
                              (u'type', u'text/html'), (u'media', u'screen')])
    [link] = links
    assert link.context == u'/a'
    assert link.media_type == u'text/plain'
    assert link.media == u'print'
    assert link.extensions == MultiDict([(u'anchor', u'/b'),
                                         (u'type', u'text/html'),
                                         (u'media', u'screen')])
    assert notices == [1002, 1002, 1002]


def test_valueless_singular():
    (links, _) = build([(u'rel', u'next'), (u'anchor', None),
                        (u'anchor', u'/a')])
    assert links[0].context == u'/a'
    assert links[0].extensions == MultiDict([(u'anchor', None)])


def test_hreflang():
    (links, notices) = build([(u'rel', u'alternate'), (u'hreflang', u'de'),
                              (u'hreflang', u'fr')])
    assert links[0].hreflang == (u'de', u'fr')
    assert links[0].extensions == MultiDict()
    assert notices == []


def test_title_star_wins():
    ext = ExtValue(u'Überblick', u'UTF-8', u'de')
    for params in [[(u'title', u'Overview'), (u'title*', ext)],
                   [(u'title*', ext), (u'title', u'Overview')]]:
        (links, notices) = build([(u'rel', u'contents')] + params)
        [link] = links
        assert link.title == u'Überblick'
        assert link.title.language == u'de'
        assert link.extensions == MultiDict([(u'title', u'Overview')])
        assert notices == [1008]


def test_valueless_title_star():
    (links, _) = build([(u'rel', u'contents'), (u'title*', None),
                        (u'title', u'Overview')])
    assert links[0].title == u'Overview'
    assert links[0].extensions == MultiDict([(u'title*', None)])


def test_extensions_in_order():
    (links, _) = build([(u'Rel', u'next'), (u'crossorigin', None),
                        (u'rel', u'next'), (u'foo', u'1'), (u'foo', u'2')])
    [link] = links
    assert link.relation_type == u'next'
    assert link.extensions.items() == [(u'Rel', u'next'),
                                       (u'crossorigin', None),
                                       (u'foo', u'1'), (u'foo', u'2')]
    assert link.extensions[u'foo'] == u'1'
    assert link.extensions.getall(u'foo') == [u'1', u'2']
    assert link.extensions.duplicates() == [u'foo']


def test_rev():
    (links, notices) = build([(u'rev', u'made')])
    assert links[0].extensions == MultiDict([(u'rev', u'made')])
    assert notices == [1003, 1001]
