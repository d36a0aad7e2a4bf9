# -*- coding: utf-8; -*-

from linkheader.blackboard import Complaint
from linkheader.citation import RFC
from linkheader.notice import Cite, Paragraph, Severity, all_notices
from linkheader.reports.common import complaint_title, piece_to_text


def test_all_notices():
    assert sorted(all_notices) == list(range(1001, 1009))
    for notice in all_notices.values():
        assert notice.title
        assert list(notice.explanation)


def test_severity():
    assert all_notices[1001].severity is Severity.comment
    assert all_notices[1001].severity_short == u'C'
    assert all_notices[1004].severity is Severity.debug
    assert all_notices[1004].severity_short == u'D'
    assert Severity.comment > Severity.debug


def test_explanation():
    [explain, cite] = list(all_notices[1001].explanation)
    assert isinstance(explain, Paragraph)
    assert isinstance(cite, Cite)
    assert cite.info == RFC(8288, u'3.3')
    assert cite.info.url == u'https://www.rfc-editor.org/rfc/rfc8288#section-3.3'
    text = piece_to_text(explain, {})
    assert text.startswith(u'This link-value has no rel parameter,')


def test_complaint_title():
    complaint = Complaint(all_notices[1002], {u'name': u'type',
                                              u'target': u'/x'})
    assert complaint_title(complaint) == \
        u'Repeated type parameter in link to /x'
    complaint = Complaint(all_notices[1002], {u'name': u'type'})
    assert complaint_title(complaint) == \
        u'Repeated type parameter in link to (?)'
