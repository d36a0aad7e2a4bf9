# -*- coding: utf-8; -*-

import codecs
import json

from linkheader.reports.common import complaint_title
from linkheader.structure import ExtValue


def json_report(headers, buf):
    """Generate a JSON report with check results.

    The report is a single JSON array with one object per header value.
    Arguments are the same as for :func:`~linkheader.reports.text_report`.
    """
    f = codecs.getwriter('utf-8')(buf)
    json.dump([_header_to_json(header) for header in headers], f,
              indent=2, ensure_ascii=False)
    f.write(u'\n')


def _header_to_json(header):
    r = {
        u'value': header.value,
        u'links': None,
        u'error': None,
        u'notices': [
            {
                u'id': complaint.id,
                u'severity': complaint.severity.name,
                u'title': complaint_title(complaint),
            }
            for complaint in header.complaints
        ],
    }
    if header.error is not None:
        r[u'error'] = {
            u'position': header.error.position,
            u'message': u'\n'.join(header.error.explain()),
        }
    else:
        r[u'links'] = [_link_to_json(link) for link in header.links]
    return r


def _link_to_json(link):
    return {
        u'target': link.target,
        u'context': link.context,
        u'relation_type': link.relation_type,
        u'title': _value_to_json(link.title),
        u'hreflang': list(link.hreflang),
        u'media_type': link.media_type,
        u'media': link.media,
        u'extensions': [[name, _value_to_json(value)]
                        for (name, value) in link.extensions.items()],
    }


def _value_to_json(value):
    if isinstance(value, ExtValue):
        return {u'value': str(value), u'charset': str(value.charset),
                u'language': value.language}
    return value
