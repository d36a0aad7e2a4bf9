# -*- coding: utf-8; -*-

import codecs

from linkheader.reports.common import complaint_title
from linkheader.util.text import ellipsize, printable


def text_report(headers, buf):
    """Generate a plain-text report with check results.

    :param headers:
        An iterable of :class:`~linkheader.header.LinkHeader` objects.
        They must be already processed by
        :func:`~linkheader.header.check_header`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    f = codecs.getwriter('utf-8')(buf)
    for header in headers:
        f.write(_header_marker(header))
        if header.error is not None:
            for i, line in enumerate(header.error.explain()):
                f.write(u'%s %s\n' % (u'E' if i == 0 else u' ',
                                      printable(line)))
        else:
            for link in header.links:
                _write_link_line(link, f)
        for complaint in header.complaints:
            f.write(u'%s %d %s\n' % (complaint.notice.severity_short,
                                     complaint.id,
                                     complaint_title(complaint)))


def _header_marker(header):
    # The number 79 fits the default ``cmd.exe`` size in Windows.
    return ellipsize(u'------------ %s' % printable(header.value), 79) + u'\n'


def _write_link_line(link, f):
    f.write(u'- <%s>' % printable(link.target))
    for (label, value) in [(u'rel', link.relation_type),
                           (u'anchor', link.context),
                           (u'title', link.title),
                           (u'type', link.media_type),
                           (u'media', link.media)]:
        if value is not None:
            f.write(u' %s=%s' % (label, printable(value)))
    for lang in link.hreflang:
        f.write(u' hreflang=%s' % printable(lang))
    for (name, value) in link.extensions.items():
        if value is None:
            f.write(u' %s' % printable(name))
        else:
            f.write(u' %s=%s' % (printable(name), printable(value)))
    f.write(u'\n')
