# -*- coding: utf-8; -*-

from collections import namedtuple

from linkheader.notice import all_notices


class Complaint(namedtuple('Complaint', ('notice', 'context'))):

    """A notice as reported about a particular header value."""

    __slots__ = ()

    @property
    def id(self):
        """The notice's ID (an integer)."""
        return self.notice.id

    @property
    def severity(self):
        """
        The notice's severity,
        as a member of the :class:`~linkheader.notice.Severity` enumeration.
        """
        return self.notice.severity


class Blackboard(object):

    """Collects complaints reported while parsing.

    Pass its :meth:`complain` method as the `complain` argument
    to :func:`linkheader.parse_header`::

        board = Blackboard()
        links = linkheader.parse_header(value, complain=board.complain)
        for complaint in board.complaints:
            ...

    """

    def __init__(self):
        self._complaints = []
        self._silenced = set()

    def complain(self, notice_id, **kwargs):
        """Report a notice on this blackboard."""
        complaint = Complaint(all_notices[notice_id], kwargs)
        if complaint not in self._complaints:
            self._complaints.append(complaint)

    def silence(self, notice_ids):
        """Silence unwanted notices.

        :param notice_ids:
          An iterable of notice IDs that will not appear in :attr:`complaints`.
        """
        self._silenced.update(notice_ids)

    @property
    def complaints(self):
        """
        A list of :class:`~linkheader.blackboard.Complaint` instances
        reported on this blackboard.
        """
        return [complaint for complaint in self._complaints
                if complaint.notice.id not in self._silenced]

    @property
    def notices(self):
        """
        A list of IDs of the notices reported on this blackboard.
        """
        return [complaint.id for complaint in self.complaints]
