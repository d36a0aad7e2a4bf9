# -*- coding: utf-8; -*-

from linkheader.__metadata__ import version as __version__
from linkheader.blackboard import Blackboard, Complaint
from linkheader.header import LinkHeader, check_header, parse_header
from linkheader.notice import Severity
from linkheader.parse import ParseError
from linkheader.reports.json import json_report
from linkheader.reports.text import text_report
from linkheader.serialize import format_link, format_links
from linkheader.structure import ExtValue, Link, MultiDict

__all__ = [
    'Blackboard',
    'Complaint',
    'ExtValue',
    'Link',
    'LinkHeader',
    'MultiDict',
    'ParseError',
    'Severity',
    'check_header',
    'format_link',
    'format_links',
    'json_report',
    'parse_header',
    'text_report',
]
