# -*- coding: utf-8; -*-

from linkheader.reports.json import json_report
from linkheader.reports.text import text_report


formats = {
    u'text': text_report,
    u'json': json_report,
}
