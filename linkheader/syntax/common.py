# -*- coding: utf-8; -*-

from linkheader.citation import RFC
from linkheader.parse import auto, char, char_range, fill_names


ALPHA = char_range(0x41, 0x5A) | char_range(0x61, 0x7A)                 > auto
DIGIT = char_range(0x30, 0x39)                                          > auto
DQUOTE = char(0x22)                                                     > auto
HEXDIG = DIGIT | 'A' | 'B' | 'C' | 'D' | 'E' | 'F'                      > auto
HTAB = char(0x09)                                                       > auto
SP = char(0x20)                                                         > auto
VCHAR = char_range(0x21, 0x7E)                                          > auto


fill_names(globals(), RFC(5234))
