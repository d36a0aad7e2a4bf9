# -*- coding: utf-8; -*-

from urllib.parse import unquote_to_bytes as pct_decode

from linkheader.citation import RFC
from linkheader.parse import (auto, fill_names, named, pivot, skip, string,
                              string1)
from linkheader.structure import UTF_8, Charset, ExtValue
from linkheader.syntax.common import ALPHA, DIGIT, HEXDIG


attr_char = (ALPHA | DIGIT |
             '!' | '#' | '$' | '&' | '+' | '-' | '.' |
             '^' | '_' | '`' | '|' | '~')                               > auto

pct_encoded = '%' + HEXDIG + HEXDIG                                     > auto

# RFC 8187 allows an empty ``value-chars``, but a compound value
# that carries no text at all is not accepted here.
value_chars = pct_decode << string1(pct_encoded | attr_char)            > pivot


def _decode_ext_value(charset, language, value_bytes):
    charset = Charset(charset)
    if charset != UTF_8:
        raise ValueError(u'unsupported charset %s' % charset)
    return ExtValue(value_bytes.decode('utf-8'), charset, language)


def ext_value(char):
    """An ``ext-value`` whose charset and language consist of `char`.

    We don't check the charset against the ``mime-charset`` rule
    or the language against RFC 5646: they only need to be free
    of single quotes. The charset must then be "UTF-8", and the decoded
    bytes must be valid UTF-8; otherwise the input is rejected.
    """
    charset = string1(char - "'")   > named(u'charset', RFC(8187))
    language = string(char - "'")   > named(u'language', RFC(8187))
    return _decode_ext_value << (
        charset * skip("'") * language * skip("'") * value_chars
    ) > named(u'ext-value', RFC(8187), is_pivot=True)


fill_names(globals(), RFC(8187))
