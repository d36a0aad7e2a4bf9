# -*- coding: utf-8; -*-

from functools import singledispatch

from linkheader import notice
from linkheader.util.text import printable


@singledispatch
def expand_piece(piece):
    return str(piece)

@expand_piece.register(notice.Content)
def expand_elem(elem):
    return elem.content


@singledispatch
def piece_to_text(piece, ctx):
    return piece_to_text(expand_piece(piece), ctx)

@piece_to_text.register(str)
def _text_to_text(text, _):
    return printable(text)

@piece_to_text.register(list)
def _list_to_text(xs, ctx):
    return u''.join(piece_to_text(x, ctx) for x in xs)

@piece_to_text.register(notice.Var)
def _var_to_text(var, ctx):
    if var.reference not in ctx:
        return u'(?)'
    return piece_to_text(ctx[var.reference], ctx)


def complaint_title(complaint):
    """The title of `complaint`'s notice, with its context filled in."""
    return piece_to_text(complaint.notice.title, complaint.context).strip()
