# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

from .layout import layout
from .render import default_render_to_stream, default_render_to_str
from .api import (
    always_break,
    align,
    as_string,
    cast_doc,
    concat,
    contextual,
    empty,
    fill,
    flat_choice,
    group,
    hang,
    hardline,
    hsep,
    intersperse,
    line,
    nest,
    punctuate,
    sep,
    softline,
    text,
    vsep,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
)
from .doc import Doc, is_doc


__all__ = [
    'render',
    'write',
    'layout',
    'default_render_to_stream',
    'default_render_to_str',
    'always_break',
    'align',
    'as_string',
    'cast_doc',
    'concat',
    'contextual',
    'empty',
    'fill',
    'flat_choice',
    'group',
    'hang',
    'hardline',
    'hsep',
    'intersperse',
    'line',
    'nest',
    'punctuate',
    'sep',
    'softline',
    'text',
    'vsep',
    'Doc',
    'is_doc',
    'NIL',
    'LINE',
    'SOFTLINE',
    'HARDLINE',
]


def render(
    doc,
    width=79,
    *,
    column=0,
    newline='\n',
    separator=' '
):
    """Returns ``doc`` laid out in ``width`` columns as a str."""
    sdocs = layout(doc, width=width, column=column)
    return default_render_to_str(sdocs, newline, separator)


def write(
    doc,
    width,
    stream,
    *,
    column=0,
    newline='\n',
    separator=' '
):
    """Writes ``doc`` laid out in ``width`` columns to ``stream``,
    which only needs a ``write`` method."""
    sdocs = layout(doc, width=width, column=column)
    default_render_to_stream(stream, sdocs, newline, separator)
