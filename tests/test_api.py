import pytest

from prettydoc import (
    align,
    always_break,
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
    render,
    sep,
    softline,
    text,
    vsep,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
)
from prettydoc.doc import Concat, Text


def test_text():
    assert isinstance(text('a'), Text)
    assert text('') is NIL
    with pytest.raises(TypeError):
        text(1)
    with pytest.raises(ValueError):
        text('a\nb')


def test_cast_doc():
    assert cast_doc(NIL) is NIL
    assert cast_doc('') is NIL
    assert cast_doc('a').value == 'a'
    with pytest.raises(ValueError):
        cast_doc(1)


def test_concat():
    assert concat() is NIL
    assert isinstance(concat('a'), Text)
    doc = concat('a', LINE, text('b'))
    assert isinstance(doc, Concat)
    assert render(doc, 80) == 'a\nb'


def test_primitive_constructors():
    assert empty() is NIL
    assert line() is LINE
    assert softline() is SOFTLINE
    assert hardline() is HARDLINE


def test_softline():
    doc = group(concat('a', softline(), 'b'))
    assert render(doc, 80) == 'ab'
    assert render(doc, 1) == 'a\nb'


def test_hardline_breaks_enclosing_group():
    doc = group(concat('a', LINE, 'b', hardline(), 'c'))
    assert render(doc, 80) == 'a\nb\nc'


def test_hardline_does_not_break_sibling_group():
    doc = concat(
        group(concat('a', LINE, 'b')),
        HARDLINE,
        group(concat('c', LINE, 'd')),
    )
    assert render(doc, 80) == 'a b\nc d'


def test_always_break():
    doc = group(always_break(concat('a', LINE, 'b')))
    assert render(doc, 80) == 'a\nb'


def test_always_break_keeps_inner_groups_independent():
    doc = group(
        concat(
            'x',
            always_break(
                nest(2, concat(LINE, group(concat('a', LINE, 'b'))))
            ),
        )
    )
    assert render(doc, 80) == 'x\n  a b'


def test_flat_choice():
    assert render(group(flat_choice('broken', 'flat')), 80) == 'flat'

    doc = group(concat(flat_choice('B', 'F'), LINE, 'x' * 20))
    assert render(doc, 10) == 'B\n' + 'x' * 20


def test_flat_choice_hardline_only_in_broken_branch():
    doc = group(concat('a', flat_choice(HARDLINE, ', '), 'b'))
    assert render(doc, 80) == 'a, b'
    assert render(doc, 2) == 'a\nb'


def test_align():
    doc = concat('key: ', align(vsep(['a', 'b', 'c'])))
    assert render(doc, 80) == 'key: a\n     b\n     c'


def test_align_inside_nest():
    doc = nest(4, concat('x', HARDLINE, 'ab', align(vsep(['c', 'd']))))
    assert render(doc, 80) == 'x\n    abc\n      d'


def test_hang():
    doc = concat('x = ', hang(2, vsep(['a', 'b'])))
    assert render(doc, 80) == 'x = a\n      b'


def test_contextual():
    doc = concat(
        'abc',
        contextual(lambda indent, column, page_width: f'{column}/{page_width}')
    )
    assert render(doc, 40) == 'abc3/40'


def test_contextual_inside_group_sees_projected_column():
    doc = group(
        concat(
            'ab',
            LINE,
            contextual(lambda indent, column, page_width: 'x' * column),
        )
    )
    # Flat: 'ab ' followed by three x's.
    assert render(doc, 6) == 'ab xxx'
    # Broken: the contextual doc starts at column 0.
    assert render(doc, 5) == 'ab\n'


def test_as_string():
    assert render(as_string(42), 80) == '42'
    assert render(as_string(None), 80) == 'None'


def test_intersperse():
    assert render(intersperse(',', ['a', 'b', 'c']), 80) == 'a,b,c'
    assert intersperse(',', []) is NIL


def test_hsep_never_breaks():
    assert render(hsep(['aaa', 'bbb', 'ccc']), 1) == 'aaa bbb ccc'


def test_vsep_breaks_without_group():
    assert render(vsep(['a', 'b']), 80) == 'a\nb'
    assert render(group(vsep(['a', 'b'])), 80) == 'a b'


def test_sep():
    doc = sep(['a', 'b', 'c'])
    assert render(doc, 80) == 'a b c'
    assert render(doc, 5) == 'a b c'
    assert render(doc, 4) == 'a\nb\nc'


def test_fill():
    doc = fill(['aaa', 'bbb', 'ccc', 'ddd'])
    assert render(doc, 80) == 'aaa bbb ccc ddd'
    assert render(doc, 8) == 'aaa bbb\nccc ddd'
    assert render(doc, 3) == 'aaa\nbbb\nccc\nddd'


def test_fill_empty():
    assert fill([]) is NIL
    assert render(fill(['a']), 0) == 'a'


def test_fill_in_nest():
    doc = concat('words:', nest(2, concat(HARDLINE, fill(['a', 'bb', 'c', 'dd']))))
    assert render(doc, 8) == 'words:\n  a bb c\n  dd'
    assert render(doc, 7) == 'words:\n  a bb\n  c dd'


def test_punctuate():
    docs = punctuate(',', ['a', 'b', 'c'])
    assert len(docs) == 3
    assert render(hsep(docs), 80) == 'a, b, c'
    assert render(sep(docs), 3) == 'a,\nb,\nc'


def test_punctuate_empty():
    assert punctuate(',', []) == []
