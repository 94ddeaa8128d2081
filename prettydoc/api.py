from .doc import (
    AlwaysBreak,
    Concat,
    Contextual,
    Doc,
    FlatChoice,
    Group,
    Nest,
    Text,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
)
from .utils import intersperse as _intersperse, mark_last

SPACE = Text(' ')


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise ValueError(doc)


def empty():
    return NIL


def text(x):
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    if x == "":
        return NIL
    return Text(x)


def as_string(value):
    """Returns a Text doc of ``str(value)``."""
    return text(str(value))


def line():
    """A line break that is laid out as a single space when flat."""
    return LINE


def softline():
    """A line break that disappears entirely when laid out flat."""
    return SOFTLINE


def hardline():
    """A line break that is never laid out flat. Any group containing
    it will be broken."""
    return HARDLINE


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. To lay out the doc on a single line, every
    ``LINE`` is replaced with a space and the ``when_flat`` branch of
    ``FlatChoice`` is used."""
    return Group(cast_doc(doc))


def concat(*docs):
    """Returns a concatenation of the documents in the arguments"""
    if not docs:
        return NIL
    elif len(docs) == 1:
        return cast_doc(docs[0])
    return Concat([cast_doc(doc) for doc in docs])


def nest(i, doc):
    """Increases the indentation of line breaks inside ``doc`` by ``i``."""
    return Nest(i, cast_doc(doc))


def contextual(fn):
    """Returns a Doc that is lazily evaluated when deciding layout.

    ``fn`` must be a function that accepts three arguments:

    - ``indent`` (``int``): the current indentation level
    - ``column`` (``int``) the current output column in the output line
    - ``page_width`` (``int``) the requested page width (character count)

    and returns a Doc (or a str).
    """
    return Contextual(fn)


def align(doc):
    """Aligns each new line in ``doc`` with the column ``doc`` starts at.
    """
    doc = cast_doc(doc)

    def evaluator(indent, column, page_width):
        return Nest(column - indent, doc)
    return contextual(evaluator)


def hang(i, doc):
    return align(Nest(i, cast_doc(doc)))


def always_break(doc):
    """Instructs the layout algorithm that ``doc`` must be
    broken to multiple lines. This instruction propagates
    to all higher levels in the layout, but nested Docs
    may still be laid out flat."""
    return AlwaysBreak(cast_doc(doc))


def flat_choice(when_broken, when_flat):
    """Gives the layout algorithm two options. ``when_flat`` Doc will be
    used when the document fit onto a single line, and ``when_broken`` is used
    when the Doc had to be broken into multiple lines."""
    return FlatChoice(cast_doc(when_broken), cast_doc(when_flat))


def intersperse(sep, docs):
    return concat(*_intersperse(sep, docs))


def hsep(docs):
    return intersperse(SPACE, docs)


def vsep(docs):
    return intersperse(LINE, docs)


def sep(docs):
    """Lays out ``docs`` separated by spaces if they fit on one line,
    otherwise one per line."""
    return group(vsep(docs))


def fill(docs):
    """Lays out ``docs`` like words in a paragraph: as many on each line as
    fit, breaking only before a doc that would overflow the line.

    Each doc after the first is grouped with the line preceding it, so
    that doc is also laid out flat when the break is not taken."""
    docs = iter(docs)
    try:
        first = next(docs)
    except StopIteration:
        return NIL
    return concat(
        first,
        *(group(concat(LINE, doc)) for doc in docs)
    )


def punctuate(p, docs):
    """Returns a list of ``docs`` with ``p`` appended to every doc but
    the last."""
    return [
        cast_doc(doc) if is_last else concat(doc, p)
        for is_last, doc in mark_last(docs)
    ]
