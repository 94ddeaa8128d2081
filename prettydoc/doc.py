def is_doc(doc):
    return isinstance(doc, Doc)


def _sum_flat_widths(docs):
    total = 0
    for doc in docs:
        if doc.flat_width is None:
            return None
        total += doc.flat_width
    return total


class Doc:
    """Base class for documents.

    ``breaks`` is True when the doc can't be laid out flat because a
    hard break is reachable in its flat layout. ``flat_width`` is the
    width of its flat layout, or None when that depends on the layout
    context (``Contextual``). Both are computed once, when the doc is
    built."""
    __slots__ = ()

    breaks = False
    flat_width = 0


class Nil(Doc):
    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if '\n' in value or '\r' in value:
            raise ValueError(
                f"Text can't contain line breaks, got {repr(value)}. "
                "Use LINE or HARDLINE instead."
            )
        self.value = value

    @property
    def flat_width(self):
        return len(self.value)

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Line(Doc):
    """A break that is replaced with ``flat`` when laid out flat,
    and with a newline and indentation otherwise."""
    __slots__ = ('flat', )

    def __init__(self, flat):
        self.flat = flat

    @property
    def flat_width(self):
        return len(self.flat)

    def __repr__(self):
        return f'Line({repr(self.flat)})'


class HardLine(Doc):
    breaks = True

    def __repr__(self):
        return 'HardLine()'


class Concat(Doc):
    __slots__ = ('docs', 'breaks', 'flat_width')

    def __init__(self, docs):
        self.docs = tuple(docs)
        self.breaks = any(doc.breaks for doc in self.docs)
        self.flat_width = _sum_flat_widths(self.docs)

    def __repr__(self):
        return f"Concat({', '.join(repr(doc) for doc in self.docs)})"


class Nest(Doc):
    __slots__ = ('indent', 'doc', 'breaks', 'flat_width')

    def __init__(self, indent, doc):
        if not isinstance(indent, int) or isinstance(indent, bool):
            raise TypeError(
                f"Nest indent must be an int, got {type(indent).__name__}"
            )
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc
        self.breaks = doc.breaks
        self.flat_width = doc.flat_width

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Group(Doc):
    __slots__ = ('doc', 'breaks', 'flat_width')

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc
        # A group around a hard break is always broken.
        self.breaks = doc.breaks
        self.flat_width = doc.flat_width

    def __repr__(self):
        return f'Group({repr(self.doc)})'


class FlatChoice(Doc):
    __slots__ = ('when_broken', 'when_flat', 'breaks', 'flat_width')

    def __init__(self, when_broken, when_flat):
        self.when_broken = when_broken
        self.when_flat = when_flat
        self.breaks = when_flat.breaks
        self.flat_width = when_flat.flat_width

    def __repr__(self):
        return (
            f'FlatChoice(when_broken={repr(self.when_broken)}, '
            f'when_flat={repr(self.when_flat)})'
        )


class AlwaysBreak(Doc):
    __slots__ = ('doc', )

    breaks = True

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc

    def __repr__(self):
        return f'AlwaysBreak({repr(self.doc)})'


class Contextual(Doc):
    __slots__ = ('fn', )

    flat_width = None

    def __init__(self, fn):
        self.fn = fn

    def __repr__(self):
        return f'Contextual({repr(self.fn)})'


HARDLINE = HardLine()
LINE = Line(' ')
SOFTLINE = FlatChoice(HARDLINE, NIL)
