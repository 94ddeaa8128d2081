class SDoc(object):
    pass


class SLine(SDoc):
    """A newline followed by ``indent`` indentation characters."""
    __slots__ = ('indent', )

    def __init__(self, indent):
        assert isinstance(indent, int)
        self.indent = indent

    def __eq__(self, other):
        return isinstance(other, SLine) and other.indent == self.indent

    def __hash__(self):
        return hash((SLine, self.indent))

    def __repr__(self):
        return f'SLine({repr(self.indent)})'
