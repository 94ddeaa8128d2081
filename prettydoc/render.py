from io import StringIO

from .sdoc import SLine


def default_render_to_stream(stream, sdocs, newline='\n', separator=' '):
    """Writes the simple docs in ``sdocs`` to ``stream``.

    ``sdocs`` is consumed lazily, so a layout generator can be passed in
    directly. Errors raised by ``stream.write`` are not handled here."""
    for sdoc in sdocs:
        if isinstance(sdoc, str):
            stream.write(sdoc)
        elif isinstance(sdoc, SLine):
            stream.write(newline + separator * sdoc.indent)
        else:
            raise TypeError(f'Unexpected simple doc {repr(sdoc)}')


def default_render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    default_render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()
