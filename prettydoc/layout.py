"""The layout algorithm.

Resolves every ``Group`` in a document to a flat or broken layout and
produces a stream of simple docs for a renderer to consume: plain ``str``
values for text (and flattened line breaks) and ``SLine`` instances for
line breaks that are taken.

Layout runs off an explicit work list of ``(indent, mode, doc)`` triples,
so neither recursion depth nor auxiliary space grows with the size of the
document. A group is laid out flat when the fits check succeeds: the group
laid out flat, followed by the rest of the pending work up to the next
line break that is taken, must fit in the width left on the current line.
"""
import logging
from enum import IntEnum

from .api import cast_doc
from .doc import (
    AlwaysBreak,
    Concat,
    Contextual,
    FlatChoice,
    Group,
    HardLine,
    Line,
    Nest,
    Nil,
    Text,
)
from .sdoc import SLine

layout_log = logging.getLogger("prettydoc.layout")


class Mode(IntEnum):
    BREAK = 0
    FLAT = 1


class StepCounter:
    """Counts the work done by a layout pass."""
    __slots__ = ('steps', 'fits_steps')

    def __init__(self):
        self.steps = 0
        self.fits_steps = 0


def fits(next_cmd, rest_cmds, width, column, counter=None):
    """Returns True if ``next_cmd`` and the commands in ``rest_cmds``
    (processed from the end of the list) fit in the rest of the current
    line.

    Commands are only inspected up to the first line break in broken mode,
    and the check stops as soon as the line overflows. A hard break met in
    flat mode never fits. Docs in flat mode are measured by their
    precomputed ``flat_width`` instead of being walked, unless they contain
    a ``Contextual``."""
    if width <= 0:
        return False

    remaining = width - column
    if remaining < 0:
        return False

    rest_idx = len(rest_cmds)
    cmds = [next_cmd]

    while True:
        if not cmds:
            if rest_idx == 0:
                # All commands have been processed
                return True
            rest_idx -= 1
            cmds.append(rest_cmds[rest_idx])

        if counter is not None:
            counter.fits_steps += 1

        indent, mode, doc = cmds.pop()

        if mode is Mode.FLAT:
            if doc.breaks:
                return False
            if doc.flat_width is not None:
                # Laid out flat, the whole doc ends up on this line.
                remaining -= doc.flat_width
                if remaining < 0:
                    return False
                continue

        if isinstance(doc, Nil):
            continue
        elif isinstance(doc, Text):
            remaining -= len(doc.value)
        elif isinstance(doc, Concat):
            cmds.extend((indent, mode, child) for child in reversed(doc.docs))
        elif isinstance(doc, Line):
            if mode is Mode.BREAK:
                return True
            remaining -= len(doc.flat)
        elif isinstance(doc, HardLine):
            return mode is Mode.BREAK
        elif isinstance(doc, Nest):
            cmds.append((indent + doc.indent, mode, doc.doc))
        elif isinstance(doc, Group):
            cmds.append((indent, mode, doc.doc))
        elif isinstance(doc, FlatChoice):
            cmds.append((
                indent,
                mode,
                doc.when_flat if mode is Mode.FLAT else doc.when_broken
            ))
        elif isinstance(doc, AlwaysBreak):
            if mode is Mode.FLAT:
                return False
            cmds.append((indent, mode, doc.doc))
        elif isinstance(doc, Contextual):
            evaluated = cast_doc(doc.fn(indent, width - remaining, width))
            cmds.append((indent, mode, evaluated))
        else:
            raise TypeError(f'Unexpected doc {repr(doc)}')

        if remaining < 0:
            return False


def layout(doc, width, column=0, counter=None):
    """Lays out ``doc`` to fit in ``width`` columns, starting at ``column``.

    Yields simple docs: ``str`` values and ``SLine`` instances.

    A ``width`` of 0 or less lays out every group broken.
    """
    if not isinstance(width, int):
        raise TypeError(
            f"width must be an int, got {type(width).__name__}"
        )
    if not isinstance(column, int) or column < 0:
        raise ValueError(f"column must be a non-negative int, got {column!r}")

    doc = cast_doc(doc)

    debug = layout_log.isEnabledFor(logging.DEBUG)
    if debug:
        layout_log.debug("layout start: width=%d column=%d", width, column)

    if counter is None and debug:
        counter = StepCounter()

    cmds = [(0, Mode.BREAK, doc)]

    while cmds:
        if counter is not None:
            counter.steps += 1

        indent, mode, doc = cmds.pop()

        if isinstance(doc, Nil):
            continue
        elif isinstance(doc, Text):
            yield doc.value
            column += len(doc.value)
        elif isinstance(doc, Concat):
            cmds.extend((indent, mode, child) for child in reversed(doc.docs))
        elif isinstance(doc, Line):
            if mode is Mode.FLAT:
                if doc.flat:
                    yield doc.flat
                column += len(doc.flat)
            else:
                column = max(indent, 0)
                yield SLine(column)
        elif isinstance(doc, HardLine):
            column = max(indent, 0)
            yield SLine(column)
        elif isinstance(doc, Nest):
            cmds.append((indent + doc.indent, mode, doc.doc))
        elif isinstance(doc, Group):
            if mode is Mode.FLAT:
                cmds.append((indent, Mode.FLAT, doc.doc))
                continue

            flat_cmd = (indent, Mode.FLAT, doc.doc)
            if not doc.breaks and fits(flat_cmd, cmds, width, column, counter):
                cmds.append(flat_cmd)
                if debug:
                    layout_log.debug(
                        "group flat at indent=%d column=%d", indent, column
                    )
            else:
                cmds.append((indent, Mode.BREAK, doc.doc))
                if debug:
                    layout_log.debug(
                        "group broken at indent=%d column=%d", indent, column
                    )
        elif isinstance(doc, FlatChoice):
            cmds.append((
                indent,
                mode,
                doc.when_flat if mode is Mode.FLAT else doc.when_broken
            ))
        elif isinstance(doc, AlwaysBreak):
            cmds.append((indent, Mode.BREAK, doc.doc))
        elif isinstance(doc, Contextual):
            evaluated = cast_doc(doc.fn(indent, column, width))
            cmds.append((indent, mode, evaluated))
        else:
            raise TypeError(f'Unexpected doc {repr(doc)}')

    if debug:
        layout_log.debug(
            "layout done: %d steps, %d fits steps",
            counter.steps,
            counter.fits_steps,
        )
