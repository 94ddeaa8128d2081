def intersperse(x, ys):
    it = iter(ys)

    try:
        y = next(it)
    except StopIteration:
        return

    yield y

    for y in it:
        yield x
        yield y


def mark_last(iterable):
    """Yields ``(is_last, item)`` pairs."""
    it = iter(iterable)

    try:
        prev = next(it)
    except StopIteration:
        return

    for item in it:
        yield False, prev
        prev = item

    yield True, prev
