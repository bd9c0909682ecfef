from typing import Iterator


def split_segments(text: str, delimiter: str) -> Iterator[str]:
    """
    Yield the non-empty pieces of ``text`` between occurrences of
    ``delimiter``, left to right. Runs of delimiters never produce empty
    pieces, and a delimiter longer than what is left of the input simply
    does not match.
    """
    if not delimiter:
        raise ValueError("empty delimiter")

    width = len(delimiter)
    start = 0
    i = 0
    while i < len(text):
        if text.startswith(delimiter, i):
            if i > start:
                yield text[start:i]
            i += width
            start = i
        else:
            i += 1

    if len(text) > start:
        yield text[start:]
