"""Break glob patterns into chunks.

A pattern is a sequence of chunks of three kinds:

* **simple**: literals, ``?`` and classes.  Only the first chunk of a
  pattern can be simple.
* **directory**: a single ``*`` followed by simple content.  The ``*``
  matches zero or more scalars except a path separator.
* **recursive**: two or more ``*`` followed by simple content.  The ``**``
  matches zero or more scalars including path separators.

A chunk ends at the end of the pattern or just before the next ``*`` that
is neither escaped nor inside a class.
"""

from __future__ import annotations

from typing import Iterator

from .charclass import get_class
from .models import ESCAPE, Chunk, ChunkKind


def next_chunk(pattern: str) -> Chunk:
    """Split the next chunk off the front of *pattern*.

    Assumes the pattern is valid.  Lead-in asterisks are dropped from the
    chunk's content; runs of three or more collapse into ``**``.
    """
    start = 0
    kind = ChunkKind.simple
    if pattern.startswith("*"):
        start = 1
        kind = ChunkKind.directory
        if pattern.startswith("*", start):
            kind = ChunkKind.recursive
            while start < len(pattern) and pattern[start] == "*":
                start += 1

    end = start
    while end < len(pattern):
        token = pattern[end]
        if token == "*":
            break
        if token == ESCAPE:
            # keep the escaped scalar in this chunk, even if it's a '*'
            end += 2
        elif token == "[":
            end += len(get_class(pattern[end:])[1])
        else:
            end += 1
    end = min(end, len(pattern))

    return Chunk(kind=kind, content=pattern[start:end], rest=pattern[end:])


def iter_chunks(pattern: str) -> Iterator[Chunk]:
    """Yield every chunk of *pattern* in order."""
    chunk = next_chunk(pattern)
    yield chunk
    while chunk.rest:
        chunk = next_chunk(chunk.rest)
        yield chunk
