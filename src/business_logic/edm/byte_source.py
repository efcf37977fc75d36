import mmap
import os
from contextlib import contextmanager
from typing import Iterator, Union

Buffer = Union[bytes, bytearray, mmap.mmap]


@contextmanager
def open_log(path: str) -> Iterator[Buffer]:
    """
    Open an EDM file read-only.
    Non-empty files are memory-mapped so the binary body is never read;
    mmap refuses empty files, those yield b"".
    """
    path = os.path.abspath(path)
    with open(path, "rb") as f:
        if os.fstat(f.fileno()).st_size == 0:
            yield b""
            return
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
            yield mm
