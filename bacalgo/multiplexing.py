"""Wait for input on a file descriptor with a timeout and echo what arrives."""

from __future__ import annotations

import argparse
import codecs
import os
import selectors
import sys
from collections.abc import Iterator
from contextlib import closing
from typing import BinaryIO, TextIO

QUIT_WORD = "FLUGGAENKDECHIOEBOLSEN"
DEFAULT_TIMEOUT = 5.0
CHUNK_SIZE = 1024

_EXIT_MESSAGE = "Exit code has been received\n"


def _is_quit(text: str) -> bool:
    # Only the first character is compared with the quit word.
    return text[:1] == QUIT_WORD[:1]


def _new_decoder() -> codecs.IncrementalDecoder:
    return codecs.getincrementaldecoder("utf-8")(errors="replace")


def _split_complete(buffer: str) -> tuple[list[str], str]:
    words = buffer.split()
    if words and not buffer[-1].isspace():
        return words[:-1], words[-1]
    return words, ""


def _words(fd: int, output: TextIO, timeout: float) -> Iterator[str]:
    """Yield whitespace-separated words from ``fd``, reporting each timeout."""
    decoder = _new_decoder()
    buffer = ""
    with selectors.DefaultSelector() as selector:
        selector.register(fd, selectors.EVENT_READ)
        while True:
            if not selector.select(timeout):
                output.write("TIMEOUT\n")
                continue
            data = os.read(fd, CHUNK_SIZE)
            if not data:
                yield from (buffer + decoder.decode(b"", final=True)).split()
                return
            complete, buffer = _split_complete(buffer + decoder.decode(data))
            yield from complete


def read_chunks_until_quit(
    stream: BinaryIO, output: TextIO, timeout: float = DEFAULT_TIMEOUT
) -> bool:
    """Echo raw chunks from ``stream`` until the quit signal or end of input.

    A chunk whose first character is the quit word's first character stops the
    loop. Returns True when stopped by the quit signal, False at end of input.
    """
    fd = stream.fileno()
    decoder = _new_decoder()
    with selectors.DefaultSelector() as selector:
        selector.register(fd, selectors.EVENT_READ)
        while True:
            if not selector.select(timeout):
                output.write("TIMEOUT\n")
                continue
            output.write(f"Handling file descriptor: {fd}\n")
            data = os.read(fd, CHUNK_SIZE)
            if not data:
                return False
            text = decoder.decode(data)
            if _is_quit(text):
                output.write(_EXIT_MESSAGE)
                return True
            output.write(text)


def read_words_until_quit(
    stream: BinaryIO, output: TextIO, timeout: float = DEFAULT_TIMEOUT
) -> bool:
    """Echo words from ``stream`` one by one until the quit signal or end of input.

    A word starting with the quit word's first character stops the loop.
    Returns True when stopped by the quit signal, False at end of input.
    """
    with closing(_words(stream.fileno(), output, timeout)) as words:
        for word in words:
            if _is_quit(word):
                output.write(_EXIT_MESSAGE)
                return True
            output.write(f"Data is ready\n{word}\n")
    return False


def read_once(
    stream: BinaryIO, output: TextIO, timeout: float = DEFAULT_TIMEOUT
) -> str | None:
    """Wait once for ``stream`` to be readable and echo its first word.

    Returns the word (empty at end of input), or None when the wait timed out.
    """
    fd = stream.fileno()
    with selectors.DefaultSelector() as selector:
        selector.register(fd, selectors.EVENT_READ)
        ready = bool(selector.select(timeout))
    if not ready:
        output.write("TIMEOUT\n")
        return None
    output.write("Data is ready\n")
    output.write("FD_ISSET status: 1\n")
    with closing(_words(fd, output, timeout)) as words:
        word = next(words, "")
    output.write(f"{word}\n")
    return word


_MODES = {
    "chunks": read_chunks_until_quit,
    "words": read_words_until_quit,
    "once": read_once,
}


def main(argv: list[str] | None = None) -> int:
    """Watch standard input in the chosen mode and echo it to standard output."""
    parser = argparse.ArgumentParser(description="Wait for input on standard input.")
    parser.add_argument("mode", nargs="?", choices=sorted(_MODES), default="chunks")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="seconds")
    args = parser.parse_args(argv)
    _MODES[args.mode](sys.stdin, sys.stdout, args.timeout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())