"""SentenceSource: splits a corpus file into independent sentence blocks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

__all__ = ["SentenceSource", "split_sentences"]

logger = logging.getLogger(__name__)

# Closes the current block even without a following blank line.
_BLOCK_END = "</s>"


def split_sentences(lines: Iterable[str]) -> list[str]:
    """Group raw lines into sentence blocks.

    Blocks are separated by one or more blank lines; a ``</s>`` line also
    ends the current block (it stays in the block, where TreeBuilder skips
    it as a terminator).  Line terminators, including a stray ``\\r`` from
    CRLF files, are removed.  Each block is returned with its lines joined
    by ``"\\n"``.
    """
    blocks: list[str] = []
    current: list[str] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            if current:
                blocks.append("\n".join(current))
                current = []
            continue
        current.append(line)
        if line.strip() == _BLOCK_END:
            blocks.append("\n".join(current))
            current = []

    if current:
        blocks.append("\n".join(current))
    return blocks


class SentenceSource:
    """Reads a corpus file and yields its sentence blocks in file order.

    Args:
        path: Corpus file path.
        encoding: Text encoding of the file.  Floresta releases exist in both
            UTF-8 and ISO-8859-1.

    Raises:
        OSError: From ``read`` when the file cannot be opened or read.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def read(self) -> list[str]:
        with self.path.open(encoding=self.encoding, newline="") as handle:
            sentences = split_sentences(handle)
        logger.info(f"Read {len(sentences)} sentence blocks from {self.path}")
        return sentences
