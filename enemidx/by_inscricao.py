"""Index from registration number to the byte offset of its line."""

from __future__ import annotations

from typing import BinaryIO

from enemidx.records import ENCODING, Inscricao, read_record_at

_KEY_WIDTH = 19


class InscricaoIndex:
    """Maps a registration number to the offset of the line that holds it."""

    def __init__(self) -> None:
        self._offsets: dict[str, int] = {}

    def add(self, numero: str, offset: int) -> None:
        """Record an offset; a later entry for the same number wins."""
        self._offsets[numero] = offset

    def offset_of(self, numero: str) -> int | None:
        """Return the offset for a number, or None if it is not indexed."""
        return self._offsets.get(numero)

    def build(self, file: BinaryIO) -> None:
        """Index the raw text before the first ';' of every data line."""
        file.readline()
        while True:
            offset = file.tell()
            raw = file.readline()
            if not raw:
                break
            key, separator, _ = raw.decode(ENCODING).partition(";")
            if not separator:
                continue
            self.add(key[:_KEY_WIDTH], offset)
        file.seek(0)

    def search(self, file: BinaryIO, numero: str) -> Inscricao | None:
        """Return the record with this number, or None.

        Raises EOFError if the indexed line cannot be read and ValueError
        if it cannot be parsed.
        """
        offset = self.offset_of(numero)
        if offset is None:
            return None
        record = read_record_at(file, offset)
        return record if record.numero == numero else None

    def clear(self) -> None:
        self._offsets.clear()

    def __len__(self) -> int:
        return len(self._offsets)