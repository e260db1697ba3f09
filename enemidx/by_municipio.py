"""Index from municipality and state to the offsets of their lines."""

from __future__ import annotations

from typing import BinaryIO, Iterator

from enemidx.records import Inscricao, iter_records, read_record_at


def make_key(municipio: str, uf: str) -> str:
    """Build the 'municipio/UF' key with surrounding spaces trimmed."""
    return f"{municipio.strip(' ')}/{uf.strip(' ')}"


class MunicipioIndex:
    """Groups line offsets by municipality and state."""

    def __init__(self) -> None:
        self._positions: dict[str, list[int]] = {}

    def add(self, municipio: str, uf: str, offset: int) -> None:
        key = make_key(municipio, uf)
        if key in self._positions:
            self._positions[key].append(offset)
        else:
            self._positions[key] = [offset]

    def offsets(self, municipio: str, uf: str) -> list[int]:
        """Offsets for a municipality, most recently added first."""
        return self._positions.get(make_key(municipio, uf), [])[::-1]

    def build(self, file: BinaryIO) -> None:
        for offset, entry in iter_records(file):
            self.add(entry.municipio, entry.uf, offset)

    def records(self, file: BinaryIO, municipio: str, uf: str) -> Iterator[Inscricao]:
        """Yield the records of a municipality, skipping unreadable lines."""
        for offset in self.offsets(municipio, uf):
            try:
                entry = read_record_at(file, offset)
            except (EOFError, ValueError):
                continue
            yield entry

    def clear(self) -> None:
        self._positions = {}