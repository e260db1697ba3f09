"""Index from essay score to the offsets of the lines with that score."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import BinaryIO, Iterator

from enemidx.records import Inscricao, iter_records, read_record_at


class NotaIndex:
    """Groups line offsets by essay score."""

    def __init__(self) -> None:
        self._by_nota: defaultdict[int, deque[int]] = defaultdict(deque)

    def add(self, nota: int, offset: int) -> None:
        self._by_nota[nota].appendleft(offset)

    def offsets(self, nota: int) -> list[int]:
        """Offsets for a score, most recently added first."""
        return list(self._by_nota.get(nota, ()))

    def build(self, file: BinaryIO) -> None:
        for position, inscricao in iter_records(file):
            self.add(inscricao.nota_redacao, position)

    def highest(self) -> int | None:
        """The highest non-negative score indexed, or None."""
        return max(filter(lambda nota: nota > -1, self._by_nota), default=None)

    def records_with_highest(self, file: BinaryIO) -> Iterator[Inscricao]:
        """Yield the records holding the highest score.

        Lines that fail to parse are skipped; an unreadable line raises
        EOFError and ends the iteration.
        """
        best = self.highest()
        if best is None:
            return
        for position in self.offsets(best):
            try:
                inscricao = read_record_at(file, position)
            except ValueError:
                continue
            yield inscricao

    def clear(self) -> None:
        self._by_nota.clear()