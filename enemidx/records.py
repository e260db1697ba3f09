"""Parsing of the semicolon-separated ENEM microdata records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import BinaryIO, Iterator

ENCODING = "latin-1"

FIELD_NUMERO = 0
FIELD_MUNICIPIO = 20
FIELD_UF = 22
FIELD_NOTA_REDACAO = 50

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class Inscricao:
    """The columns of one registration that the indexes care about."""

    numero: str = ""
    municipio: str = ""
    uf: str = ""
    nota_redacao: int = 0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_csv_line(line: str) -> Inscricao:
    """Parse one data line; raise ValueError on an unterminated quoted field."""
    wanted = {FIELD_NUMERO, FIELD_MUNICIPIO, FIELD_UF, FIELD_NOTA_REDACAO}
    fields: dict[int, str] = {}
    position = 0
    start = 0
    length = len(line)
    while start < length:
        if line[start] == '"':
            start += 1
            end = line.find('"', start)
            if end < 0:
                raise ValueError(f"unterminated quoted field {position}")
            step = 2
        else:
            end = line.find(";", start)
            if end < 0:
                end = length
            step = 1
        if position in wanted:
            fields[position] = line[start:end]
        start = end + step
        position += 1

    nota_text = fields.get(FIELD_NOTA_REDACAO, "")
    return Inscricao(
        numero=fields.get(FIELD_NUMERO, ""),
        municipio=fields.get(FIELD_MUNICIPIO, ""),
        uf=fields.get(FIELD_UF, ""),
        nota_redacao=_atoi(nota_text) if nota_text else 0,
    )


def strip_line_break(line: str) -> str:
    """Cut the line at its first carriage return or line feed."""
    for index, char in enumerate(line):
        if char in "\r\n":
            return line[:index]
    return line


def iter_records(file: BinaryIO) -> Iterator[tuple[int, Inscricao]]:
    """Yield (byte offset, record) for every parsable line after the header.

    The file is rewound to its start once iteration ends.
    """
    file.readline()
    try:
        while True:
            offset = file.tell()
            raw = file.readline()
            if not raw:
                return
            try:
                record = parse_csv_line(strip_line_break(raw.decode(ENCODING)))
            except ValueError:
                continue
            yield offset, record
    finally:
        file.seek(0)


def read_record_at(file: BinaryIO, offset: int) -> Inscricao:
    """Read and parse the line that starts at the given byte offset."""
    file.seek(offset)
    raw = file.readline()
    if not raw:
        raise EOFError(f"no line at offset {offset}")
    return parse_csv_line(strip_line_break(raw.decode(ENCODING)))