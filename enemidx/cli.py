"""Interactive menu over the indexed ENEM microdata file."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from enemidx.by_inscricao import InscricaoIndex
from enemidx.by_municipio import MunicipioIndex, make_key
from enemidx.by_nota import NotaIndex
from enemidx.records import iter_records

DEFAULT_PATH = "MICRODADOS_ENEM_2023.csv"

_WHITESPACE = " \t\n\v\f\r"
_INTEGER = re.compile(r"[+-]?[0-9]+")

_MENU = (
    "\n--- MENU ---\n"
    "1 - Buscar inscricao por numero\n"
    "2 - Listar inscricoes com maior nota na redacao\n"
    "3 - Listar inscricoes por municipio e UF\n"
    "0 - Sair\n"
    "Escolha uma opcao: "
)


@dataclass
class Indexes:
    """The three indexes built over one data file."""

    inscricao: InscricaoIndex = field(default_factory=InscricaoIndex)
    nota: NotaIndex = field(default_factory=NotaIndex)
    municipio: MunicipioIndex = field(default_factory=MunicipioIndex)


def build_indexes(file: BinaryIO) -> Indexes:
    """Fill all three indexes in a single pass over the file."""
    indexes = Indexes()
    for offset, record in iter_records(file):
        indexes.inscricao.add(record.numero, offset)
        indexes.nota.add(record.nota_redacao, offset)
        indexes.municipio.add(record.municipio, record.uf, offset)
    return indexes


class _Scanner:
    """Whitespace-delimited reading of user input, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip(_WHITESPACE)
            if self._buffer:
                return
            chunk = self._stream.readline()
            if not chunk:
                raise EOFError("end of input")
            self._buffer = chunk

    def _take(self, stop: str, width: int | None) -> str:
        limit = len(self._buffer) if width is None else min(width, len(self._buffer))
        count = 0
        while count < limit and self._buffer[count] not in stop:
            count += 1
        text, self._buffer = self._buffer[:count], self._buffer[count:]
        return text

    def integer(self) -> int | None:
        """Read an integer; an unreadable word is consumed and gives None."""
        self._skip_space()
        match = _INTEGER.match(self._buffer)
        if match is None:
            self._take(_WHITESPACE, None)
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def word(self, width: int) -> str:
        self._skip_space()
        return self._take(_WHITESPACE, width)

    def line(self, width: int) -> str:
        self._skip_space()
        return self._take("\n", width)


def _ask(stdout: TextIO, prompt: str) -> None:
    stdout.write(prompt)
    stdout.flush()


def _show_inscricao(file: BinaryIO, indexes: Indexes, numero: str, stdout: TextIO) -> None:
    try:
        record = indexes.inscricao.search(file, numero)
    except EOFError:
        stdout.write("Erro ao ler o arquivo.\n")
        return
    except ValueError:
        stdout.write("Erro ao analisar linha.\n")
        return
    if record is None:
        stdout.write("Inscricao nao encontrada.\n")
        return
    stdout.write(
        "\nInscricao encontrada:\n"
        f"Numero: {record.numero}\n"
        f"Municipio: {record.municipio}\n"
        f"UF: {record.uf}\n"
        f"Nota Redacao: {record.nota_redacao}\n"
    )


def _show_highest(file: BinaryIO, indexes: Indexes, stdout: TextIO) -> None:
    best = indexes.nota.highest()
    if best is None:
        stdout.write("Nao foi possivel encontrar a maior nota.\n")
        return
    stdout.write(f"Maior nota de redacao: {best}\n")
    if not indexes.nota.offsets(best):
        stdout.write("Nenhuma inscricao com a maior nota encontrada.\n")
        return
    count = 0
    try:
        for record in indexes.nota.records_with_highest(file):
            stdout.write(
                f"Inscricao: {record.numero}, Municipio: {record.municipio}, "
                f"UF: {record.uf}, Nota: {record.nota_redacao}\n"
            )
            count += 1
    except EOFError:
        stdout.write("Erro ao ler o arquivo.\n")
        return
    stdout.write(f"\nTotal de inscricoes com nota {best}: {count}\n")


def _show_municipio(
    file: BinaryIO, indexes: Indexes, municipio: str, uf: str, stdout: TextIO
) -> None:
    stdout.write(f"Buscando pela chave: '{make_key(municipio, uf)}'\n")
    if not indexes.municipio.offsets(municipio, uf):
        stdout.write(f"Nenhuma inscricao encontrada para {municipio}/{uf}.\n")
        return
    stdout.write(f"Inscricoes para {municipio}/{uf}:\n")
    for record in indexes.municipio.records(file, municipio, uf):
        stdout.write(f"Inscricao: {record.numero}, Nota Redacao: {record.nota_redacao}\n")


def run_menu(file: BinaryIO, indexes: Indexes, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user chooses 0 or input ends."""
    scanner = _Scanner(stdin)
    try:
        while True:
            _ask(stdout, _MENU)
            option = scanner.integer()
            if option == 1:
                _ask(stdout, "Digite o numero de inscricao: ")
                _show_inscricao(file, indexes, scanner.word(19), stdout)
            elif option == 2:
                _show_highest(file, indexes, stdout)
            elif option == 3:
                _ask(stdout, "Digite o nome do municipio: ")
                municipio = scanner.line(99)
                _ask(stdout, "Digite a UF: ")
                uf = scanner.word(2)
                _show_municipio(file, indexes, municipio, uf, stdout)
            elif option == 0:
                stdout.write("Saindo...\n")
                return
            else:
                stdout.write("Opcao invalida! Tente novamente.\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="enemidx", description="Search the ENEM microdata file."
    )
    parser.add_argument("csv", nargs="?", default=DEFAULT_PATH, help="data file")
    args = parser.parse_args(argv)

    try:
        file = open(args.csv, "rb")
    except OSError:
        print("Erro ao abrir o arquivo.")
        return 1

    with file:
        print(
            "Carregando os Microdados enem 2023... (aproximadamente 30-35segundos"
            " - dependendo da sua configuracao!)...",
            end="",
            flush=True,
        )
        indexes = build_indexes(file)
        run_menu(file, indexes, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())