import pytest

from enemidx.by_inscricao import InscricaoIndex
from enemidx.records import Inscricao

HEADER_ROW = ";".join(["col"] * 51)
FIRST_OFFSET = len(HEADER_ROW) + 1


def row(numero, municipio="Recife", uf="PE", nota="700"):
    return f"{numero}{';' * 20}{municipio};;{uf}{';' * 28}{nota}"


@pytest.fixture
def csv_file(tmp_path):
    def create(*rows):
        target = tmp_path / "inscricoes.csv"
        target.write_bytes("".join(f"{text}\n" for text in (HEADER_ROW, *rows)).encode("latin-1"))
        return target

    return create


def indexed(target):
    index = InscricaoIndex()
    with target.open("rb") as handle:
        index.build(handle)
    return index


def test_add_and_lookup():
    index = InscricaoIndex()
    index.add("100", 10)
    index.add("200", 20)
    assert (index.offset_of("100"), index.offset_of("300"), len(index)) == (10, None, 2)


def test_later_entry_wins():
    index = InscricaoIndex()
    for offset in (10, 99):
        index.add("100", offset)
    assert (index.offset_of("100"), len(index)) == (99, 1)


def test_clear_empties_index():
    index = InscricaoIndex()
    index.add("100", 10)
    index.clear()
    assert (len(index), index.offset_of("100")) == (0, None)


def test_build_and_search(csv_file):
    target = csv_file(row("111"), row("222", "Natal", "RN", "800"))
    index = InscricaoIndex()
    with target.open("rb") as handle:
        index.build(handle)
        assert handle.tell() == 0
        assert index.search(handle, "222") == Inscricao("222", "Natal", "RN", 800)
        assert index.search(handle, "333") is None


def test_build_skips_lines_without_separator(csv_file):
    index = indexed(csv_file("nosemicolon", row("111")))
    assert len(index) == 1
    assert index.offset_of("nosemicolon") is None


def test_build_truncates_long_keys(csv_file):
    long_number = "1234567890123456789012"
    index = indexed(csv_file(row(long_number)))
    assert index.offset_of(long_number[:19]) == FIRST_OFFSET


def test_search_with_mismatched_line_returns_none(csv_file):
    target = csv_file(row("111"))
    index = InscricaoIndex()
    index.add("999", FIRST_OFFSET)
    with target.open("rb") as handle:
        assert index.search(handle, "999") is None


def test_search_past_end_raises(csv_file):
    target = csv_file(row("111"))
    index = InscricaoIndex()
    index.add("111", target.stat().st_size)
    with target.open("rb") as handle, pytest.raises(EOFError):
        index.search(handle, "111")