import pytest

from enemidx.records import (
    Inscricao,
    iter_records,
    parse_csv_line,
    read_record_at,
    strip_line_break,
)

HEADER = ";".join(f"C{i}" for i in range(51))


def make_line(numero, municipio, uf, nota):
    fields = [""] * 51
    fields[0] = numero
    fields[20] = municipio
    fields[22] = uf
    fields[50] = nota
    return ";".join(fields)


def write_csv(tmp_path, lines, newline="\n"):
    path = tmp_path / "data.csv"
    path.write_bytes((newline.join([HEADER, *lines]) + newline).encode("latin-1"))
    return path


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (make_line("210001", "Recife", "PE", "720"), Inscricao("210001", "Recife", "PE", 720)),
        (
            make_line('"210002"', '"Sao Paulo"', '"SP"', '"880"'),
            Inscricao("210002", "Sao Paulo", "SP", 880),
        ),
        (make_line("210004", "Natal", "RN", ""), Inscricao("210004", "Natal", "RN", 0)),
        (make_line("210005", "Natal", "RN", "960.0"), Inscricao("210005", "Natal", "RN", 960)),
        ("210006", Inscricao(numero="210006")),
    ],
)
def test_parse_csv_line(line, expected):
    assert parse_csv_line(line) == expected


def test_parse_unterminated_quote_raises():
    with pytest.raises(ValueError):
        parse_csv_line('"210003;Recife')


@pytest.mark.parametrize(("raw", "clean"), [("abc\r\ndef", "abc"), ("plain", "plain")])
def test_strip_line_break(raw, clean):
    assert strip_line_break(raw) == clean


def test_iter_records_offsets_point_at_lines(tmp_path):
    lines = [make_line("1", "Recife", "PE", "500"), make_line("2", "Natal", "RN", "600")]
    path = write_csv(tmp_path, lines, newline="\r\n")
    with path.open("rb") as file:
        found = list(iter_records(file))
        assert [record.numero for _, record in found] == ["1", "2"]
        assert found[0][0] == len(HEADER) + 2
        for offset, record in found:
            assert read_record_at(file, offset) == record
        list(iter_records(file))
        assert file.tell() == 0


def test_iter_records_skips_bad_lines(tmp_path):
    path = write_csv(tmp_path, ['"broken;x', make_line("7", "Natal", "RN", "100")])
    with path.open("rb") as file:
        assert [record.numero for _, record in iter_records(file)] == ["7"]


def test_read_record_past_end_raises(tmp_path):
    path = write_csv(tmp_path, [make_line("1", "Recife", "PE", "500")])
    with path.open("rb") as file, pytest.raises(EOFError):
        read_record_at(file, path.stat().st_size)