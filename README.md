# enemidx

Interactive lookup tool for the ENEM 2023 microdata file. The file is
semicolon-separated and named `MICRODADOS_ENEM_2023.csv` by default.

At startup the whole file is scanned once. Three in-memory indexes are built.
Each one maps a key to the byte offsets of the matching lines:

- by registration number (column 0, `NU_INSCRICAO`),
- by essay grade (column 50, `NU_NOTA_REDACAO`),
- by test city and state (columns 20 and 22, `NO_MUNICIPIO_PROVA` / `SG_UF_PROVA`).

Queries then seek straight to the matching lines. They do not rescan the file.
Lines are decoded as Latin-1. The first line is treated as a header and is
skipped. Lines with an unterminated quoted field are left out of the indexes.

## Installation

```
pip install .
```

## Usage

```
enemidx [CSV]
```

`CSV` is the path of the data file. It defaults to `MICRODADOS_ENEM_2023.csv`
in the current directory. If the file cannot be opened, the command prints
`Erro ao abrir o arquivo.` and exits with status 1.

After loading, the command shows this menu:

```
--- MENU ---
1 - Buscar inscricao por numero
2 - Listar inscricoes com maior nota na redacao
3 - Listar inscricoes por municipio e UF
0 - Sair
```

- **1** asks for a registration number, read as one word of at most 19 characters. It prints the number, the city, the state and the essay grade for that registration. If there is no match it prints `Inscricao nao encontrada.`
- **2** prints the highest essay grade. It then prints every registration that has that grade, followed by a count.
- **3** asks for a city name, read as the rest of the line up to 99 characters. It then asks for a state, read as up to two characters. It lists the registration numbers and essay grades for that city. Leading and trailing spaces in the city and state are ignored.
- **0** exits.

Any other input prints `Opcao invalida! Tente novamente.` The menu also ends
when input runs out.

## Library use

```python
from enemidx.cli import build_indexes

with open("MICRODADOS_ENEM_2023.csv", "rb") as f:
    indexes = build_indexes(f)
    record = indexes.inscricao.search(f, "210000000001")
    best = indexes.nota.highest()
    top = list(indexes.nota.records_with_highest(f))
    city = list(indexes.municipio.records(f, "SAO PAULO", "SP"))
```

The file must be opened in binary mode, because the indexes store byte offsets.
`build_indexes` returns an `Indexes` object. Its attributes `inscricao`, `nota`
and `municipio` hold the three indexes.

- `enemidx.by_inscricao.InscricaoIndex` has `add`, `offset_of`, `build`, `search` (which returns an `Inscricao` or `None`), `clear` and `len()`.
- `enemidx.by_nota.NotaIndex` has `add`, `offsets`, `build`, `highest`, `records_with_highest` and `clear`.
- `enemidx.by_municipio.MunicipioIndex` has `add`, `offsets`, `build`, `records` and `clear`. `enemidx.by_municipio.make_key` builds the trimmed `municipio/UF` key.
- `enemidx.records` provides the `Inscricao` dataclass (`numero`, `municipio`, `uf`, `nota_redacao`). It also provides `parse_csv_line`, `strip_line_break`, `iter_records` and `read_record_at`.

`enemidx.cli.run_menu(file, indexes, stdin, stdout)` runs the menu against any
pair of text streams.

## Limitations

The indexes live only in memory and are rebuilt from the file on every start.
Nothing is saved to disk.

## Tests

```
pip install .[test]
pytest
```