"""In-memory indexes and an interactive menu over ENEM microdata CSV files."""

__version__ = "0.1.0"
__all__ = ["records", "by_inscricao", "by_nota", "by_municipio", "cli"]