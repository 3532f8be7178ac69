"""Tests for the output schema builder."""

from procsheet.engine.headers import resolve_columns
from procsheet.engine.schema import build_schema, header_names
from procsheet.grid.models import ColumnMap, DerivedColumn


class TestBuildSchema:
    """Test build_schema."""

    def test_derived_columns_follow_their_anchors(self, full_header_row):
        definitions = build_schema(full_header_row, resolve_columns(full_header_row))

        assert header_names(definitions) == [
            "Número Processo",
            "Dígito",
            "Feito",
            "Other",
            "Localizadores",
            "Localizadores do Gabinete",
            "Inclusão no Localizador",
            "Último Evento",
        ]

    def test_locators_before_process_number(self):
        headers = ["Localizadores", "Número Processo", "Z"]
        names = header_names(build_schema(headers, resolve_columns(headers)))

        assert names == [
            "Localizadores",
            "Localizadores do Gabinete",
            "Número Processo",
            "Dígito",
            "Feito",
            "Z",
        ]

    def test_anchor_positions(self):
        headers = ["A", "Número Processo", "B", "Localizadores", "C"]
        names = header_names(build_schema(headers, resolve_columns(headers)))

        p = names.index("Número Processo")
        q = names.index("Localizadores")
        assert names[p + 1] == "Dígito"
        assert names[p + 2] == "Feito"
        assert names[q + 1] == "Localizadores do Gabinete"

    def test_unresolved_anchors_append(self):
        names = header_names(build_schema(["X"], ColumnMap()))
        assert names == ["X", "Localizadores do Gabinete", "Dígito", "Feito"]

    def test_only_locators_unresolved(self):
        headers = ["Número Processo", "X"]
        names = header_names(build_schema(headers, resolve_columns(headers)))
        assert names == ["Número Processo", "Dígito", "Feito", "X", "Localizadores do Gabinete"]

    def test_definition_count(self, full_header_row):
        definitions = build_schema(full_header_row, resolve_columns(full_header_row))
        assert len(definitions) == len(full_header_row) + 3

    def test_existing_definitions_keep_source_index(self, full_header_row):
        definitions = build_schema(full_header_row, resolve_columns(full_header_row))

        existing = [d for d in definitions if d.is_existing]
        assert [d.index for d in existing] == list(range(len(full_header_row)))
        new = [d.key for d in definitions if not d.is_existing]
        assert new == [DerivedColumn.DIGITO, DerivedColumn.FEITO, DerivedColumn.GABINETE_COUNT]

    def test_header_names_are_stringified(self):
        names = header_names(build_schema([2024, None], ColumnMap()))
        assert names[:2] == ["2024", ""]
