"""
Тесты для PcmCatalog и PropertyModelCatalog.
"""

from pcm_explorer.models.materials import PcmRecord, PropertyDefinition
from pcm_explorer.parsing.tabular_parser import parse_pcm_table, parse_property_table
from pcm_explorer.storage.catalogs import PcmCatalog, PropertyModelCatalog


class TestPcmCatalog:
    """Тесты для PcmCatalog."""

    def test_empty_catalog(self):
        catalog = PcmCatalog()

        assert catalog.is_empty
        assert len(catalog) == 0
        assert catalog.get("PCM-001") is None
        assert catalog.to_dataframe().empty

    def test_lookup_and_order(self, pcm_csv):
        """Тест поиска по id и сохранения порядка."""
        catalog = PcmCatalog(parse_pcm_table(pcm_csv))

        assert len(catalog) == 4
        assert [r.id for r in catalog] == ["PCM-001", "PCM-002", "PCM-003", "PCM-004"]
        assert catalog.get("PCM-002").name == "Dummy cryo-PCM B"

    def test_duplicate_id_last_wins(self):
        """Тест: при дубликатах id поиск возвращает последнюю запись."""
        catalog = PcmCatalog([
            PcmRecord(id="P1", name="first"),
            PcmRecord(id="P2", name="other"),
            PcmRecord(id="P1", name="second"),
        ])

        assert len(catalog) == 3
        assert catalog.get("P1").name == "second"
        assert catalog.ids() == ["P1", "P2"]

    def test_replace_is_wholesale(self, pcm_csv):
        """Тест полной замены содержимого каталога."""
        catalog = PcmCatalog(parse_pcm_table(pcm_csv))
        catalog.replace([PcmRecord(id="X")])

        assert [r.id for r in catalog] == ["X"]
        assert catalog.get("PCM-001") is None

    def test_to_dataframe_uses_source_columns(self, pcm_csv):
        df = PcmCatalog(parse_pcm_table(pcm_csv)).to_dataframe()

        assert len(df) == 4
        assert "meltingPointK" in df.columns
        assert list(df["id"]) == ["PCM-001", "PCM-002", "PCM-003", "PCM-004"]


class TestPropertyModelCatalog:
    """Тесты для PropertyModelCatalog."""

    def test_find_first_match_wins(self):
        """Тест: при дубликатах (pcm_id, property_type) используется первое определение."""
        catalog = PropertyModelCatalog([
            PropertyDefinition(pcm_id="P1", property_type="cp", name="first", a=1, b=0, c=0, tmin=0, tmax=1),
            PropertyDefinition(pcm_id="P1", property_type="cp", name="second", a=2, b=0, c=0, tmin=0, tmax=1),
        ])

        assert catalog.find("P1", "cp").name == "first"
        assert catalog.find("P1", "k") is None

    def test_distinct_values_in_first_seen_order(self, property_csv):
        catalog = PropertyModelCatalog(parse_property_table(property_csv))

        assert catalog.distinct_pcm_ids() == ["PCM-001", "PCM-002", "PCM-003"]
        assert catalog.distinct_property_types() == ["solid-specific-heat", "thermal-conductivity"]

    def test_for_pcm(self, property_csv):
        catalog = PropertyModelCatalog(parse_property_table(property_csv))

        assert [d.property_type for d in catalog.for_pcm("PCM-001")] == [
            "solid-specific-heat",
            "thermal-conductivity",
        ]

    def test_invalid_definitions_are_kept(self, property_csv):
        """Тест: непригодные определения остаются в каталоге и помечаются."""
        catalog = PropertyModelCatalog(parse_property_table(property_csv))

        assert len(catalog) == 4
        invalid = catalog.invalid_definitions()
        assert [d.pcm_id for d in invalid] == ["PCM-003"]
        assert catalog.find("PCM-003", "solid-specific-heat") is invalid[0]

    def test_to_dataframe(self, property_csv):
        df = PropertyModelCatalog(parse_property_table(property_csv)).to_dataframe()

        assert list(df["pcmId"]) == ["PCM-001", "PCM-001", "PCM-002", "PCM-003"]
