"""
Тесты для форматирования сведений о материалах.
"""

from pcm_explorer.formatting.pcm_details_formatter import (
    NO_SELECTION_TITLE,
    PLACEHOLDER,
    PcmDetailsFormatter,
    load_status_message,
    result_options,
)
from pcm_explorer.models.materials import PcmRecord


def make_record(**overrides) -> PcmRecord:
    values = dict(
        id="PCM-001",
        name="Dummy cryo-PCM A",
        latent_heat=180.56,
        melting_point_k=250.0,
        boiling_point_k=310.04,
        flash_point_k=320.0,
        cost=12.5,
        safety_rating="A",
    )
    values.update(overrides)
    return PcmRecord(**values)


class TestPcmDetailsFormatter:
    """Тесты для PcmDetailsFormatter."""

    def test_details(self):
        details = PcmDetailsFormatter.details(make_record())

        assert details.title == "PCM-001 — Dummy cryo-PCM A"
        assert details.melting_point == "250.0 K"
        assert details.boiling_point == "310.0 K"
        assert details.latent_heat == "180.6 kJ/kg"
        assert details.flash_point == "320.0 K"
        assert details.safety_rating == "A"
        assert details.cost == "12.50 (relative units)"

    def test_no_selection(self):
        """Тест: без выбора все значения заменяются '–'."""
        details = PcmDetailsFormatter.details(None)

        assert details.title == NO_SELECTION_TITLE
        assert all(value == PLACEHOLDER for _, value in details.rows())

    def test_missing_values(self):
        details = PcmDetailsFormatter.details(make_record(flash_point_k=None, cost=None, safety_rating=""))

        assert details.flash_point == PLACEHOLDER
        assert details.cost == PLACEHOLDER
        assert details.safety_rating == PLACEHOLDER

    def test_format_details_text(self):
        text = PcmDetailsFormatter().format_details(make_record())

        assert text.startswith("PCM-001 — Dummy cryo-PCM A")
        assert "Melting point" in text
        assert "250.0 K" in text

    def test_format_results_marks_selection(self):
        records = [make_record(), make_record(id="PCM-002", name="B")]
        text = PcmDetailsFormatter.format_results(records, selected_id="PCM-002")

        selected_line = next(line for line in text.splitlines() if "PCM-002" in line)
        assert selected_line.lstrip().startswith("*")

    def test_format_empty_results(self):
        assert PcmDetailsFormatter.format_results([]) == "No results"


def test_result_options():
    records = [make_record(), make_record(id="PCM-002", name="B")]

    assert result_options(records) == [
        ("PCM-001", "PCM-001 — Dummy cryo-PCM A"),
        ("PCM-002", "PCM-002 — B"),
    ]
    assert result_options([]) == [("", "No results")]


def test_load_status_message():
    assert load_status_message(3, "rawdata/pcms.csv") == "Showing all PCMs (no filters applied yet)."
    assert load_status_message(0, "rawdata/pcms.csv") == "No PCM data loaded. Check rawdata/pcms.csv."
