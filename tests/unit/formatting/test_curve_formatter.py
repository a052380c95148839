"""
Тесты для CurveTableFormatter и TextCurveRenderer.
"""

from pcm_explorer.calculations.curve_evaluator import CurveEvaluator
from pcm_explorer.formatting.curve_formatter import CurveTableFormatter, TextCurveRenderer
from pcm_explorer.models.materials import PropertyDefinition

DEFINITIONS = [
    PropertyDefinition(
        pcm_id="PCM-001", name="Solid specific heat", property_type="cp",
        a=1.0, b=0.0, c=0.0, tmin=2.0, tmax=4.0,
    )
]


class TestCurveTableFormatter:
    """Тесты для CurveTableFormatter."""

    def test_table(self):
        result = CurveEvaluator().evaluate(DEFINITIONS, "PCM-001", "cp")
        text = CurveTableFormatter().format(result)

        assert text.splitlines()[0] == "PCM-001: Solid specific heat"
        assert "T, K" in text
        assert "16" in text

    def test_diagnostic_message(self):
        result = CurveEvaluator().evaluate(DEFINITIONS, "PCM-404", "cp")

        assert CurveTableFormatter().format(result) == result.message

    def test_max_rows(self):
        result = CurveEvaluator().evaluate(DEFINITIONS, "PCM-001", "cp")
        text = CurveTableFormatter(max_rows=2).format(result)

        assert text.endswith("... 1 more point(s)")


class TestTextCurveRenderer:
    """Тесты для TextCurveRenderer."""

    def test_draw(self):
        lines = []
        renderer = TextCurveRenderer(output=lines.append)

        renderer.draw("cp", DEFINITIONS, "PCM-001")
        renderer.draw("cp", DEFINITIONS, None)

        assert len(lines) == 2
        assert "PCM-001: Solid specific heat" in lines[0]
        assert lines[1] == "No PCM selected."
