"""Step-by-step calculation text.

The text is rendered verbatim by callers, so these tests pin it exactly.
"""

import pytest

from beam_check.core import SimplySupportedBeamSolver
from beam_check.core.narrative import STEP_TITLES, category_label
from beam_check.models import DesignConstants


SIMPLY_SUPPORTED_STEPS = [
    ("Step 1: Identify Beam Properties",
     "Selected UNIVERSAL BEAM with size 203x133x25"),
    ("Step 2: Calculate Bending Moment",
     "For a simply supported beam with point load at center:\n"
     "M = Force × Length / 4\n"
     "M = 10000 N × 4000 mm / 4\n"
     "M = 10000000.00 N·mm"),
    ("Step 3: Calculate Bending Stress",
     "σ = Moment / Section Modulus\n"
     "σ = 10000000.00 N·mm / Z\n"
     "σ = 43.10 N/mm²"),
    ("Step 4: Calculate Deflection",
     "δ = (Force × Length³) / (48 × Young's Modulus × I)\n"
     "δ = 2.70 mm"),
    ("Step 5: Check Stress Utilization",
     "Using typical yield strength of 275 N/mm² for mild steel:\n"
     "Utilization = (43.10 / 275) × 100%\n"
     "Utilization = 15.67%"),
    ("Step 6: Check Deflection Criteria",
     "Span/Deflection = 4000 / 2.70 = 1480.50\n"
     "Typical limit for serviceability: L/250 = 16.00 mm\n"
     "Deflection is acceptable"),
]


CANTILEVER_STEPS = [
    ("Step 1: Identify Beam Properties",
     "Selected UNIVERSAL BEAM with size 203x133x25"),
    ("Step 2: Calculate Bending Moment",
     "For a cantilever beam with point load at distance from fixed end:\n"
     "M = Force × Distance\n"
     "M = 5000 N × 2000 mm\n"
     "M = 10000000.00 N·mm"),
    ("Step 3: Calculate Bending Stress",
     "σ = Moment / Section Modulus\n"
     "σ = 10000000.00 N·mm / Z\n"
     "σ = 43.10 N/mm²"),
    ("Step 4: Calculate Deflection",
     "δ = (Force × Distance² × (3 × Length - Distance)) / (6 × Young's Modulus × I)\n"
     "δ = 2.70 mm"),
    ("Step 5: Check Stress Utilization",
     "Using typical yield strength of 275 N/mm² for mild steel:\n"
     "Utilization = (43.10 / 275) × 100%\n"
     "Utilization = 15.67%"),
    ("Step 6: Check Deflection Criteria",
     "Span/Deflection = 2000 / 2.70 = 740.25\n"
     "Typical limit for serviceability: L/250 = 8.00 mm\n"
     "Deflection is acceptable"),
]


def _pairs(result):
    return [(step.title, step.content) for step in result.steps]


class TestSimplySupportedText:

    def test_full_text(self, simply_supported):
        result = simply_supported.calculate("universal_beam", "203x133x25", 4000, 10000)
        assert _pairs(result) == SIMPLY_SUPPORTED_STEPS

    def test_raw_force_echoed_unrounded(self, simply_supported):
        result = simply_supported.calculate("universal_beam", "203x133x25", 4, 10,
                                            {"length_unit": "m", "force_unit": "kg"})
        assert "M = 98.10000000000001 N × 4000 mm / 4" in result.steps[1].content

    def test_small_force_echoed_in_fixed_notation(self, simply_supported):
        result = simply_supported.calculate("universal_beam", "203x133x25", 4000, 0.00005)
        assert "M = 0.00005 N × 4000 mm / 4" in result.steps[1].content

    def test_display_deflection_keeps_mm_label(self, simply_supported):
        result = simply_supported.calculate("universal_beam", "203x133x25", 4000, 10000,
                                            {"deflection_unit": "cm"})
        assert result.steps[3].content.endswith("δ = 0.27 mm")
        assert result.steps[5].content.startswith("Span/Deflection = 4000 / 0.27 = 1480.50")

    def test_stress_step_uses_base_stress(self, simply_supported):
        result = simply_supported.calculate("universal_beam", "203x133x25", 4000, 10000,
                                            {"stress_unit": "kPa"})
        assert "σ = 43.10 N/mm²" in result.steps[2].content


class TestCantileverText:

    def test_full_text(self, cantilever):
        result = cantilever.calculate("universal_beam", "203x133x25", 2000, 5000, 2000)
        assert _pairs(result) == CANTILEVER_STEPS


class TestStepStructure:

    def test_six_fixed_titles(self, simply_supported, cantilever):
        a = simply_supported.calculate("shs", "100x100x5", 3000, 8000)
        b = cantilever.calculate("shs", "100x100x5", 3000, 8000, 1000)
        assert [s.title for s in a.steps] == list(STEP_TITLES)
        assert [s.title for s in b.steps] == list(STEP_TITLES)

    @pytest.mark.parametrize("category, label", [
        ("universal_beam", "UNIVERSAL BEAM"),
        ("parallel_flange_channel", "PARALLEL FLANGE_CHANNEL"),
        ("chs", "CHS"),
    ])
    def test_category_label_replaces_first_underscore(self, category, label):
        assert category_label(category) == label

    def test_configured_constants_quoted(self, table):
        solver = SimplySupportedBeamSolver(
            table, DesignConstants(yield_stress=355, deflection_limit=360)
        )
        result = solver.calculate("universal_beam", "203x133x25", 3600, 10000)
        assert "yield strength of 355 N/mm²" in result.steps[4].content
        assert "L/360 = 10.00 mm" in result.steps[5].content
