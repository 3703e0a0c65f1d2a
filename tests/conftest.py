"""Shared fixtures for the beam check tests."""

import pytest

from beam_check.core import CantileverBeamSolver, SimplySupportedBeamSolver
from beam_check.models import DesignConstants
from beam_check.sections import SectionPropertyTable, clear_section_cache


@pytest.fixture(scope="module")
def table():
    clear_section_cache()
    return SectionPropertyTable.default()


@pytest.fixture(scope="module")
def simply_supported(table):
    return SimplySupportedBeamSolver(table)


@pytest.fixture(scope="module")
def cantilever(table):
    return CantileverBeamSolver(table)


@pytest.fixture
def exact_table():
    """Sections sized so that unit E gives a deflection of exactly 1 mm.

    Simply supported: P=48 N, L=250 mm -> δ = 48·250³ / (48·1·15625000) = 1
    Cantilever:       P=3 N,  L=a=250 mm -> δ = 3·250²·500 / (6·1·15625000) = 1
    """
    return SectionPropertyTable({
        "test_section": {
            "exact": {"I": 15625000, "Z": 1000},
            "soft": {"I": 15624999, "Z": 1000},
        }
    })


@pytest.fixture
def unit_modulus():
    return DesignConstants(youngs_modulus=1)
