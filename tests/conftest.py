"""
Conftest: shared fixtures for all Spectra test modules.

Records are plain dicts in wire form (camelCase), built fresh per test so
tests can mutate them freely.
"""

import copy
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from spectra.samples import CLASSIC_AEROCHROME, SAMPLE_CORE


def make_spectrum_record(spectrum_id="classicAerochrome", **overrides):
    """Minimal valid Spectrum record, with required fields only."""
    record = {
        "id": spectrum_id,
        "displayName": f"{spectrum_id} look",
        "summary": "Test look.",
        "lutPath": f"Spectra/Resources/Packs/LUTs/{spectrum_id}_33.cube",
        "defaultIntensity": 0.75,
    }
    record.update(overrides)
    return record


def make_pack_record(spectra=None, default="classicAerochrome", **overrides):
    """Minimal valid SpectraPack record."""
    if spectra is None:
        spectra = [make_spectrum_record(default)]
    record = {
        "id": "testPack",
        "name": "Test Pack",
        "spectra": spectra,
        "defaultSpectrumID": default,
    }
    record.update(overrides)
    return record


@pytest.fixture
def spectrum_record():
    """A full Spectrum record (all optional fields present)."""
    return copy.deepcopy(CLASSIC_AEROCHROME)


@pytest.fixture
def pack_record():
    """The sample core pack record."""
    return copy.deepcopy(SAMPLE_CORE)
