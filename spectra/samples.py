"""
Spectra — Sample Pack

Minimal development pack for previews and tests, kept as raw wire records
so it exercises the same decode path as a pack file.
"""

from spectra.codec import decode_pack
from spectra.models import SpectraPack

CLASSIC_AEROCHROME = {
    "id": "classicAerochrome",
    "displayName": "Classic Aerochrome",
    "summary": "Foliage to magenta and red, skies deep cyan. The original false-color infrared look.",
    "lutPath": "Spectra/Resources/Packs/LUTs/AeroXloneClassic_33.cube",
    "lutDigest": "TBD",
    "defaultIntensity": 0.85,
    "toneCurve": {"lift": 1.0, "gamma": 1.0, "gain": 1.0},
    "presets": [
        {"id": "subtle", "name": "Subtle", "intensity": 0.55},
        {"id": "classic", "name": "Classic", "intensity": 0.85},
        {
            "id": "punchy",
            "name": "Punchy",
            "intensity": 1.0,
            "toneCurve": {"lift": 0.9, "gamma": 1.1, "gain": 1.2},
        },
    ],
}

SAMPLE_CORE = {
    "id": "aeroXloneCore",
    "name": "AeroXlone Core",
    "description": "Core Spectra for development and previews.",
    "version": 1,
    "spectra": [CLASSIC_AEROCHROME],
    "defaultSpectrumID": "classicAerochrome",
}


def sample_core() -> SpectraPack:
    """Decode and validate the sample core pack."""
    return decode_pack(SAMPLE_CORE).validate()
