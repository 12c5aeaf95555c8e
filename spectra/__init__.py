"""
Spectra — named infrared looks bundled into validated packs.

    from spectra import loads

    pack = loads(path.read_bytes()).validate()
    look = pack.default_spectrum
"""

from spectra.codec import (
    DecodeError,
    decode_pack,
    decode_spectrum,
    dumps,
    encode_pack,
    encode_spectrum,
    loads,
)
from spectra.models import (
    SpectraError,
    SpectraPack,
    Spectrum,
    SpectrumPreset,
    ToneCurveParams,
    clamp_intensity,
)
from spectra.validation import (
    DuplicateSpectrumIDsError,
    EmptySpectraError,
    MissingDefaultSpectrumError,
    PackValidationError,
    validate,
)

__version__ = "0.1.0"
