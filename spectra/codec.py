"""
Spectra — Record Codec

Decodes raw structured records (parsed JSON objects) into Spectra models and
encodes models back into records. Field names are the wire contract:

    Spectrum:    id, displayName, summary, lutPath, lutDigest?, defaultIntensity,
                 toneCurve?, presets?
    SpectraPack: id, name, description?, version?, updatedAt?, spectra,
                 defaultSpectrumID

Decoding checks shape only. Uniqueness and default-existence are checked by
spectra.validation, as a separate step.
"""

import json
import logging

from pydantic import ValidationError

from spectra.models import SpectraError, SpectraPack, Spectrum

logger = logging.getLogger(__name__)


class DecodeError(SpectraError, ValueError):
    """Raised when a record is missing a required field or has the wrong shape.

    Attributes:
        field: Dotted wire path of the offending field (e.g. "spectra.0.lutPath"),
            or None when the whole document is at fault.
        reason: Short description of what was wrong.
    """

    def __init__(self, field: str | None, reason: str):
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"{field}: {reason}")
        else:
            super().__init__(reason)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "DecodeError":
        """Build a DecodeError from the first pydantic error."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        if first["type"] == "missing":
            reason = "missing required field"
        else:
            reason = first["msg"]
        return cls(field, reason)


def _decode(model, record, what: str):
    if not isinstance(record, dict):
        raise DecodeError(None, f"{what} record must be an object, got {type(record).__name__}")
    try:
        return model.model_validate(record, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError.from_validation_error(e) from e


def decode_spectrum(record: dict) -> Spectrum:
    """Decode one Spectrum record.

    Intensities are clamped. Missing optional fields become None.

    Raises:
        DecodeError: If a required field is missing or malformed.
    """
    return _decode(Spectrum, record, "Spectrum")


def decode_pack(record: dict) -> SpectraPack:
    """Decode a SpectraPack record, including every Spectrum in it.

    version defaults to 1 and is raised to at least 1. An unparsable
    updatedAt string becomes None (logged, not raised).

    Raises:
        DecodeError: If a required field is missing or any Spectrum fails to decode.
    """
    pack = _decode(SpectraPack, record, "SpectraPack")
    logger.debug("Decoded pack %r (%d spectra)", pack.id, len(pack.spectra))
    return pack


def loads(data: bytes | str) -> SpectraPack:
    """Parse JSON text and decode it as a SpectraPack."""
    try:
        record = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise DecodeError(None, f"Invalid JSON: {e}") from e
    return decode_pack(record)


def encode_spectrum(spectrum: Spectrum) -> dict:
    """Encode a Spectrum to its wire record. Absent optionals are omitted."""
    return spectrum.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_pack(pack: SpectraPack) -> dict:
    """Encode a SpectraPack to its wire record. Absent optionals are omitted."""
    return pack.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps(pack: SpectraPack, indent: int | None = 2) -> str:
    """Encode a SpectraPack as JSON text."""
    return json.dumps(encode_pack(pack), indent=indent)
