"""
Spectra — Data Model

Pydantic models for Spectra packs: named infrared/Aerochrome-style looks
("Spectra") bundled with metadata and a default selection.

Python attribute names are snake_case. The wire names are lowerCamelCase
(e.g. "displayName", "defaultSpectrumID") and are bound as aliases, so both
spellings work when constructing models in code. Decoding raw records goes
through spectra.codec, which accepts the wire names only.

All models are frozen. "Updating" a pack means building and validating a new one.
"""

from __future__ import annotations

import hashlib
import logging
import re
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field, field_serializer, field_validator

logger = logging.getLogger(__name__)

# --- Configurable Limits ---
INTENSITY_MIN = 0.40           # Lowest accepted intensity
INTENSITY_MAX = 1.00           # Highest accepted intensity
DIGEST_SENTINEL = "TBD"        # lutDigest placeholder meaning "no digest yet"
MIN_PACK_VERSION = 1           # Versions below this are raised to it
TONE_CURVE_RANGE = (0.0, 2.0)  # Nominal lift/gamma/gain range (not enforced)

# YYYY-MM-DDTHH:MM:SS followed by Z or a numeric offset. No fractional seconds.
_TIMESTAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?P<tz>Z|[+-]\d{2}:?\d{2})"
)

_MODEL_CONFIG = {
    "frozen": True,
    "validate_by_name": True,
    "validate_by_alias": True,
}


class SpectraError(Exception):
    """Base class for every error raised by the spectra package."""
    pass


def clamp_intensity(value: float) -> float:
    """Clamp an intensity into the accepted band (0.40...1.00).

    Used for Spectrum.default_intensity and SpectrumPreset.intensity.
    Out-of-range input is normalized silently, never rejected.
    """
    return min(INTENSITY_MAX, max(INTENSITY_MIN, value))


def parse_timestamp(text: str) -> datetime | None:
    """Parse a strict ISO-8601 internet date-time, or return None.

    Accepts "2025-01-31T12:00:00Z" and "2025-01-31T12:00:00+02:00"
    (or "+0200"). Anything else, including fractional seconds, a missing
    offset, or an impossible calendar date, yields None.
    """
    match = _TIMESTAMP_RE.fullmatch(text)
    if not match:
        return None

    tz = match.group("tz")
    if tz == "Z":
        text = text[:-1] + "+00:00"
    elif ":" not in tz:
        text = text[:-2] + ":" + text[-2:]

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def require_number(value, field: str):
    """Reject JSON booleans and strings for numeric fields; pass the rest through."""
    if isinstance(value, (bool, str)):
        raise ValueError(f"{field} must be a number")
    return value


def format_timestamp(value: datetime) -> str:
    """Format a datetime in the same strict form parse_timestamp accepts."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

class ToneCurveParams(BaseModel):
    """Tone curve parameters. 1.0 is neutral for all three.

    Typical range is 0.0...2.0. The range is a convention only; values
    outside it are kept as given.
    """
    lift: float = Field(default=1.0, description="Shadow lift.")
    gamma: float = Field(default=1.0, description="Midtone gamma.")
    gain: float = Field(default=1.0, description="Highlight gain.")

    model_config = _MODEL_CONFIG

    @field_validator("lift", "gamma", "gain", mode="before")
    @classmethod
    def _numeric(cls, value, info):
        return require_number(value, info.field_name)

    @property
    def is_neutral(self) -> bool:
        return self.lift == 1.0 and self.gamma == 1.0 and self.gain == 1.0

    @property
    def in_nominal_range(self) -> bool:
        """True when lift, gamma and gain all sit inside TONE_CURVE_RANGE."""
        low, high = TONE_CURVE_RANGE
        return all(low <= v <= high for v in (self.lift, self.gamma, self.gain))


class SpectrumPreset(BaseModel):
    """A named quick-pick of parameters for a Spectrum."""
    id: str
    name: str
    intensity: float = Field(description="Clamped into 0.40...1.00.")
    tone_curve: ToneCurveParams | None = Field(default=None, alias="toneCurve")

    model_config = _MODEL_CONFIG

    @field_validator("intensity", mode="before")
    @classmethod
    def _numeric_intensity(cls, value):
        return require_number(value, "intensity")

    @field_validator("intensity")
    @classmethod
    def _clamp_intensity(cls, value: float) -> float:
        return clamp_intensity(value)


# ---------------------------------------------------------------------------
# Spectrum
# ---------------------------------------------------------------------------

class Spectrum(BaseModel):
    """One infrared look.

    Identity:
        id: Stable identifier, unique within a pack (the pack checks this).
        display_name / summary: UI strings.

    Resources:
        lut_path: Path of the .cube lookup table, e.g.
            "Spectra/Resources/Packs/LUTs/AeroXloneClassic_33.cube".
            Not checked here.
        lut_digest: Optional SHA-256 hex digest of the LUT. "TBD" means skip.

    Parameters:
        default_intensity: Clamped into 0.40...1.00.
        tone_curve: None means "use pipeline defaults".
        presets: Optional named presets, in file order.
    """
    id: str = Field(min_length=1)
    display_name: str = Field(alias="displayName")
    summary: str
    lut_path: str = Field(alias="lutPath")
    lut_digest: str | None = Field(default=None, alias="lutDigest")
    default_intensity: float = Field(alias="defaultIntensity")
    tone_curve: ToneCurveParams | None = Field(default=None, alias="toneCurve")
    presets: tuple[SpectrumPreset, ...] | None = None

    model_config = _MODEL_CONFIG

    @field_validator("default_intensity", mode="before")
    @classmethod
    def _numeric_default_intensity(cls, value):
        return require_number(value, "defaultIntensity")

    @field_validator("default_intensity")
    @classmethod
    def _clamp_default_intensity(cls, value: float) -> float:
        return clamp_intensity(value)

    @property
    def has_usable_digest(self) -> bool:
        """Whether lut_digest can be used to verify the LUT."""
        if self.lut_digest is None:
            return False
        digest = self.lut_digest.strip()
        if not digest:
            return False
        return digest.upper() != DIGEST_SENTINEL

    def verify_digest(self, payload: bytes) -> bool:
        """Check LUT bytes against lut_digest (SHA-256, hex).

        Returns True without hashing when there is no usable digest,
        since the comparison is skipped in that case.
        """
        if not self.has_usable_digest:
            return True
        actual = hashlib.sha256(payload).hexdigest()
        return actual == self.lut_digest.strip().lower()

    def preset(self, preset_id: str) -> SpectrumPreset | None:
        """Find a preset by ID."""
        for preset in self.presets or ():
            if preset.id == preset_id:
                return preset
        return None


# ---------------------------------------------------------------------------
# SpectraPack
# ---------------------------------------------------------------------------

class SpectraPack(BaseModel):
    """A bundle of Spectra plus metadata, as defined by a JSON pack file.

    Construction never checks cross-field rules. Call validate() (or
    spectra.validation.validate) once after decoding:

        pack = decode_pack(record).validate()
    """
    id: str = Field(description='Stable pack identifier, e.g. "aeroXloneCore".')
    name: str = Field(description='Human-readable name, e.g. "AeroXlone Core".')
    description: str | None = Field(default=None, description="Optional blurb.")
    version: int = Field(default=MIN_PACK_VERSION, description="Content/schema version (>= 1).")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    spectra: tuple[Spectrum, ...]
    default_spectrum_id: str = Field(alias="defaultSpectrumID")

    model_config = _MODEL_CONFIG

    @field_validator("version", mode="before")
    @classmethod
    def _default_version(cls, value):
        if value is None:
            return MIN_PACK_VERSION
        return require_number(value, "version")

    @field_validator("version")
    @classmethod
    def _coerce_version(cls, value: int) -> int:
        return max(MIN_PACK_VERSION, value)

    @field_validator("updated_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value):
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("updatedAt must be a date-time string")
        parsed = parse_timestamp(value)
        if parsed is None:
            logger.warning("Ignoring unparsable updatedAt %r", value)
        return parsed

    @field_validator("updated_at")
    @classmethod
    def _normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        # Whole seconds, always timezone-aware, so the wire form round-trips.
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        elif value.utcoffset() % timedelta(minutes=1):
            # The wire form only carries whole-minute offsets.
            value = value.astimezone(timezone.utc)
        return value.replace(microsecond=0)

    @field_serializer("updated_at", when_used="json")
    def _serialize_timestamp(self, value: datetime | None) -> str | None:
        return format_timestamp(value) if value is not None else None

    # -- Lookup --

    def _index(self) -> dict[str, Spectrum]:
        # Rebuilt per call; with duplicate IDs the last entry wins.
        return {spectrum.id: spectrum for spectrum in self.spectra}

    def spectrum(self, spectrum_id: str) -> Spectrum | None:
        """Find a Spectrum by its ID."""
        return self._index().get(spectrum_id)

    @property
    def default_spectrum(self) -> Spectrum | None:
        """The default Spectrum, or None if default_spectrum_id is unmatched."""
        return self.spectrum(self.default_spectrum_id)

    @property
    def spectrum_ids(self) -> list[str]:
        """Spectrum IDs in pack order (duplicates included)."""
        return [spectrum.id for spectrum in self.spectra]

    # -- Validation --

    def validate(self) -> SpectraPack:
        """Check pack invariants. Returns self so calls can be chained.

        Raises:
            PackValidationError: EmptySpectraError, DuplicateSpectrumIDsError
                or MissingDefaultSpectrumError.
        """
        from spectra.validation import validate
        return validate(self)
