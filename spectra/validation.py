"""
Spectra — Pack Validation

Checks the invariants a decoded pack must hold before it is used:
  1. at least one Spectrum
  2. Spectrum IDs are unique
  3. defaultSpectrumID names one of them

Checks run in that order and the first failure is raised. Validation
never changes the pack.
"""

import logging

from spectra.models import SpectraError, SpectraPack

logger = logging.getLogger(__name__)


class PackValidationError(SpectraError):
    """Raised when a decoded pack breaks one of its invariants."""
    pass


class EmptySpectraError(PackValidationError):
    def __init__(self):
        super().__init__("The pack contains no Spectra.")


class DuplicateSpectrumIDsError(PackValidationError):
    """Raised with the sorted list of IDs that appear more than once."""

    def __init__(self, ids: list[str]):
        self.ids = list(ids)
        super().__init__(f"Duplicate Spectrum IDs found: {', '.join(self.ids)}.")


class MissingDefaultSpectrumError(PackValidationError):
    def __init__(self, spectrum_id: str):
        self.spectrum_id = spectrum_id
        super().__init__(
            f"The default Spectrum ID '{spectrum_id}' does not exist in this pack."
        )


def find_duplicate_ids(ids: list[str]) -> list[str]:
    """Return every ID that appears more than once, sorted, each listed once."""
    seen = set()
    dupes = set()
    for spectrum_id in ids:
        if spectrum_id in seen:
            dupes.add(spectrum_id)
        seen.add(spectrum_id)
    return sorted(dupes)


def validate(pack: SpectraPack) -> SpectraPack:
    """Validate a decoded pack.

    Args:
        pack: A pack from decode_pack() or built directly.

    Returns:
        The same pack, unchanged.

    Raises:
        EmptySpectraError: If the pack has no Spectra.
        DuplicateSpectrumIDsError: If any Spectrum ID is repeated.
        MissingDefaultSpectrumError: If defaultSpectrumID matches no Spectrum.
    """
    if not pack.spectra:
        raise EmptySpectraError()

    ids = pack.spectrum_ids
    if len(set(ids)) != len(ids):
        raise DuplicateSpectrumIDsError(find_duplicate_ids(ids))

    if pack.default_spectrum is None:
        raise MissingDefaultSpectrumError(pack.default_spectrum_id)

    logger.debug("Pack %r is valid", pack.id)
    return pack
