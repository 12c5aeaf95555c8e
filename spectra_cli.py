#!/usr/bin/env python3
"""
Spectra — Pack Tool
===================
Inspect and check Spectra pack files (JSON) from the command line.

Usage:
    python spectra_cli.py validate packs/core.spectra.json packs/extra.spectra.json
    python spectra_cli.py list packs/core.spectra.json
    python spectra_cli.py show packs/core.spectra.json classicAerochrome
    python spectra_cli.py sample > core.spectra.json
"""

import argparse
import logging
import sys
from pathlib import Path

from spectra import SpectraError, __version__, dumps, loads
from spectra.models import format_timestamp
from spectra.samples import sample_core


def _load(path: str):
    return loads(Path(path).read_bytes())


def cmd_validate(args):
    """Decode and validate each pack file. Exit 1 if any fails."""
    failed = 0
    for path in args.files:
        try:
            pack = _load(path).validate()
        except (SpectraError, OSError) as e:
            failed += 1
            print(f"  ✗ {path}: {e}")
            continue
        print(f"  ✓ {path}: {pack.name} v{pack.version} ({len(pack.spectra)} spectra)")

    ok = len(args.files) - failed
    print(f"\n  Total: {ok} valid, {failed} invalid out of {len(args.files)}")
    return 1 if failed else 0


def cmd_list(args):
    """List the Spectra in a pack, marking the default."""
    pack = _load(args.file).validate()
    print(f"\n  {pack.name.upper()} ({pack.id}, v{pack.version})")
    if pack.description:
        print(f"  {pack.description}")
    if pack.updated_at:
        print(f"  Updated: {format_timestamp(pack.updated_at)}")
    print(f"  {'—' * 60}")
    for spectrum in pack.spectra:
        marker = "*" if spectrum.id == pack.default_spectrum_id else " "
        print(f"  {marker} {spectrum.id:24s} {spectrum.display_name}")
    print("\n  * default. Use 'show <file> <id>' for parameters.\n")
    return 0


def cmd_show(args):
    """Show one Spectrum's parameters and presets."""
    pack = _load(args.file).validate()
    spectrum = pack.spectrum(args.spectrum_id)
    if spectrum is None:
        print(f"Unknown spectrum: {args.spectrum_id}")
        print(f"Available: {', '.join(pack.spectrum_ids)}")
        return 1

    print(f"\n  {spectrum.display_name} ({spectrum.id})")
    print(f"  {spectrum.summary}")
    print(f"  {'—' * 60}")
    print(f"  LUT:       {spectrum.lut_path}")
    digest = spectrum.lut_digest if spectrum.has_usable_digest else "none (verification skipped)"
    print(f"  Digest:    {digest}")
    print(f"  Intensity: {spectrum.default_intensity:.2f}")
    if spectrum.tone_curve:
        tc = spectrum.tone_curve
        print(f"  Tone:      lift={tc.lift} gamma={tc.gamma} gain={tc.gain}")
    if spectrum.presets:
        print(f"\n  PRESETS ({len(spectrum.presets)}):")
        for preset in spectrum.presets:
            print(f"    {preset.id:16s} {preset.name} @ {preset.intensity:.2f}")
    print()
    return 0


def cmd_sample(args):
    """Print the built-in sample pack as JSON."""
    print(dumps(sample_core()))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="spectra",
        description="Spectra — inspect and validate Spectra pack files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    # validate
    p = sub.add_parser("validate", help="Decode and validate pack files")
    p.add_argument("files", nargs="+", help="Pack JSON files")

    # list
    p = sub.add_parser("list", help="List the Spectra in a pack")
    p.add_argument("file", help="Pack JSON file")

    # show
    p = sub.add_parser("show", help="Show one Spectrum")
    p.add_argument("file", help="Pack JSON file")
    p.add_argument("spectrum_id", help="Spectrum ID (e.g. classicAerochrome)")

    # sample
    sub.add_parser("sample", help="Print the built-in sample pack")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "validate": cmd_validate,
        "list": cmd_list,
        "show": cmd_show,
        "sample": cmd_sample,
    }

    if args.command in commands:
        try:
            code = commands[args.command](args)
        except (SpectraError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if code:
            sys.exit(code)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
