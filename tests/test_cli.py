"""
Spectra — CLI Tests
Tests for the validate, list, show and sample commands.

Run with: pytest tests/test_cli.py -v
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from conftest import make_pack_record, make_spectrum_record
from spectra.codec import loads
from spectra_cli import main


@pytest.fixture
def good_pack(tmp_path, pack_record):
    path = tmp_path / "core.spectra.json"
    path.write_text(json.dumps(pack_record))
    return str(path)


@pytest.fixture
def bad_pack(tmp_path):
    """A pack whose default points nowhere."""
    path = tmp_path / "broken.spectra.json"
    path.write_text(json.dumps(make_pack_record(default="ghost", spectra=[make_spectrum_record("a")])))
    return str(path)


class TestValidateCommand:

    def test_all_valid(self, good_pack, capsys):
        """A valid pack reports OK and exits normally."""
        main(["validate", good_pack])
        out = capsys.readouterr().out
        assert "✓" in out
        assert "AeroXlone Core v1" in out
        assert "1 valid, 0 invalid" in out

    def test_mixed(self, good_pack, bad_pack, capsys):
        """Any invalid pack makes the command exit 1."""
        with pytest.raises(SystemExit) as exc:
            main(["validate", good_pack, bad_pack])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "'ghost' does not exist" in out
        assert "1 valid, 1 invalid" in out

    def test_missing_file_reported(self, tmp_path, capsys):
        """An unreadable file counts as invalid, not a crash."""
        with pytest.raises(SystemExit):
            main(["validate", str(tmp_path / "nope.json")])
        assert "0 valid, 1 invalid" in capsys.readouterr().out


class TestListAndShow:

    def test_list_marks_default(self, good_pack, capsys):
        """list shows each spectrum and stars the default."""
        main(["list", good_pack])
        out = capsys.readouterr().out
        assert "AEROXLONE CORE" in out
        assert "* classicAerochrome" in out

    def test_list_updated_in_wire_form(self, tmp_path, pack_record, capsys):
        """list prints updatedAt the way it is written to pack files."""
        pack_record["updatedAt"] = "2025-01-31T12:00:00+00:00"
        path = tmp_path / "dated.spectra.json"
        path.write_text(json.dumps(pack_record))
        main(["list", str(path)])
        assert "Updated: 2025-01-31T12:00:00Z" in capsys.readouterr().out

    def test_show(self, good_pack, capsys):
        """show prints parameters and presets."""
        main(["show", good_pack, "classicAerochrome"])
        out = capsys.readouterr().out
        assert "Intensity: 0.85" in out
        assert "verification skipped" in out
        assert "punchy" in out

    def test_show_unknown(self, good_pack, capsys):
        """An unknown spectrum ID exits 1 and lists what exists."""
        with pytest.raises(SystemExit) as exc:
            main(["show", good_pack, "nope"])
        assert exc.value.code == 1
        assert "Available: classicAerochrome" in capsys.readouterr().out

    def test_list_invalid_pack(self, bad_pack, capsys):
        """Commands that need a valid pack print the error to stderr."""
        with pytest.raises(SystemExit) as exc:
            main(["list", bad_pack])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestSampleCommand:

    def test_sample_is_valid_pack(self, capsys):
        """sample prints JSON that decodes and validates."""
        main(["sample"])
        pack = loads(capsys.readouterr().out).validate()
        assert pack.id == "aeroXloneCore"
