"""Tier 2 integration tests: end-to-end parsing of sample header files."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from header_parser import parse_file, parse_file_with_diagnostics
from header_parser.ast_nodes import *
from tests.helpers import count_content_types

SAMPLES_DIR = Path(os.environ.get(
    "HEADER_SAMPLES_DIR", Path(__file__).parent.parent / "samples"))

_HEADER_NODE_TYPES = (VPickup, Setup, HeaderCommand, Annotation)


def _collect_samples():
    """Collect all sample files for parametrize."""
    files = []
    if not SAMPLES_DIR.is_dir():
        return files
    for dirpath, _, filenames in os.walk(SAMPLES_DIR):
        for fn in sorted(filenames):
            files.append(Path(dirpath) / fn)
    return files


_ALL_SAMPLES = _collect_samples()
_SAMPLE_IDS = [
    f.name for f in _ALL_SAMPLES
] if _ALL_SAMPLES else []


@pytest.mark.skipif(not _ALL_SAMPLES, reason="No sample files found")
class TestSampleParsing:
    """Basic parsing assertions for every sample file."""

    @pytest.mark.parametrize("sample_path", _ALL_SAMPLES, ids=_SAMPLE_IDS)
    def test_parses_without_errors(self, sample_path):
        contents, errors = parse_file_with_diagnostics(sample_path)
        assert errors.is_empty(), errors.format(
            sample_path.read_text(encoding='utf-8'), sample_path.name)
        assert contents is not None

    @pytest.mark.parametrize("sample_path", _ALL_SAMPLES, ids=_SAMPLE_IDS)
    def test_has_statements(self, sample_path):
        contents = parse_file(sample_path)
        assert any(isinstance(c, _HEADER_NODE_TYPES) for c in contents)

    @pytest.mark.parametrize("sample_path", _ALL_SAMPLES, ids=_SAMPLE_IDS)
    def test_documented(self, sample_path):
        """Every sample carries a header name and a description."""
        contents = parse_file(sample_path)
        assert isinstance(contents[0], (OuterDocumentation, InnerDocumentation))
        assert any(isinstance(c, OuterDocumentation) for c in contents)
        assert any(isinstance(c, InnerDocumentation) for c in contents)


class TestBundledSamples:
    def _parse(self, name):
        return parse_file(Path(__file__).parent.parent / "samples" / name)

    def test_bonus_items(self):
        counts = count_content_types(self._parse("bonus_items.wotwrh"))
        assert counts["Add"] == 7
        assert counts["Price"] == 2

    def test_timers(self):
        contents = self._parse("timers.wotwrh")
        timers = [c for c in contents if isinstance(c, SetupTimer)]
        assert [t.switch for t in timers] == [UberIdentifier(6, 2), UberIdentifier(6, 4)]
        pickups = [c for c in contents if isinstance(c, VPickup)]
        assert [p.skip_validation for p in pickups] == [True, False, False]

    def test_spawn_items(self):
        contents = self._parse("spawn_items.wotwrh")
        pickups = [c for c in contents if isinstance(c, VPickup)]
        assert pickups[0].item == SpiritLight(Parameter("sl"), False)
        assert [p.ignore for p in pickups].count(True) == 1
        assert contents[-1] == Include("bonus_items")


class TestFixtures:
    def test_sample_files_fixture(self, sample_files):
        assert all(f.suffix == ".wotwrh" for f in sample_files)

    def test_parse_snippet_fixtures(self, parse_snippet, parse_snippet_with_diagnostics):
        assert parse_snippet("!!endif") == [EndIf()]
        contents, errors = parse_snippet_with_diagnostics("@")
        assert contents is None and len(errors) == 1
