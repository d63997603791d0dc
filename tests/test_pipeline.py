"""Tests for gcide_dict.pipeline module."""

import json
from pathlib import Path

import pytest
from lxml import etree

from gcide_dict import pipeline
from gcide_dict.extract import PLACEHOLDER_ENTRY
from gcide_dict.pipeline import RunState, Settings

D_NS = "{http://www.apple.com/DTDs/DictionaryService-1.0.rng}"


# ============================================================================
# File Selection and Reading Tests
# ============================================================================


class TestFindSourceFiles:
    """Tests for find_source_files function."""

    def test_matches_pattern_sorted(self, temp_output_dir: Path):
        for name in ("CIDE.B", "CIDE.A", "README", "cide.c"):
            (temp_output_dir / name).write_text("", encoding="utf-8")
        (temp_output_dir / "CIDE.D").mkdir()

        paths = pipeline.find_source_files(Settings(source_dir=temp_output_dir))

        assert [path.name for path in paths] == ["CIDE.A", "CIDE.B"]

    def test_custom_pattern(self, temp_output_dir: Path):
        (temp_output_dir / "CIDE.A").write_text("", encoding="utf-8")
        (temp_output_dir / "extra.txt").write_text("", encoding="utf-8")

        paths = pipeline.find_source_files(
            Settings(source_dir=temp_output_dir, file_pattern=r"\.txt$")
        )

        assert [path.name for path in paths] == ["extra.txt"]


class TestReadDocuments:
    """Tests for read_documents function."""

    def test_replaces_undecodable_bytes(self, temp_output_dir: Path):
        path = temp_output_dir / "CIDE.A"
        path.write_bytes(b"<pr>(\xff)</pr>")

        [(read_path, text)] = list(pipeline.read_documents([path]))

        assert read_path == path
        assert text == "<pr>(�)</pr>"

    def test_missing_file_raises(self, temp_output_dir: Path):
        with pytest.raises(OSError):
            list(pipeline.read_documents([temp_output_dir / "missing"]))


# ============================================================================
# Extraction Tests
# ============================================================================


class TestExtractFiles:
    """Tests for extract_files and finish_extraction."""

    def test_extracts_fixture(self, source_dir: Path, settings: Settings):
        state = RunState()

        count = pipeline.extract_files(pipeline.find_source_files(settings), state, settings)

        assert count == 1
        assert "Cat" in state.dictionary
        assert "Catty" not in state.dictionary
        assert state.unknown.names() == ["xyz"]
        assert state.unknown.source_of("xyz") == "CIDE.C"

    def test_all_sources(self, settings: Settings):
        state = RunState()
        settings = settings._replace(only_webster=False)

        pipeline.extract_files(pipeline.find_source_files(settings), state, settings)

        assert state.index["Catty"] == ["Catty"]

    def test_finish_drops_placeholder_and_duplicates(self):
        state = RunState()
        state.dictionary = {PLACEHOLDER_ENTRY: "front", "Cat": "x"}
        state.index = {PLACEHOLDER_ENTRY: [], "Cat": ["Cat", "Cats", "Cat"]}

        pipeline.finish_extraction(state)

        assert state.dictionary == {"Cat": "x"}
        assert state.index == {"Cat": ["Cat", "Cats"]}


# ============================================================================
# Full Run Tests
# ============================================================================


class TestRun:
    """Tests for run function."""

    def test_writes_all_outputs(self, settings: Settings):
        pipeline.run(settings)

        assert (settings.output_dir / pipeline.PRELIM_FILENAME).exists()
        assert (settings.output_dir / pipeline.DICT_FILENAME).exists()
        assert (settings.output_dir / pipeline.UNKNOWN_REPORT_FILENAME).exists()
        assert settings.xml_path.exists()

    def test_final_dictionary(self, settings: Settings):
        state = pipeline.run(settings)

        assert list(state.dictionary) == ["Cat", "Cate", "Catharsis"]
        assert PLACEHOLDER_ENTRY not in state.index
        assert state.index["Cat"] == ["Cat"]
        assert '<h2 class="hw">Cat </h2>' in state.dictionary["Cat"]
        assert '<div class="q">The choicest cates. <div class="qau">Shak.</div></div>' in state.dictionary["Cate"]
        assert '<div class="grk">κάθαρσις</div>' in state.dictionary["Catharsis"]

    def test_snapshot_is_taken_before_post_processing(self, settings: Settings):
        pipeline.run(settings)

        prelim = json.loads((settings.output_dir / pipeline.PRELIM_FILENAME).read_text(encoding="utf-8"))

        assert set(prelim) == {"dictionary", "index"}
        assert "<hw>Cat" in prelim["dictionary"]["Cat"]
        assert prelim["index"]["Cat"] == ["Cat"]

    def test_final_json_matches_state(self, settings: Settings):
        state = pipeline.run(settings)

        final = json.loads((settings.output_dir / pipeline.DICT_FILENAME).read_text(encoding="utf-8"))

        assert final == state.dictionary

    def test_xml_has_entry_per_key(self, settings: Settings):
        pipeline.run(settings)

        root = etree.fromstring(settings.xml_path.read_bytes())
        titles = [entry.get(f"{D_NS}title") for entry in root.findall(f"{D_NS}entry")]

        assert titles == ["Cat", "Cate", "Catharsis"]

    def test_unknown_report(self, settings: Settings):
        pipeline.run(settings)

        report = (settings.output_dir / pipeline.UNKNOWN_REPORT_FILENAME).read_text(encoding="utf-8")

        assert "### `<xyz/`" in report
        assert "**Source:** `CIDE.C`" in report


# ============================================================================
# Command Line Tests
# ============================================================================


class TestMain:
    """Tests for main function."""

    def test_missing_directory(self, temp_output_dir: Path, capsys):
        result = pipeline.main([str(temp_output_dir / "missing")])

        assert result == 1
        assert "Not a directory" in capsys.readouterr().err

    def test_runs_conversion(self, source_dir: Path, temp_output_dir: Path, capsys):
        output_dir = temp_output_dir / "out"
        xml_path = temp_output_dir / "dict.xml"

        result = pipeline.main([
            str(source_dir),
            "--output-dir", str(output_dir),
            "--xml", str(xml_path),
        ])

        assert result == 0
        assert xml_path.exists()
        out = capsys.readouterr().out
        assert "Done. 3 entries." in out
        assert "Unknown entities (1): xyz" in out

    def test_all_sources_flag(self, source_dir: Path, temp_output_dir: Path):
        output_dir = temp_output_dir / "out"

        pipeline.main([
            str(source_dir),
            "--output-dir", str(output_dir),
            "--xml", str(temp_output_dir / "dict.xml"),
            "--all-sources",
        ])

        final = json.loads((output_dir / pipeline.DICT_FILENAME).read_text(encoding="utf-8"))
        assert "Catty" in final
