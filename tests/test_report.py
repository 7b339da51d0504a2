import json
from pathlib import Path

import pytest

from movemutant.report import (
    Mutation,
    MutationReport,
    Range,
    Report,
    make_patch,
)


def _sample_entry():
    modification = Mutation(Range(0, 10), "operator", "old", "new")
    entry = MutationReport.create(
        Path("file"), Path("original_file"), "module", "function", "\n", "diff\n"
    )
    entry.add_modification(modification)
    return entry


def test_report():
    report = Report()
    assert report.to_json() == '{\n  "mutants": []\n}'

    report.add_entry(_sample_entry())
    assert report.to_json() == (
        "{\n  \"mutants\": [\n    {\n      \"mutant_path\": \"file\",\n"
        "      \"original_file\": \"original_file\",\n      \"module_name\": \"module\",\n"
        "      \"function_name\": \"function\",\n      \"mutations\": [\n        {\n"
        "          \"changed_place\": {\n            \"start\": 0,\n            \"end\": 10\n"
        "          },\n          \"operator_name\": \"operator\",\n"
        "          \"old_value\": \"old\",\n          \"new_value\": \"new\"\n        }\n"
        "      ],\n      \"diff\": \"--- original\\n+++ modified\\n@@ -1 +1 @@\\n-diff\\n+\\n\"\n"
        "    }\n  ]\n}"
    )


def test_range():
    rng = Range(0, 10)
    assert json.dumps(rng.to_dict(), separators=(",", ":")) == '{"start":0,"end":10}'


def test_modification():
    modification = Mutation(Range(0, 10), "operator", "old", "new")
    assert json.dumps(modification.to_dict(), separators=(",", ":")) == (
        '{"changed_place":{"start":0,"end":10},"operator_name":"operator",'
        '"old_value":"old","new_value":"new"}'
    )


def test_range_rejects_start_after_end():
    with pytest.raises(ValueError):
        Range(5, 4)


def test_saves_report_as_text_file_successfully(tmp_path):
    report = Report()
    report.add_entry(_sample_entry())
    path = tmp_path / "test_report.txt"
    report.save_to_text_file(path)

    contents = path.read_text(encoding="utf-8")
    for expected in (
        "Mutant path: file",
        "Original file: original_file",
        "Module name: module",
        "Function name: function",
        "Mutations:",
        "Operator: operator",
        "Old value: old",
        "New value: new",
        "Changed place: 0-10",
    ):
        assert expected in contents


def test_fails_to_save_report_to_non_existent_directory(tmp_path):
    report = Report()
    with pytest.raises(FileNotFoundError):
        report.save_to_text_file(tmp_path / "non_existent_directory" / "test_report.txt")


def test_json_file_round_trip(tmp_path):
    report = Report()
    report.add_entry(_sample_entry())
    path = tmp_path / "report.json"
    report.save_to_json_file(path)
    loaded = Report.load_from_json_file(path)
    assert loaded == report
    assert loaded.mutants[0].mutations[0].changed_place == Range(0, 10)


def test_make_patch_identical_sources_has_no_hunks():
    patch = make_patch("same\n", "same\n")
    assert patch.startswith("--- original\n+++ modified\n")
    assert "@@" not in patch


def test_make_patch_marks_missing_trailing_newline():
    patch = make_patch("a\n", "b")
    assert "\\ No newline at end of file" in patch
    assert "-a\n" in patch
    assert "+b\n" in patch