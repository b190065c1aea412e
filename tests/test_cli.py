"""
Tests for the tendance-export command line.
"""

import json

import pytest

from tendance_toolkit.cli import build_parser, main


@pytest.fixture
def payload_file(tmp_path, sample_payload):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


class TestParser:

    def test_parse_when_repeated_options_then_lists(self):
        args = build_parser().parse_args([
            "p.json", "--subgroup", "Anatomie", "--subgroup", "Physiologie",
            "--year", "2021", "--year", "2022", "--exam-type", "EMD1",
        ])

        assert args.subgroups == ["Anatomie", "Physiologie"]
        assert args.exam_years == [2021, 2022]
        assert args.exam_types == ["EMD1"]

    def test_parse_when_unknown_preset_then_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["p.json", "--preset", "final"])


class TestMain:

    def test_main_when_export_then_prints_path(self, payload_file, tmp_path, capsys):
        # Arrange
        out_dir = tmp_path / "out"

        # Act
        code = main([str(payload_file), "--output-dir", str(out_dir)])

        # Assert
        assert code == 0
        expected = out_dir / "tendance-cardio.svg"
        assert expected.exists()
        assert capsys.readouterr().out.strip() == str(expected)

    def test_main_when_module_option_then_that_module(self, payload_file, tmp_path):
        code = main([str(payload_file), "--module", "Pneumo", "--output-dir", str(tmp_path)])

        assert code == 0
        assert (tmp_path / "tendance-pneumo.svg").exists()

    def test_main_when_list_modules_then_ranked_json(self, payload_file, capsys):
        code = main([str(payload_file), "--list-modules"])

        modules = json.loads(capsys.readouterr().out)
        assert code == 0
        assert [m["module_name"] for m in modules] == ["Cardio", "Pneumo"]
        assert modules[0]["total_questions"] == 9
        assert set(modules[0]["sub_disciplines"]) == {"Anatomie", "Physiologie"}

    def test_main_when_list_modules_with_preset_then_filtered(self, payload_file, capsys):
        code = main([str(payload_file), "--list-modules", "--preset", "rattrapage"])

        modules = json.loads(capsys.readouterr().out)
        assert code == 0
        assert modules == [{
            "module_name": "Cardio",
            "sub_disciplines": ["Physiologie"],
            "total_questions": 4,
        }]

    def test_main_when_payload_missing_then_returns_1(self, tmp_path, capsys):
        code = main([str(tmp_path / "nope.json"), "--output-dir", str(tmp_path)])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_main_when_preset_and_exam_type_then_returns_1(self, payload_file, tmp_path):
        code = main([
            str(payload_file), "--preset", "emd", "--exam-type", "EMD1",
            "--output-dir", str(tmp_path),
        ])

        assert code == 1

    def test_main_when_payload_is_directory_then_returns_1(self, tmp_path, capsys):
        code = main([str(tmp_path), "--output-dir", str(tmp_path / "out")])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_main_when_list_modules_on_directory_then_returns_1(self, tmp_path):
        assert main([str(tmp_path), "--list-modules"]) == 1
