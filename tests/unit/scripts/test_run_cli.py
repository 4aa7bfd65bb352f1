"""Tests for the command-line entry point."""

import json

import pytest

import scripts.run as run


@pytest.fixture
def config_dir(tmp_path):
    """Empty config directory so only schema defaults apply."""
    path = tmp_path / "configs"
    path.mkdir()
    return path


def write_json(path, data):
    path.write_text(json.dumps(data))
    return path


def cli(config_dir, *argv):
    return run.main(["--config-dir", str(config_dir), "--log-level", "ERROR", *argv])


class TestAlignCommand:
    def test_prints_updates(self, tmp_path, config_dir, step_rows, provider_response, capsys):
        steps = write_json(tmp_path / "steps.json", {"steps": step_rows})
        transcription = write_json(tmp_path / "transcription.json", provider_response)

        assert cli(config_dir, "align", str(steps), str(transcription), "-t", "tut-9") == 0

        output = json.loads(capsys.readouterr().out)
        assert output["tutorialId"] == "tut-9"
        assert output["metadata"] == {"duration": 12.4, "language": "en"}
        assert output["steps"][0] == {
            "id": "a",
            "text_content": "Click the new button.",
            "timestamp_end": 3000,
        }

    def test_invalid_timestamp_exits_with_error(self, tmp_path, config_dir, provider_response, capsys):
        steps = write_json(tmp_path / "steps.json", [{"id": "b", "timestamp_start": "soon"}])
        transcription = write_json(tmp_path / "transcription.json", provider_response)

        assert cli(config_dir, "align", str(steps), str(transcription)) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid timestamp_start" in captured.err

    def test_missing_file_exits_with_error(self, tmp_path, config_dir, capsys):
        missing = tmp_path / "missing.json"

        assert cli(config_dir, "align", str(missing), str(missing)) == 1
        assert "Error" in capsys.readouterr().err


class TestClosestCommand:
    def test_prints_closest_segment(self, tmp_path, config_dir, provider_response, capsys):
        transcription = write_json(tmp_path / "transcription.json", provider_response)

        assert cli(config_dir, "closest", "6", str(transcription)) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["transcript"] == "Give the project a name."

    def test_no_segments_prints_null(self, tmp_path, config_dir, capsys):
        transcription = write_json(tmp_path / "transcription.json", [])

        assert cli(config_dir, "closest", "1", str(transcription)) == 0
        assert json.loads(capsys.readouterr().out) is None


class TestOptionsCommand:
    def test_prints_provider_options(self, config_dir, capsys):
        assert cli(config_dir, "options") == 0

        output = json.loads(capsys.readouterr().out)
        assert output == {
            "provider": "deepgram",
            "options": {
                "model": "nova-2",
                "language": "fr",
                "punctuate": True,
                "utterances": True,
                "smart_format": True,
            },
        }

    def test_reflects_config_file(self, config_dir, capsys):
        (config_dir / "base.yaml").write_text("transcription:\n  language: en\n  smart_format: false\n")

        assert cli(config_dir, "options") == 0

        options = json.loads(capsys.readouterr().out)["options"]
        assert options["language"] == "en"
        assert options["smart_format"] is False
