from __future__ import annotations

import json
import runpy

import numpy as np
import pytest
import soundfile as sf
from typer.testing import CliRunner

from lufsmeter import cli
from lufsmeter.loudness import loudness

runner = CliRunner()


@pytest.fixture
def tone_file(tmp_path, tone_997, sample_rate):
    path = tmp_path / "tone.wav"
    sf.write(path, tone_997.astype(np.float32), samplerate=sample_rate, subtype="FLOAT")
    return path


def test_measure_prints_integrated_loudness(tone_file):
    result = runner.invoke(cli.app, ["measure", "--input", str(tone_file)])

    assert result.exit_code == 0
    assert "Integrated loudness: -3.01 LUFS" in result.output


def test_measure_json_report(tone_file):
    result = runner.invoke(cli.app, ["measure", "--input", str(tone_file), "--json"])

    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["integrated_lufs"] == pytest.approx(-3.01, abs=0.001)
    assert report["window_count"] == 7
    assert report["sample_count"] == 48_000


def test_measure_rejects_stereo_file(tmp_path, tone_997, sample_rate):
    path = tmp_path / "stereo.wav"
    sf.write(path, np.stack([tone_997, tone_997], axis=1), samplerate=sample_rate, subtype="FLOAT")

    result = runner.invoke(cli.app, ["measure", "--input", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_normalize_writes_file_at_target(tmp_path, tone_file):
    output = tmp_path / "out" / "normalized.wav"

    result = runner.invoke(
        cli.app,
        ["normalize", "--input", str(tone_file), "--output", str(output), "--target-lufs", "-16"],
    )

    assert result.exit_code == 0
    audio, _ = sf.read(output, dtype="float32")
    assert loudness(audio) == pytest.approx(-16.0, abs=0.01)


def test_normalize_cli_options_override_config(tmp_path, tone_file):
    config_path = tmp_path / "normalize.json"
    config_path.write_text(json.dumps({"target_lufs": -30.0, "max_gain_db": 40.0}), encoding="utf-8")
    output = tmp_path / "normalized.wav"

    result = runner.invoke(
        cli.app,
        [
            "normalize",
            "--input",
            str(tone_file),
            "--output",
            str(output),
            "--config",
            str(config_path),
            "--max-gain-db",
            "3",
        ],
    )

    assert result.exit_code == 0
    audio, _ = sf.read(output, dtype="float32")
    assert loudness(audio) == pytest.approx(-3.01 - 3.0, abs=0.01)


def test_module_entrypoint_calls_cli_main(monkeypatch):
    called = {"value": False}

    def fake_main():
        called["value"] = True

    monkeypatch.setattr(cli, "main", fake_main)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("lufsmeter.__main__", run_name="__main__")

    assert called["value"]
    assert exc_info.value.code == 0


def _reject_constant(token):
    raise ValueError(f"non-standard JSON token {token}")


def test_measure_json_report_of_silence_is_strict_json(tmp_path, sample_rate):
    path = tmp_path / "silence.wav"
    sf.write(path, np.zeros(sample_rate, dtype=np.float32), samplerate=sample_rate, subtype="FLOAT")

    result = runner.invoke(cli.app, ["measure", "--input", str(path), "--json"])

    assert result.exit_code == 0
    report = json.loads(result.output, parse_constant=_reject_constant)
    assert report["integrated_lufs"] is None
    assert report["absolute_gated_lufs"] is None
    assert report["relative_threshold_lufs"] is None
    assert report["window_count"] == 7


@pytest.mark.parametrize(
    "options",
    [["--target-lufs", "3"], ["--max-gain-db", "-1"], ["--max-gain-db", "99"]],
)
def test_normalize_rejects_out_of_range_options(tmp_path, tone_file, options):
    output = tmp_path / "normalized.wav"

    result = runner.invoke(
        cli.app,
        ["normalize", "--input", str(tone_file), "--output", str(output), *options],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not output.exists()


@pytest.mark.parametrize(
    "payload",
    ['{"target_lufs": 6.0}', "{not json"],
)
def test_normalize_rejects_bad_config_file(tmp_path, tone_file, payload):
    config_path = tmp_path / "normalize.json"
    config_path.write_text(payload, encoding="utf-8")
    output = tmp_path / "normalized.wav"

    result = runner.invoke(
        cli.app,
        ["normalize", "--input", str(tone_file), "--output", str(output), "--config", str(config_path)],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not output.exists()
