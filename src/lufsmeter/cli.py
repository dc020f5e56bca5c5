"""CLI interface for lufsmeter."""

from pathlib import Path
import json
import logging

import typer
from pydantic import ValidationError

from .audio_contract import UnsupportedSignalError
from .io.audio_file import read_audio, write_audio
from .loudness import measure_loudness
from .processor.loudness_comp import LoudnessCompProcessor
from .utils.config import NormalizationConfig, load_normalization_config

app = typer.Typer(help="Integrated loudness (LUFS) meter for mono 48 kHz audio")


@app.callback()
def configure_logging(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command("measure")
def measure_command(
    input_path: Path = typer.Option(..., "--input", "-i", help="Path to mono 48 kHz audio"),
    as_json: bool = typer.Option(False, "--json", help="Print the full measurement as JSON."),
) -> None:
    """Print the integrated loudness of an audio file."""

    try:
        audio, _ = read_audio(input_path)
    except UnsupportedSignalError as error:
        _fail(error)

    measurement = measure_loudness(audio)
    if as_json:
        typer.echo(json.dumps(measurement.as_dict(), indent=2, allow_nan=False))
        return
    typer.echo(f"Integrated loudness: {measurement.integrated_lufs:.2f} LUFS")


@app.command("normalize")
def normalize_command(
    input_path: Path = typer.Option(..., "--input", "-i", help="Path to mono 48 kHz audio"),
    output_path: Path = typer.Option(..., "--output", "-o", help="Path to write the adjusted audio"),
    target_lufs: float | None = typer.Option(None, "--target-lufs", help="Target integrated loudness."),
    max_gain_db: float | None = typer.Option(None, "--max-gain-db", help="Largest gain change in dB."),
    config_path: Path | None = typer.Option(
        None, "--config", help="Optional JSON/YAML normalization config."
    ),
) -> None:
    """Scale an audio file toward a target integrated loudness."""

    overrides = {
        key: value
        for key, value in {"target_lufs": target_lufs, "max_gain_db": max_gain_db}.items()
        if value is not None
    }
    try:
        config = load_normalization_config(config_path) if config_path else NormalizationConfig()
        if overrides:
            config = NormalizationConfig.model_validate({**config.model_dump(), **overrides})
    except (ValidationError, json.JSONDecodeError) as error:
        _fail(error)

    try:
        audio, sample_rate = read_audio(input_path)
    except UnsupportedSignalError as error:
        _fail(error)

    processor = LoudnessCompProcessor(config.target_lufs, max_gain_db=config.max_gain_db)
    adjusted = processor.process(audio, sample_rate)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    write_audio(output_path, adjusted, sample_rate)
    typer.echo(f"Normalized audio written to: {output_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
