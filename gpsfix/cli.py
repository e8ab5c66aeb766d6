"""Command line interface for gpsfix.

``gpsfix acquire`` opens the receiver's serial port and prints one fused fix
as JSON. ``gpsfix decode`` decodes the GGA and RMC sentences of a logged NMEA
file, one JSON object per sentence.
"""

import json
import logging
from pathlib import Path

import typer

from gpsfix.exceptions import GpsFixError, NoFixError
from gpsfix.gnss.acquisition import acquire_fix, decoder_for
from gpsfix.gnss.serial_source import SerialByteSource
from gpsfix.nmea.reader import parse_sentence

_logger = logging.getLogger(__name__)

_EXIT_ERROR = 1
_EXIT_NO_FIX = 2

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Read position fixes from an NMEA 0183 GPS receiver.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def acquire(
    port: str = typer.Option(
        "/dev/ttyUSB0", "--port", envvar="GPSFIX_PORT", help="Serial device path"
    ),
    baud_rate: int = typer.Option(
        9600, "--baud-rate", envvar="GPSFIX_BAUD_RATE", help="Serial line speed"
    ),
    attempts: int = typer.Option(
        1, "--attempts", min=1, help="Tries while the receiver reports no fix"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Acquire one fix from the receiver and print it as JSON."""
    _configure_logging(verbose)

    for attempt in range(1, attempts + 1):
        try:
            fix = acquire_fix(SerialByteSource(port, baud_rate).open())
        except NoFixError as e:
            _logger.warning("Attempt %d/%d: %s", attempt, attempts, e)
            continue
        except GpsFixError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=_EXIT_ERROR) from e
        typer.echo(json.dumps(fix.to_dict()))
        return

    typer.echo(f"error: no fix after {attempts} attempt(s)", err=True)
    raise typer.Exit(code=_EXIT_NO_FIX)


@app.command()
def decode(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Logged NMEA file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Decode every GGA and RMC sentence of a logged NMEA file.

    GGA sentences carry no date, so their timestamp is the time of decoding.
    """
    _configure_logging(verbose)

    text = path.read_text(encoding="ascii", errors="replace")
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            sentence = parse_sentence(line)
        except GpsFixError as e:
            typer.echo(f"line {line_number}: {e}", err=True)
            continue

        try:
            decode_fields = decoder_for(sentence.sentence_type)
        except ValueError:
            _logger.debug("Line %d: skipping %s", line_number, sentence.talker_and_type)
            continue

        try:
            fix = decode_fields(sentence.fields)
        except GpsFixError as e:
            typer.echo(f"line {line_number}: {e}", err=True)
            continue

        typer.echo(json.dumps({"sentence": sentence.talker_and_type, **fix.to_dict()}))
