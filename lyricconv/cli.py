from __future__ import annotations

import sys
from pathlib import Path
import typer

from lyricconv.config import load_config, save_config_value
from lyricconv.convert import Format, guess_format, parse_format, read, read_with_stats, render, split_lines
from lyricconv.errors import ReadError, UnsupportedFormat
from lyricconv.logging_setup import setup_logging
from lyricconv.song.timing import NTSC_TO_PAL, PAL_TO_NTSC


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _is_std(name: str | None) -> bool:
    return name is None or name == "-"


def _pick_format(explicit: str | None, file_name: str | None, what: str, unsupported_code: int, unknown_code: int) -> Format:
    if explicit:
        try:
            fmt = parse_format(explicit)
        except UnsupportedFormat:
            typer.echo(f"Unsupported {what} format: {explicit}", err=True)
            raise typer.Exit(code=unsupported_code)
    elif not _is_std(file_name):
        fmt = guess_format(file_name)
    else:
        fmt = None

    if fmt is None:
        option = "--from" if what == "input" else "--to"
        typer.echo(f"Cannot detect {what} format, please specify it with '{option}'", err=True)
        raise typer.Exit(code=unknown_code)
    return fmt


def _pick_ratio(ntsc: bool, pal: bool, ratio: float | None) -> float:
    if ratio is not None:
        return ratio
    if ntsc and pal:
        typer.echo("--ntsc and --pal cannot be used together", err=True)
        raise typer.Exit(code=5)
    if ntsc:
        return NTSC_TO_PAL
    if pal:
        return PAL_TO_NTSC
    return 1.0


@app.command()
def convert(
    in_file: str | None = typer.Argument(None, help="Input file or '-' for stdin (default)"),
    out_file: str | None = typer.Argument(None, help="Output file or '-' for stdout (default)"),
    from_fmt: str | None = typer.Option(None, "--from", "-f", help="Input format: lrc|srt|vtt|webvtt"),
    to_fmt: str | None = typer.Option(None, "--to", "-t", help="Output format: lrc|srt|vtt|webvtt"),
    output: str | None = typer.Option(None, "--output", help="Output file (same as OUT_FILE)"),
    apply_offset: bool = typer.Option(False, "--apply-offset", "-a", help="Apply the [offset] tag value to the lyrics"),
    offset: int = typer.Option(0, "--offset", "-o", help="Add MSEC milliseconds to all timings"),
    ntsc: bool = typer.Option(False, "--ntsc", "-n", help="Convert timings from NTSC to PAL"),
    pal: bool = typer.Option(False, "--pal", "-p", help="Convert timings from PAL to NTSC"),
    ratio: float | None = typer.Option(None, "--ratio", "-r", help="Convert timings with a custom ratio (1 = no change)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Convert between LRC, SRT and WebVTT.

    The in/out formats are guessed from the file extensions if needed.
    To name a file '-', prefix it with a path (e.g. './-').
    """
    setup_logging(debug)

    if output:
        if out_file:
            typer.echo("Syntax error: OUT_FILE given twice", err=True)
            raise typer.Exit(code=5)
        out_file = output

    src = _pick_format(from_fmt, in_file, "input", unsupported_code=8, unknown_code=6)
    dst = _pick_format(to_fmt, out_file, "output", unsupported_code=9, unknown_code=7)
    conv = _pick_ratio(ntsc, pal, ratio)

    try:
        text = sys.stdin.read() if _is_std(in_file) else Path(in_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot open input file: {in_file} ({e})", err=True)
        raise typer.Exit(code=2)

    try:
        song = read(split_lines(text), src)
    except ReadError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=22)

    cfg = load_config()
    data = render(song, dst, options=cfg.write_options(apply_offset=apply_offset, add_offset_ms=offset, ratio=conv))

    if _is_std(out_file):
        typer.echo(data, nl=False)
        return

    try:
        fh = open(out_file, "w", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Cannot create output file: {out_file} ({e})", err=True)
        raise typer.Exit(code=3)
    with fh:
        try:
            fh.write(data)
        except OSError as e:
            typer.echo(f"Write error: {out_file} ({e})", err=True)
            raise typer.Exit(code=33)


@app.command()
def stats(
    path: Path,
    from_fmt: str | None = typer.Option(None, "--from", "-f", help="Input format: lrc|srt|vtt|webvtt"),
):
    """Read a file and print what was found in it."""
    fmt = _pick_format(from_fmt, str(path), "input", unsupported_code=8, unknown_code=6)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot open input file: {path} ({e})", err=True)
        raise typer.Exit(code=2)

    try:
        song, st = read_with_stats(split_lines(text), fmt)
    except ReadError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=22)

    typer.echo(f"format={fmt.value}")
    typer.echo(f"lines_total={st.lines_total}")
    typer.echo(f"lyrics_total={st.lyrics_total}")
    typer.echo(f"comments_total={st.comments_total}")
    typer.echo(f"empty_total={st.empty_total}")
    typer.echo(f"offset_ms={song.offset}")
    typer.echo(f"language={song.lang or ''}")
    typer.echo(f"metas={[(m.key, m.value) for m in song.metas]}")


@app.command("config")
def config_cmd(
    created_by: str | None = typer.Option(None, "--created-by", help="Value of the LRC [created_by] tag"),
    vtt_cue_ids: bool | None = typer.Option(None, "--vtt-cue-ids/--no-vtt-cue-ids", help="Number WebVTT cues"),
    vtt_meta_notes: bool | None = typer.Option(
        None, "--vtt-meta-notes/--no-vtt-meta-notes", help="Write metadata as WebVTT NOTE blocks"
    ),
):
    """Show or change the saved settings."""
    if created_by is not None:
        save_config_value("created_by", created_by)
    if vtt_cue_ids is not None:
        save_config_value("vtt_cue_ids", vtt_cue_ids)
    if vtt_meta_notes is not None:
        save_config_value("vtt_meta_notes", vtt_meta_notes)

    cfg = load_config()
    typer.echo(f"config_dir={cfg.config_dir}")
    typer.echo(f"created_by={cfg.created_by}")
    typer.echo(f"vtt_cue_ids={cfg.vtt_cue_ids}")
    typer.echo(f"vtt_meta_notes={cfg.vtt_meta_notes}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
