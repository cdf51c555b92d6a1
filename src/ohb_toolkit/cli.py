"""
Unified CLI for the OHB Toolkit.

Entry point: ohb
"""
import json
from pathlib import Path

import click

from .config import ToolkitConfig


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@click.group()
@click.option("--data-dir", type=click.Path(path_type=Path), default=None,
              help="Directory holding the imported edition (default: data/).")
@click.option("--source-dir", type=click.Path(path_type=Path), default=None,
              help="Cache directory for downloaded book XML (default: source/).")
@click.option("--strip-cantillation/--keep-cantillation", default=None,
              help="Remove cantillation marks from word text (default: keep).")
@click.option("--no-gematria", is_flag=True, default=False,
              help="Skip the gematria enrichment pass.")
@click.option("--force", is_flag=True, default=False,
              help="Force re-running even if the output exists.")
@click.pass_context
def cli(ctx, data_dir, source_dir, strip_cantillation, no_gematria, force):
    """Open Scriptures Hebrew Bible toolkit."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ToolkitConfig.from_overrides(
        data_dir=data_dir,
        source_dir=source_dir,
        strip_cantillation=strip_cantillation,
        gematria=False if no_gematria else None,
    )
    ctx.obj["force"] = force


@cli.command("import")
@click.option("--book", "books", multiple=True,
              help="OSIS book id to import (repeatable, default: all 39).")
@click.pass_context
def import_cmd(ctx, books):
    """Download MorphHB and write one JSON file per verse."""
    from .importer import run

    run(ctx.obj["config"], force=ctx.obj["force"], books=list(books) or None)


@cli.command()
@click.argument("xml_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--verse", "osis_id", default=None,
              help="Only print this verse (e.g. Gen.1.1).")
@click.pass_context
def parse(ctx, xml_file, osis_id):
    """Transform a local OSIS file and print the verse records."""
    from .osis import parse_osis

    config = ctx.obj["config"]
    verses = parse_osis(
        xml_file.read_text(encoding="utf-8"),
        strip_marks=config.strip_cantillation,
        gematria=config.gematria,
        label=str(xml_file),
    )
    if osis_id is not None:
        verses = [v for v in verses if v.osis_id == osis_id]
        if not verses:
            raise click.ClickException(f"Verse {osis_id} not found in {xml_file}")
    _echo_json({v.osis_id: v.verse.to_dict() for v in verses})


@cli.command()
@click.argument("snippets", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def rebuild(ctx, snippets):
    """Re-import single-verse XML snippets over the stored edition."""
    from .importer import rebuild_verses

    written = rebuild_verses(
        ctx.obj["config"],
        [p.read_text(encoding="utf-8") for p in snippets],
    )
    click.echo(f"  Updated {len(written)} verse(s)")


@cli.command()
@click.argument("book")
@click.argument("chapter", type=int)
@click.argument("verse", type=int, required=False)
@click.pass_context
def show(ctx, book, chapter, verse):
    """Print a stored verse, or a whole chapter."""
    from .source import load_chapter, load_verse

    config = ctx.obj["config"]
    if verse is None:
        _echo_json(load_chapter(config, book, chapter))
    else:
        _echo_json(load_verse(config, book, chapter, verse))


@cli.command()
def books():
    """List the books of the edition with their OSIS ids."""
    from .source import BOOK_TO_OSIS

    for name, osis in BOOK_TO_OSIS.items():
        click.echo(f"  {osis:6s} {name}")


@cli.command()
@click.argument("lemma")
def strongs(lemma):
    """Show the Strong's codes extracted from a lemma attribute."""
    from .strongs import extract_strongs, is_prefix_only

    codes = extract_strongs(lemma)
    if is_prefix_only(lemma):
        click.echo("  prefix only")
    else:
        click.echo("  " + " ".join(codes))


@cli.command()
@click.argument("word")
def gematria(word):
    """Show standard and ordinal gematria of a Hebrew word."""
    from .gematria import compute_gematria

    values = compute_gematria(word)
    click.echo(f"  standard: {values['standard']}")
    click.echo(f"  ordinal:  {values['ordinal']}")


def main():
    cli()
