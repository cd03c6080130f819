"""Command-line interface for ui-vault."""

import sys
import json
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_config, load_config
from .color_engine import (
    ColorMode,
    ColorPalette,
    PaletteEngine,
    WCAGLevel,
    evaluate_wcag,
    format_contrast_ratio,
    get_analogous,
    get_complementary,
    get_split_complementary,
    get_text_color_for_background,
    get_triadic,
    get_wcag_level_style,
    is_valid_hex,
    normalize_hex,
)

logger = logging.getLogger(__name__)

MODE_CHOICES = click.Choice(['light', 'dark', 'both'])


def get_console() -> Console:
    """Console honoring the no_color setting."""
    return Console(no_color=get_config().no_color)


def get_engine() -> PaletteEngine:
    return PaletteEngine.from_config(get_config())


def validate_hex(ctx, param, value):
    """Click callback rejecting anything but #RRGGBB colors."""
    if value is None:
        return value
    # Accept colors typed without the leading '#'
    candidate = value if value.startswith('#') else f"#{value}"
    if not is_valid_hex(candidate):
        raise click.BadParameter(f"'{value}' is not a #RRGGBB hex color")
    return normalize_hex(candidate)


def setup_logging(verbose: bool, level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def swatch(color: str) -> Text:
    """Colored block with the hex code printed in a readable text color."""
    return Text(f" {color} ", style=f"{get_text_color_for_background(color)} on {color}")


def level_text(level: WCAGLevel) -> Text:
    return Text(level.value, style=get_wcag_level_style(level))


def palette_table(palette: ColorPalette, title: str) -> Table:
    """Build a table of every token in a palette."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Group", style="cyan")
    table.add_column("Token", style="magenta")
    table.add_column("Color")

    for group, colors in palette.to_dict().items():
        for token, color in colors.items():
            table.add_row(group, token, swatch(color))
            group = ""

    return table


def print_palettes(console: Console, palettes, mode: str, as_json: bool, label: str) -> None:
    modes = ['light', 'dark'] if mode == 'both' else [mode]

    if as_json:
        data = {m: palettes.for_mode(m).to_dict() for m in modes}
        click.echo(json.dumps(data, indent=2))
        return

    for m in modes:
        console.print(palette_table(palettes.for_mode(m), f"{label} ({m})"))
        console.print()


@click.group()
@click.option("--config", type=click.Path(), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, verbose):
    """ui-vault - generate color palettes and audit WCAG contrast."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Load configuration
    if config:
        cfg = load_config(Path(config))
    else:
        cfg = get_config()

    setup_logging(verbose, cfg.log_level)
    logger.debug(f"Using data directory {cfg.data_dir}")


@main.command()
@click.argument("seed", callback=validate_hex)
@click.option("--mode", "-m", type=MODE_CHOICES, default="both", help="Color mode(s) to show")
@click.option("--json", "as_json", is_flag=True, help="Print palettes as JSON")
def generate(seed, mode, as_json):
    """Generate light and dark palettes from a SEED color."""
    console = get_console()
    palettes = get_engine().generate(seed)
    print_palettes(console, palettes, mode, as_json, f"Palette from {seed}")


@main.command()
@click.argument("name")
@click.option("--mode", "-m", type=MODE_CHOICES, default="both", help="Color mode(s) to show")
@click.option("--json", "as_json", is_flag=True, help="Print palettes as JSON")
def preset(name, mode, as_json):
    """Generate the palette for a named preset."""
    console = get_console()
    try:
        palettes = get_engine().generate_preset(name)
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        sys.exit(1)

    print_palettes(console, palettes, mode, as_json, f"Preset {name}")


@main.command()
def presets():
    """List available palette presets."""
    console = get_console()

    table = Table(title="Palette Presets", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan", min_width=10)
    table.add_column("Seed")

    for name, seed in sorted(get_engine().list_presets().items()):
        table.add_row(name, swatch(seed))

    console.print(table)


@main.command()
@click.argument("foreground", callback=validate_hex)
@click.argument("background", callback=validate_hex)
def contrast(foreground, background):
    """Check the WCAG contrast of FOREGROUND text on BACKGROUND."""
    console = get_console()
    result = evaluate_wcag(foreground, background)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Check", style="cyan")
    table.add_column("Required")
    table.add_column("Result")

    checks = [
        ("AA normal text", "4.5:1", result.passes_aa),
        ("AA large text", "3.0:1", result.passes_aa_large),
        ("AAA normal text", "7.0:1", result.passes_aaa),
        ("AAA large text", "4.5:1", result.passes_aaa_large),
    ]
    for label, required, passed in checks:
        table.add_row(label, required, "[green]pass[/green]" if passed else "[red]fail[/red]")

    console.print(Text.assemble(
        swatch(foreground), " on ", swatch(background), "  ",
        (format_contrast_ratio(result.ratio), "bold"), "  ",
        level_text(result.level),
    ))
    console.print(table)


@main.command()
@click.argument("foreground", callback=validate_hex)
@click.argument("background", callback=validate_hex)
@click.option("--level", "-l", type=click.Choice(['AA', 'AAA']), help="Target WCAG level")
def suggest(foreground, background, level):
    """Suggest an accessible replacement for FOREGROUND on BACKGROUND."""
    console = get_console()
    engine = get_engine()
    target = WCAGLevel(level) if level else engine.target_level

    suggestion = engine.suggest(foreground, background, target)
    result = evaluate_wcag(suggestion, background)

    if suggestion == foreground:
        console.print(f"[green]{foreground} already meets {target.value} on {background}[/green]")
    console.print(Text.assemble(
        ("Suggested: ", "bold"), swatch(suggestion), "  ",
        format_contrast_ratio(result.ratio), "  ", level_text(result.level),
    ))


@main.command()
@click.argument("seed", callback=validate_hex)
@click.option("--mode", "-m", type=click.Choice(['light', 'dark']), help="Color mode to audit")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--strict", is_flag=True, help="Exit with status 1 when errors are found")
def audit(seed, mode, as_json, strict):
    """Audit the palette generated from SEED for contrast issues."""
    console = get_console()
    mode = ColorMode(mode) if mode else get_config().default_mode
    report = get_engine().audit(seed, mode)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
    elif report.is_perfect:
        console.print(Panel(
            f"[green]All contrast checks pass ({mode.value} mode)[/green]",
            title="[cyan]Accessibility Audit[/cyan]",
            border_style="green",
        ))
    else:
        table = Table(
            title=f"Accessibility Audit ({mode.value}) - score {report.score}",
            show_header=True,
            header_style="bold",
        )
        table.add_column("Severity")
        table.add_column("Check", style="cyan")
        table.add_column("Colors")
        table.add_column("Ratio", justify="right")
        table.add_column("Suggestion")

        for issue in report.issues:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            table.add_row(
                Text(issue.severity.value, style=severity_style),
                issue.message,
                Text.assemble(swatch(issue.foreground), " ", swatch(issue.background)),
                format_contrast_ratio(issue.ratio),
                swatch(issue.suggestion) if issue.suggestion else "",
            )

        console.print(table)

    if strict and report.errors:
        sys.exit(1)


@main.command()
@click.argument("color", callback=validate_hex)
def harmony(color):
    """Show color-wheel harmonies for COLOR."""
    console = get_console()

    table = Table(title=f"Harmonies of {color}", show_header=True, header_style="bold")
    table.add_column("Harmony", style="cyan")
    table.add_column("Colors")

    rows = [
        ("Complementary", (get_complementary(color),)),
        ("Analogous", get_analogous(color)),
        ("Triadic", get_triadic(color)),
        ("Split complementary", get_split_complementary(color)),
    ]
    for label, colors in rows:
        table.add_row(label, Text(" ").join(swatch(c) for c in colors))

    console.print(table)


if __name__ == "__main__":
    main()
