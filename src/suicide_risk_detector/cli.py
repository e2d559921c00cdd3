"""Command-line interface for the Suicide Risk Detector.

Provides ``classify``, ``batch``, ``evaluate``, ``model-info``, and
``resources`` commands with rich terminal output using the ``click`` and
``rich`` libraries.

Usage::

    suicide-risk-detector classify "I can't do this anymore"
    suicide-risk-detector --model-dir ./model_files batch posts.txt
    suicide-risk-detector evaluate Suicide_Detection.csv
    suicide-risk-detector resources
"""

from __future__ import annotations

import csv
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .classifier import RiskClassifier
from .config import configure_logging, get_settings
from .exceptions import DependencyMissingError, ValidationError
from .info import DISCLAIMER, crisis_resources
from .models import PredictionResult, RiskLevel
from .resources import load_resources

console = Console()
logger = logging.getLogger(__name__)


def _get_risk_style(level: RiskLevel) -> str:
    """Return a rich style string for a risk level."""
    return {
        RiskLevel.HIGH: "bold red",
        RiskLevel.MODERATE: "bold yellow",
        RiskLevel.LOW: "dim green",
    }.get(level, "")


def _get_risk_icon(level: RiskLevel) -> str:
    """Return an emoji icon for a risk level."""
    return {
        RiskLevel.HIGH: "🔴",
        RiskLevel.MODERATE: "🟡",
        RiskLevel.LOW: "🟢",
    }.get(level, "")


def _load_classifier(ctx: click.Context) -> RiskClassifier:
    """Load model resources on first use and cache the classifier."""
    obj = ctx.ensure_object(dict)
    if "classifier" not in obj:
        try:
            obj["classifier"] = RiskClassifier(load_resources(obj["model_dir"]))
        except DependencyMissingError as e:
            logger.error("Error loading model files: %s", e)
            console.print(f"[bold red]Error:[/] {e}")
            console.print(
                "[dim]Please ensure the model directory contains vocabulary.json, "
                "idf_values.json and class_labels.json[/]"
            )
            sys.exit(1)
    return obj["classifier"]


@click.group()
@click.version_option(package_name="suicide-risk-detector")
@click.option("--model-dir", type=click.Path(path_type=Path), default=None,
              help="Directory with the exported model files (env: SRD_MODEL_DIR).")
@click.option("--log-level", default=None,
              help="Logging level, e.g. DEBUG or INFO (env: SRD_LOG_LEVEL).")
@click.pass_context
def main(ctx: click.Context, model_dir: Path | None, log_level: str | None) -> None:
    """🧠 Suicide Risk Detector: TF-IDF text screening.

    Scores text for suicide-risk language and reports a label, confidence,
    and risk tier. For educational purposes only.
    """
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["model_dir"] = model_dir or settings.model_dir


@main.command()
@click.argument("text", required=False)
@click.option("--file", "-f", "file", type=click.Path(exists=True, path_type=Path),
              default=None, help="Read the text to classify from a file.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_context
def classify(ctx: click.Context, text: str | None, file: Path | None, output: str) -> None:
    """Classify a piece of text.

    Reads from standard input when neither TEXT nor --file is given.

    Example: suicide-risk-detector classify "I feel hopeless"
    """
    if file is not None:
        text = file.read_text(encoding="utf-8", errors="replace")
    elif text is None:
        text = click.get_text_stream("stdin").read()

    classifier = _load_classifier(ctx)
    try:
        result = classifier.classify(text)
    except ValidationError as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(2)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _render_prediction(result)


@main.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_context
def batch(ctx: click.Context, file: Path, output: str) -> None:
    """Classify every non-blank line of a text file.

    Example: suicide-risk-detector batch posts.txt
    """
    content = file.read_text(encoding="utf-8", errors="replace")
    lines = [line for line in content.splitlines() if line.strip()]
    classifier = _load_classifier(ctx)
    results = classifier.classify_batch(lines)

    if output == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        _render_batch(results, file.name)


@main.command()
@click.argument("csv_file", type=click.Path(exists=True, path_type=Path))
@click.option("--text-column", default="text", show_default=True,
              help="Column holding the text.")
@click.option("--label-column", default="class", show_default=True,
              help="Column holding the expected label.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_context
def evaluate(
    ctx: click.Context,
    csv_file: Path,
    text_column: str,
    label_column: str,
    output: str,
) -> None:
    """Evaluate the classifier against a labeled CSV file.

    Example: suicide-risk-detector evaluate Suicide_Detection.csv
    """
    with open(csv_file, "r", encoding="utf-8", errors="replace", newline="") as f:
        reader = csv.DictReader(f)
        fields = reader.fieldnames or []
        missing = [c for c in (text_column, label_column) if c not in fields]
        if missing:
            console.print(f"[bold red]Error:[/] missing column(s): {', '.join(missing)}")
            sys.exit(2)
        rows = [(row[text_column], row[label_column]) for row in reader]

    if not rows:
        console.print("[bold red]Error:[/] no rows to evaluate")
        sys.exit(2)

    classifier = _load_classifier(ctx)
    with console.status("[bold blue]Evaluating...", spinner="dots"):
        metrics = classifier.evaluate([t for t, _ in rows], [lbl for _, lbl in rows])

    if output == "json":
        click.echo(json.dumps(metrics.to_dict(), indent=2))
    else:
        console.print(Panel(metrics.summary(), title=f"📊 Evaluation: {csv_file.name}",
                            border_style="blue"))


@main.command("model-info")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_context
def model_info(ctx: click.Context, output: str) -> None:
    """Show metadata about the loaded model."""
    info = _load_classifier(ctx).model_info()

    if output == "json":
        click.echo(json.dumps(info.to_dict(), indent=2))
        return

    table = Table(title="Model Information", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Model", info.model)
    table.add_row("Accuracy", f"{info.accuracy:.2%}")
    table.add_row("Vocabulary size", f"{info.vocabulary_size:,}")
    table.add_row("Classes", ", ".join(info.classes))
    table.add_row("Training samples", f"{info.training_size:,}")
    table.add_row("Testing samples", f"{info.testing_size:,}")
    table.add_row("Total samples", f"{info.total_samples:,}")
    console.print(table)


@main.command()
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def resources(output: str) -> None:
    """List crisis hotlines and support resources."""
    hotlines = crisis_resources()

    if output == "json":
        click.echo(json.dumps({"hotlines": [h.to_dict() for h in hotlines]}, indent=2))
        return

    _render_hotlines()


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_prediction(result: PredictionResult) -> None:
    """Render a single PredictionResult with rich formatting."""
    icon = _get_risk_icon(result.risk_level)
    style = _get_risk_style(result.risk_level)

    body = (
        f"Prediction: [bold]{result.label}[/]\n"
        f"Risk level: {icon} [{style}]{result.risk_level.value.upper()}[/]\n"
        f"Confidence: {result.confidence:.0%}\n"
        f"Tokens processed: {result.tokens_processed}"
    )
    if result.preview:
        body += f"\n\n[dim]{result.preview}[/]"
    if result.message:
        body += f"\n\n💡 {result.message}"

    console.print()
    console.print(Panel(body, title="🧠 Risk Assessment", border_style="blue"))

    if result.is_at_risk:
        _render_hotlines()

    console.print(f"[dim]{DISCLAIMER}[/]")
    console.print()


def _render_batch(results: list[PredictionResult], filename: str) -> None:
    """Render batch predictions as a rich table."""
    table = Table(title=f"Predictions: {filename}", show_lines=True)
    table.add_column("#", justify="right", width=4)
    table.add_column("Text (excerpt)", style="white", max_width=60)
    table.add_column("Prediction", style="cyan", width=14)
    table.add_column("Conf.", justify="center", width=6)
    table.add_column("Risk", justify="center", width=10)

    for i, result in enumerate(results, 1):
        text = result.original_text.replace("\n", " ")
        excerpt = text[:120] + ("..." if len(text) > 120 else "")
        table.add_row(
            str(i),
            excerpt,
            result.label,
            f"{result.confidence:.0%}",
            Text(result.risk_level.value.upper(), style=_get_risk_style(result.risk_level)),
        )

    console.print(table)
    at_risk = sum(1 for r in results if r.is_at_risk)
    console.print(f"Flagged: [bold]{at_risk}[/] of {len(results)}")
    console.print()


def _render_hotlines() -> None:
    """Render crisis hotlines as a rich table."""
    table = Table(title="📞 Crisis Resources", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Contact", style="white")
    table.add_column("Available", justify="center", width=10)

    for hotline in crisis_resources():
        contact = hotline.number or hotline.website or ""
        if hotline.description:
            contact += f"\n[dim]{hotline.description}[/]"
        table.add_row(hotline.name, contact, hotline.available or "-")

    console.print(table)


if __name__ == "__main__":
    main()
