"""
Main evaluation script for alphabetical id values.
Runs the evaluation suite on synthetic strings and reports the results.
"""

import argparse
from pathlib import Path
from typing import Dict

import numpy as np
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TimeElapsedColumn
from rich.table import Table

from alidval import AlphabeticalIdEvaluator, EvaluationConfig, SyntheticStringDataset
from alidval.utils import RangeParseError, parse_range

console = Console()

METRIC_CATEGORIES = {
    "Ordering": ["rank_correlation", "order_violations"],
    "Resolution": ["collision_rate", "precision_saturation"],
    "Distribution": ["range_coverage", "bucket_balance"],
}


def display_results_table(results: Dict[str, float]) -> None:
    """Display evaluation results in a formatted table."""
    if not results:
        console.print("[red]No results to display[/red]")
        return

    table = Table(title="Alphabetical Id Evaluation Results")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Metric", style="magenta")
    table.add_column("Score", justify="right", style="green")

    for category_name, metric_names in METRIC_CATEGORIES.items():
        table.add_row(f"[bold]{category_name}[/bold]", "", "", style="bright_black")
        for metric in metric_names:
            if metric not in results:
                continue
            score = results[metric]
            value = "n/a" if np.isnan(score) else f"{score:.3f}"
            table.add_row("", metric.replace("_", " ").title(), value)
        table.add_row("", "", "")

    console.print(table)


def run_evaluation(args: argparse.Namespace) -> Dict[str, float]:
    """Run complete evaluation suite."""
    console.rule("[bold blue]Alphabetical Id Evaluation[/bold blue]")

    config = EvaluationConfig(
        num_samples=args.num_samples,
        seed=args.seed,
        max_length=args.max_length,
        num_buckets=args.buckets,
        first_char_alphabetic_stretch=args.stretch,
        scale_range=args.range,
    )

    with Progress(
        SpinnerColumn(),
        *Progress.get_default_columns(),
        TimeElapsedColumn(),
        console=console
    ) as progress:
        data_task = progress.add_task("[cyan]Generating strings...", total=1)
        dataset = SyntheticStringDataset(config)
        progress.update(data_task, completed=1)

        eval_task = progress.add_task("[cyan]Running evaluation...", total=1)
        evaluator = AlphabeticalIdEvaluator(config)
        results = evaluator.evaluate(dataset)
        progress.update(eval_task, completed=1)

    console.print(f"Evaluated {len(dataset)} strings")
    display_results_table(results)

    if args.save_results:
        save_dir = Path("results")
        evaluator.save_results(save_dir)
        console.print(f"\n[green]Results saved in {save_dir}[/green]")

    return results


def range_argument(text: str):
    try:
        return parse_range(text)
    except RangeParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run alphabetical id evaluation"
    )
    parser.add_argument(
        "--num-samples",
        type=int,
        default=1000,
        help="Number of synthetic strings to generate"
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=16,
        help="Maximum length of generated strings"
    )
    parser.add_argument(
        "--buckets",
        type=int,
        default=26,
        help="Number of buckets for the balance metric"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "-A", "--stretch",
        action="store_true",
        help="Evaluate the first-character alphabetic stretch mode"
    )
    parser.add_argument(
        "-r", "--range",
        type=range_argument,
        default=None,
        help="Scale ids onto <lower>,<upper>"
    )
    parser.add_argument(
        "--save-results",
        action="store_true",
        help="Save evaluation results and visualization"
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    run_evaluation(args)
