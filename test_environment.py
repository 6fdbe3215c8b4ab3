"""
Environment test script to verify the alphabetical id setup and basic functionality.
"""

import sys
from typing import Any, Dict

import numpy as np
import scipy
import matplotlib
from rich.console import Console
from rich.table import Table

import alidval
from alidval import AlphabeticalIdEncoder, EncoderConfig, RangeScaler, ScaleRange

console = Console()


def check_basic_encoding() -> Dict[str, bool]:
    """Check basic encoding and scaling functionality."""
    encoder = AlphabeticalIdEncoder()
    stretch_encoder = AlphabeticalIdEncoder(EncoderConfig(first_char_alphabetic_stretch=True))
    results = {}

    string_id = encoder.encode("Hello")
    results["standard_encoding"] = 0.0 <= string_id <= 1.0
    results["case_insensitive"] = encoder.encode("hello") == string_id
    results["stretch_encoding"] = stretch_encoder.encode("A") == 0.0

    ids = encoder.batch_encode(["apple", "banana", "cherry"])
    results["batch_encoding"] = ids.shape == (3,) and bool(np.all(np.diff(ids) > 0))

    scaler = RangeScaler(ScaleRange(5.0, 1.0))
    results["reversed_scaling"] = scaler.scale(0.0) == 5.0 and scaler.scale(1.0) == 1.0
    return results


def environment_info() -> Dict[str, Any]:
    return {
        "Python": sys.version.split()[0],
        "alidval": alidval.__version__,
        "NumPy": np.__version__,
        "SciPy": scipy.__version__,
        "Matplotlib": matplotlib.__version__,
    }


def test_environment_checks_pass():
    assert all(check_basic_encoding().values())


def run_environment_test() -> None:
    """Run complete environment test suite and display results."""
    console.print("\n[bold blue]Running Alphabetical Id Environment Test[/bold blue]\n")

    env_table = Table(title="Python Environment")
    env_table.add_column("Component", style="cyan")
    env_table.add_column("Version", style="green")
    for component, version in environment_info().items():
        env_table.add_row(component, str(version))
    console.print(env_table)

    console.print("\n[yellow]Testing Basic Encoding Functionality...[/yellow]")
    encoding_results = check_basic_encoding()

    results_table = Table(title="Encoding Tests")
    results_table.add_column("Test", style="cyan")
    results_table.add_column("Status", style="green")
    for test_name, passed in encoding_results.items():
        status = "[green]✓ Passed" if passed else "[red]✗ Failed"
        results_table.add_row(test_name.replace("_", " ").title(), status)
    console.print(results_table)

    if all(encoding_results.values()):
        console.print("\n[green]✨ All tests passed successfully![/green]")
    else:
        console.print("\n[red]❌ Some tests failed. Please check the results above.[/red]")


if __name__ == "__main__":
    run_environment_test()
