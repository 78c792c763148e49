"""Demo command - times random string generation with one timer per size.

CLI Examples:
    benchtimer demo                          # 5 loops, 100k strings each, ms
    benchtimer demo -n 1000 --unit us        # Quicker run in microseconds
    benchtimer demo --mode sequential        # Stop timers on one thread
    benchtimer demo -o timings.json          # Save to JSON
    benchtimer demo -o a.json -o b.yaml      # Multiple outputs
"""

import random
import sys
from pathlib import Path

import click

from benchtimer.config import BenchConfig
from benchtimer.registry import ExecutionMode
from benchtimer.results import BenchResults, OutputFormat
from benchtimer.units import DurationUnit
from benchtimer.utils.logger import Logger
from benchtimer.workloads import run_string_benchmark


def get_output_format(output: str | None, fmt: str | None) -> OutputFormat:
    """Determine output format from filename or explicit format."""
    if fmt:
        return OutputFormat(fmt.lower())

    if output:
        suffix = Path(output).suffix.lower()
        if suffix == ".json":
            return OutputFormat.JSON
        elif suffix in (".yaml", ".yml"):
            return OutputFormat.YAML

    return OutputFormat.TEXT


def run_demo(
    loops: int,
    base_length: int,
    iterations: int,
    unit: str | None,
    mode: str | None,
    seed: int | None,
    outputs: tuple[str, ...],
    fmt: str | None,
) -> BenchResults:
    """Run the string-generation workload and emit its timings.

    ``unit`` and ``mode`` override the environment configuration when given.
    """
    config = BenchConfig.from_env()
    if unit:
        config.unit = DurationUnit.parse(unit)
    if mode:
        config.mode = ExecutionMode(mode.lower())

    log = Logger.get("demo")
    log.info(
        f"Running {loops} loops x {iterations} strings "
        f"(unit={config.unit.symbol}, mode={config.mode.value})"
    )

    registry = config.create_registry()
    rng = random.Random(seed)
    run_string_benchmark(
        registry,
        loops=loops,
        base_length=base_length,
        iterations=iterations,
        rng=rng,
        mode=config.mode,
    )

    results = BenchResults(unit=config.unit)
    results.add_registry(registry)
    registry.remove_all()

    if outputs:
        for out_path in outputs:
            results.emit(out_path, get_output_format(out_path, None))
            click.echo(f"Results saved to: {out_path}")

    if not outputs or fmt:
        out_format = OutputFormat(fmt) if fmt else OutputFormat.TEXT
        if out_format == OutputFormat.TEXT:
            results.emit_stdout()
        else:
            results.emit(sys.stdout, out_format)

    return results
