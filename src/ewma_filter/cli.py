from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from .config import DemoCfg, EWMAcfg
from .ewma import EWMA, calculate_array
from .utils import env_default_float, setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    """EWMA demo: smooth a sample series and print the running average."""
    setup_logging(verbose)


# EWMAError, ValidationError, JSONDecodeError and a bad $EWMA_ALPHA are all ValueErrors
BAD_INPUT = (ValueError, OSError)


def _load_cfg(alpha: Optional[float], values_json: Optional[str], *, env_alpha: bool = True) -> DemoCfg:
    raw = {}
    if alpha is None and env_alpha:
        alpha = env_default_float("EWMA_ALPHA", EWMAcfg().alpha)
    if alpha is not None:
        raw["ewma"] = {"alpha": alpha}
    if values_json is not None:
        raw["values"] = json.loads(Path(values_json).read_text(encoding="utf-8"))
    return DemoCfg.model_validate(raw)


def _fail(msg: str) -> None:
    rprint(f"[red]error:[/red] {escape(msg)}")
    raise typer.Exit(code=2)


ALPHA_HELP = "Smoothing factor in (0, 1]; defaults to $EWMA_ALPHA, then 0.3"
VALUES_HELP = "JSON file holding a list of samples"


@app.command()
def steps(
    alpha: Optional[float] = typer.Option(None, help=ALPHA_HELP),
    values_json: Optional[str] = typer.Option(None, help=VALUES_HELP),
) -> None:
    """Feed the series through one estimator, one update at a time."""
    try:
        cfg = _load_cfg(alpha, values_json)
        e = EWMA.from_config(cfg.ewma)
        table = Table(title=f"Step by step, alpha={e.alpha:.2f}")
        table.add_column("input", justify="right")
        table.add_column("ewma", justify="right")
        for x in cfg.values:
            table.add_row(f"{x:.7f}", f"{e.update(x):.3f}")
    except BAD_INPUT as exc:
        _fail(str(exc))
    rprint(table)


@app.command()
def batch(
    alpha: Optional[float] = typer.Option(None, help=ALPHA_HELP),
    values_json: Optional[str] = typer.Option(None, help=VALUES_HELP),
) -> None:
    """Smooth the whole series with calculate_array."""
    try:
        cfg = _load_cfg(alpha, values_json)
        out = calculate_array(cfg.values, cfg.ewma.alpha)
    except BAD_INPUT as exc:
        _fail(str(exc))

    table = Table(title=f"Array calculation, alpha={cfg.ewma.alpha:.2f}")
    table.add_column("index", justify="right")
    table.add_column("value", justify="right")
    table.add_column("ewma", justify="right")
    for i, (x, v) in enumerate(zip(cfg.values, out)):
        table.add_row(str(i), f"{x:.1f}", f"{v:.3f}")
    rprint(table)


@app.command()
def compare(
    alpha: Optional[List[float]] = typer.Option(None, help="Repeat to sweep several alphas"),
    values_json: Optional[str] = typer.Option(None, help=VALUES_HELP),
) -> None:
    """Run the series once per alpha and print one table each."""
    try:
        cfg = _load_cfg(None, values_json, env_alpha=False)
        if alpha:
            cfg = DemoCfg.model_validate({**cfg.model_dump(), "compare_alphas": alpha})
        runs = [(a, calculate_array(cfg.values, a)) for a in cfg.compare_alphas]
    except BAD_INPUT as exc:
        _fail(str(exc))

    for a, out in runs:
        table = Table(title=f"alpha={a:.1f}")
        table.add_column("input", justify="right")
        table.add_column("ewma", justify="right")
        for x, v in zip(cfg.values, out):
            table.add_row(f"{x:.1f}", f"{v:.3f}")
        rprint(table)
