import logging
import typing as t

import typer

from kinorrt.display.plot import EdgeRecorder, save_plot
from kinorrt.exceptions import ConfigurationError
from kinorrt.log import logger
from kinorrt.report import BenchmarkReport
from kinorrt.scenario import Scenario

app = typer.Typer()


def _load_scenario(scenario: str) -> Scenario:
    try:
        return Scenario.load(scenario)
    except (ConfigurationError, FileNotFoundError) as e:
        typer.echo(f"Could not load scenario {scenario}: {e}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(verbose: t.Annotated[bool, typer.Option("--verbose", "-v")] = False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def plan(
    scenario: str,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
    plot: t.Annotated[t.Optional[str], typer.Option("--plot")] = None,
    max_steps: t.Annotated[t.Optional[int], typer.Option("--max-steps")] = None,
):
    """Runs one planner on SCENARIO and prints its report as JSON."""
    sc = _load_scenario(scenario)
    recorder = EdgeRecorder()
    try:
        rrt = sc.create_planner(seed=seed, edge_callbacks=[recorder])
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    rrt.plan(max_steps=max_steps)
    report = rrt.report()
    typer.echo(report.model_dump_json(indent=2))

    if plot:
        save_plot(rrt, plot, recorder=recorder, obstacle_map=sc.obstacle_map)
        logger.info("Saved plot to %s", plot)

    if not rrt.is_successful():
        raise typer.Exit(code=1)


@app.command()
def benchmark(
    scenario: str,
    runs: t.Annotated[int, typer.Option("--runs")] = 10,
    seed: t.Annotated[int, typer.Option("--seed")] = 0,
):
    """Runs RUNS planners with consecutive seeds and prints aggregate statistics."""
    sc = _load_scenario(scenario)
    reports = []
    for i in range(runs):
        try:
            rrt = sc.create_planner(seed=seed + i)
        except ConfigurationError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=2)
        rrt.plan()
        reports.append(rrt.report())
        logger.info("Run %d finished with status %s", i, rrt.status.value)

    typer.echo(BenchmarkReport.from_reports(reports).model_dump_json(indent=2))


if __name__ == "__main__":
    app()
