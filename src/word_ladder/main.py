import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from word_ladder.config import SolverConfig
from word_ladder.dictionary import WordDictionary
from word_ladder.exceptions import DictionaryUnavailableError, WordLadderException
from word_ladder.logging_config import setup_logging
from word_ladder.solver import SolverResponse, Strategy, WordLadderSolver

app = typer.Typer(help="Find word ladders between equal-length words.")
console = Console()
logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def _load_solver(
    config: SolverConfig, dictionary: Optional[str], log_level: Optional[str], plain_logs: bool
) -> WordLadderSolver:
    setup_logging(level=log_level or config.log_level, use_rich=not plain_logs)

    path = dictionary or config.dictionary_path
    try:
        words = WordDictionary.from_file(path)
    except DictionaryUnavailableError as e:
        console.print(e.message, style="red", markup=False)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    return WordLadderSolver(words, use_neighbor_cache=config.use_neighbor_cache)


def _print_response(response: SolverResponse) -> None:
    if not response.found:
        console.print("No path found.")
        return
    console.print(f"Path: {' -> '.join(response.path)}")
    console.print(f"Words in path: {response.word_count}")
    console.print(f"Substitutions: {response.path_length}")
    console.print(f"Nodes expanded: {response.nodes_expanded}")
    console.print(f"Execution time: {response.computation_time_ms:.2f} milliseconds")


@app.command()
def solve(
    start: Optional[str] = typer.Argument(None, help="Start word. Prompted for when omitted."),
    end: Optional[str] = typer.Argument(None, help="End word. Prompted for when omitted."),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Search strategy: UCS, Greedy or A*. Prompted for when omitted.",
    ),
    dictionary: Optional[str] = typer.Option(
        None,
        "--dictionary",
        "-d",
        help="Path to a newline-delimited word list.",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
    plain_logs: bool = typer.Option(False, "--plain-logs", help="Disable Rich log formatting."),
):
    """
    Find a word ladder from START to END.
    """
    config = SolverConfig.from_env()
    solver = _load_solver(config, dictionary, log_level, plain_logs)

    if start is None:
        start = typer.prompt("Enter start word")
    if end is None:
        end = typer.prompt("Enter end word")
    if strategy is None:
        strategy = typer.prompt("Choose algorithm (UCS/Greedy/A*)", default=config.default_strategy)

    try:
        response = solver.find_path(start, end, strategy)
    except WordLadderException as e:
        logger.warning(f"Rejected request {start!r} -> {end!r}: {e.message}")
        console.print(e.message, style="red", markup=False)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    _print_response(response)
    if not response.found:
        raise typer.Exit(code=EXIT_NOT_FOUND)


@app.command()
def compare(
    start: str = typer.Argument(..., help="Start word."),
    end: str = typer.Argument(..., help="End word."),
    dictionary: Optional[str] = typer.Option(
        None,
        "--dictionary",
        "-d",
        help="Path to a newline-delimited word list.",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
    plain_logs: bool = typer.Option(False, "--plain-logs", help="Disable Rich log formatting."),
):
    """
    Run every strategy on the same pair and tabulate the results.
    """
    solver = _load_solver(SolverConfig.from_env(), dictionary, log_level, plain_logs)

    try:
        responses = solver.compare(start, end)
    except WordLadderException as e:
        logger.warning(f"Rejected request {start!r} -> {end!r}: {e.message}")
        console.print(e.message, style="red", markup=False)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    table = Table(title=f"{responses[0].start} -> {responses[0].goal}")
    table.add_column("Strategy")
    table.add_column("Substitutions", justify="right")
    table.add_column("Nodes expanded", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Path")
    for response in responses:
        table.add_row(
            response.strategy.display_name,
            str(response.path_length) if response.found else "-",
            str(response.nodes_expanded),
            f"{response.computation_time_ms:.2f}",
            " -> ".join(response.path) if response.found else "No path found.",
        )
    console.print(table)

    if not any(response.found for response in responses):
        raise typer.Exit(code=EXIT_NOT_FOUND)


@app.command()
def strategies():
    """List the available search strategies."""
    for strategy in Strategy:
        console.print(f"{strategy.display_name:<8} ({strategy.value})")


if __name__ == "__main__":
    app()
