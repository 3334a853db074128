"""One verification cycle: resolve samples, build, run and report."""

from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from ..config.solution_config import SolutionConfig
from ..utils.terminal import clear_screen, console, print_error
from .cases import NamePredicate, load_test_cases
from .executor import CaseResult, Verdict, build_solution, run_test_cases
from .watch import WatchScheduler, watch_paths


def print_case_result(result: CaseResult) -> None:
    console.print(f"Test case: [bold]{escape(result.name)}[/bold]")

    if result.verdict is Verdict.RUN_FAILED:
        print_error(result.error)
        return

    console.print(f"Time: {result.seconds:.6f}")

    if result.verdict is Verdict.CORRECT:
        console.print("[green]Correct[/green]")
        return

    console.print("[red]Wrong Answer[/red]")
    console.print()
    console.print("Input:", markup=False)
    console.print(result.input, markup=False, highlight=False, soft_wrap=True)
    console.print("Found:", markup=False)
    console.print(result.found, markup=False, highlight=False, soft_wrap=True)
    console.print("Expected:", markup=False)
    console.print(result.expected, markup=False, highlight=False, soft_wrap=True)


def verify_solution(
    directory: Path,
    config: SolutionConfig,
    predicate: Optional[NamePredicate] = None,
    clear: bool = False,
) -> List[CaseResult]:
    """Build the solution and check it against every matching sample."""
    cases = load_test_cases(config.sample_dir(directory), predicate)

    if clear:
        clear_screen()

    build_solution(directory, config.build)

    if clear:
        clear_screen()

    results = []
    for result in run_test_cases(directory, config.run, cases):
        print_case_result(result)
        results.append(result)

    passed = sum(result.passed for result in results)
    style = "green" if passed == len(results) else "red"
    console.print(f"\n[{style}]{passed}/{len(results)} test cases passed[/{style}]")

    return results


def watch_solution(
    directory: Path,
    config: SolutionConfig,
    predicate: Optional[NamePredicate] = None,
    clear: bool = False,
) -> None:
    """Verify the solution now and again whenever its files or samples change."""
    files = [Path(directory) / path for path in config.submission.files]

    with watch_paths(files, config.sample_dir(directory)) as events:
        scheduler = WatchScheduler(
            lambda: verify_solution(directory, config, predicate, clear), events
        )
        scheduler.run()
