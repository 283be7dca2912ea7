#!/usr/bin/env python3
"""
dharma Fixture Test Runner

Runs dharma program fixtures through the command-line interpreter and
verifies their output against expected results.

Each fixture `tNN_name.dh` has a `tNN_name.expected.txt` next to it. The
expected file holds either the exact standard output of a successful run, or
a single line `ERROR: <message>` for a run that must fail with `<message>`
on standard error.

Usage:
    python run_fixtures.py [options]

Examples:
    python run_fixtures.py
    python run_fixtures.py --verbose --fail-fast
    python run_fixtures.py --fixtures-dir ./custom_tests
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

ERROR_PREFIX = "ERROR: "
PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class FixtureResult:
    """Represents the result of a single fixture."""
    name: str
    passed: bool
    expected_output: str = ""
    actual_output: str = ""
    error_message: str = ""

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}"


@dataclass
class FixtureSuite:
    """Manages a collection of fixture results."""
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    def add_result(self, result: FixtureResult) -> None:
        self.results.append(result)

    def print_summary(self) -> None:
        """Print a summary of all fixture results."""
        print("\n" + "=" * 50)
        print(f"Fixture Summary: {self.passed_count} passed, {self.failed_count} failed")
        print("=" * 50)

        if self.failed_count > 0:
            print("\nFailed fixtures:")
            for result in self.results:
                if not result.passed:
                    print(f"  - {result.name}: {result.error_message}")


class FixtureRunner:
    """Discovers, runs and checks dharma program fixtures."""

    def __init__(self, fixtures_dir: Path, verbose: bool = False, fail_fast: bool = False) -> None:
        """
        Initialize the fixture runner.

        Args:
            fixtures_dir: Directory containing program fixtures
            verbose: Enable verbose output
            fail_fast: Stop on first failure
        """
        self.fixtures_dir = fixtures_dir.resolve()
        self.verbose = verbose
        self.fail_fast = fail_fast
        self.suite = FixtureSuite()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    def discover_fixtures(self) -> Iterator[Path]:
        """Yield fixture program files in name order."""
        if not self.fixtures_dir.exists():
            raise FileNotFoundError(f"Fixtures directory not found: {self.fixtures_dir}")

        fixtures = sorted(self.fixtures_dir.glob("t*.dh"))
        if not fixtures:
            raise ValueError(f"No fixtures found in {self.fixtures_dir}")

        logger.debug("Discovered %d fixtures", len(fixtures))
        yield from fixtures

    def normalize_output(self, text: str) -> str:
        """Convert CRLF to LF and trim trailing whitespace."""
        return text.replace("\r\n", "\n").rstrip()

    def run_program(self, program: Path) -> subprocess.CompletedProcess:
        """Run one program through `python -m dharma run`."""
        cmd = [sys.executable, "-m", "dharma", "run", str(program)]
        logger.debug("Running: %s", " ".join(cmd))
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
            cwd=PROJECT_ROOT,
            timeout=30
        )

    def run_single_fixture(self, program: Path) -> FixtureResult:
        """Run one fixture and compare against its expected file."""
        name = program.stem
        expected_file = self.fixtures_dir / f"{name}.expected.txt"

        if not expected_file.exists():
            return FixtureResult(name=name, passed=False, error_message=f"Missing expected file: {expected_file}")

        expected = self.normalize_output(expected_file.read_text(encoding="utf-8"))

        try:
            completed = self.run_program(program)
        except (subprocess.SubprocessError, OSError) as e:
            logger.error("Failed to run %s: %s", name, e)
            return FixtureResult(name=name, passed=False, expected_output=expected, error_message=str(e))

        if expected.startswith(ERROR_PREFIX):
            message = expected[len(ERROR_PREFIX):]
            actual = self.normalize_output(completed.stderr)
            passed = completed.returncode != 0 and message in actual
        else:
            actual = self.normalize_output(completed.stdout)
            passed = completed.returncode == 0 and actual == expected

        if not passed and self.verbose:
            print("---- expected ----")
            print(expected)
            print("---- actual ----")
            print(actual)

        return FixtureResult(
            name=name,
            passed=passed,
            expected_output=expected,
            actual_output=actual,
            error_message="" if passed else "Output mismatch"
        )

    def run_all(self) -> int:
        """Run every fixture. Returns the process exit code."""
        try:
            fixtures = list(self.discover_fixtures())
        except (FileNotFoundError, ValueError) as e:
            logger.error("Fixture discovery failed: %s", e)
            return 1

        for program in fixtures:
            result = self.run_single_fixture(program)
            print(result)
            self.suite.add_result(result)
            if self.fail_fast and not result.passed:
                break

        self.suite.print_summary()
        return 0 if self.suite.failed_count == 0 else 1


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run dharma program fixtures")
    parser.add_argument(
        "--fixtures-dir",
        type=Path,
        default=PROJECT_ROOT / "tests" / "fixtures",
        help="Directory containing fixtures (default: tests/fixtures)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")
    return parser


def main(argv: list = None) -> int:
    args = create_parser().parse_args(argv)
    runner = FixtureRunner(args.fixtures_dir, verbose=args.verbose, fail_fast=args.fail_fast)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
