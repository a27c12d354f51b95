"""Regression runner comparing rendered SVG files with expected PNG images."""

from __future__ import annotations

import itertools
import os
import sys
import traceback
from collections.abc import Sequence
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from pathlib import Path

from .image import PNGImage
from .reader import convert

__all__ = ["ConversionTestDriver", "RunSummary", "LOG_FILE_NAME", "main"]

LOG_FILE_NAME = "test_log.txt"


@dataclass(frozen=True)
class RunSummary:
    """Counts of the tests run."""

    total: int
    passed: int
    failed: int


def _strip_extension(name: str) -> str:
    index = name.rfind(".")
    return name if index < 0 else name[:index]


class ConversionTestDriver:
    """Runs conversion tests found under ``<root>/input`` and logs details."""

    def __init__(self, root_path: str | os.PathLike[str]) -> None:
        self.root_path = Path(root_path)
        self.total_tests = 0
        self.passed_tests = 0
        self.failed_tests = 0
        self._log = open(self.root_path / LOG_FILE_NAME, "w", encoding="utf-8")

    def close(self) -> None:
        """Close the log file."""
        self._log.close()

    def __enter__(self) -> ConversionTestDriver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run_conversion_test(self, name: str) -> bool:
        """Render ``input/<name>.svg`` and compare it with ``expected/<name>.png``."""
        svg_file = self.root_path / "input" / f"{name}.svg"
        exp_file = self.root_path / "expected" / f"{name}.png"
        out_file = self.root_path / "output" / f"{name}.png"
        convert(svg_file, out_file)
        expected = PNGImage.load(exp_file)
        actual = PNGImage.load(out_file)
        if (expected.width, expected.height) != (actual.width, actual.height):
            print(
                "Images have different dimensions: "
                f"{expected.width}x{expected.height} != {actual.width}x{actual.height}"
            )
            return False
        for i, j in itertools.product(range(expected.width), range(expected.height)):
            want, got = expected[i, j], actual[i, j]
            if want != got:
                print(
                    f"pixel ({i} {j}): expected "
                    f"{want.red} {want.green} {want.blue} "
                    f"got {got.red} {got.green} {got.blue}"
                )
                return False
        return True

    def _run_test(self, name: str) -> None:
        self.total_tests += 1
        self._log.write(f">>>> [{self.total_tests}] {name} <<<<\n")
        self._log.flush()
        print(f"[{self.total_tests}] {name}: ", end="", flush=True)

        with redirect_stdout(self._log), redirect_stderr(self._log):
            try:
                success = self.run_conversion_test(name)
            except Exception:
                traceback.print_exc()
                success = False
        self._log.flush()

        print("pass" if success else "fail")
        if success:
            self.passed_tests += 1
        else:
            self.failed_tests += 1

    def _summary(self) -> RunSummary:
        return RunSummary(self.total_tests, self.passed_tests, self.failed_tests)

    def run_tests(self, spec: str) -> RunSummary:
        """Run every test whose input file name starts with ``spec``."""
        input_dir = f"{self.root_path}/input"
        try:
            with os.scandir(input_dir) as entries:
                names = sorted(
                    _strip_extension(entry.name)
                    for entry in entries
                    if entry.is_file(follow_symlinks=False)
                    and entry.name.startswith(spec)
                )
        except OSError:
            print(f"Unable to open input directory {input_dir}", file=sys.stderr)
            return self._summary()

        if not names:
            print(f"No scripts matched the spec: {spec}")
            return self._summary()

        print(f"== {len(names)} tests to execute  ==")
        for name in names:
            self._run_test(name)

        print("== TEST EXECUTION SUMMARY ==")
        print(f"Total tests: {self.total_tests}")
        print(f"Passed tests: {self.passed_tests}")
        print(f"Failed tests: {self.failed_tests}")
        print(f"See {LOG_FILE_NAME} for details.")
        return self._summary()


def main(argv: Sequence[str] | None = None) -> int:
    """Run tests: ``[spec [root]]``; the root defaults to the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    root = args[1] if len(args) == 2 else "."
    spec = args[0] if args else ""
    with ConversionTestDriver(root) as driver:
        driver.run_tests(spec)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())