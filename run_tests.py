#!/usr/bin/env python3
"""
Test runner for the keyboard friendly graphics view.

Usage:
    python run_tests.py              # Run unit + integration tests
    python run_tests.py unit         # Run unit tests only (no Qt needed)
    python run_tests.py integration  # Run Qt view tests only
    python run_tests.py --coverage   # Run with coverage report

Examples:
    python run_tests.py unit -x            # Stop on first failure
    python run_tests.py --coverage         # With coverage report
"""

import sys
import subprocess
import argparse


def main():
    parser = argparse.ArgumentParser(
        description="Run keyboard friendly view tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Test Suites:
  unit         Models, navigation, keyboard controller, settings (fast, no Qt)
  integration  Qt view and demo dialog, run offscreen
  all          All test suites
        """
    )
    parser.add_argument(
        "suite",
        nargs="?",
        choices=["unit", "integration", "all"],
        default="all",
        help="Test suite to run (default: all)"
    )
    parser.add_argument(
        "--coverage", "--cov",
        action="store_true",
        help="Run with coverage report"
    )
    parser.add_argument(
        "--failfast", "-x",
        action="store_true",
        help="Stop on first failure"
    )

    args = parser.parse_args()

    # Build pytest command
    cmd = [sys.executable, "-m", "pytest", "-v"]

    # Select test directory based on suite
    if args.suite == "unit":
        cmd.append("tests/unit")
    elif args.suite == "integration":
        cmd.append("tests/integration")
    else:
        cmd.append("tests")

    # Add failfast
    if args.failfast:
        cmd.append("-x")

    # Add coverage options
    if args.coverage:
        cmd.extend([
            "--cov=models",
            "--cov=services",
            "--cov=views",
            "--cov-report=term-missing",
            "--cov-report=html:coverage_report"
        ])

    # Print command
    print(f"Running: {' '.join(cmd)}")
    print("-" * 60)

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
