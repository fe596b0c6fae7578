#!/usr/bin/env python3
"""
Courier Compliance Test Runner
==============================
Run all unit tests for the compliance engines.

Usage:
    python run_tests.py          # Run all tests
    python run_tests.py -v       # Verbose output
    python run_tests.py -k name  # Run tests matching 'name'
"""
import subprocess
import sys
import os


def main():
    # Run from tests directory
    test_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(test_dir)

    cmd = [sys.executable, "-m", "pytest"]
    cmd.extend(sys.argv[1:])

    # Default: verbose
    if "-v" not in sys.argv and "-q" not in sys.argv:
        cmd.append("-v")

    print("=" * 60)
    print("🧪 Courier Compliance Unit Tests")
    print("=" * 60)
    print(f"Running: {' '.join(cmd)}")
    print("-" * 60)

    result = subprocess.run(cmd)

    print("-" * 60)
    if result.returncode == 0:
        print("✅ All tests passed!")
    else:
        print(f"❌ Tests failed (exit code: {result.returncode})")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
