#!/usr/bin/env python3
"""Test runner script for rubikcage with different test configurations."""

import argparse
import subprocess
import sys


def run_command(cmd, description=""):
    """Run a command and handle errors."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, capture_output=False)
    if result.returncode != 0:
        print(f"\n❌ {description} failed with return code {result.returncode}")
        return False
    else:
        print(f"\n✅ {description} completed successfully")
        return True


def run_suite(path, description, verbose=False, markers=None):
    cmd = [sys.executable, "-m", "pytest", path]
    if verbose:
        cmd.append("-v")
    if markers:
        cmd.extend(["-m", markers])
    cmd.extend(["--tb=short"])

    return run_command(cmd, description)


def run_specific_component(component, verbose=False):
    """Run tests for a specific component."""
    component_map = {
        'cage': 'test_cage.py',
        'game': 'test_game.py',
        'zobrist': 'test_zobrist.py',
        'symmetry': 'test_symmetry.py',
        'evaluator': 'test_evaluator.py',
        'lookup': 'test_lookup.py',
        'store': 'test_store.py',
        'db': 'test_eval_db.py',
        'cli': 'test_cli.py',
    }

    if component not in component_map:
        print(f"❌ Unknown component: {component}")
        print(f"Available components: {list(component_map.keys())}")
        return False

    return run_suite(f"tests/unit/{component_map[component]}", f"{component.title()} Component Tests", verbose)


def main():
    """Main test runner."""
    parser = argparse.ArgumentParser(description="rubikcage Test Runner")

    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run integration tests only")
    parser.add_argument("--fast", action="store_true", help="Run fast tests only (exclude slow)")
    parser.add_argument("--component", type=str, help="Run tests for specific component")
    parser.add_argument("--markers", type=str, help="Run tests with specific pytest markers")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args()

    if args.unit:
        success = run_suite("tests/unit/", "Unit Tests", args.verbose, args.markers)
    elif args.integration:
        success = run_suite("tests/integration/", "Integration Tests", args.verbose, args.markers)
    elif args.fast:
        success = run_suite("tests/", "Fast Tests", args.verbose, "not slow")
    elif args.component:
        success = run_specific_component(args.component, args.verbose)
    else:
        success = run_suite("tests/", "All Tests", args.verbose, args.markers)

    print(f"\n{'='*60}")
    if success:
        print("🎉 All tests completed successfully!")
        print(f"{'='*60}")
        sys.exit(0)
    else:
        print("❌ Some tests failed. Check output above.")
        print(f"{'='*60}")
        sys.exit(1)


if __name__ == "__main__":
    main()
