#!/usr/bin/env python3
"""
Test Runner for the Merkle Whitelist Library

This script runs all test suites and prints a per-suite and overall summary.
"""

import unittest
import sys
import os
from io import StringIO

# Make the package and the shared fixtures importable
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src'))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def run_test_suite(test_module_name, description):
    """
    Run a specific test suite and return results.

    Args:
        test_module_name: Name of the test module to run
        description: Human-readable description of the test suite

    Returns:
        Tuple of (success_count, failure_count, error_count, skip_count)
    """
    print(f"\n{'='*60}")
    print(f"Running {description}")
    print('='*60)

    test_module = __import__(test_module_name)

    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(test_module)

    stream = StringIO()
    runner = unittest.TextTestRunner(
        stream=stream,
        verbosity=2,
        resultclass=unittest.TextTestResult
    )
    result = runner.run(suite)
    print(stream.getvalue())

    total_tests = result.testsRun
    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)
    success = total_tests - failures - errors - skipped

    print(f"\n{description} Summary:")
    print(f"  Total Tests: {total_tests}")
    print(f"  Successful: {success}")
    print(f"  Failed: {failures}")
    print(f"  Errors: {errors}")
    print(f"  Skipped: {skipped}")

    return success, failures, errors, skipped


def main():
    """Run all test suites and provide comprehensive reporting."""
    print("Starting Merkle Whitelist Test Suite")
    print(f"Python version: {sys.version}")

    test_suites = [
        ('test_hashing', 'Hashing Tests'),
        ('test_tree', 'Tree Building Tests'),
        ('test_proof', 'Proof Tests'),
        ('test_main', 'Proof Generation Workflow Tests'),
        ('test_whitelist', 'Whitelist Manager Tests'),
        ('test_config', 'Configuration Tests'),
    ]

    total_success = 0
    total_failures = 0
    total_errors = 0
    total_skipped = 0

    for module_name, description in test_suites:
        try:
            success, failures, errors, skipped = run_test_suite(module_name, description)
        except ImportError as e:
            print(f"\nError importing {module_name}: {e}")
            total_errors += 1
            continue
        total_success += success
        total_failures += failures
        total_errors += errors
        total_skipped += skipped

    print(f"\n{'='*60}")
    print("OVERALL TEST SUMMARY")
    print('='*60)
    print(f"Successful: {total_success}")
    print(f"Failed: {total_failures}")
    print(f"Errors: {total_errors}")
    print(f"Skipped: {total_skipped}")

    if total_failures == 0 and total_errors == 0:
        print("\nAll tests passed.")
        return 0
    print(f"\nTests failed: {total_failures + total_errors} issues found")
    return 1


if __name__ == '__main__':
    sys.exit(main())
