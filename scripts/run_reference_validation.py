#!/usr/bin/env python3
"""Validate the property correlations against literature reference data.

Checks saturation pressure, brine density, thermal conductivity and NaCl
solubility against IAPWS-95 and CRC handbook values.

Usage:
    python scripts/run_reference_validation.py [--property NAME] [--tolerance TOL] [--verbose]
"""

import argparse
import logging
import sys
import time

from jax_brine.validation_pack.property_validation import validate_against_reference


def print_result(result, verbose: bool = False):
    """Print one property's validation result."""
    status = "PASS" if result.passed else "FAIL"
    print(f"\n{result.property_name}")
    print(f"  Status: {status} ({result.n_points} points, tolerance {result.tolerance*100:.1f}%)")
    print(f"  Max error:  {result.max_relative_error*100:.3f}%")
    print(f"  Mean error: {result.mean_relative_error*100:.3f}%")

    if verbose:
        print(f"  {'T [K]':>8} {'w_NaCl':>8} {'reference':>12} {'computed':>12} {'error':>8}")
        for T, w, ref, calc, err in result.all_errors:
            print(f"  {T:>8.2f} {w:>8.3f} {ref:>12.5g} {calc:>12.5g} {err*100:>7.3f}%")


def main():
    parser = argparse.ArgumentParser(
        description="Validate brine property correlations against reference data"
    )
    parser.add_argument(
        "--property",
        "-p",
        action="append",
        dest="properties",
        help="Property to validate (repeatable). Default: all",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Relative tolerance overriding the per-property defaults",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print every reference point",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("JAX BRINE PROPERTIES - REFERENCE VALIDATION")
    print("=" * 60)

    start_time = time.time()
    try:
        results = validate_against_reference(args.properties, args.tolerance)
    except ValueError as e:
        print(f"  ERROR: {e}")
        return 2

    for result in results.values():
        print_result(result, args.verbose)

    elapsed = time.time() - start_time
    all_passed = all(r.passed for r in results.values())

    print("\n" + "=" * 60)
    print(f"  Time elapsed: {elapsed:.1f} s")
    print(f"  OVERALL: {'ALL VALIDATIONS PASSED' if all_passed else 'SOME VALIDATIONS FAILED'}")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
