#!/usr/bin/env python3
"""
Main test runner for arithparse.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SAMPLES = {
    "prefix": "+ 1 * 2 3",
    "postfix": "1 2 3 * +",
    "infix-right": "1 + 2 + 3",
    "infix-precedence": "1 + 2 * 3 - 4",
    "infix-reversed": "1*2 + 3*(4+5)",
    "climbing": "1^-2^3*4 + -5*6*-7",
}


def run_smoke_checks() -> bool:
    """Parse one sample per variant and print the trees."""
    try:
        from arithparse.parser import PARSERS, get_parser, ParseError
        print("✅ arithparse modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import arithparse modules: {e}")
        return False

    print("Parsing one sample per grammar...")
    for name, source in SAMPLES.items():
        try:
            ast = get_parser(name)().parse(source)
        except ParseError as e:
            print(f"  ❌ {name}: {e.kind.value}: {e.detail}")
            return False
        print(f"  🌳 {name:<17} {source:<22} => {ast}")

    registered = {cls.name for cls in PARSERS.values()}
    missing = registered - set(SAMPLES)
    if missing:
        print(f"  ⚠️  No smoke sample for: {', '.join(sorted(missing))}")
    print()
    return True


def run_all_tests() -> bool:
    """Run all arithparse tests."""

    print("🚀 arithparse Test Suite")
    print("=" * 60)

    if not run_smoke_checks():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
