#!/usr/bin/env python3
"""
Main test runner for arithexpr tests.

Author: arithexpr developers
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Push one expression through every stage and report what each produced."""

    print("arithexpr Test Suite")
    print("=" * 60)

    try:
        from arithexpr.lexer import Lexer
        from arithexpr.parser import Parser
        from arithexpr.interpreter import Interpreter
    except ImportError as e:
        print(f"Failed to import arithexpr modules: {e}")
        return False

    source = "-(1 + 2.5) * 2 ^ 3 ^ 2 / 4"
    try:
        tokens = Lexer(source).tokenize()
        print(f"  Lexing...   {len(tokens)} tokens")

        tree = Parser(tokens).parse()
        print(f"  Parsing...  {tree.represent()}")

        value = Interpreter().evaluate(tree)
        print(f"  Evaluating... {value}")
    except Exception as e:
        print(f"  Pipeline failed: {e}")
        return False

    print()
    return True


def run_all_tests():
    """Run the smoke test and then every unittest under tests/."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
