# tests/conftest.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the expression engine tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for notations and formulas
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import syntax
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def ascii_notation():
    """Fresh copy of the default ascii notation.

    Returns:
        OperatorNotation: ``~ & v -> <->``
    """
    from syntax import OperatorNotation

    return OperatorNotation.ascii()


@pytest.fixture
def all_notations():
    """Every built-in notation preset, freshly constructed.

    Returns:
        Dict[str, OperatorNotation]: Preset name to notation
    """
    from syntax import OperatorNotation

    return {
        "ascii": OperatorNotation.ascii(),
        "mathematical": OperatorNotation.mathematical(),
        "mathematical_ascii": OperatorNotation.mathematical_ascii(),
        "bits": OperatorNotation.bits(),
        "bits_ascii": OperatorNotation.bits_ascii(),
        "boolean": OperatorNotation.boolean(),
        "boolean_ascii": OperatorNotation.boolean_ascii(),
        "words": OperatorNotation.words(),
    }


@pytest.fixture
def complex_formula():
    """Formula exercising every connective, multi-digit names and grouping.

    Returns:
        str: Formula in the default notation
    """
    return "~A&B1->Cv~(D42<->E)"
