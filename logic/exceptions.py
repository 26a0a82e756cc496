# logic/exceptions.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Custom exceptions for tree construction, evaluation and analysis

"""Domain-specific exceptions raised while building, evaluating and
analysing expression trees. None of them is fatal; each is raised to the
caller with enough context to recover.
"""


class VariableNameError(ValueError):
    """Raised when a variable name does not match ``[A-Z][0-9]*``."""

    def __init__(self, name: str):
        super().__init__(
            f"Invalid variable name {name!r}: expected an uppercase letter "
            f"followed by digits"
        )
        self.name = name


class UnassignedVariableError(LookupError):
    """Raised when evaluation reaches a variable that has no value.

    Attributes:
        name: Name of the first unassigned variable encountered
    """

    def __init__(self, name: str):
        super().__init__(f"Variable {name} has no assigned value")
        self.name = name


class AnalysisLimitError(RuntimeError):
    """Raised when an exhaustive enumeration would exceed the variable ceiling."""

    pass
