class SequenceError(Exception):
    """base class for every error raised by seqops"""


class InvalidArgumentError(SequenceError, TypeError, ValueError):
    """a parameter is not a sequence, not callable, or out of range"""


class EmptySequenceError(SequenceError, ValueError):
    """the operation has no defined result for an empty sequence"""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() arg is an empty sequence")
        self.operation = operation


class MultipleMatchesError(SequenceError, ValueError):
    """more than one element satisfies a condition that expects exactly one"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)
