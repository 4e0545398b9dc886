class SeqOpError(Exception):
    """base class for errors raised by seqop"""
    pass


class ContractViolation(SeqOpError, TypeError):
    """
    a supplied function (or random source) does not have the shape an operation requires.
    raised before any element is visited; this signals a defect in the calling code.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")
