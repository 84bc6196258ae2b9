""" Exceptions raised when an action can't be applied to a budget tree. """

from enum import Enum

class ErrorKind(Enum):
    """ The reasons an action can fail. """
    NOT_FOUND = 'not found'
    INVALID_OPERATION = 'invalid operation'
    INVALID_TARGET = 'invalid target'

class BudgetError(Exception):
    """ Base class for errors raised by operations on a budget tree.

    Attributes:
        kind (ErrorKind): The category of failure.
        message (str): A human-readable description of the failure.
    """
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

class NotFoundError(BudgetError):
    """ A referenced account name does not exist in the tree. """
    kind = ErrorKind.NOT_FOUND

    def __init__(self, name, message=None):
        if message is None:
            message = 'Could not find account ' + repr(name)
        super().__init__(message)
        self.name = name

class InvalidOperationError(BudgetError):
    """ An operation isn't supported by the shape of its target node. """
    kind = ErrorKind.INVALID_OPERATION

class InvalidTargetError(InvalidOperationError):
    """ A new account was given a leaf account as its parent. """
    kind = ErrorKind.INVALID_TARGET
