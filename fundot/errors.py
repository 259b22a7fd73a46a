class FundotError(Exception):
    """ Base class for all fundot errors"""
    pass


class FundotSyntaxError(FundotError):
    """ Raised when text cannot be read into a Value"""

    def __init__(self, message: str, offset: int | None = None):
        self.message = message
        self.offset = offset
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)


class UnterminatedString(FundotSyntaxError):
    """ Raised when input ends inside a string literal"""


class InvalidEscape(FundotSyntaxError):
    """ Raised when a string literal uses an unknown backslash escape"""


class InvalidNumericLiteral(FundotSyntaxError):
    """ Raised when a digit-started token is neither an integer nor a float"""


class UnbalancedDelimiter(FundotSyntaxError):
    """ Raised when input ends before a bracket form is closed"""


class MalformedVectorElement(FundotSyntaxError):
    """ Raised when a comma-separated vector segment is not exactly one value"""


class MalformedMapPair(FundotSyntaxError):
    """ Raised when a comma-separated map segment is not `key : value`"""


class UnexpectedEndOfInput(FundotSyntaxError):
    """ Raised when there is nothing left to read"""


class NestingTooDeep(FundotSyntaxError):
    """ Raised when bracket forms nest deeper than the configured limit"""


class FundotUnboundSymbol(FundotError):
    """ Raised in strict mode when a symbol has no global binding"""


class FundotTypeError(FundotError):
    """ Raised in strict mode when a value has the wrong variant for an operation"""


class FundotArityError(FundotError):
    """ Raised in strict mode when a primitive receives too few arguments"""
