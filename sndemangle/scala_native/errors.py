from typing import Optional


class DemangleError(Exception):
    """Base class for all failures while demangling a Scala Native symbol.

    Attributes:
        offset: position in the mangled input where the failure was detected
        production: grammar production being parsed at that point
        token: offending token, None if the input ended
        given_str: the full mangled input, filled in by the entry point
    """

    def __init__(self, offset: int, production: str, token: Optional[str] = None, message="Not able to demangle"):
        self.offset = offset
        self.production = production
        self.token = token
        self.message = message
        self.given_str = None
        super().__init__(self.message)

    def _describeToken(self):
        return "end of input" if self.token is None else repr(self.token)

    def __str__(self):
        text = f"{self.message} in <{self.production}> at offset {self.offset} (found {self._describeToken()})"
        if self.given_str is not None:
            return f"[{self.given_str}] {text}"
        return text

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.offset == other.offset
            and self.production == other.production
            and self.token == other.token
        )

    def __hash__(self):
        return hash((type(self), self.offset, self.production, self.token))


class UnexpectedEnd(DemangleError):
    def __init__(self, offset, production, expected=None):
        self.expected = expected
        message = "Unexpected end of input" if expected is None else f"Unexpected end of input, expected {expected}"
        super().__init__(offset, production, None, message)


class UnexpectedChar(DemangleError):
    def __init__(self, offset, production, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(offset, production, found, f"Expected {expected}")


class UnknownTag(DemangleError):
    def __init__(self, offset, production, found):
        super().__init__(offset, production, found, "Unknown tag")


class UnknownPrimitiveCode(DemangleError):
    def __init__(self, offset, production, found):
        super().__init__(offset, production, found, "Unknown primitive type code")


class InvalidLength(DemangleError):
    def __init__(self, offset, production, token, length=None, remaining=None):
        self.length = length
        self.remaining = remaining
        if length is None:
            message = "Invalid length prefix"
        else:
            message = f"Invalid length prefix {length} with {remaining} characters remaining"
        super().__init__(offset, production, token, message)


class TrailingInput(DemangleError):
    def __init__(self, offset, production, token):
        super().__init__(offset, production, token, "Trailing input after complete symbol")


class RecursionLimitExceeded(DemangleError):
    def __init__(self, offset, production, token, limit):
        self.limit = limit
        super().__init__(offset, production, token, f"Nesting deeper than {limit} levels")
