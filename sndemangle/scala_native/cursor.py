import string

from .definitions import LENGTH_SEPARATOR
from .errors import InvalidLength, UnexpectedChar, UnexpectedEnd


class Cursor:
    """Linear scanner over a mangled identifier.

    The cursor never backtracks; `production` is maintained by the parser so
    that every error raised here names the grammar rule being consumed.
    """

    def __init__(self, text: str, offset: int = 0) -> None:
        self.text = text
        self.offset = offset
        self.production = "mangled-name"

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def remaining(self) -> int:
        return max(0, len(self.text) - self.offset)

    def peek(self) -> str:
        if self.at_end():
            raise UnexpectedEnd(self.offset, self.production)
        return self.text[self.offset]

    def advance(self) -> str:
        tag = self.peek()
        self.offset += 1
        return tag

    def eat(self, tag: str) -> bool:
        if self.text.startswith(tag, self.offset):
            self.offset += len(tag)
            return True
        return False

    def expect(self, tag: str) -> None:
        if self.eat(tag):
            return
        found = self.text[self.offset : self.offset + len(tag)]
        if len(found) < len(tag) and tag.startswith(found):
            raise UnexpectedEnd(self.offset + len(found), self.production, expected=repr(tag))
        raise UnexpectedChar(self.offset, self.production, repr(tag), found)

    def read_digits(self) -> str:
        start = self.offset
        while not self.at_end() and self.text[self.offset] in string.digits:
            self.offset += 1
        if self.offset == start:
            if self.at_end():
                raise UnexpectedEnd(start, self.production, expected="digit")
            raise UnexpectedChar(start, self.production, "digit", self.text[start])
        return self.text[start : self.offset]

    def read_length_prefixed_name(self) -> str:
        """Read `<length> [-] <chars>` and return the raw (still escaped) chars."""
        start = self.offset
        digits = self.read_digits()
        if digits[0] == "0":
            raise InvalidLength(start, self.production, digits)
        self.eat(LENGTH_SEPARATOR)
        remaining = self.remaining()
        # compare digit counts first so absurd prefixes never reach int()
        if len(digits) > len(str(remaining)) or int(digits) > remaining:
            raise InvalidLength(start, self.production, digits, digits, remaining)
        length = int(digits)
        name = self.text[self.offset : self.offset + length]
        self.offset += length
        return name
