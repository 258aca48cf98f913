import string
from contextlib import contextmanager
from typing import Iterable, Tuple

from .cursor import Cursor
from .definitions import MODULE_SUFFIX, PATH_SEPARATOR, PRIMITIVES, SYMBOL_PREFIX
from .errors import InvalidLength, RecursionLimitExceeded, TrailingInput, UnexpectedChar, UnknownPrimitiveCode, UnknownTag
from .escapes import decode_name
from .tree import (
    Array,
    CArray,
    Constructor,
    Duplicate,
    Extern,
    Field,
    FunctionType,
    Generated,
    Method,
    PathSegment,
    Primitive,
    Private,
    Proxy,
    Reference,
    Scope,
    SegmentKind,
    StaticInitializer,
    Struct,
    Symbol,
    ValuePointer,
)

# each nesting level costs at most two interpreter frames, this stays well below sys.getrecursionlimit()
MAX_RECURSION_DEPTH = 256
# NIR array values are indexed by a 32 bit Int
MAX_CARRAY_LENGTH = 2**31 - 1


def make_path(names: Iterable[str]) -> Tuple[PathSegment, ...]:
    """Build owner path segments from already decoded segment names."""
    names = list(names)
    segments = [PathSegment(SegmentKind.PACKAGE, name) for name in names[:-1]]
    if names:
        last = names[-1]
        if len(last) > 1 and last.endswith(MODULE_SUFFIX):
            segments.append(PathSegment(SegmentKind.MODULE, last))
        else:
            segments.append(PathSegment(SegmentKind.CLASS, last))
    return tuple(segments)


def split_path(raw: str) -> Tuple[PathSegment, ...]:
    pieces = raw.split(PATH_SEPARATOR)
    if not all(pieces):
        # `a..b`, `.a` and friends are not qualified names, keep them whole
        pieces = [raw]
    return make_path(decode_name(piece) for piece in pieces)


def make_array(element, nullable):
    """Fold nested arrays of equal nullability into a single multi-dimensional array."""
    if isinstance(element, Array) and element.nullable == nullable:
        return Array(element.element, element.dimensions + 1, nullable)
    return Array(element, 1, nullable)


class Parser:
    """Recursive-descent parser for Scala Native mangled names.

    Every production is selected by exactly one lookahead tag, there is no
    backtracking. The first malformed production raises a DemangleError.
    """

    def __init__(self, text: str, max_depth: int = MAX_RECURSION_DEPTH) -> None:
        self.cursor = Cursor(text)
        self.max_depth = max_depth
        self._depth = 0

    @contextmanager
    def _production(self, name):
        if self._depth >= self.max_depth:
            token = None if self.cursor.at_end() else self.cursor.text[self.cursor.offset]
            raise RecursionLimitExceeded(self.cursor.offset, name, token, self.max_depth)
        outer = self.cursor.production
        self.cursor.production = name
        self._depth += 1
        try:
            yield
        except RecursionError:
            # a max_depth above what the interpreter stack holds, report it like the depth guard
            token = None if self.cursor.at_end() else self.cursor.text[self.cursor.offset]
            raise RecursionLimitExceeded(self.cursor.offset, name, token, self._depth) from None
        finally:
            self._depth -= 1
            self.cursor.production = outer

    def parse_symbol(self) -> Symbol:
        with self._production("mangled-name"):
            if self.cursor.text.startswith("_" + SYMBOL_PREFIX):
                self.cursor.advance()
            self.cursor.expect(SYMBOL_PREFIX)
            symbol = self.parse_defn_name()
            if not self.cursor.at_end():
                raise TrailingInput(self.cursor.offset, "mangled-name", self.cursor.text[self.cursor.offset :])
        return symbol

    def parse_defn_name(self) -> Symbol:
        with self._production("defn-name"):
            offset = self.cursor.offset
            tag = self.cursor.advance()
            if tag == "T":
                return Symbol(self.parse_path_segments())
            if tag == "M":
                path = self.parse_path_segments()
                return Symbol(path, self.parse_member())
            raise UnknownTag(offset, "defn-name", tag)

    def parse_path_segments(self) -> Tuple[PathSegment, ...]:
        with self._production("owner-name"):
            return split_path(self.cursor.read_length_prefixed_name())

    def parse_name(self) -> str:
        with self._production("name"):
            return decode_name(self.cursor.read_length_prefixed_name())

    def parse_member(self):
        with self._production("sig-name"):
            offset = self.cursor.offset
            tag = self.cursor.advance()
            if tag == "F":
                name = self.parse_name()
                return Field(name, scope=self.parse_scope())
            if tag == "R":
                return Constructor(self._parse_type_list())
            if tag == "I":
                self.cursor.expect("E")
                return StaticInitializer()
            if tag == "D":
                name = self.parse_name()
                params, result = self._parse_signature()
                return Method(name, params, result, scope=self.parse_scope())
            if tag == "P":
                name = self.parse_name()
                params, result = self._parse_signature()
                return Proxy(name, params, result)
            if tag == "C":
                return Extern(self.parse_name())
            if tag == "G":
                return Generated(self.parse_name())
            if tag == "K":
                member = self.parse_member()
                params, result = self._parse_signature()
                return Duplicate(member, params, result)
            raise UnknownTag(offset, "sig-name", tag)

    def parse_scope(self):
        with self._production("scope"):
            offset = self.cursor.offset
            tag = self.cursor.advance()
            if tag == "O":
                return Scope.PUBLIC
            if tag == "o":
                return Scope.PUBLIC_STATIC
            if tag == "P":
                return Private(self.parse_defn_name())
            if tag == "p":
                return Private(self.parse_defn_name(), static=True)
            raise UnknownTag(offset, "scope", tag)

    def _parse_type_list(self, minimum=0):
        """Read `<type-name>* E`."""
        with self._production("type-list"):
            types = []
            while True:
                offset = self.cursor.offset
                if self.cursor.eat("E"):
                    break
                types.append(self.parse_type())
            if len(types) < minimum:
                raise UnexpectedChar(offset, "type-list", "type-name", "E")
            return tuple(types)

    def _parse_signature(self):
        """Read `<type-name>+ E`, the last type being the result type."""
        types = self._parse_type_list(minimum=1)
        return types[:-1], types[-1]

    def parse_type(self):
        with self._production("type-name"):
            offset = self.cursor.offset
            tag = self.cursor.peek()
            if tag in string.digits:
                return Reference(self.parse_path_segments(), nullable=False)
            self.cursor.advance()
            if tag == "L":
                return self._parse_nullable_type()
            if tag == "X":
                return Reference(self.parse_path_segments(), nullable=False, exact=True)
            if tag == "A":
                element = self.parse_type()
                if self.cursor.eat("_"):
                    return make_array(element, nullable=False)
                length = self._parse_carray_length()
                self.cursor.expect("_")
                return CArray(element, length)
            if tag == "R":
                if self.cursor.eat("_"):
                    return ValuePointer()
                params, result = self._parse_signature()
                return FunctionType(params, result)
            if tag == "S":
                return Struct(self._parse_type_list())
            if tag in PRIMITIVES:
                return Primitive(tag)
            if tag in string.ascii_lowercase:
                raise UnknownPrimitiveCode(offset, "type-name", tag)
            raise UnknownTag(offset, "type-name", tag)

    def _parse_nullable_type(self):
        with self._production("nullable-type-name"):
            offset = self.cursor.offset
            tag = self.cursor.peek()
            if tag in string.digits:
                return Reference(self.parse_path_segments())
            self.cursor.advance()
            if tag == "A":
                element = self.parse_type()
                self.cursor.expect("_")
                return make_array(element, nullable=True)
            if tag == "X":
                return Reference(self.parse_path_segments(), exact=True)
            raise UnknownTag(offset, "nullable-type-name", tag)

    def _parse_carray_length(self):
        offset = self.cursor.offset
        digits = self.cursor.read_digits()
        too_long = len(digits) > len(str(MAX_CARRAY_LENGTH))
        if (len(digits) > 1 and digits[0] == "0") or too_long or int(digits) > MAX_CARRAY_LENGTH:
            raise InvalidLength(offset, self.cursor.production, digits)
        return int(digits)
