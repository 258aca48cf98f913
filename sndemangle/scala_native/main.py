from typing import Union

from .errors import DemangleError, UnexpectedChar
from .parser import MAX_RECURSION_DEPTH, Parser
from .renderer import render_symbol
from .tree import Symbol


def _as_text(inp):
    if isinstance(inp, (bytes, bytearray)):
        try:
            return bytes(inp).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UnexpectedChar(exc.start, "mangled-name", "UTF-8 text", repr(bytes(inp[exc.start : exc.end]))) from None
    return inp


def parse(inp_str: Union[str, bytes], max_depth: int = MAX_RECURSION_DEPTH) -> Symbol:
    """Parse a Scala Native mangled symbol name into its tree representation.

    Raises:
        DemangleError: for any input that is not a well-formed mangled name.
    """
    text = _as_text(inp_str)
    try:
        return Parser(text, max_depth).parse_symbol()
    except DemangleError as exc:
        exc.given_str = text
        if isinstance(inp_str, (bytes, bytearray)):
            # offsets into bytes input count bytes, not decoded characters
            exc.offset = len(text[: exc.offset].encode("utf-8"))
        raise


def demangle(inp_str: Union[str, bytes], max_depth: int = MAX_RECURSION_DEPTH) -> str:
    """Demangle a Scala Native mangled symbol name.

    Args:
        inp_str: The mangled symbol name to demangle, e.g. `_SM17java.lang.IntegerD7compareiiiEo`.
        max_depth: Maximum nesting of grammar productions before giving up.

    Returns:
        The demangled symbol name, e.g. `java.lang.Integer.compare(Int, Int): Int`.

    Raises:
        DemangleError: subclass describing the first malformed production,
            the offset it was found at and the offending token.
    """
    return render_symbol(parse(inp_str, max_depth))
