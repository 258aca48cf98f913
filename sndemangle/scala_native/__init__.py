from .errors import (
    DemangleError,
    InvalidLength,
    RecursionLimitExceeded,
    TrailingInput,
    UnexpectedChar,
    UnexpectedEnd,
    UnknownPrimitiveCode,
    UnknownTag,
)
from .main import demangle, parse
from .renderer import render_symbol
