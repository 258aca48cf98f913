# Scala Native name mangling tables
# https://scala-native.org/en/latest/contrib/mangling.html

SYMBOL_PREFIX = "_S"
# Mach-O and some toolchains prepend an extra underscore to every symbol
SYMBOL_PREFIXES = ("_S", "__S")

LENGTH_SEPARATOR = "-"
PATH_SEPARATOR = "."
MODULE_SUFFIX = "$"

# <type-name> primitive codes
PRIMITIVES = {
    "b": "Byte",
    "s": "Short",
    "i": "Int",
    "j": "Long",
    "f": "Float",
    "d": "Double",
    "z": "Boolean",
    "c": "Char",
    "u": "Unit",
    "l": "Null",
    "n": "Nothing",
    "v": "...",
}

# scalac encodes operator glyphs in identifiers, see scala.reflect.NameTransformer
OPERATOR_CODES = {
    "~": "tilde",
    "=": "eq",
    "<": "less",
    ">": "greater",
    "!": "bang",
    "#": "hash",
    "%": "percent",
    "^": "up",
    "&": "amp",
    "|": "bar",
    "*": "times",
    "/": "div",
    "+": "plus",
    "-": "minus",
    ":": "colon",
    "\\": "bslash",
    "?": "qmark",
    "@": "at",
}
ESCAPE_CHAR = "$"
# $uXXXX for any other character that is not a valid JVM identifier part
UNICODE_ESCAPE = "u"
UNICODE_ESCAPE_WIDTH = 4
# UTF-16 surrogate ranges, astral characters are escaped as two $uXXXX halves
HIGH_SURROGATE_START = 0xD800
LOW_SURROGATE_START = 0xDC00
SURROGATE_END = 0xDFFF

# reference types that render by their short name
COLLAPSED_NAMES = {
    "java.lang.Object": "Object",
    "java.lang.String": "String",
    "java.lang.Throwable": "Throwable",
}
COLLAPSED_PREFIXES = ["scala.collection.immutable."]

CONSTRUCTOR_NAME = "<init>"
STATIC_INITIALIZER_NAME = "<clinit>"
OPAQUE_POINTER_NAME = "Ptr"
POINTER_SIGIL = "*"
