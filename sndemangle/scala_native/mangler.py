"""Encode symbol trees back into Scala Native mangled names.

This is the exact inverse of the parser for every tree the grammar can
express. Nodes without an encoding (type parameters, typed pointers, typed
fields) raise ValueError.
"""
from .definitions import LENGTH_SEPARATOR, PATH_SEPARATOR, PRIMITIVES, SYMBOL_PREFIX
from .escapes import encode_name
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
    Primitive,
    Private,
    Proxy,
    Reference,
    Scope,
    StaticInitializer,
    Struct,
    ValuePointer,
)


def mangle_identifier(encoded: str) -> str:
    if not encoded:
        raise ValueError("identifiers must not be empty")
    separator = LENGTH_SEPARATOR if encoded[0].isdigit() or encoded[0] == LENGTH_SEPARATOR else ""
    return f"{len(encoded)}{separator}{encoded}"


def mangle_name(name: str) -> str:
    return mangle_identifier(encode_name(name))


def mangle_path(path) -> str:
    return mangle_identifier(PATH_SEPARATOR.join(encode_name(segment.name) for segment in path))


def _mangle_types(types):
    return "".join(mangle_type(ty) for ty in types)


def mangle_type(ty) -> str:
    if isinstance(ty, Primitive):
        if ty.code not in PRIMITIVES:
            raise ValueError(f"unknown primitive code {ty.code!r}")
        return ty.code
    if isinstance(ty, Reference):
        prefix = ("L" if ty.nullable else "") + ("X" if ty.exact else "")
        return prefix + mangle_path(ty.path)
    if isinstance(ty, Array):
        prefix = "LA" if ty.nullable else "A"
        return prefix * ty.dimensions + mangle_type(ty.element) + "_" * ty.dimensions
    if isinstance(ty, FunctionType):
        return "R" + _mangle_types(ty.params) + mangle_type(ty.result) + "E"
    if isinstance(ty, ValuePointer) and ty.referenced is None:
        return "R_"
    if isinstance(ty, CArray):
        return f"A{mangle_type(ty.element)}{ty.length}_"
    if isinstance(ty, Struct):
        return "S" + _mangle_types(ty.fields) + "E"
    raise ValueError(f"{type(ty).__name__} has no mangled form")


def mangle_scope(scope) -> str:
    if scope == Scope.PUBLIC:
        return "O"
    if scope == Scope.PUBLIC_STATIC:
        return "o"
    if isinstance(scope, Private):
        return ("p" if scope.static else "P") + mangle_defn_name(scope.owner)
    raise ValueError(f"unknown scope {scope!r}")


def mangle_member(member) -> str:
    if isinstance(member, Field):
        if member.type is not None:
            raise ValueError("field types have no mangled form")
        return "F" + mangle_name(member.name) + mangle_scope(member.scope)
    if isinstance(member, Method):
        if member.type_params:
            raise ValueError("type parameters have no mangled form")
        signature = _mangle_types(member.params) + mangle_type(member.result)
        return "D" + mangle_name(member.name) + signature + "E" + mangle_scope(member.scope)
    if isinstance(member, Constructor):
        return "R" + _mangle_types(member.params) + "E"
    if isinstance(member, StaticInitializer):
        return "IE"
    if isinstance(member, Proxy):
        return "P" + mangle_name(member.name) + _mangle_types(member.params) + mangle_type(member.result) + "E"
    if isinstance(member, Extern):
        return "C" + mangle_name(member.name)
    if isinstance(member, Generated):
        return "G" + mangle_name(member.name)
    if isinstance(member, Duplicate):
        return "K" + mangle_member(member.member) + _mangle_types(member.params) + mangle_type(member.result) + "E"
    raise ValueError(f"unknown member {member!r}")


def mangle_defn_name(symbol) -> str:
    if symbol.member is None:
        return "T" + mangle_path(symbol.path)
    return "M" + mangle_path(symbol.path) + mangle_member(symbol.member)


def mangle_symbol(symbol) -> str:
    return SYMBOL_PREFIX + mangle_defn_name(symbol)
