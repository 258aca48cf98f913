"""Structured representation of a demangled Scala Native symbol.

All nodes are immutable so that a parsed tree can be compared, hashed and
shared between renderings without copying.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class SegmentKind(Enum):
    PACKAGE = 0
    CLASS = 1
    MODULE = 2


@dataclass(frozen=True)
class PathSegment:
    kind: SegmentKind
    name: str


# Types


@dataclass(frozen=True)
class Primitive:
    code: str


@dataclass(frozen=True)
class Reference:
    path: Tuple[PathSegment, ...]
    nullable: bool = True
    # X prefix, the referenced class is known exactly (no subclasses)
    exact: bool = False


@dataclass(frozen=True)
class Array:
    element: "Type"
    dimensions: int = 1
    nullable: bool = True


@dataclass(frozen=True)
class FunctionType:
    params: Tuple["Type", ...]
    result: "Type"


@dataclass(frozen=True)
class TypeParameter:
    index: int
    name: Optional[str] = None


@dataclass(frozen=True)
class ValuePointer:
    # None for the untyped C pointer
    referenced: Optional["Type"] = None


@dataclass(frozen=True)
class CArray:
    element: "Type"
    length: int


@dataclass(frozen=True)
class Struct:
    fields: Tuple["Type", ...]


Type = Union[Primitive, Reference, Array, FunctionType, TypeParameter, ValuePointer, CArray, Struct]


# Scopes


class Scope(Enum):
    PUBLIC = 0
    PUBLIC_STATIC = 1


@dataclass(frozen=True)
class Private:
    owner: "Symbol"
    static: bool = False


MemberScope = Union[Scope, Private]


# Members


@dataclass(frozen=True)
class Field:
    name: str
    # the mangled form carries no field type, only hand-built trees have one
    type: Optional[Type] = None
    scope: MemberScope = Scope.PUBLIC


@dataclass(frozen=True)
class Method:
    name: str
    params: Tuple[Type, ...]
    result: Type
    type_params: Tuple[TypeParameter, ...] = ()
    scope: MemberScope = Scope.PUBLIC


@dataclass(frozen=True)
class Constructor:
    params: Tuple[Type, ...] = ()


@dataclass(frozen=True)
class StaticInitializer:
    pass


@dataclass(frozen=True)
class Proxy:
    name: str
    params: Tuple[Type, ...]
    result: Type


@dataclass(frozen=True)
class Extern:
    name: str


@dataclass(frozen=True)
class Generated:
    name: str


@dataclass(frozen=True)
class Duplicate:
    member: "Member"
    params: Tuple[Type, ...]
    result: Type


Member = Union[Field, Method, Constructor, StaticInitializer, Proxy, Extern, Generated, Duplicate]


@dataclass(frozen=True)
class Symbol:
    path: Tuple[PathSegment, ...] = field(default_factory=tuple)
    member: Optional[Member] = None

    @property
    def is_top_level(self) -> bool:
        return self.member is None
