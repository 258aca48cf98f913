from .definitions import (
    COLLAPSED_NAMES,
    COLLAPSED_PREFIXES,
    CONSTRUCTOR_NAME,
    OPAQUE_POINTER_NAME,
    PATH_SEPARATOR,
    POINTER_SIGIL,
    PRIMITIVES,
    STATIC_INITIALIZER_NAME,
)
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
    StaticInitializer,
    Struct,
    TypeParameter,
    ValuePointer,
)


def render_path(path) -> str:
    return PATH_SEPARATOR.join(segment.name for segment in path)


def _collapse(name):
    if name in COLLAPSED_NAMES:
        return COLLAPSED_NAMES[name]
    for prefix in COLLAPSED_PREFIXES:
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix) :]
    return name


def _render_list(types):
    return ", ".join(render_type(ty) for ty in types)


def render_type(ty) -> str:
    if isinstance(ty, Primitive):
        return PRIMITIVES[ty.code]
    if isinstance(ty, Reference):
        return _collapse(render_path(ty.path))
    if isinstance(ty, Array):
        return render_type(ty.element) + "[]" * ty.dimensions
    if isinstance(ty, FunctionType):
        return f"({_render_list(ty.params)}) => {render_type(ty.result)}"
    if isinstance(ty, TypeParameter):
        return ty.name if ty.name else f"T{ty.index}"
    if isinstance(ty, ValuePointer):
        if ty.referenced is None:
            return OPAQUE_POINTER_NAME
        return render_type(ty.referenced) + POINTER_SIGIL
    if isinstance(ty, CArray):
        return f"CArray[{render_type(ty.element)}, {ty.length}]"
    if isinstance(ty, Struct):
        return "{" + _render_list(ty.fields) + "}"
    raise TypeError(f"not a type node: {ty!r}")


def render_scope(scope) -> str:
    if isinstance(scope, Private):
        return f"<private[{render_symbol(scope.owner)}]>"
    return ""


def _member_name(member):
    if isinstance(member, Constructor):
        return CONSTRUCTOR_NAME
    if isinstance(member, StaticInitializer):
        return STATIC_INITIALIZER_NAME
    if isinstance(member, Duplicate):
        return _member_name(member.member)
    return member.name


def _render_signature(params, result):
    return f"({_render_list(params)}): {render_type(result)}"


def render_member(member) -> str:
    if isinstance(member, Field):
        rendered = render_scope(member.scope) + member.name
        if member.type is not None:
            rendered += ": " + render_type(member.type)
        return rendered
    if isinstance(member, Method):
        rendered = render_scope(member.scope) + member.name
        if member.type_params:
            rendered += "[" + _render_list(member.type_params) + "]"
        return rendered + _render_signature(member.params, member.result)
    if isinstance(member, Constructor):
        return f"{CONSTRUCTOR_NAME}({_render_list(member.params)})"
    if isinstance(member, StaticInitializer):
        return STATIC_INITIALIZER_NAME
    if isinstance(member, Proxy):
        return member.name + _render_signature(member.params, member.result)
    if isinstance(member, (Extern, Generated)):
        return member.name
    if isinstance(member, Duplicate):
        return _member_name(member) + _render_signature(member.params, member.result)
    raise TypeError(f"not a member node: {member!r}")


def render_symbol(symbol) -> str:
    """Render a parsed symbol in canonical notation, e.g. `App.run(): Int`."""
    path = render_path(symbol.path)
    if symbol.is_top_level:
        return path
    member = render_member(symbol.member)
    if not path:
        return member
    return path + PATH_SEPARATOR + member
