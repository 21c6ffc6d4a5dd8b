"""Translate GraphQL schema definitions into TypeScript resolver declarations."""

from __future__ import annotations

import logging

from graphql import (
    DefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

logger = logging.getLogger(__name__)

RecordTypeNode = (
    ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode | InputObjectTypeDefinitionNode
)
RECORD_TYPES = (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode, InputObjectTypeDefinitionNode)

SCALAR_TYPES: dict[str, str] = {
    "ID": "string",
    "String": "string",
    "Float": "number",
    "Int": "number",
    "Boolean": "boolean",
}

HELPER_TYPES = (
    "export type ArrayOrValue<TValue> = Array<TValue> | TValue;\n"
    "export type Resolve<TResult, TArgs = {{}}> = "
    "(args?: TArgs, context?: {context}) => TResult | Promise<TResult>;\n"
    "export type Field<TResult> = TResult | Promise<TResult> | Resolve<TResult>;\n"
    "export type Maybe<TValue> = TValue | undefined;\n"
)

DEFAULT_INDENT = "\t"


class UnsupportedDefinitionKind(ValueError):
    """Raised when a top-level definition cannot be translated."""

    def __init__(self, kind: str, name: str | None = None) -> None:
        self.kind = kind
        self.name = name
        label = f"{kind} ({name})" if name else kind
        super().__init__(f"Unsupported definition kind: {label}")


def resolve_bare_type(node: TypeNode) -> str:
    """Render ``node`` assuming the non-null wrapper was already stripped."""
    if isinstance(node, NamedTypeNode):
        name = node.name.value
        return SCALAR_TYPES.get(name, name)
    if isinstance(node, ListTypeNode):
        return f"ArrayOrValue<{resolve_type(node.type)}>"
    if isinstance(node, NonNullTypeNode):
        return resolve_bare_type(node.type)
    raise TypeError(f"Unexpected type node: {type(node).__name__}")


def resolve_type(node: TypeNode) -> str:
    """Render ``node``, wrapping nullable types in ``Maybe<...>``."""
    if isinstance(node, NonNullTypeNode):
        return resolve_bare_type(node.type)
    return f"Maybe<{resolve_bare_type(node)}>"


def _optional_marker(node: TypeNode) -> str:
    return "" if isinstance(node, NonNullTypeNode) else "?"


def emit_field(node: FieldDefinitionNode | InputValueDefinitionNode) -> str:
    """Render a single interface member.

    Input object fields become plain data members. Output fields without
    arguments may be a value, a promise or a resolver (``Field<T>``); fields
    with arguments must be resolvers (``Resolve<T, {...}>``).
    """
    name = node.name.value
    field_type = resolve_type(node.type)
    optional = _optional_marker(node.type)

    if isinstance(node, InputValueDefinitionNode):
        return f"{name}{optional}: {field_type};"

    if not node.arguments:
        return f"{name}{optional}: Field<{field_type}>;"

    args = [
        f"{arg.name.value}{_optional_marker(arg.type)}: {resolve_bare_type(arg.type)}"
        for arg in node.arguments
    ]
    return f"{name}{optional}: Resolve<{field_type}, {{{', '.join(args)}}}>;"


def emit_record_type(node: RecordTypeNode, indent: str = DEFAULT_INDENT) -> str:
    """Render an object, interface or input object as a TypeScript interface."""
    data = f"export interface {node.name.value} {{\n"
    for field in node.fields or ():
        data += indent + emit_field(field) + "\n"
    data += "}\n"
    return data


def emit_enum_type(node: EnumTypeDefinitionNode) -> str:
    """Render an enum as a union of string literals."""
    values = [f"'{value.name.value}'" for value in node.values or ()]
    # An enum without values has no inhabitants.
    union = " | ".join(values) or "never"
    return f"export type {node.name.value} = {union};\n"


def emit_definition(node: DefinitionNode, indent: str = DEFAULT_INDENT) -> str:
    if isinstance(node, RECORD_TYPES):
        return emit_record_type(node, indent=indent)
    if isinstance(node, EnumTypeDefinitionNode):
        return emit_enum_type(node)
    name = getattr(node, "name", None)
    raise UnsupportedDefinitionKind(node.kind, name.value if name is not None else None)


def helper_types(context: str) -> str:
    """Return the fixed helper declarations for the given context type."""
    return HELPER_TYPES.format(context=context)


def generate_resolver_types(
    context: str,
    header: str,
    document: DocumentNode,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Emit the full declaration file for ``document``.

    ``context`` is the TypeScript type passed as the second resolver argument
    and ``header`` is copied verbatim to the top of the output (typically the
    import of the context type). Raises :class:`UnsupportedDefinitionKind` on
    the first definition that is not an object, interface, input object or
    enum; nothing is returned in that case.
    """
    logger.debug("Emitting %d definitions", len(document.definitions))
    result = header + "\n" + helper_types(context)
    for definition in document.definitions:
        logger.debug("Emitting %s", definition.kind)
        result += emit_definition(definition, indent=indent) + "\n"
    return result


emit = generate_resolver_types
