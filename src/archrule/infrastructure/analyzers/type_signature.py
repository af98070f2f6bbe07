"""Return-signature text helpers.

Type references are matched by identifier and CamelCase word boundaries,
never by raw substring: `UserEntity` ends with the word `Entity`,
`Entityish` and `ResponseEntityBuilder` do not.
"""

from __future__ import annotations

import ast
import re

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Acronym run (DTO, HTTP), capitalized or lowercase word, or digit run
_CAMEL_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z]|[0-9_]|$)|[A-Z]?[a-z]+|[0-9]+")


def split_identifiers(signature: str) -> tuple[str, ...]:
    """Extract identifiers in textual order.

    Dotted names yield one identifier per component.

    Example:
        >>> split_identifiers("Result[domain.UserEntity, Error]")
        ('Result', 'domain', 'UserEntity', 'Error')
    """
    return tuple(_IDENTIFIER_PATTERN.findall(signature))


def camel_words(identifier: str) -> tuple[str, ...]:
    """Split identifier into CamelCase words.

    Example:
        >>> camel_words("HTTPUserDTO")
        ('HTTP', 'User', 'DTO')
    """
    return tuple(_CAMEL_WORD_PATTERN.findall(identifier))


def ends_with_word(identifier: str, token: str) -> bool:
    """Check if identifier is token or ends with it on a word boundary.

    Args:
        identifier: Single identifier from a signature
        token: Model-type name or exemption marker

    Returns:
        True for `Entity`/`Entity`, `UserEntity`/`Entity`,
        `MoneyValueObject`/`ValueObject`; False for `Modeling`/`Model`
    """
    if identifier == token:
        return True
    if not token or not identifier.endswith(token):
        return False

    token_words = camel_words(token)
    if not token_words:
        return False

    return camel_words(identifier)[-len(token_words) :] == token_words


def expand_signature(signature: str) -> tuple[str, ...]:
    """Unwrap generic containers into candidate signatures.

    Returns the outer signature followed by every nested type argument,
    depth-first pre-order. Handles subscripts (`Result[A, B]`,
    `list[A]`), unions (`A | None`), argument lists (`Callable[[A], B]`)
    and string forward references (`"A"`). `Literal[...]` values are
    not types; `Annotated[T, ...]` contributes only `T`.

    Text that is not a valid expression is a single leaf candidate.

    Example:
        >>> expand_signature("Result[Optional[UserEntity], Error]")
        ('Result[Optional[UserEntity], Error]', 'Optional[UserEntity]', 'UserEntity', 'Error')
    """
    text = signature.strip()
    if not text:
        return ()

    root = _parse_expression(text)
    if root is None:
        return (text,)

    nested = _sub_signatures(root)[1:]
    return (text, *(ast.unparse(node) for node in nested))


def signature_identifiers(signature: str) -> tuple[tuple[str, ...], ...]:
    """Type identifiers of each candidate signature, aligned with expand_signature().

    Identifiers come from the syntax tree: names, dotted-name components
    and parsed forward references. `Literal` values and `Annotated`
    metadata are not type references and contribute nothing. Text that is
    not a valid expression falls back to split_identifiers().

    Example:
        >>> signature_identifiers("Annotated[UserDTO, 'Entity']")
        (('Annotated', 'UserDTO'), ('UserDTO',))
    """
    text = signature.strip()
    if not text:
        return ()

    root = _parse_expression(text)
    if root is None:
        return (split_identifiers(text),)

    return tuple(_identifiers(node) for node in _sub_signatures(root))


def _sub_signatures(root: ast.expr) -> list[ast.expr]:
    """Root followed by its type arguments, recursively, pre-order."""
    nodes = [root]
    for argument in _type_arguments(root):
        nodes.extend(_sub_signatures(argument))
    return nodes


def _identifiers(node: ast.expr) -> tuple[str, ...]:
    """Type identifiers of one annotation expression, in textual order."""
    match node:
        case ast.Name(id=name):
            return (name,)
        case ast.Attribute(value=value, attr=attr):
            return (*_identifiers(value), attr)
        case ast.Subscript(value=container):
            names = list(_identifiers(container))
            for argument in _type_arguments(node):
                names.extend(_identifiers(argument))
            return tuple(names)
        case ast.Constant(value=str()):
            return tuple(name for arg in _type_arguments(node) for name in _identifiers(arg))
        case ast.Constant():
            return ()
    found: list[str] = []
    for child in ast.iter_child_nodes(node):
        if isinstance(child, ast.expr):
            found.extend(_identifiers(child))
    return tuple(found)


def _type_arguments(node: ast.expr) -> tuple[ast.expr, ...]:
    """Direct type arguments of a container annotation."""
    match node:
        case ast.Subscript(value=container) if _container_name(container) == "Literal":
            return ()
        case ast.Subscript(value=container, slice=ast.Tuple(elts=[first, *_])) if (
            _container_name(container) == "Annotated"
        ):
            return (first,)
        case ast.Subscript(slice=ast.Tuple(elts=elts)):
            return tuple(elts)
        case ast.Subscript(slice=inner):
            return (inner,)
        case ast.BinOp(op=ast.BitOr(), left=left, right=right):
            return (left, right)
        case ast.List(elts=elts) | ast.Tuple(elts=elts):
            return tuple(elts)
        case ast.Constant(value=str() as forward_ref):
            parsed = _parse_expression(forward_ref)
            return (parsed,) if parsed is not None else ()
    return ()


def _container_name(node: ast.expr) -> str | None:
    """Last component of a container name (`typing.Literal` -> `Literal`)."""
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(attr=name):
            return name
    return None


def _parse_expression(text: str) -> ast.expr | None:
    """Parse annotation text, None if not a valid expression."""
    try:
        return ast.parse(text.strip(), mode="eval").body
    except (SyntaxError, ValueError):
        return None
