"""
Path-recording JSON decoding.

Decodes JSON text into any pydantic-compatible target type and, on failure,
reports the exact location in the *input document* where decoding stopped:

    response.output[0].content[1].text

Pydantic error locations also contain union member labels (tag values of
discriminated unions, member names of plain unions). Those are not part of
the document. The location is walked against the target type, where a
union consumes its label, and against the parsed input wherever the type
is open (``Any``), keeping only segments that address keys and indexes.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from functools import lru_cache
from types import UnionType
from typing import TYPE_CHECKING, Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from openai_responses.errors.base import DecodeError, DecodeErrorKind
from openai_responses.telemetry.logger import get_logger

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


logger = get_logger("openai_responses.decode")

# Object keys whose value names the variant of a tagged union
_TAG_FIELDS = ("type",)

_MISSING = object()

_KIND_BY_ERROR_TYPE: dict[str, DecodeErrorKind] = {
    "missing": DecodeErrorKind.MISSING_FIELD,
    "union_tag_not_found": DecodeErrorKind.MISSING_FIELD,
    "union_tag_invalid": DecodeErrorKind.UNKNOWN_VARIANT,
    "enum": DecodeErrorKind.UNKNOWN_VARIANT,
    "literal_error": DecodeErrorKind.INVALID_VALUE,
    "extra_forbidden": DecodeErrorKind.INVALID_VALUE,
}


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def format_path(segments: Sequence[str | int]) -> str:
    """Render path segments as a dotted/bracketed string.

    Example:
        >>> format_path(["response", "output", 0, "id"])
        'response.output[0].id'
    """
    path = ""
    for segment in segments:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = segment
    return path


def _discriminator_of(info: Any) -> str | None:
    discriminator = getattr(info, "discriminator", None)
    return discriminator if isinstance(discriminator, str) else None


def _unwrap(tp: Any, discriminator: str | None = None) -> tuple[Any, str | None]:
    """Strip ``Annotated`` and ``Optional`` wrappers, keeping the discriminator."""
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            base, *metadata = get_args(tp)
            for info in metadata:
                discriminator = _discriminator_of(info) or discriminator
            tp = base
        elif origin in (Union, UnionType):
            members = [arg for arg in get_args(tp) if arg is not type(None)]
            if len(members) != 1:
                return tp, discriminator
            tp = members[0]
        else:
            return tp, discriminator


def _union_members(tp: Any) -> list[Any] | None:
    if get_origin(tp) not in (Union, UnionType):
        return None
    return [arg for arg in get_args(tp) if arg is not type(None)]


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _model_field(model: type[BaseModel], key: str) -> tuple[Any, str | None]:
    for name, field in model.model_fields.items():
        if (field.alias or name) == key:
            return field.annotation, _discriminator_of(field)
    return None, None


def _select_member(members: list[Any], label: str | int, discriminator: str | None) -> Any:
    """Pick the union member a pydantic location label names."""
    for member in members:
        tp, _ = _unwrap(member)
        if discriminator is not None:
            if _is_model(tp):
                tags = get_args(_model_field(tp, discriminator)[0])
                if str(label) in (str(getattr(tag, "value", tag)) for tag in tags):
                    return member
            continue
        origin = get_origin(tp)
        if origin is None and getattr(tp, "__name__", None) == label:
            return member
        origin_name = getattr(origin, "__name__", None)
        if origin_name and str(label).startswith(f"{origin_name}["):
            return member
    return None


def _child_type(tp: Any, segment: str | int) -> tuple[Any, str | None]:
    """Type of the value ``segment`` addresses inside a value of type ``tp``."""
    if _is_model(tp):
        return _model_field(tp, segment) if isinstance(segment, str) else (None, None)
    origin = get_origin(tp)
    args = get_args(tp)
    if origin in (list, Sequence) and isinstance(segment, int) and args:
        return args[0], None
    if origin in (dict, Mapping) and isinstance(segment, str) and len(args) == 2:
        return args[1], None
    return None, None


def _child_node(node: Any, segment: str | int) -> Any:
    if isinstance(node, dict) and isinstance(segment, str):
        return node.get(segment, _MISSING)
    if isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
        return node[segment]
    return _MISSING


def _is_tag_label(node: dict[str, Any], segment: str) -> bool:
    return any(node.get(key) == segment for key in _TAG_FIELDS)


def _resolve_untyped(loc: Sequence[str | int], document: Any) -> list[str | int]:
    segments: list[str | int] = []
    node = document
    last = len(loc) - 1

    for i, segment in enumerate(loc):
        if isinstance(node, dict) and isinstance(segment, str):
            if segment in node:
                segments.append(segment)
                node = node[segment]
            elif i == last and not _is_tag_label(node, segment):
                # Required key absent from this object
                segments.append(segment)
            continue

        if isinstance(node, list) and isinstance(segment, int):
            if 0 <= segment < len(node):
                segments.append(segment)
                node = node[segment]
            continue

        # Union member label on a scalar or list node
        continue

    return segments


def resolve_path(
    loc: Sequence[str | int],
    document: Any,
    target: Any = None,
) -> list[str | int]:
    """Map a pydantic error location onto the decoded document.

    With a ``target`` the location is walked against the type: a union
    consumes the next segment as its member label, models and containers
    consume keys and indexes. Where the type is not known (``Any`` values,
    no target) the remainder is matched against the document instead,
    dropping segments that name tag values rather than keys.

    Args:
        loc: Error location reported by pydantic
        document: The parsed JSON document that failed validation
        target: Type the document was validated against

    Returns:
        Segments addressing keys and indexes of the document, plus a
        trailing key for fields that are missing
    """
    segments: list[str | int] = []
    node = document
    tp, discriminator = _unwrap(target)

    for i, segment in enumerate(loc):
        members = _union_members(tp)
        if members is not None:
            tp, discriminator = _unwrap(_select_member(members, segment, discriminator))
            continue

        child, child_discriminator = _child_type(tp, segment)
        if child is None or child is Any:
            return segments + _resolve_untyped(loc[i:], node)

        segments.append(segment)
        node = _child_node(node, segment)
        tp, discriminator = _unwrap(child, child_discriminator)

    return segments


def _error_segments(error: ErrorDetails, document: Any, target: Any) -> list[str | int]:
    segments = resolve_path(error["loc"], document, target)
    if error["type"] in ("union_tag_invalid", "union_tag_not_found"):
        discriminator = str(error.get("ctx", {}).get("discriminator", "type"))
        segments.append(discriminator.strip("'\""))
    return segments


def _error_kind(error_type: str) -> DecodeErrorKind:
    if error_type in _KIND_BY_ERROR_TYPE:
        return _KIND_BY_ERROR_TYPE[error_type]
    if error_type.endswith(("_type", "_parsing")):
        return DecodeErrorKind.TYPE_MISMATCH
    return DecodeErrorKind.INVALID_VALUE


def parse_json(text: str, *, target_name: str | None = None) -> Any:
    """Parse JSON text, raising DecodeError with kind SYNTAX on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(
            path="",
            kind=DecodeErrorKind.SYNTAX,
            raw=text,
            detail=f"{e.msg} (line {e.lineno}, column {e.colno})",
            target=target_name,
        ) from e


def validate_document(
    document: Any,
    target: Any,
    *,
    raw: str,
    target_name: str | None = None,
) -> Any:
    """Validate an already-parsed document against a target type.

    Args:
        document: Parsed JSON value
        target: Any type pydantic can build a TypeAdapter for
        raw: Original text, kept on the error for diagnostics
        target_name: Name used in error messages

    Returns:
        The validated value

    Raises:
        DecodeError: With the path of the first failure
    """
    name = target_name or _type_name(target)
    try:
        return _adapter(target).validate_python(document)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        path = format_path(_error_segments(first, document, target))
        error = DecodeError(
            path=path,
            kind=_error_kind(first["type"]),
            raw=raw,
            detail=first["msg"],
            target=name,
        )
        logger.error(
            "Deserialization error",
            target=name,
            path=path,
            kind=error.kind.value,
            detail=first["msg"],
        )
        raise error from e


def decode_json(text: str, target: Any, *, target_name: str | None = None) -> Any:
    """Decode JSON text into ``target``, recording the failure path.

    Raises:
        DecodeError: kind SYNTAX when the text is not JSON, otherwise the
            structural cause and path of the first validation failure
    """
    name = target_name or _type_name(target)
    document = parse_json(text, target_name=name)
    return validate_document(document, target, raw=text, target_name=name)
