"""
Request canonicalization and signing for the JW Platform management API.

Every request carries an ``api_signature`` parameter: the SHA-1 hex digest
of the signature base string with the shared secret appended. The base
string is built from all other parameters sorted by key, each key and
value percent-encoded per RFC 3986 and joined as ``key=value`` pairs
separated by ``&``.

The query string sent on the wire uses exactly the same canonical form,
so the server decodes the values that were signed.
"""

import hashlib
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Tuple, Union
from urllib.parse import quote

from .constants import PARAM_SIGNATURE
from .exceptions import SigningInputError

Scalar = Union[str, bytes, int, float, bool]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes, int, float))


def _scalar_text(value: Scalar) -> Union[str, bytes]:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, bytes)):
        return value
    return str(value)


def encode(value: Any) -> Union[str, List, Dict]:
    """
    Percent-encode a parameter value per RFC 3986.

    Only unreserved characters are left literal (``~`` included), and a
    space becomes ``%20``. Lists, tuples and dicts are encoded element-wise
    and keep their shape.

    Raises:
        SigningInputError: If the value is neither a scalar nor a container
    """
    if isinstance(value, Mapping):
        return {key: encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if _is_scalar(value):
        return quote(_scalar_text(value), safe="~")
    raise SigningInputError(
        f"Cannot encode parameter value of type {type(value).__name__}"
    )


def _flatten(name: str, value: Any) -> Iterator[Tuple[str, Any]]:
    # Nested values become bracketed keys, as PHP's http_build_query does.
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{name}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{name}[{index}]", item)
    else:
        yield name, value


def canonical_pairs(params: Mapping) -> List[Tuple[str, Any]]:
    """
    Return ``(key, value)`` pairs in canonical order.

    Only top-level keys are sorted, as PHP's ``ksort`` does. Nested values
    are flattened afterwards and stay next to their parent key in their
    original order, so ``tags[0]`` comes before ``tagsZ`` even though
    ``[`` sorts after ``Z``.
    """
    pairs = []
    for key in sorted(params, key=str):
        pairs.extend(_flatten(str(key), params[key]))
    return pairs


def canonical_query(params: Mapping) -> str:
    """Serialize parameters into the canonical ``key=value&...`` form."""
    return "&".join(
        f"{encode(key)}={encode(value)}" for key, value in canonical_pairs(params)
    )


def signature_base_string(params: Mapping) -> str:
    """
    Build the string a request signature is computed over.

    Raises:
        SigningInputError: If ``api_signature`` is already among the parameters
            or a value cannot be encoded
    """
    if PARAM_SIGNATURE in params:
        raise SigningInputError(f"{PARAM_SIGNATURE} must not be part of the signed parameters")
    return canonical_query(params)


def generate_signature(params: Mapping, secret: str) -> str:
    """
    Compute the request signature for ``params``.

    Args:
        params: Caller data plus system parameters, without ``api_signature``
        secret: Shared API secret

    Returns:
        Lowercase hex SHA-1 digest
    """
    message = signature_base_string(params) + secret
    return hashlib.sha1(message.encode("utf-8")).hexdigest()
