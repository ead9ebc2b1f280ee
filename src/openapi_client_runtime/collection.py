"""Array parameter encoding for query strings and headers."""

from collections.abc import Sequence
from enum import Enum

from openapi_client_runtime.errors.exceptions import UnsupportedFormatError


class CollectionFormat(str, Enum):
    """Array serialization styles from the OpenAPI 2.0 ``collectionFormat`` field."""

    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"


_SEPARATORS = {
    CollectionFormat.CSV: ",",
    CollectionFormat.SSV: " ",
    CollectionFormat.TSV: "\t",
    CollectionFormat.PIPES: "|",
}


def build_collection_param(values: Sequence, collection_format: "CollectionFormat | str") -> str | list[str]:
    """Encode ``values`` using the named collection format.

    ``multi`` returns the values as a list; the transport then repeats the
    parameter once per value.

    Raises:
        UnsupportedFormatError: If ``collection_format`` is not a known style.
    """
    try:
        style = CollectionFormat(collection_format)
    except ValueError:
        raise UnsupportedFormatError(
            f"unsupported collection format: {collection_format!r}",
            collection_format=collection_format,
        ) from None

    items = [str(value) for value in values]
    if style is CollectionFormat.MULTI:
        return items
    return _SEPARATORS[style].join(items)
