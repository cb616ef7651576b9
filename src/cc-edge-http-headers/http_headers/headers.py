# Standard Library
from typing import Any, Dict, Mapping


def apply_http_headers(
    response: Dict[str, Any], http_headers: Mapping[str, str]
) -> Dict[str, Any]:
    """Set the configured headers on a CloudFront response.

    CloudFront keys headers by their lower-cased name and stores a list of
    ``{"key": ..., "value": ...}`` entries; configured headers replace any
    header the origin sent with the same name.

    Parameters
    ----------
    response : Dict[str, Any]
        The ``cf.response`` object of a Lambda@Edge event.
    http_headers : Mapping[str, str]
        Header names and values to set.

    Returns
    -------
    Dict[str, Any]
        The same response object, modified in place.
    """
    headers = response.setdefault("headers", {})
    for name, value in http_headers.items():
        headers[name.lower()] = [{"key": name, "value": value}]
    return response
