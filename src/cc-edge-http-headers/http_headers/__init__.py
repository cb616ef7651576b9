"""
Edge HTTP Headers

Lambda@Edge origin-response function adding the HTTP headers listed in its
injected configuration (``httpHeaders``) to every CloudFront response.
"""

# Local Modules
from .configuration import load_configuration, reset_configuration
from .headers import apply_http_headers

__all__ = [
    "apply_http_headers",
    "load_configuration",
    "reset_configuration",
]
