from __future__ import annotations

"""Classification of CouchDB responses into ``Result`` values.

The split is deliberately binary: any 2xx is a success, anything else is an
error. Callers that need to tell not-found from conflict read
``Result.status_code`` or ``Result.error``.
"""

import httpx

from .models import Headers, Result

DELETE_OK_STATUSES = frozenset({200, 202})


def _raw_headers(response: httpx.Response) -> Headers:
    """Response headers with their original casing, order and duplicates."""

    encoding = response.headers.encoding
    return [(key.decode(encoding), value.decode(encoding)) for key, value in response.headers.raw]


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _classify(response: httpx.Response, ok: bool, include_headers: bool) -> Result:
    return Result(
        ok=ok,
        body=response.text,
        status_code=response.status_code,
        headers=_raw_headers(response) if include_headers else None,
    )


def handle_get(response: httpx.Response, include_headers: bool = False) -> Result:
    return _classify(response, _is_success(response.status_code), include_headers)


def handle_put(response: httpx.Response, include_headers: bool = True) -> Result:
    """Classify a create/update response; headers carry ``ETag``/``Location``."""

    return _classify(response, _is_success(response.status_code), include_headers)


def handle_delete(response: httpx.Response) -> Result:
    """Only 200 (deleted) and 202 (accepted) count as a successful delete."""

    return _classify(response, response.status_code in DELETE_OK_STATUSES, False)


def attachment_exists(result: Result) -> bool:
    return result.ok
