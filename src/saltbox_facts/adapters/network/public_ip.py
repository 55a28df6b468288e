"""Public IP discovery over HTTPS with httpx.

Every endpoint of one address family is queried at the same time; the first
endpoint answering with a valid address wins and the other requests are
cancelled. When all of them fail the per-endpoint messages are joined, in
the order the failures happened, into the family's error fact.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import httpx

from saltbox_facts import __init__conf__
from saltbox_facts.domain.enums import IpFamily
from saltbox_facts.domain.models import IpLookupResult
from saltbox_facts.domain.parsing import is_valid_ip

logger = logging.getLogger(__name__)

NO_ENDPOINTS_ERROR = "All requests failed with unknown errors"


class EndpointError(Exception):
    """One endpoint did not produce a usable address; the message is user-facing."""


def build_async_client(timeout: float, *, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the shared ``httpx.AsyncClient`` used for all lookups.

    Args:
        timeout: Per-operation httpx timeout in seconds.
        transport: Optional transport override (``httpx.MockTransport`` in tests).
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={
            "User-Agent": f"{__init__conf__.shell_command}/{__init__conf__.version}",
            "Accept": "text/plain",
        },
        transport=transport,
    )


def _format_seconds(seconds: float) -> str:
    return f"{seconds:g}s"


async def _request_address(client: httpx.AsyncClient, url: str, family: IpFamily) -> str:
    try:
        response = await client.send(client.build_request("GET", url), stream=True)
    except httpx.HTTPError as exc:
        raise EndpointError(f"Request failed for {url}: {exc}") from exc
    try:
        if not response.is_success:
            raise EndpointError(f"HTTP {response.status_code} {response.reason_phrase} received from {url}")
        try:
            body = await response.aread()
        except httpx.HTTPError as exc:
            raise EndpointError(f"Failed to read response body from {url}: {exc}") from exc
    finally:
        await response.aclose()

    address = body.decode("utf-8", errors="replace").strip()
    if not is_valid_ip(address, family):
        raise EndpointError(f"Invalid {family.label} address '{address}' received from {url}")
    return address


async def fetch_address(client: httpx.AsyncClient, url: str, family: IpFamily, timeout: float) -> str:
    """Fetch one endpoint and return the validated address it reports.

    *timeout* bounds the whole exchange, connect through body.

    Raises:
        EndpointError: With the user-facing reason on any failure.
    """
    try:
        return await asyncio.wait_for(_request_address(client, url, family), timeout)
    except asyncio.TimeoutError as exc:
        raise EndpointError(f"Timeout after {_format_seconds(timeout)} for {url}") from exc


async def lookup_public_ip(
    client: httpx.AsyncClient,
    urls: Sequence[str],
    family: IpFamily,
    timeout: float,
) -> IpLookupResult:
    """Race all *urls* and return the first valid address of *family*.

    Returns:
        ``IpLookupResult`` with ``address`` set on success, otherwise with
        ``error`` holding every endpoint failure joined by ``"; "``.

    Example:
        >>> import asyncio
        >>> async def _empty() -> IpLookupResult:
        ...     async with build_async_client(1.0) as client:
        ...         return await lookup_public_ip(client, [], IpFamily.V4, 1.0)
        >>> asyncio.run(_empty()).error
        'All requests failed with unknown errors'
    """
    if not urls:
        return IpLookupResult(error=NO_ENDPOINTS_ERROR)

    tasks = [asyncio.ensure_future(fetch_address(client, url, family, timeout)) for url in urls]
    errors: list[str] = []
    try:
        for next_done in asyncio.as_completed(tasks):
            try:
                address = await next_done
            except EndpointError as exc:
                logger.debug("Public IP endpoint failed", extra={"family": family.value, "error": str(exc)})
                errors.append(str(exc))
                continue
            logger.debug("Public IP resolved", extra={"family": family.value, "address": address})
            return IpLookupResult(address=address)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    combined = "; ".join(errors) if errors else NO_ENDPOINTS_ERROR
    logger.warning("Public IP lookup failed", extra={"family": family.value, "error": combined})
    return IpLookupResult(error=combined)


async def resolve_public_ip(urls: Sequence[str], family: IpFamily, timeout: float) -> IpLookupResult:
    """Run :func:`lookup_public_ip` on a client opened for this lookup only."""
    async with build_async_client(timeout) as client:
        return await lookup_public_ip(client, urls, family, timeout)


__all__ = [
    "NO_ENDPOINTS_ERROR",
    "EndpointError",
    "build_async_client",
    "fetch_address",
    "lookup_public_ip",
    "resolve_public_ip",
]
