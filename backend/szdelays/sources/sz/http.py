import logging
import time

import httpx

from szdelays.errors import NetworkError

from .config import SZ_HOST, SzConfig
from .types import RawSnapshot

logger = logging.getLogger(__name__)


def browser_headers(url: httpx.URL) -> dict[str, str]:
    """The map service rejects requests that do not look like they come from its own page."""
    host = url.netloc.decode("ascii")
    origin = f"{url.scheme}://{host}"
    return {
        "Host": host,
        "Origin": origin,
        "Referer": origin,
    }


def verify_tls_for(cfg: SzConfig, url: httpx.URL) -> bool:
    # Unverified TLS is never allowed for any host other than the SZ map service.
    return cfg.verify_tls or url.host != SZ_HOST


def log_request(request: httpx.Request) -> None:
    logger.debug("HTTP %s %s", request.method, request.url)


def make_client(cfg: SzConfig, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    timeout = httpx.Timeout(
        connect=cfg.connect_timeout,
        read=cfg.read_timeout,
        write=cfg.write_timeout,
        pool=cfg.pool_timeout,
    )
    url = httpx.URL(cfg.url)
    verify = verify_tls_for(cfg, url)
    if not verify:
        logger.warning("TLS certificate verification disabled for %s", url.host)

    return httpx.Client(
        timeout=timeout,
        headers=browser_headers(url),
        verify=verify,
        follow_redirects=True,
        transport=transport,
        event_hooks={"request": [log_request]},
    )


def fetch_snapshot(client: httpx.Client, url: str) -> RawSnapshot:
    """
    Single GET against the map service, no retry.

    Raises NetworkError for transport failures, non-2xx statuses and bodies
    that are not JSON. Missing fields in the body surface as KeyError.
    """
    t0 = time.perf_counter()
    try:
        r = client.get(url)
        r.raise_for_status()
        payload = r.json()
    except httpx.HTTPError as e:
        elapsed = time.perf_counter() - t0
        logger.error("GET %s failed after %.2fs error=%r", url, elapsed, e)
        raise NetworkError(f"Fetching snapshot failed: {e}") from e
    except ValueError as e:
        snippet = (r.text or "")[:300]
        logger.error("GET %s returned a non-JSON body body_snippet=%r", url, snippet)
        raise NetworkError("Snapshot body is not valid JSON") from e

    elapsed = time.perf_counter() - t0
    snapshot = RawSnapshot.from_json(payload)
    logger.info(
        "Fetched snapshot md=%s records=%d in %.2fs status=%d",
        snapshot.md,
        len(snapshot.records),
        elapsed,
        r.status_code,
    )
    return snapshot
