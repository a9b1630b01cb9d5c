import logging
from typing import Optional

from .config import SzConfig, load_config
from .http import fetch_snapshot, make_client
from .types import RawSnapshot

logger = logging.getLogger(__name__)


def load_snapshot(cfg: Optional[SzConfig] = None) -> RawSnapshot:
    """Open a client, fetch the current train positions, close the client."""
    cfg = cfg or load_config()
    logger.debug("Loading snapshot from %s verify_tls=%s", cfg.url, cfg.verify_tls)
    with make_client(cfg) as client:
        return fetch_snapshot(client, cfg.url)
