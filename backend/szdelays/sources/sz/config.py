import os
from dataclasses import dataclass

SZ_HOST = "mapy.spravazeleznic.cz"
SZ_ORIGIN = f"https://{SZ_HOST}"
SZ_URL = f"{SZ_ORIGIN}/serverside/request2.php?module=Layers\\OsVlaky&action=load"


@dataclass(frozen=True)
class SzConfig:
    url: str

    # The map service does not present a valid certificate chain. The feed is
    # public, so verification may be switched off, but only for SZ_HOST.
    verify_tls: bool

    connect_timeout: float
    read_timeout: float
    write_timeout: float
    pool_timeout: float


def load_config() -> SzConfig:
    return SzConfig(
        url=os.getenv("SZ_URL", SZ_URL),
        verify_tls=os.getenv("SZ_VERIFY_TLS", "0") == "1",
        connect_timeout=float(os.getenv("SZ_CONNECT_TIMEOUT_SECONDS", "10")),
        read_timeout=float(os.getenv("SZ_READ_TIMEOUT_SECONDS", "30")),
        write_timeout=float(os.getenv("SZ_WRITE_TIMEOUT_SECONDS", "30")),
        pool_timeout=float(os.getenv("SZ_POOL_TIMEOUT_SECONDS", "30")),
    )
