from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Response

from szdelays.aggregation.delays import CompanyDelays, DelayResult, aggregate
from szdelays.api.v1.schemas.delays import AvgDelay, CompanyInfo, DelayBuckets, DelayInfo, TrainCounts
from szdelays.core.deps import get_sz_config
from szdelays.errors import NetworkError
from szdelays.sources.sz.config import SzConfig
from szdelays.sources.sz.source import load_snapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["delays"])

# Path served by the original Next.js deployment; kept for existing clients.
legacy_router = APIRouter(prefix="/api", tags=["delays"])

CACHE_CONTROL = "max-age=0, s-maxage=60"


def company_info(c: CompanyDelays) -> CompanyInfo:
    return CompanyInfo(
        company=c.company,
        avg_delay=AvgDelay(
            avg_delay=c.avg_delay,
            avg_regional_delay=c.avg_regional_delay,
            avg_long_distance_delay=c.avg_long_distance_delay,
        ),
        delay_info=DelayBuckets(**asdict(c.histogram)),
        train_counts=TrainCounts(
            total=c.total,
            total_regional=c.total_regional,
            total_long_distance=c.total_long_distance,
        ),
    )


def delay_info(result: DelayResult) -> DelayInfo:
    return DelayInfo(
        time_fetched=result.time_fetched,
        companies=[company_info(c) for c in result.companies],
    )


@router.get("/delays", response_model=DelayInfo)
def get_delays(response: Response, cfg: SzConfig = Depends(get_sz_config)):
    # Full fetch + aggregate on every call; caching is left to the CDN.
    try:
        snapshot = load_snapshot(cfg)
    except NetworkError:
        logger.exception("Snapshot fetch from %s failed", cfg.url)
        raise HTTPException(status_code=500, detail="Upstream fetch failed")

    result = aggregate(snapshot)
    response.headers["Cache-Control"] = CACHE_CONTROL
    return delay_info(result)


legacy_router.add_api_route("/getDelays", get_delays, methods=["GET"], response_model=DelayInfo)
