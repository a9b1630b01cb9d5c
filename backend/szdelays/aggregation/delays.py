from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from szdelays.sources.sz.types import RawSnapshot

logger = logging.getLogger(__name__)

# Train type codes counted as regional; anything else is long-distance.
REGIONAL_TRAIN_TYPES = frozenset({"Os", "Sp", "LET", "TL"})


def is_regional(train_type: str) -> bool:
    return train_type in REGIONAL_TRAIN_TYPES


def bucket_for(delay: int) -> str:
    """
    Delay bucket, checked from the top:
      over60 (> 60), over30 (> 30), over15 (> 15), over5 (> 5),
      to5 (0..5 inclusive), under0 (early)
    """
    if delay > 60:
        return "over60"
    if delay > 30:
        return "over30"
    if delay > 15:
        return "over15"
    if delay > 5:
        return "over5"
    if delay >= 0:
        return "to5"
    return "under0"


def mean(total: float, count: int) -> float:
    """
    total / count, or NaN when there is nothing to average.
    NaN is the "no trains in this category" signal in the output.
    """
    if count == 0:
        return math.nan
    return total / count


@dataclass
class DelayHistogram:
    under0: int = 0
    to5: int = 0
    over5: int = 0
    over15: int = 0
    over30: int = 0
    over60: int = 0

    def add(self, delay: int) -> None:
        name = bucket_for(delay)
        setattr(self, name, getattr(self, name) + 1)


@dataclass(frozen=True)
class TrainDelay:
    train_type: str
    delay: int


@dataclass
class CompanyTrains:
    trains: list[TrainDelay] = field(default_factory=list)
    histogram: DelayHistogram = field(default_factory=DelayHistogram)


@dataclass(frozen=True)
class CompanyDelays:
    company: str

    avg_delay: float
    avg_regional_delay: float
    avg_long_distance_delay: float

    histogram: DelayHistogram

    total: int
    total_regional: int
    total_long_distance: int


@dataclass(frozen=True)
class DelayResult:
    time_fetched: str        # verbatim upstream "md"
    companies: list[CompanyDelays]


def group_by_company(snapshot: RawSnapshot) -> dict[str, CompanyTrains]:
    """Buckets records per operator, keeping the order in which operators first appear."""
    by_company: dict[str, CompanyTrains] = {}
    for rec in snapshot.records:
        acc = by_company.get(rec.company)
        if acc is None:
            acc = by_company[rec.company] = CompanyTrains()
        acc.trains.append(TrainDelay(train_type=rec.train_type, delay=rec.delay))
        acc.histogram.add(rec.delay)
    return by_company


def summarize_company(company: str, acc: CompanyTrains) -> CompanyDelays:
    total_delay = 0
    regional_delay = 0
    regional_trains = 0
    long_distance_delay = 0
    long_distance_trains = 0

    for train in acc.trains:
        if is_regional(train.train_type):
            regional_delay += train.delay
            regional_trains += 1
        else:
            long_distance_delay += train.delay
            long_distance_trains += 1
        total_delay += train.delay

    return CompanyDelays(
        company=company,
        avg_delay=mean(total_delay, len(acc.trains)),
        avg_regional_delay=mean(regional_delay, regional_trains),
        avg_long_distance_delay=mean(long_distance_delay, long_distance_trains),
        histogram=acc.histogram,
        total=len(acc.trains),
        total_regional=regional_trains,
        total_long_distance=long_distance_trains,
    )


def aggregate(snapshot: RawSnapshot) -> DelayResult:
    """
    Per-operator delay statistics for one snapshot, busiest operator first.
    Operators with the same train count keep their first-seen order.
    """
    by_company = group_by_company(snapshot)
    companies = [summarize_company(name, acc) for name, acc in by_company.items()]
    companies.sort(key=lambda c: c.total, reverse=True)

    logger.debug(
        "Aggregated %d records into %d companies md=%s",
        len(snapshot.records),
        len(companies),
        snapshot.md,
    )
    return DelayResult(time_fetched=snapshot.md, companies=companies)
