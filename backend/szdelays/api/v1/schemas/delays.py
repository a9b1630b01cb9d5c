import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class AvgDelay(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # NaN (no trains in the category) is written as null
    avg_delay: Optional[float] = Field(..., alias="avgDelay")
    avg_regional_delay: Optional[float] = Field(..., alias="avgRegionalDelay")
    avg_long_distance_delay: Optional[float] = Field(..., alias="avgLongDistanceDelay")

    @field_serializer("avg_delay", "avg_regional_delay", "avg_long_distance_delay")
    def nan_to_null(self, v: Optional[float]) -> Optional[float]:
        if v is None or math.isnan(v):
            return None
        return v


class DelayBuckets(BaseModel):
    under0: int
    to5: int
    over5: int
    over15: int
    over30: int
    over60: int


class TrainCounts(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    total_regional: int = Field(..., alias="totalRegional")
    total_long_distance: int = Field(..., alias="totalLongDistance")


class CompanyInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company: str
    avg_delay: AvgDelay = Field(..., alias="avgDelay")
    delay_info: DelayBuckets = Field(..., alias="delayInfo")
    train_counts: TrainCounts = Field(..., alias="trainCounts")


class DelayInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    time_fetched: str = Field(..., alias="timeFetched", description="Snapshot time as published, DD.MM.YYYY HH:MM:SS")
    companies: list[CompanyInfo]
