from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawTrainRecord:
    company: str             # properties.d, operator name
    train_type: str          # properties.tt, e.g. "Os", "EC"
    delay: int               # properties.de, minutes; negative = early

    @classmethod
    def from_feature(cls, feature: dict) -> "RawTrainRecord":
        """
        Map one upstream feature onto a record. Missing keys raise KeyError,
        there is no schema validation beyond that.
        """
        props = feature["properties"]
        return cls(
            company=props["d"],
            train_type=props["tt"],
            delay=props["de"],
        )


@dataclass(frozen=True)
class RawSnapshot:
    md: str                  # "DD.MM.YYYY HH:MM:SS", upstream local time
    records: list[RawTrainRecord] = field(default_factory=list)

    @classmethod
    def from_json(cls, payload: dict) -> "RawSnapshot":
        return cls(
            md=payload["md"],
            records=[RawTrainRecord.from_feature(f) for f in payload["result"]],
        )
