import argparse
import logging
from pathlib import Path

from szdelays.aggregation.delays import aggregate
from szdelays.api.v1.routes.delays import delay_info
from szdelays.core.logging import configure_logging_if_needed
from szdelays.errors import FormatError
from szdelays.sources.sz.config import load_config
from szdelays.sources.sz.source import load_snapshot
from szdelays.utils.time import parse_timestamp

logger = logging.getLogger(__name__)


def main(argv=None):
    p = argparse.ArgumentParser(description="Fetch the current SZ train positions and print per-operator delay stats")
    p.add_argument("--output", help="Write JSON to this file instead of stdout")
    p.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    args = p.parse_args(argv)

    configure_logging_if_needed()

    snapshot = load_snapshot(load_config())
    try:
        fetched_at = parse_timestamp(snapshot.md)
    except FormatError:
        logger.warning("Snapshot time %r is not DD.MM.YYYY HH:MM:SS", snapshot.md)
        fetched_at = None
    logger.info("Snapshot md=%r parsed=%s", snapshot.md, fetched_at.isoformat() if fetched_at else None)

    result = aggregate(snapshot)
    logger.info("Computed stats for %d companies from %d trains", len(result.companies), len(snapshot.records))

    body = delay_info(result).model_dump_json(by_alias=True, indent=2 if args.pretty else None)
    if args.output:
        Path(args.output).write_text(body + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(body)


if __name__ == "__main__":
    main()
