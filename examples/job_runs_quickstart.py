#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
from datetime import UTC, datetime, timedelta

from dbxquery import DataQuery, DataSource, DataSourceSettings, QueryDataRequest, TimeRange


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List recent Databricks job runs")
    p.add_argument("job_id", nargs="?", default="")
    p.add_argument("hours", nargs="?", type=int, default=24)
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("--active-only", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    settings = DataSourceSettings.from_env()

    now = datetime.now(UTC)
    payload = {
        "resourceType": "job_runs",
        "resourceParams": {"jobId": args.job_id, "activeOnly": args.active_only},
        "limit": args.limit,
    }
    query = DataQuery(
        ref_id="A",
        payload=json.dumps(payload),
        time_range=TimeRange(from_=now - timedelta(hours=args.hours), to=now),
    )

    async with DataSource(settings) as datasource:
        response = await datasource.query_data(QueryDataRequest(queries=[query]))

    outcome = response["A"]
    if not outcome.ok:
        print(f"{outcome.error_class.value}: {outcome.message}")
        return

    frame = outcome.frame
    print("=" * 90)
    print(f"Frame      : {frame.name}")
    print(f"Runs count : {frame.row_count}")
    print("=" * 90)
    print(f"{'Start Time':26} | {'Run ID':>16} | {'Status':12} | {'Duration (ms)':>13} | Run Name")
    print("-" * 90)
    for start, run_id, status, duration, name in zip(
        frame.field("Start Time").values,
        frame.field("Run ID").values,
        frame.field("Status").values,
        frame.field("Run Duration (milliseconds)").values,
        frame.field("Run Name").values,
    ):
        print(f"{start.isoformat():26} | {run_id:>16} | {status:12} | {duration:>13} | {name}")
    print("=" * 90)


if __name__ == "__main__":
    asyncio.run(main())
