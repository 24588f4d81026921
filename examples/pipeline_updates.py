#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from dbxquery import DataQuery, DataSource, DataSourceSettings, QueryDataRequest


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Databricks pipelines and their recent updates")
    p.add_argument("filter", nargs="?", default="")
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    settings = DataSourceSettings.from_env()

    async with DataSource(settings) as datasource:
        health = await datasource.check_health()
        print(f"Health     : {health.message}")
        if not health.ok:
            return

        listing = DataQuery(
            ref_id="pipelines",
            payload=json.dumps(
                {
                    "resourceType": "pipelines",
                    "resourceParams": {"filter": args.filter},
                    "limit": args.limit,
                }
            ),
        )
        response = await datasource.query_data(QueryDataRequest(queries=[listing]))
        pipelines = response["pipelines"]
        if not pipelines.ok:
            print(f"{pipelines.error_class.value}: {pipelines.message}")
            return

        queries = [
            DataQuery(
                ref_id=pipeline_id,
                payload=json.dumps(
                    {
                        "resourceType": "pipeline_updates",
                        "resourceParams": {"pipelineId": pipeline_id},
                        "limit": 5,
                    }
                ),
            )
            for pipeline_id in pipelines.frame.field("Pipeline Id").values
        ]
        updates = await datasource.query_data(QueryDataRequest(queries=queries))

    for pipeline_id, name, state in pipelines.frame.rows():
        print("=" * 72)
        print(f"{name} ({pipeline_id}) : {state}")
        outcome = updates[pipeline_id]
        if not outcome.ok:
            print(f"  {outcome.error_class.value}: {outcome.message}")
            continue
        for created, update_id, _, cause, update_state in outcome.frame.rows():
            print(f"  {created.isoformat():26} | {update_id:36} | {cause:16} | {update_state}")
    print("=" * 72)


if __name__ == "__main__":
    asyncio.run(main())
