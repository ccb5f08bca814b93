"""AWS Lambda handler for preview rendering runs."""

import json

from ..engine import get_pipeline
from ..errors import ArtworkNotFoundError, PipelineError, RunInProgressError
from ..models import RenderRun


def _summary(run: RenderRun) -> dict:
    return {
        "artwork_id": run.artwork_id,
        "run_id": run.run_id,
        "jobs": [
            {
                "template_id": job.template_id,
                "category": job.category.value,
                "order": job.order,
                "job_id": job.handle.job_id,
            }
            for job in run.jobs
        ],
        "failures": [
            {"template_id": f.template_id, "category": f.category.value, "error": f.error}
            for f in run.failures
        ] or None,
    }


def handler(event, context):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "artwork_id": 42
    }

    SQS records are processed one by one; run-level errors are re-raised so
    the queue retries the message. HTTP calls get a status code instead.
    """
    pipeline = get_pipeline()

    # Handle SQS event format
    if "Records" in event:
        results = []
        for record in event["Records"]:
            body = json.loads(record["body"])
            artwork_id = int(body["artwork_id"])
            print(f"Rendering previews for artwork {artwork_id}...", flush=True)
            run = pipeline.run(artwork_id)
            print(f"  {len(run.jobs)} jobs dispatched, {len(run.failures)} failed", flush=True)
            results.append(_summary(run))
        return {"statusCode": 200, "body": json.dumps({"runs": results})}

    body = json.loads(event.get("body") or "{}")

    # Validate required field
    if body.get("artwork_id") is None:
        return {
            "statusCode": 400,
            "body": json.dumps({"error": "Missing 'artwork_id' field"}),
        }

    try:
        artwork_id = int(body["artwork_id"])
    except (ValueError, TypeError):
        return {
            "statusCode": 400,
            "body": json.dumps({"error": f"Invalid 'artwork_id': {body['artwork_id']!r}"}),
        }

    try:
        run = pipeline.run(artwork_id, wait=False)
    except ArtworkNotFoundError as e:
        return {"statusCode": 404, "body": json.dumps({"error": str(e)})}
    except RunInProgressError as e:
        return {"statusCode": 409, "body": json.dumps({"error": str(e)})}
    except PipelineError as e:
        print(f"ERROR: {e}", flush=True)
        return {"statusCode": 500, "body": json.dumps({"error": str(e)})}

    # Partial success when some templates did not dispatch
    status_code = 207 if run.failures else 200
    return {"statusCode": status_code, "body": json.dumps(_summary(run))}


def status_handler(event, context):
    """HTTP handler returning the render job statuses of an artwork's last run."""
    params = event.get("pathParameters") or event.get("queryStringParameters") or {}
    if params.get("artwork_id") is None:
        return {
            "statusCode": 400,
            "body": json.dumps({"error": "Missing 'artwork_id' parameter"}),
        }

    try:
        artwork_id = int(params["artwork_id"])
    except (ValueError, TypeError):
        return {
            "statusCode": 400,
            "body": json.dumps({"error": f"Invalid 'artwork_id': {params['artwork_id']!r}"}),
        }

    pipeline = get_pipeline()
    reports = pipeline.job_statuses(artwork_id)
    return {
        "statusCode": 200,
        "body": json.dumps({
            "artwork_id": artwork_id,
            "jobs": [
                {"job_id": report.handle.job_id, "status": report.status.value}
                for report in reports
            ],
            "failed_template_ids": pipeline.failed_template_ids(artwork_id),
        }),
    }


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m mockups.handlers.worker <artwork_id>")
        sys.exit(1)

    event = {"body": json.dumps({"artwork_id": int(sys.argv[1])})}

    result = handler(event, None)
    print("\nResult:")
    print(json.dumps(json.loads(result["body"]), indent=2))
