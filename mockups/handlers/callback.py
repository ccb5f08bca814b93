"""AWS Lambda handler for render completion callbacks."""

import json

from ..clients.render import STATUS_MAP
from ..engine import get_pipeline
from ..errors import UnknownJobError
from ..models import JobStatus


def handler(event, context):
    """
    Rendering service webhook.

    Query string carries the metadata sent with the composition (order,
    for_marketing, ...). Body:
    {
        "job_id": "f54e0fcb-...",
        "status": "succeeded",
        "image_url": "https://...",
        "errors": ["..."]        # only when failed
    }
    """
    body = json.loads(event.get("body") or "{}")
    metadata = event.get("queryStringParameters") or {}

    job_id = body.get("job_id")
    if not job_id:
        return {
            "statusCode": 400,
            "body": json.dumps({"error": "Missing 'job_id' field"}),
        }

    status = STATUS_MAP.get(body.get("status", ""), JobStatus.PENDING)
    errors = body.get("errors")
    error_msg = None
    if errors:
        error_msg = "; ".join(map(str, errors)) if isinstance(errors, list) else str(errors)

    try:
        preview = get_pipeline().complete_job(
            job_id,
            status,
            image_url=body.get("image_url"),
            metadata=metadata,
            error=error_msg,
        )
    except UnknownJobError as e:
        return {"statusCode": 404, "body": json.dumps({"error": str(e)})}
    except ValueError as e:
        return {"statusCode": 400, "body": json.dumps({"error": str(e)})}

    return {
        "statusCode": 200,
        "body": json.dumps({
            "job_id": job_id,
            "status": status.value,
            "preview_id": preview.id if preview else None,
        }),
    }
