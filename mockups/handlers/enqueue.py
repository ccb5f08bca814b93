"""AWS Lambda handler for HTTP to SQS enqueue of preview runs."""

import base64
import json
from functools import lru_cache

import boto3

from ..config import QUEUE_URL


@lru_cache(maxsize=1)
def _sqs():
    return boto3.client("sqs")


def handler(event, context):
    """
    HTTP to SQS proxy.

    Queues {"artwork_id": ...} for the worker, typically fired when an
    artwork is approved.
    """
    body = event.get("body") or "{}"

    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")

    try:
        payload = json.loads(body)
        artwork_id = int(payload["artwork_id"])
    except (ValueError, KeyError, TypeError):
        return {
            "statusCode": 400,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"error": "Missing or invalid 'artwork_id' field"}),
        }

    response = _sqs().send_message(
        QueueUrl=QUEUE_URL,
        MessageBody=json.dumps({"artwork_id": artwork_id}),
    )

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"status": "queued", "messageId": response["MessageId"]}),
    }
