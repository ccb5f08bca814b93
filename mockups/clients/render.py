"""Rendering service client (Photoshop smart-object API)."""

import logging
import time
from urllib.parse import urlencode

import requests

from ..errors import RenderSubmitError
from ..models.job import CompositionRequest, JobStatus, RenderJobHandle

logger = logging.getLogger(__name__)

# Service status -> our status. Anything unknown is still pending.
STATUS_MAP = {
    "pending": JobStatus.PENDING,
    "starting": JobStatus.PENDING,
    "running": JobStatus.PENDING,
    "succeeded": JobStatus.COMPLETE,
    "failed": JobStatus.FAILED,
}


class RenderClient:
    """Client for compositing artwork onto templates via the rendering service."""

    def __init__(
        self,
        api_token: str,
        api_key: str,
        base_url: str,
        callback_url: str,
        smart_object_layer: str = "artwork",
    ):
        self.api_token = api_token
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.callback_url = callback_url
        self.smart_object_layer = smart_object_layer

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "x-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    def _request_with_retry(
        self,
        method: str,
        url: str,
        headers: dict,
        json: dict | None = None,
        max_retries: int = 5,
    ) -> requests.Response:
        """Make request with exponential backoff on 429 errors."""
        response = None
        for attempt in range(max_retries):
            if method == "POST":
                response = requests.post(url, json=json, headers=headers, timeout=30)
            else:
                response = requests.get(url, headers=headers, timeout=30)

            if response.status_code == 429:
                wait_time = 2 ** attempt
                time.sleep(wait_time)
                continue

            return response

        return response

    def _output_href(self, request: CompositionRequest) -> str:
        """Upload target the service delivers the finished image to."""
        return f"{self.callback_url}?{urlencode(request.metadata())}"

    def build_payload(self, request: CompositionRequest) -> dict:
        return {
            "inputs": [{"href": request.artwork_input, "storage": "external"}],
            "options": {
                "layers": [
                    {
                        "name": self.smart_object_layer,
                        "input": {"href": request.template_url, "storage": "external"},
                    }
                ],
            },
            "outputs": [
                {
                    "href": self._output_href(request),
                    "storage": "external",
                    "type": "image/jpeg",
                    "width": request.width,
                }
            ],
        }

    def submit_composition(self, request: CompositionRequest) -> RenderJobHandle:
        """
        Submit one composition job.

        Returns:
            RenderJobHandle parsed from the service's status link.

        Raises:
            RenderSubmitError: On transport errors, non-2xx responses or a
                response without a status link.
        """
        url = f"{self.base_url}/smartObject"
        payload = self.build_payload(request)

        try:
            response = self._request_with_retry("POST", url, self._get_headers(), json=payload)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RenderSubmitError(f"Failed to submit template {request.template_id}: {e}")
        except ValueError as e:
            raise RenderSubmitError(f"Invalid response for template {request.template_id}: {e}")

        return self._parse_handle(data)

    def _parse_handle(self, data) -> RenderJobHandle:
        # Response format: {"_links": {"self": {"href": "https://.../status/<job_id>"}}}
        links = data.get("_links") if isinstance(data, dict) else None
        link = links.get("self") if isinstance(links, dict) else None
        href = link.get("href") if isinstance(link, dict) else None
        if not href or not isinstance(href, str):
            raise RenderSubmitError(f"Unexpected render service response: {data}")
        job_id = href.rstrip("/").split("/")[-1]
        return RenderJobHandle(job_id=job_id, status_url=href)

    def poll(self, job_id: str) -> tuple[JobStatus, str | None]:
        """Poll a single job. Returns (status, error)."""
        url = f"{self.base_url}/status/{job_id}"

        try:
            response = self._request_with_retry("GET", url, self._get_headers())
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Status check for job {job_id} failed: {e}")
            return JobStatus.PENDING, str(e)

        outputs = data.get("outputs") if isinstance(data, dict) else None
        output = outputs[0] if isinstance(outputs, list) and outputs else None
        if not isinstance(output, dict):
            logger.warning(f"Unexpected status response for job {job_id}: {data}")
            return JobStatus.PENDING, None

        service_status = output.get("status")
        status = STATUS_MAP.get(service_status, JobStatus.PENDING) if isinstance(service_status, str) else JobStatus.PENDING

        errors = output.get("errors")
        error_msg = None
        if errors:
            error_msg = "; ".join(map(str, errors)) if isinstance(errors, list) else str(errors)

        return status, error_msg
