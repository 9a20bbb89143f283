"""Webhook notifications sent when a render finishes, and gifski arguments."""

from __future__ import annotations

import json
import tempfile
import threading
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

CALLBACK_TIMEOUT = 10.0

# Seconds to wait before each delivery attempt; the index is the retry number.
RETRY_DELAYS = (0, 8, 27, 64, 125, 216, 343, 512, 729, 900)

PostFunction = Callable[[str, bytes, float], int]
Scheduler = Callable[[float, Callable[[], None]], None]


@dataclass
class CallbackResponse:
    """The JSON body posted to a render's callback URL."""

    type: str = ""
    action: str = ""
    id: str = ""
    owner: str = ""
    status: str = ""
    url: str = ""
    error: str | None = None
    completed: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialise, leaving out empty fields except ``error``."""
        result: dict[str, Any] = {}
        for key in ("type", "action", "id", "owner", "status", "url"):
            value = getattr(self, key)
            if value:
                result[key] = value
        result["error"] = self.error
        if self.completed:
            result["completed"] = self.completed
        return result


def _format_completed(moment: datetime) -> str:
    """Format a completion time the way the callback body has always carried it.

    The fractional part holds the unpadded month, the unpadded day and the
    12-hour clock hour, followed by a literal ``Z``.
    """
    hour12 = moment.hour % 12 or 12
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.month}{moment.day}{hour12}Z"


def build_callback_response(
    render_id: str,
    download_base_url: str,
    completed: datetime,
    error_label: str = "",
) -> CallbackResponse:
    """Build the callback body for a finished or failed render."""
    response = CallbackResponse(
        type="edit",
        action="render",
        id=render_id,
        owner="me",
        status="done",
    )
    if error_label:
        response.status = "failed"
        response.error = error_label
    else:
        response.url = f"{download_base_url}/renders/{render_id}"
        response.completed = _format_completed(completed)
    return response


def _http_post(url: str, body: bytes, timeout: float) -> int:
    request = urllib.request.Request(
        url,
        data=body,
        method="POST",
        headers={"Content-Type": "application/json"},
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as reply:
            return reply.status
    except urllib.error.HTTPError as exc:
        return exc.code
    except urllib.error.URLError as exc:
        if isinstance(exc.reason, TimeoutError):
            raise TimeoutError(str(exc.reason)) from exc
        raise


def _timer(delay: float, action: Callable[[], None]) -> None:
    timer = threading.Timer(delay, action)
    timer.daemon = True
    timer.start()


class CallbackSender:
    """Posts render results to callback URLs, retrying failed deliveries."""

    def __init__(
        self,
        download_base_url: str,
        post: PostFunction | None = None,
        scheduler: Scheduler | None = None,
        timeout: float = CALLBACK_TIMEOUT,
    ) -> None:
        self.download_base_url = download_base_url
        self._post = post or _http_post
        self._schedule = scheduler or _timer
        self.timeout = timeout

    def execute(
        self,
        render_id: str,
        callback_url: str,
        completed: datetime,
        error_label: str = "",
        retry: int = 0,
    ) -> int | None:
        """Deliver the callback once; schedule a retry if delivery failed.

        Returns the HTTP status received, or None when nothing was received
        (no callback URL, or the request timed out). Errors other than a
        timeout propagate.
        """
        if not callback_url:
            return None

        response = build_callback_response(
            render_id, self.download_base_url, completed, error_label
        )
        body = json.dumps(response.to_dict()).encode("utf-8")

        try:
            status: int | None = self._post(callback_url, body, self.timeout)
        except TimeoutError:
            status = None

        failed = status is None or not 200 <= status <= 399
        next_retry = retry + 1
        if failed and retry < len(RETRY_DELAYS) and next_retry < len(RETRY_DELAYS):
            self._schedule(
                RETRY_DELAYS[next_retry],
                lambda: self.execute(
                    render_id, callback_url, completed, error_label, next_retry
                ),
            )
        return status


def gifski_parameters(
    output_name: str,
    repeat: bool,
    render_id: str,
    directory: str | Path | None = None,
) -> list[str]:
    """Arguments for gifski: output, loop mode and the frames of a render.

    Frames are the files directly inside *directory* (the temporary
    directory by default) whose name contains *render_id*, in name order.
    """
    root = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    frames = sorted(
        str(entry)
        for entry in root.iterdir()
        if not entry.is_dir() and render_id in entry.name
    )
    if not frames:
        raise FileNotFoundError("impossible to detect PNGs to create GIF")
    return ["-o", output_name, "--repeat", "0" if repeat else "-1", *frames]