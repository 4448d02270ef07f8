"""
Shared Test Fixtures

Explicit wire payloads and transports. No network, no random generation.
"""

import json
from typing import Callable, List, Optional

import httpx

from ingestion.contracts import MemeRecord


ENDPOINT = "https://api.imgflip.com/get_memes"

FRY_BODY = (
    b'{"success":true,"data":{"memes":[{"id":"1","name":"Fry","url":"http://x/1.jpg",'
    b'"width":10,"height":10,"box_count":2}]}}'
)

EMPTY_BODY = b'{"success":true,"data":{"memes":[]}}'

MALFORMED_BODY = b'{"success":true,"data":{"memes":['


def meme_dict(
    meme_id: str = "181913649",
    name: str = "Drake Hotline Bling",
    url: str = "https://i.imgflip.com/30b1gx.jpg",
    width: int = 1200,
    height: int = 1200,
    box_count: int = 2,
    **extra
) -> dict:
    """Wire shape of a single meme."""
    element = {
        "id": meme_id,
        "name": name,
        "url": url,
        "width": width,
        "height": height,
        "box_count": box_count,
    }
    element.update(extra)
    return element


def response_body(memes: List[dict], success: bool = True, **extra_data) -> bytes:
    data = {"memes": memes}
    data.update(extra_data)
    return json.dumps({"success": success, "data": data}).encode("utf-8")


THREE_MEMES = [
    meme_dict("181913649", "Drake Hotline Bling", "https://i.imgflip.com/30b1gx.jpg", 1200, 1200, 2),
    meme_dict("87743020", "Two Buttons", "https://i.imgflip.com/1g8my4.jpg", 600, 908, 3),
    meme_dict("112126428", "Distracted Boyfriend", "https://i.imgflip.com/1ur9b0.jpg", 1200, 800, 3),
]

THREE_MEMES_BODY = response_body(THREE_MEMES)

FRY = MemeRecord(
    meme_id="1",
    name="Fry",
    image_url="http://x/1.jpg",
    width=10,
    height=10,
    box_count=2,
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(
        self,
        body: bytes = THREE_MEMES_BODY,
        status_code: int = 200,
        raises: Optional[Callable[[httpx.Request], Exception]] = None
    ):
        self.requests: List[httpx.Request] = []
        self._body = body
        self._status_code = status_code
        self._raises = raises
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._raises is not None:
            raise self._raises(request)
        return httpx.Response(self._status_code, content=self._body)
