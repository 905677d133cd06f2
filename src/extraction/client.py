"""
Vision Extraction Client

Async client that sends a word list photo to an OpenAI-compatible chat
completions endpoint and turns the reply into a WordList.
"""

import base64
import mimetypes
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

import aiohttp

from core.config import get_config
from core.exceptions import ExtractionError, RateLimitError
from quiz.models import WordList
from utils.logging import get_logger
from utils.rate_limit import SlidingWindowRateLimiter
from .parser import build_extraction_prompt, parse_extraction_output

logger = get_logger(__name__)

ANONYMOUS_CLIENT = "anonymous"


def image_to_data_url(image: bytes, content_type: Optional[str] = None) -> str:
    """Encode image bytes as a base64 ``data:`` URL."""
    encoded = base64.b64encode(image).decode("ascii")
    return f"data:{content_type or 'image/jpeg'};base64,{encoded}"


class VisionExtractor:
    """Extracts word lists from photos with a vision language model."""

    def __init__(self, api_key: Optional[str] = None, config=None,
                 rate_limiter: Optional[SlidingWindowRateLimiter] = None):
        """
        Initialize the extractor.

        Args:
            api_key: API key (from OPENROUTER_API_KEY if not provided)
            config: Application configuration (global config if None)
            rate_limiter: Shared per-client limiter (built from config if None)
        """
        self.app_config = config or get_config()
        self.settings = self.app_config.extraction

        self.api_key = api_key or os.getenv('OPENROUTER_API_KEY')
        if not self.api_key:
            raise ExtractionError(
                "API key not provided. Set OPENROUTER_API_KEY environment variable."
            )

        self.rate_limiter = rate_limiter or SlidingWindowRateLimiter(
            max_requests=self.settings.rate_limit.max_requests,
            window_seconds=self.settings.rate_limit.window_seconds,
        )
        self.session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.settings.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)
        return self.session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def build_payload(self, data_url: str) -> Dict[str, Any]:
        """Chat completions request body for one photo."""
        return {
            "model": self.settings.model,
            "max_tokens": self.settings.max_tokens,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": build_extraction_prompt(self.settings.languages)},
                        {
                            "type": "image_url",
                            "image_url": {"url": data_url, "detail": self.settings.image_detail},
                        },
                    ],
                }
            ],
        }

    async def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        session = await self._ensure_session()
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.headers.get("referer", ""),
            "X-Title": self.settings.headers.get("title", ""),
        }
        url = f"{self.settings.base_url.rstrip('/')}/chat/completions"

        try:
            async with session.post(url, headers=headers, json=payload) as response:
                if response.status == 429:
                    retry_after = response.headers.get('Retry-After', '')
                    raise RateLimitError(
                        "Vision API rate limit exceeded",
                        retry_after=float(retry_after) if retry_after.isdigit() else None
                    )
                if response.status >= 400:
                    body = await response.text()
                    raise ExtractionError(
                        f"Vision API request failed with status {response.status}",
                        status_code=response.status,
                        raw_output=body
                    )
                return await response.json()
        except aiohttp.ClientError as e:
            raise ExtractionError(f"Vision API request failed: {e}")

    async def extract(self, image: bytes, content_type: Optional[str] = None,
                      client_id: str = ANONYMOUS_CLIENT) -> WordList:
        """
        Extract a word list from photo bytes.

        Args:
            image: Raw image bytes
            content_type: Image MIME type (JPEG assumed if None)
            client_id: Identity the request is throttled under

        Returns:
            Validated WordList

        Raises:
            RateLimitError: If the client exhausted its request window
            ExtractionError: If the request fails or the reply holds no word list
        """
        if not image:
            raise ExtractionError("No image data received")

        self.rate_limiter.check(client_id)

        payload = self.build_payload(image_to_data_url(image, content_type))
        start_time = time.time()
        logger.info(f"Requesting word list extraction from {self.settings.model} for {client_id}",
                    extra={'client_id': client_id})
        response_data = await self._post(payload)
        logger.debug(f"Vision request completed in {time.time() - start_time:.2f}s")

        choices = response_data.get('choices') or []
        if not choices:
            raise ExtractionError("Invalid response format: no choices in response",
                                  raw_output=str(response_data))

        text = (choices[0].get('message') or {}).get('content') or ""
        return parse_extraction_output(text)

    async def extract_file(self, path: Union[str, Path],
                           client_id: str = ANONYMOUS_CLIENT) -> WordList:
        """Extract a word list from an image file on disk."""
        path = Path(path)
        try:
            image = path.read_bytes()
        except OSError as e:
            raise ExtractionError(f"Cannot read image {path}: {e}")

        content_type, _ = mimetypes.guess_type(path.name)
        return await self.extract(image, content_type, client_id)
