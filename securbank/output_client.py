"""
Forms Output Client Module

REST client for the external forms output service that renders XDP
templates and documents to PDF. Template paths are resolved by the
output service itself.
"""

import base64
import httpx
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import PdfGenerationError

logger = logging.getLogger("securbank.output")


@dataclass
class RenderRequest:
    """A single render call sent to the output service"""
    data: bytes  # XML data document, may be empty
    content_root: str = ""
    template_path: Optional[str] = None  # Rendered by path when set
    document: Optional[bytes] = None  # Otherwise rendered from these bytes
    mime_type: Optional[str] = None

    def __post_init__(self):
        if (self.template_path is None) == (self.document is None):
            raise ValueError("Exactly one of template_path or document must be provided")

    def to_payload(self) -> dict:
        """JSON body expected by the output service"""
        return {
            "templatePath": self.template_path,
            "document": base64.b64encode(self.document).decode("ascii") if self.document is not None else None,
            "data": base64.b64encode(self.data).decode("ascii"),
            "contentRoot": self.content_root,
            "mimeType": self.mime_type,
        }


class OutputClient:
    """REST client for the forms output service"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        api_key: Optional[str] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self._client = httpx.Client(timeout=timeout)

    def generate_pdf_output(self, request: RenderRequest) -> bytes:
        """Render a PDF

        Args:
            request: Template or document plus XML data

        Returns:
            PDF bytes

        Raises:
            PdfGenerationError: On transport failure or a non-200 response
        """
        headers = {"Accept": "application/pdf"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        start = time.time()
        try:
            response = self._client.post(
                f"{self.base_url}/output/pdf",
                json=request.to_payload(),
                headers=headers
            )
        except httpx.HTTPError as e:
            raise PdfGenerationError(f"Forms output service unreachable: {e}") from e

        latency_ms = (time.time() - start) * 1000

        if response.status_code != 200:
            logger.warning(f"Forms output service returned {response.status_code}: {response.text}")
            raise PdfGenerationError(
                f"Forms output service returned status {response.status_code}"
            )

        logger.debug(f"Rendered {len(response.content)} bytes in {latency_ms:.1f}ms")
        return response.content

    def health_check(self) -> bool:
        """Check if the output service is healthy"""
        try:
            r = self._client.get(f"{self.base_url}/health")
            return r.status_code == 200
        except httpx.HTTPError:
            return False

    def close(self):
        """Close the HTTP client"""
        self._client.close()


class MockOutputClient(OutputClient):
    """In-process stand-in for the output service, returns a stub PDF"""

    def __init__(self, fail_with: Optional[str] = None, **kwargs):
        kwargs.setdefault("base_url", "http://localhost:4502")
        super().__init__(**kwargs)
        self.fail_with = fail_with
        self.requests: List[RenderRequest] = []

    def generate_pdf_output(self, request: RenderRequest) -> bytes:
        """Record the request and return a minimal PDF wrapping the data"""
        self.requests.append(request)

        if self.fail_with:
            raise PdfGenerationError(self.fail_with)

        return b"%PDF-1.4\n% securbank mock output\n" + request.data + b"\n%%EOF\n"

    def health_check(self) -> bool:
        """Mock health check always returns True"""
        return True
