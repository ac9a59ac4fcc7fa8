"""
PDF Generation Service Module

Prepares render requests (XML form data, content root) and hands them to
the forms output service. No rendering happens here.
"""

from typing import Any, Mapping, Optional

from .exceptions import PdfGenerationError
from .forms import build_xml_data, content_root_for
from .logging_config import get_logger
from .output_client import OutputClient, RenderRequest


class PdfGenerationService:
    """Generates PDFs from XDP templates, HTML and other documents"""

    def __init__(self, output_client: Optional[OutputClient]):
        self.output_client = output_client
        self.logger = get_logger("securbank.pdf")

    def generate_pdf_from_xdp(self, template_path: str, form_data: Mapping[str, Any]) -> bytes:
        """
        Generate a PDF from an XDP template and form data.

        Args:
            template_path: Repository path of the XDP template
            form_data: Field values bound into the template

        Returns:
            PDF bytes

        Raises:
            InvalidArgumentError: If a field name cannot be used as an XML element
            PdfGenerationError: If the output service fails or is not configured
        """
        self.logger.info(f"Generating PDF from XDP template: {template_path}")

        xml_data = build_xml_data(form_data)
        request = RenderRequest(
            template_path=template_path,
            data=xml_data.encode("utf-8"),
            content_root=content_root_for(template_path)
        )
        return self._render(request, "Failed to generate PDF from XDP template")

    def generate_pdf_from_html(self, html_content: str) -> bytes:
        """Generate a PDF from an HTML document"""
        self.logger.info("Generating PDF from HTML content")

        request = RenderRequest(
            document=html_content.encode("utf-8"),
            data=b"",
            mime_type="text/html"
        )
        return self._render(request, "Failed to generate PDF from HTML")

    def render_pdf_form(self, form_path: str, data: str) -> bytes:
        """Render a form with a caller supplied XML data document"""
        self.logger.info(f"Rendering PDF form: {form_path}")

        request = RenderRequest(
            template_path=form_path,
            data=data.encode("utf-8"),
            content_root=content_root_for(form_path)
        )
        return self._render(request, "Failed to render PDF form")

    def convert_to_pdf(self, document: bytes, mime_type: str) -> bytes:
        """Convert an arbitrary document to PDF"""
        self.logger.info(f"Converting document to PDF, MIME type: {mime_type}")

        request = RenderRequest(document=document, data=b"", mime_type=mime_type)
        return self._render(request, "Failed to convert document to PDF")

    def _render(self, request: RenderRequest, failure_message: str) -> bytes:
        if self.output_client is None:
            raise PdfGenerationError("Forms output service is not configured")

        try:
            return self.output_client.generate_pdf_output(request)
        except PdfGenerationError as e:
            self.logger.error(failure_message, exc_info=True)
            raise PdfGenerationError(f"{failure_message}: {e}") from e
