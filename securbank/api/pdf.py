"""
PDF generation endpoint

Accepts a template path plus arbitrary form fields (query string or form
body) and streams back the rendered PDF.
"""

from email.utils import formatdate
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from .dependencies import SecurBankSystem, get_system
from ..exceptions import InvalidArgumentError
from ..forms import extract_form_data
from ..logging_config import get_logger, log_action


PARAM_TEMPLATE = "template"
PARAM_FILENAME = "filename"

logger = get_logger("securbank.api.pdf")

router = APIRouter()


async def _request_params(request: Request) -> List[Tuple[str, str]]:
    """Query parameters followed by form body fields; uploaded files are ignored"""
    params = list(request.query_params.multi_items())
    if request.method == "POST":
        form = await request.form()
        params.extend((key, value) for key, value in form.multi_items() if isinstance(value, str))
    return params


def _safe_filename(filename: str) -> str:
    return filename.replace('"', '').replace('\r', '').replace('\n', '').strip()


def _error(status_code: int, message: str, code: Optional[str] = None) -> JSONResponse:
    body = {"error": message}
    if code:
        body["code"] = code
    return JSONResponse(status_code=status_code, content=body)


@router.api_route("/generate-pdf", methods=["GET", "POST"])
async def generate_pdf(
    request: Request,
    system: SecurBankSystem = Depends(get_system)
):
    """Generate a PDF from an XDP template and the remaining request parameters"""
    params = await _request_params(request)
    values = {}
    for key, value in params:
        values.setdefault(key, value)

    template_path = values.get(PARAM_TEMPLATE)
    if template_path is None or not template_path.strip():
        return _error(400, "Template path parameter is required")

    form_data = extract_form_data(params, reserved=(PARAM_TEMPLATE, PARAM_FILENAME))

    filename = _safe_filename(values.get(PARAM_FILENAME) or "")
    if not filename:
        filename = system.config.pdf_default_filename

    log_action(
        logger, "info", f"Generating PDF from XDP template: {template_path}",
        action="generate_pdf", resource=f"template:{template_path}",
        extra={"field_count": len(form_data), "filename": filename}
    )

    try:
        pdf_bytes = await run_in_threadpool(
            system.pdf_service.generate_pdf_from_xdp, template_path, form_data
        )
    except InvalidArgumentError as e:
        return _error(400, str(e), e.code)
    except Exception as e:
        logger.error("Error generating PDF from XDP template", exc_info=True)
        return _error(500, str(e))

    log_action(
        logger, "info", f"PDF generated successfully: {filename}",
        action="generate_pdf", resource=f"template:{template_path}",
        extra={"bytes": len(pdf_bytes)}
    )

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "Pragma": "no-cache",
            "Expires": formatdate(0, usegmt=True),
        }
    )
