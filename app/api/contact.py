"""
app/api/contact.py

Purpose: Public contact form endpoint

- Accepts JSON or form-encoded submissions
- Hands the raw fields to the submission workflow
- Returns the saved id and SMS outcome
"""

import json

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import InvalidInputError
from app.core.logging import get_logger
from app.services.submission_service import SubmissionWorkflow
from app.api.dependencies import get_workflow

logger = get_logger(__name__)
router = APIRouter()


async def read_form_fields(request: Request) -> dict:
    """
    Reads the request body as a flat dict of fields.

    Form posts and JSON objects are both accepted. Any other content
    type, or an empty body, gives an empty dict so validation reports
    the missing fields.
    """
    content_type = request.headers.get("content-type", "")

    if "application/x-www-form-urlencoded" in content_type or "multipart/form-data" in content_type:
        form = await request.form()
        return dict(form)

    if "application/json" not in content_type:
        return {}

    body = await request.body()
    if not body:
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        logger.info("Rejected submission with unparseable body")
        raise InvalidInputError()

    if not isinstance(payload, dict):
        raise InvalidInputError()

    return payload


@router.post("/send-sms")
async def submit_contact_form(
    request: Request,
    workflow: SubmissionWorkflow = Depends(get_workflow),
):
    """
    Saves a contact form submission and attempts a thank-you SMS.

    Responds 200 even when the SMS fails; `sms` is then null and
    `notification_status` says whether it failed or was skipped.
    """
    fields = await read_form_fields(request)

    # Blocking DB and HTTP work runs off the event loop
    result = await run_in_threadpool(workflow.submit, fields)

    return result.render()
