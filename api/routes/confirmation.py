"""Send-confirmation endpoint.

Receives a lead-capture submission, generates personalized welcome copy and
sends the welcome email. Every response carries permissive cross-origin
headers so browser forms on any origin can call it.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
import logfire

from api.dependencies import get_content_generator, get_email_sender
from config.settings import Settings, get_settings
from schemas.confirmation import ConfirmationResponse, ErrorResponse, SubmissionRequest
from services.welcome_email import EmailSender, TextGenerator, send_welcome_email


router = APIRouter(tags=["Confirmation"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

INVALID_INPUT_MESSAGE = "Invalid JSON input"


def _json_response(body: dict, status_code: int) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


def parse_submission(raw_body: bytes) -> SubmissionRequest:
    """
    Decode and validate the raw request body.

    Raises:
        ValueError: If the body is empty, not valid JSON, not an object, or a
            required field is missing, empty or not a string
    """
    text = raw_body.decode("utf-8")
    if not text:
        raise ValueError("Empty body")
    return SubmissionRequest.model_validate_json(text)


@router.options("/send-confirmation")
async def send_confirmation_preflight() -> Response:
    """Cross-origin pre-flight: empty body, no further processing."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)


@router.post(
    "/send-confirmation",
    responses={
        200: {"model": ConfirmationResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def send_confirmation(
    request: Request,
    settings: Settings = Depends(get_settings),
    generator: TextGenerator = Depends(get_content_generator),
    sender: EmailSender = Depends(get_email_sender),
) -> JSONResponse:
    """
    Generate welcome copy and send the welcome email.

    The body is read as raw bytes so an empty or malformed payload becomes a
    controlled 400 instead of an unhandled parse error.

    Returns:
        200: {"success": true, "emailId": "<id>"} (emailId omitted if none)
        400: {"error": "Invalid JSON input"}, no outbound calls made
        500: {"error": "<message>"} for any failure after validation
    """
    with logfire.span("api.send_confirmation"):
        try:
            try:
                raw_body = await request.body()
                logfire.info("Raw request body", raw_body=raw_body.decode("utf-8", errors="replace"))
                submission = parse_submission(raw_body)
            except ValueError as e:
                logfire.warning("Invalid JSON input", error=str(e))
                return _json_response(
                    ErrorResponse(error=INVALID_INPUT_MESSAGE).model_dump(),
                    status.HTTP_400_BAD_REQUEST
                )

            result = await send_welcome_email(
                submission=submission,
                generator=generator,
                sender=sender,
                email_from=settings.email_from
            )

            return _json_response(
                ConfirmationResponse(email_id=result.message_id).to_body(),
                status.HTTP_200_OK
            )

        except Exception as e:
            logfire.error(
                "Error in send-confirmation function",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=True
            )
            return _json_response(
                ErrorResponse(error=str(e) or "Unknown error").model_dump(),
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )
