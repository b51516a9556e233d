from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dishka import FromDishka
from dishka.integrations.fastapi import inject

import json
import logging
from typing import Any

from contact_backend.core.dto import ContactMessageDTO
from contact_backend.core.gateways import ContactMessageGateway
from ..models.contact_api_models import *

REQUIRED_FIELDS_MESSAGE = "All fields are required."
SUBMIT_SUCCESS_MESSAGE = "Thank you for your message! We will get back to you soon."
SUBMIT_ERROR_MESSAGE = "There was an error saving your message. Please try again."
FETCH_ERROR_MESSAGE = "There was an error fetching messages."

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump()
    )

def to_response(contact_message: ContactMessageDTO) -> ContactMessageResponse:
    return ContactMessageResponse(
        id=contact_message.id,
        name=contact_message.name,
        email=contact_message.email,
        message=contact_message.message,
        created_at=contact_message.created_at
    )


class ContactAPI:
    """
    Contact form API endpoints.

    Accepts contact form submissions and lists the stored messages.
    Every response uses the {success, message, data} envelope the
    front end expects, including validation and store errors.

    Attributes:
        logger: Logger instance for tracking operations
        contact_router: FastAPI router containing contact endpoints
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger

        self._contact_router = APIRouter(prefix="/api", tags=["Contact"])

        self._register_endpoints()

    @property
    def contact_router(self) -> APIRouter:
        return self._contact_router

    def get_router(self) -> APIRouter:
        return self._contact_router

    async def read_body(self, request: Request) -> dict[str, Any]:
        """
        Reads a JSON or form encoded request body.

        Args:
            request: Incoming request

        Returns:
            Parsed body, or an empty dict when the body is missing,
            malformed or of an unsupported content type
        """
        content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

        if content_type == "application/json" or content_type.endswith("+json"):
            try:
                body = await request.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                self.logger.debug("Malformed JSON body on %s", request.url.path)
                return {}
            return body if isinstance(body, dict) else {}

        if content_type in FORM_CONTENT_TYPES:
            form = await request.form()
            return dict(form)

        return {}

    def _register_endpoints(self):
        @self.contact_router.post(
            "/contact",
            response_model=ContactSubmitResponse,
            responses={
                status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
                status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
            }
        )
        @inject
        async def submit_contact(request: Request, gateway: FromDishka[ContactMessageGateway]):
            """
            Store a contact form submission.

            Args:
                request: Request carrying name, email and message
                gateway: Contact message persistence interface

            Returns:
                The stored record wrapped in a success envelope
            """
            body = await self.read_body(request)

            try:
                submission = ContactSubmitRequest.model_validate(body)
            except ValidationError:
                return error_response(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

            try:
                contact_message = await gateway.create_message(
                    name=submission.name,
                    email=submission.email,
                    message=submission.message
                )
            except Exception as e:
                self.logger.error("Error saving message: %s", e, exc_info=True)
                return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SUBMIT_ERROR_MESSAGE)

            self.logger.info("Contact message %s saved", contact_message.id)

            return ContactSubmitResponse(
                message=SUBMIT_SUCCESS_MESSAGE,
                data=to_response(contact_message)
            )

        @self.contact_router.get(
            "/messages",
            response_model=MessagesResponse,
            responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
        )
        @inject
        async def get_messages(gateway: FromDishka[ContactMessageGateway]):
            """
            List every stored contact message, newest first.
            """
            try:
                messages = await gateway.get_messages()
            except Exception as e:
                self.logger.error("Error fetching messages: %s", e, exc_info=True)
                return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_ERROR_MESSAGE)

            return MessagesResponse(data=[to_response(message) for message in messages])
