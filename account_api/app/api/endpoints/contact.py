"""
Contact form endpoint.

Submissions are relayed by email to the site operator.  If the mail
server fails, the client receives a generic 500 error and the detail
stays in the server log.
"""

from fastapi import APIRouter

from account_api.app.schemas.contact import ContactError, ContactMessage
from account_api.app.schemas.user import MessageResponse
from account_api.app.services.mail_service import MailService

router = APIRouter()


@router.post(
    "/contact",
    response_model=MessageResponse,
    responses={500: {"model": ContactError, "description": "Mail delivery failed"}},
)
async def send_contact_message(payload: ContactMessage) -> MessageResponse:
    await MailService.send_contact_message(payload)
    return MessageResponse(message="Email sent successfully!")
