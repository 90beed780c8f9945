"""
Transactional-email adapter for meeting invitations.

Posts JSON to a Brevo-compatible endpoint with an ``api-key`` header.
Recipients are blind-copied behind the configured sender.
"""

import logging
from html import escape
from typing import List, Optional

import httpx

from chapterhub.app.services.mail_dispatcher import IMailDispatcher, MeetingDetails

logger = logging.getLogger(__name__)


def _clean_recipients(recipients: List[str]) -> List[str]:
    seen = []
    for entry in recipients:
        email = (entry or "").strip()
        if email and email not in seen:
            seen.append(email)
    return seen


class HttpMailDispatcher(IMailDispatcher):
    def __init__(
        self,
        api_url: str,
        api_key: Optional[str],
        sender_email: Optional[str],
        sender_name: str = "Chapterhub",
        app_url: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.app_url = app_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def meeting_link(self, meeting: MeetingDetails) -> str:
        return f"{self.app_url}/events/{meeting.event_id}?payment=true"

    def render(self, meeting: MeetingDetails) -> str:
        fee = f"<p><strong>Entry Fee:</strong> {meeting.entry_fee}</p>" if meeting.entry_fee else ""
        return (
            '<div style="font-family: Arial, sans-serif; padding: 20px;">'
            f"<h2>You are invited to {escape(meeting.title)}!</h2>"
            f"<p><strong>Date:</strong> {meeting.date.strftime('%Y-%m-%d')}</p>"
            f"<p><strong>Time:</strong> {meeting.date.strftime('%H:%M')}</p>"
            f"<p><strong>Venue:</strong> {escape(meeting.venue or 'TBA')}</p>"
            f"{fee}"
            f"<p>{escape(meeting.description)}</p>"
            f'<a href="{self.meeting_link(meeting)}">Pay Now</a>'
            "</div>"
        )

    async def send_invites(self, recipients: List[str], meeting: MeetingDetails) -> None:
        if not self.api_key:
            logger.warning("MAIL_API_KEY is not configured. Skipping invitation email.")
            return
        if not self.sender_email:
            logger.warning("MAIL_SENDER_EMAIL is not configured. Skipping invitation email.")
            return

        recipient_list = _clean_recipients(recipients)
        if not recipient_list:
            return

        payload = {
            "sender": {"email": self.sender_email, "name": self.sender_name},
            "to": [{"email": self.sender_email, "name": self.sender_name}],
            "bcc": [{"email": email} for email in recipient_list],
            "subject": f"Invitation: {meeting.title}",
            "htmlContent": self.render(meeting),
        }
        headers = {
            "api-key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.api_url, headers=headers, json=payload)
                response.raise_for_status()
            logger.info(
                "Sent invitation for event %s to %d recipient(s)",
                meeting.event_id,
                len(recipient_list),
            )
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Mail API responded with an error: status=%s body=%s",
                exc.response.status_code,
                exc.response.text[:500],
            )
        except httpx.HTTPError as exc:
            logger.error("Failed to call mail API: %s", exc)
