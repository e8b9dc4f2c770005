"""
Module: orders.mailer

Purpose:
    Compose the order notification email sent to the business and hand it
    to an injected sender. Attaches every original design and the
    print-ready PDF built by the sheet engine.

Key Classes:
    - OrderMailer: Composes and dispatches order emails
    - OrderEmail: Email payload (Resend-style ``to_dict()``)
    - EmailAttachment: Base64 attachment

Dependencies:
    - sticker_studio.sheets: build_sheet() for the PDF
    - sticker_studio.settings: Recipient and sender addresses

Used By:
    - Order handler, after acknowledging the customer

A failed PDF build never blocks the email: the error is logged and the
email goes out with the original designs only.
"""

from __future__ import annotations

import base64
import html
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from sticker_studio.settings import StudioSettings
from sticker_studio.sheets import LayoutConfig, SheetError, build_sheet

from .models import Order

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₡"


@dataclass(frozen=True)
class EmailAttachment:
    """
    Email attachment.

    Attributes:
        filename: Attachment filename
        content: Base64-encoded file content
    """
    filename: str
    content: str


@dataclass(frozen=True)
class OrderEmail:
    """
    Composed order email (immutable).

    Attributes:
        sender: From address
        to: Recipient addresses
        subject: Subject line
        html: HTML body
        attachments: Designs plus optional print-ready PDF
        has_print_pdf: Whether the print-ready PDF is attached
    """
    sender: str
    to: tuple[str, ...]
    subject: str
    html: str
    attachments: tuple[EmailAttachment, ...]
    has_print_pdf: bool = False

    def to_dict(self) -> dict:
        """Serialise to the JSON body expected by transactional email APIs."""
        return {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "attachments": [
                {"filename": a.filename, "content": a.content}
                for a in self.attachments
            ],
        }


# Delivers an email and returns the provider's message id
EmailSender = Callable[[OrderEmail], Optional[str]]


class OrderMailer:
    """
    Builds and dispatches order emails.

    Example:
        >>> mailer = OrderMailer(settings, sender=resend_client.send)
        >>> mailer.dispatch(order)
        'msg_123'
    """

    def __init__(
        self,
        settings: StudioSettings,
        sender: EmailSender,
        *,
        layout_config: Optional[LayoutConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize mailer.

        Args:
            settings: Recipient and sender configuration
            sender: Callable that delivers a composed email
            layout_config: Sheet layout configuration (A4 defaults when omitted)
            clock: Returns the current local time
        """
        self._settings = settings
        self._sender = sender
        self._layout_config = layout_config
        self._clock = clock

    def dispatch(self, order: Order) -> Optional[str]:
        """
        Compose the order email and hand it to the sender.

        Returns:
            Message id from the sender, or None when email is not configured
        """
        if not self._settings.email_enabled:
            logger.info("BUSINESS_EMAIL not configured, skipping order email")
            return None

        email = self.compose(order)
        logger.info(f"Sending order email to: {self._settings.business_email}")
        message_id = self._sender(email)
        logger.info(f"Order email sent successfully: {message_id}")
        return message_id

    def compose(self, order: Order) -> OrderEmail:
        """
        Compose the email for an order.

        Args:
            order: Validated order

        Returns:
            OrderEmail with designs and, when it builds, the print-ready PDF
        """
        now = self._clock()
        millis = int(now.timestamp() * 1000)

        attachments = [
            EmailAttachment(
                filename=f"sticker-{i}-{millis}.{image.ext}",
                content=image.base64_data,
            )
            for i, image in enumerate(order.images, start=1)
        ]

        pdf_attachment = self._build_print_pdf(order)
        if pdf_attachment is not None:
            attachments.append(pdf_attachment)

        return OrderEmail(
            sender=self._settings.email_from,
            to=(self._settings.business_email,) if self._settings.business_email else (),
            subject=_subject_line(order),
            html=_html_body(order, now, has_print_pdf=pdf_attachment is not None),
            attachments=tuple(attachments),
            has_print_pdf=pdf_attachment is not None,
        )

    def _build_print_pdf(self, order: Order) -> Optional[EmailAttachment]:
        """Build the print-ready PDF, or None if it cannot be built."""
        if not order.images:
            logger.warning("Order has no designs, skipping print PDF")
            return None

        logger.info("Generating print PDF...")
        try:
            result = build_sheet(
                order.image_buffers,
                order.size,
                order.slots,
                config=self._layout_config,
            )
        except SheetError as e:
            logger.error(f"PDF generation failed: {e}")
            return None

        logger.info(f"Print PDF generated: {result.filename} ({result.page_count} pages)")
        return EmailAttachment(
            filename=result.filename,
            content=base64.b64encode(result.pdf_bytes).decode("ascii"),
        )


def _subject_line(order: Order) -> str:
    """Subject line distinguishing sheet and single-design orders."""
    if order.is_sheet:
        return (
            f"New Sheet Order - {len(order.images)} designs, "
            f"{order.slot_count} stickers"
        )
    return f"New Sticker Order - {order.size} x {order.quantity}"


def _html_body(order: Order, now: datetime, *, has_print_pdf: bool) -> str:
    """Render the HTML order summary. All order text is escaped."""
    esc = html.escape
    design_list = ", ".join(order.descriptions)
    order_type = "Mixed Sheet" if order.is_sheet else "Single Design"
    pdf_note = (
        " + print-ready PDF (A4, tiled with cut lines)"
        if has_print_pdf
        else " (print-ready PDF unavailable)"
    )

    return (
        "<h2>New Sticker Order!</h2>\n"
        f"<p><strong>Type:</strong> {order_type}</p>\n"
        f"<p><strong>Designs:</strong> {esc(design_list)}</p>\n"
        f"<p><strong>Size:</strong> {esc(order.size)}</p>\n"
        f"<p><strong>Stickers on sheet:</strong> {order.slot_count}</p>\n"
        f"<p><strong>Total:</strong> {CURRENCY_SYMBOL}{esc(str(order.total))}</p>\n"
        f"<p><strong>Customer Email:</strong> {esc(order.customer_email)}</p>\n"
        f"<p><strong>Time:</strong> {now.strftime('%Y-%m-%d %H:%M:%S')}</p>\n"
        "<hr>\n"
        f"<p><strong>Attachments:</strong> {len(order.images)} original image(s){pdf_note}</p>\n"
    )
