"""
Module: orders

Purpose:
    Order intake and order email composition. Turns a submitted order
    payload into an Order, builds the print-ready sheet and hands the
    notification email to an injected sender.

Key Functions:
    - parse_order(): Validate and normalise an order payload
    - parse_data_url(): Decode an image data URL

Key Classes:
    - Order: Normalised order
    - OrderMailer: Email composition and dispatch

Dependencies:
    - jsonschema: Payload validation
    - sticker_studio.sheets: Print-ready PDF

Used By:
    - Order submission handler
"""

from .models import DataUrlImage, Order, OrderKind
from .data_urls import parse_data_url
from .intake import parse_order, validate_order, OrderValidationError
from .mailer import OrderMailer, OrderEmail, EmailAttachment, EmailSender

__all__ = [
    # Models
    "DataUrlImage",
    "Order",
    "OrderKind",
    # Intake
    "parse_data_url",
    "parse_order",
    "validate_order",
    "OrderValidationError",
    # Email
    "OrderMailer",
    "OrderEmail",
    "EmailAttachment",
    "EmailSender",
]
