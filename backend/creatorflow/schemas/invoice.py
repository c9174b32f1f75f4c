"""
Pydantic schemas for invoice composition.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date
from decimal import Decimal


class InvoiceConfig(BaseModel):
    """Client and payment metadata supplied when composing an invoice."""
    client_name: str = ""
    invoice_number: Optional[str] = None  # Generated as INV-NNNNN when absent
    invoice_date: Optional[date] = None  # Defaults to today
    due_date: Optional[date] = None  # Defaults to invoice_date + INVOICE_DUE_DAYS
    discount_amount: Decimal = Field(default=Decimal(0), ge=0)
    logo_url: Optional[str] = None
    payment_terms: Optional[str] = None


class InvoiceLine(BaseModel):
    description: str
    category: str
    quantity: int
    unit_price: Decimal
    amount: Decimal


class InvoiceDocument(BaseModel):
    """A point-in-time rendering of a project's expenses for print or share."""
    project_id: int
    project_title: str
    invoice_number: str
    client_name: str
    invoice_date: date
    due_date: date
    logo_url: str
    payment_terms: str
    lines: List[InvoiceLine] = []
    subtotal: Decimal
    discount_amount: Decimal
    grand_total: Decimal


class ShareResult(BaseModel):
    """Outcome of handing an invoice summary to a share surface."""
    channel: str  # "share", "clipboard" or "failed"
    text: str
    message: Optional[str] = None
