"""
Invoice composition for projects, with print and share renderings.
"""
import logging
import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Optional
from creatorflow.core.config import settings
from creatorflow.core.utils import format_money, to_money
from creatorflow.schemas.invoice import InvoiceConfig, InvoiceDocument, InvoiceLine, ShareResult
from creatorflow.services.project_service import ZERO, compute_total_cost, line_amount

logger = logging.getLogger(__name__)

ShareCallback = Callable[[str, str], None]  # (title, text)
ClipboardCallback = Callable[[str], None]


def generate_invoice_number(rng: Optional[random.Random] = None) -> str:
    """Random five-digit invoice number, e.g. ``INV-48213``."""
    rng = rng or random
    return f"INV-{rng.randint(10000, 99999)}"


def compute_grand_total(total_cost, discount_amount) -> Decimal:
    """Total after discount, floored at zero."""
    return max(ZERO, to_money(total_cost) - to_money(discount_amount))


def build_invoice(
    project,
    config: Optional[InvoiceConfig] = None,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None
) -> InvoiceDocument:
    """Compose an invoice for a project, filling in any missing metadata."""
    config = config or InvoiceConfig()
    invoice_date = config.invoice_date or today or date.today()
    due_date = config.due_date or invoice_date + timedelta(days=settings.INVOICE_DUE_DAYS)

    lines = [
        InvoiceLine(
            description=item.description,
            category=item.category,
            quantity=item.quantity,
            unit_price=to_money(item.unit_price),
            amount=line_amount(item)
        )
        for item in project.expenses
    ]
    subtotal = compute_total_cost(project)
    discount = to_money(config.discount_amount)

    return InvoiceDocument(
        project_id=project.id,
        project_title=project.title,
        invoice_number=config.invoice_number or generate_invoice_number(rng),
        client_name=config.client_name,
        invoice_date=invoice_date,
        due_date=due_date,
        logo_url=config.logo_url or settings.INVOICE_LOGO_URL,
        payment_terms=config.payment_terms or settings.INVOICE_PAYMENT_TERMS,
        lines=lines,
        subtotal=subtotal,
        discount_amount=discount,
        grand_total=compute_grand_total(subtotal, discount)
    )


def render_printable(document: InvoiceDocument, symbol: Optional[str] = None) -> str:
    """Plain-text layout of an invoice for the print surface."""
    symbol = symbol if symbol is not None else settings.CURRENCY_SYMBOL
    money = lambda value: format_money(value, symbol)  # noqa: E731

    out = [
        f"INVOICE {document.invoice_number}",
        f"Project: {document.project_title}",
        f"Bill to: {document.client_name or '-'}",
        f"Date: {document.invoice_date.isoformat()}    Due: {document.due_date.isoformat()}",
        "",
        f"{'Description':<32}{'Category':<16}{'Qty':>5}{'Price':>14}{'Amount':>14}",
        "-" * 81,
    ]
    for line in document.lines:
        out.append(
            f"{(line.description or '-')[:31]:<32}{line.category[:15]:<16}{line.quantity:>5}"
            f"{money(line.unit_price):>14}{money(line.amount):>14}"
        )
    out.extend([
        "-" * 81,
        f"{'Subtotal':>67}{money(document.subtotal):>14}",
        f"{'Discount':>67}{money(-document.discount_amount):>14}",
        f"{'Grand total':>67}{money(document.grand_total):>14}",
        "",
        "Payment terms:",
        document.payment_terms,
    ])
    return "\n".join(out) + "\n"


def share_text(document: InvoiceDocument, symbol: Optional[str] = None) -> str:
    symbol = symbol if symbol is not None else settings.CURRENCY_SYMBOL
    return (
        f"Invoice {document.invoice_number} for {document.project_title}\n"
        f"Total: {format_money(document.grand_total, symbol)}"
    )


def share_invoice(
    document: InvoiceDocument,
    share: Optional[ShareCallback] = None,
    clipboard: Optional[ClipboardCallback] = None
) -> ShareResult:
    """
    Hand an invoice summary to a share surface.

    Uses ``share`` when one is available; a failing share (the user closed
    the sheet, for instance) is logged and reported, not raised. Without a
    share surface the text goes to ``clipboard`` instead.
    """
    text = share_text(document)
    if share is not None:
        try:
            share(f"Invoice {document.invoice_number}", text)
        except Exception as e:
            logger.warning(f"Sharing invoice {document.invoice_number} failed: {e}")
            return ShareResult(channel="failed", text=text)
        return ShareResult(channel="share", text=text)

    if clipboard is not None:
        clipboard(text)
    return ShareResult(channel="clipboard", text=text, message="Invoice details copied to clipboard.")
