"""Approval documents for leave requests.

The PDF carries the request details and a QR code pointing at the public
verification page, so a printed copy can be checked against the live record.
"""

from __future__ import annotations

import io
import uuid
from datetime import UTC, date, datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel
from reportlab.graphics import renderPDF
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from leavedesk.config import get_settings


class LeaveDocumentData(BaseModel):
    """Fields printed on an approval document."""

    id: uuid.UUID
    employee_name: str
    leave_type: str
    start_date: date
    end_date: date
    reason: str
    status: str
    approved_by_name: str | None = None
    created_at: datetime


def verification_url(leave_id: uuid.UUID) -> str:
    return f"{get_settings().app_base_url.rstrip('/')}/verify/{leave_id}"


def document_filename(leave_id: uuid.UUID) -> str:
    return f"leave-approval-{leave_id}.pdf"


@runtime_checkable
class DocumentGenerator(Protocol):
    """Interface for rendering approval documents."""

    def render(self, data: LeaveDocumentData) -> bytes:
        """Return the document as PDF bytes."""
        ...


class ReportLabDocumentGenerator:
    """Single-page A4 approval document drawn with ReportLab."""

    qr_size = 110

    def _draw_qr(self, pdf: canvas.Canvas, url: str, x: float, y: float) -> None:
        widget = QrCodeWidget(url)
        x0, y0, x1, y1 = widget.getBounds()
        drawing = Drawing(
            self.qr_size,
            self.qr_size,
            transform=[self.qr_size / (x1 - x0), 0, 0, self.qr_size / (y1 - y0), 0, 0],
        )
        drawing.add(widget)
        renderPDF.draw(drawing, pdf, x, y)

    def render(self, data: LeaveDocumentData) -> bytes:
        settings = get_settings()
        buf = io.BytesIO()
        pdf = canvas.Canvas(buf, pagesize=A4)
        width, height = A4
        pdf.setTitle(f"Leave approval {data.id}")

        pdf.setFont("Helvetica-Bold", 12)
        pdf.drawCentredString(width / 2, height - 50, settings.app_name)
        self._draw_qr(pdf, verification_url(data.id), width - 40 - self.qr_size, height - 40 - self.qr_size)

        pdf.setFont("Helvetica-Bold", 16)
        pdf.drawCentredString(width / 2, height - 180, "Official Leave Approval Document")
        pdf.setLineWidth(0.5)
        pdf.line(40, height - 190, width - 40, height - 190)

        rows = [
            ("Request ID", str(data.id)),
            ("Employee Name", data.employee_name),
            ("Leave Type", data.leave_type),
            ("Date Range", f"{data.start_date:%b %d, %Y} to {data.end_date:%b %d, %Y}"),
            ("Reason Provided", data.reason),
            ("Status", data.status),
            ("Approved By", data.approved_by_name or "N/A"),
            ("Requested On", f"{data.created_at:%b %d, %Y}"),
            ("Issued On", f"{datetime.now(UTC):%b %d, %Y}"),
        ]
        y = height - 220
        for label, value in rows:
            pdf.setFont("Helvetica-Bold", 10)
            pdf.drawString(50, y, label)
            pdf.setFont("Helvetica", 10)
            pdf.drawString(190, y, value[:90])
            y -= 20

        pdf.setFont("Helvetica-Oblique", 8)
        pdf.drawCentredString(width / 2, 40, f"Verify this document at {verification_url(data.id)}")
        pdf.showPage()
        pdf.save()
        return buf.getvalue()


class InMemoryDocumentGenerator:
    """Records rendered documents and returns a small placeholder payload."""

    def __init__(self) -> None:
        self.rendered: list[LeaveDocumentData] = []

    def render(self, data: LeaveDocumentData) -> bytes:
        self.rendered.append(data)
        return b"%PDF-1.4 stub " + str(data.id).encode()


_document_generator: DocumentGenerator = ReportLabDocumentGenerator()


def get_document_generator() -> DocumentGenerator:
    return _document_generator


def set_document_generator(generator: DocumentGenerator) -> None:
    """Override the generator (for testing or production wiring)."""
    global _document_generator
    _document_generator = generator
