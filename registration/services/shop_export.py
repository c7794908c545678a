import io
import logging

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, KeepTogether, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from xml.sax.saxutils import escape

from registration.utils import get_value

logger = logging.getLogger(__name__)

MISSING = 'N/A'

EXPORT_COLUMNS = [
    ('Business Category', 'businessCategory'),
    ('Owner Name', 'ownerName'),
    ('Shop Name', 'shopName'),
    ('Phone Number', 'shopPhone'),
    ('Email', 'email'),
    ('Website', 'website'),
    ('Address', 'address.street'),
    ('PIN Code', 'address.pincode'),
    ('Village/Colony', 'address.village'),
    ('Taluka', 'address.taluka'),
    ('District', 'address.district'),
    ('State', 'address.state'),
    ('Country', 'address.country'),
]


def display_value(record, name):
    value = get_value(record, name)
    if value is None:
        return MISSING
    value = str(value).strip()
    return value or MISSING


def format_address(record):
    parts = [
        get_value(record, f'address.{field}')
        for field in ('street', 'village', 'taluka', 'district', 'state', 'pincode', 'country')
    ]
    parts = [str(part).strip() for part in parts if part and str(part).strip()]
    return ', '.join(parts) or MISSING


class ShopExcelExporter:
    filename = 'shops.xlsx'
    sheet_name = 'Shops'

    def __init__(self, records):
        self.records = list(records)

    def to_dataframe(self):
        headers = [header for header, _ in EXPORT_COLUMNS]
        rows = [
            [display_value(record, name) for _, name in EXPORT_COLUMNS]
            for record in self.records
        ]
        return pd.DataFrame(rows, columns=headers)

    def generate_xlsx(self):
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            self.to_dataframe().to_excel(writer, sheet_name=self.sheet_name, index=False)
            # openpyxl stores text starting with "=" as a formula
            sheet = writer.sheets[self.sheet_name]
            for row in sheet.iter_rows():
                for cell in row:
                    if cell.data_type == 'f':
                        cell.data_type = 's'
        logger.info(f"Generated spreadsheet export with {len(self.records)} rows")
        return buffer.getvalue()


class ShopPDFGenerator:
    filename = 'shops.pdf'

    def __init__(self, records):
        self.records = list(records)

    def _styles(self):
        styles = getSampleStyleSheet()
        return {
            'title': ParagraphStyle(
                'ShopTitle',
                parent=styles['Heading1'],
                fontSize=20,
                alignment=TA_CENTER,
                spaceAfter=20,
                fontName='Helvetica-Bold'
            ),
            'shop_name': ParagraphStyle(
                'ShopName',
                parent=styles['Heading2'],
                fontSize=14,
                alignment=TA_LEFT,
                textColor=colors.HexColor('#1e40af'),
                spaceAfter=6,
                fontName='Helvetica-Bold'
            ),
            'detail': ParagraphStyle(
                'ShopDetail',
                parent=styles['Normal'],
                fontSize=10,
                leading=14,
            ),
        }

    def _shop_section(self, record, styles):
        details = [
            ('Category', display_value(record, 'businessCategory')),
            ('Owner', display_value(record, 'ownerName')),
            ('Phone', display_value(record, 'shopPhone')),
            ('Email', display_value(record, 'email')),
            ('Website', display_value(record, 'website')),
            ('Address', format_address(record)),
        ]
        rows = [[Paragraph(escape(display_value(record, 'shopName')), styles['shop_name'])]]
        for label, value in details:
            rows.append([Paragraph(f"<b>{label}:</b> {escape(value)}", styles['detail'])])

        table = Table(rows, colWidths=[6.8 * inch])
        table.setStyle(TableStyle([
            ('BOX', (0, 0), (-1, -1), 0.75, colors.HexColor('#cccccc')),
            ('LEFTPADDING', (0, 0), (-1, -1), 10),
            ('RIGHTPADDING', (0, 0), (-1, -1), 10),
            ('TOPPADDING', (0, 0), (-1, 0), 8),
            ('BOTTOMPADDING', (0, -1), (-1, -1), 8),
        ]))
        return KeepTogether([table, Spacer(1, 0.25 * inch)])

    def generate_pdf(self):
        buffer = io.BytesIO()

        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=0.5 * inch,
            leftMargin=0.5 * inch,
            topMargin=0.5 * inch,
            bottomMargin=0.5 * inch,
            title='Retailer Data',
        )

        styles = self._styles()
        story = [Paragraph('Retailer Data', styles['title'])]

        if self.records:
            for record in self.records:
                story.append(self._shop_section(record, styles))
        else:
            story.append(Paragraph('No data available.', styles['detail']))

        doc.build(story)
        logger.info(f"Generated PDF export with {len(self.records)} shops")
        return buffer.getvalue()
