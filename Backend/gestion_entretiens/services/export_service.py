from io import BytesIO

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment

HEADERS = ["ID", "Titre", "Employé", "Poste", "Type", "Statut", "Date prévue", "Date réalisée", "Template", "Objectifs"]
COLUMN_WIDTHS = [8, 30, 22, 22, 12, 16, 20, 20, 28, 40]


def entretiens_workbook(entretiens) -> BytesIO:
    """Build an .xlsx listing of the given interviews, returned rewound."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Entretiens"

    ws.append(HEADERS)

    # Style header row
    header_fill = PatternFill(start_color="667EEA", end_color="667EEA", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)

    for e in entretiens:
        ws.append([
            e.id,
            e.titre,
            e.employee.nom if e.employee else "",
            e.employee.poste if e.employee else "",
            e.type.value,
            e.statut.value,
            e.date_prevue,
            e.date_realise,
            e.template.nom if e.template else "",
            e.objectifs or "",
        ])

    for i, width in enumerate(COLUMN_WIDTHS, 1):
        ws.column_dimensions[openpyxl.utils.get_column_letter(i)].width = width

    for row in ws.iter_rows(min_row=2, max_row=ws.max_row, min_col=1, max_col=len(HEADERS)):
        for cell in row:
            cell.alignment = Alignment(horizontal="left", vertical="center", wrap_text=True)

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
