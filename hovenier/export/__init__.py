from .excel_export import export_nacalculatie_to_excel, export_offerte_to_excel

__all__ = ["export_offerte_to_excel", "export_nacalculatie_to_excel"]
