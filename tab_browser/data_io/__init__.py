"""
File collaborators: translate CSV/JSON files to and from the row/header
contract of DatasetStore. Nothing in tab_browser.core touches files.
"""

from .importer import read_table, read_json_records, parse_text_cell
from .exporter import write_table, rows_to_frame

__all__ = ["read_table", "read_json_records", "parse_text_cell", "write_table", "rows_to_frame"]
