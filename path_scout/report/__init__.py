# File: path_scout/report/__init__.py
"""path_scout.report: Генерация отчётов (JSON и HTML) по итогам сканирования."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
