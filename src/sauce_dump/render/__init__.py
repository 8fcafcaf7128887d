"""Renderers for SAUCE records."""

from sauce_dump.render.json_format import render_json, to_dict
from sauce_dump.render.text import ReportLine, format_report, render, size_description

__all__ = ["ReportLine", "render", "format_report", "size_description", "render_json", "to_dict"]
