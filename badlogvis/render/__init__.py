"""HTML presentation of grouped graphs (Highcharts + Bootstrap)."""

from .html import chart_options, render_folder, render_page, write_page

__all__ = ["chart_options", "render_folder", "render_page", "write_page"]
