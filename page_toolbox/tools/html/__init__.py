from page_toolbox.tools.html.sanitize import make_sanitize_html_tool, sanitize_html

__all__ = ["make_sanitize_html_tool", "sanitize_html"]
