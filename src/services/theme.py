"""Fixed visual theme shared by the slide preview and the document encoder."""

BRAND_LABEL = "Clevio Coder Camp"
BRAND_WORDMARK = "CLEVIO CODER CAMP"

# Colours as RRGGBB hex strings
PRIMARY = "FF6B35"
SECONDARY = "004E89"
ACCENT = "F7B801"
TEXT = "333333"
LIGHT_GRAY = "F5F5F5"
WHITE = "FFFFFF"

HEADING_FONT = "Arial"
BODY_FONT = "Calibri"
CODE_FONT = "Courier New"

# Fixed slide headings
AGENDA_HEADING = "Agenda"
SUMMARY_HEADING = "Key Takeaways"
QA_HEADING = "Q & A"
THANK_YOU_HEADING = "Thank You!"

# Opacity (percent) of overlays and text panels
TITLE_OVERLAY_OPACITY = 20
TITLE_PANEL_OPACITY = 80
CONTENT_PANEL_OPACITY = 50


def css_color(hex_color: str) -> str:
    """Format a theme colour for CSS."""
    return f"#{hex_color}"
