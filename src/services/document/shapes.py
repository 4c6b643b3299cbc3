"""Drawing helpers on top of python-pptx for the lesson document."""
from io import BytesIO
from typing import Iterable, Optional

from lxml import etree
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Emu, Inches, Pt

from src.core.errors import EncodingFailed
from src.models.outline import ImagePayload

from .layout import FULL_PAGE, Frame

BULLET_CHAR = "•"
# Fixed field id keeps the serialized page content stable across runs
SLIDE_NUMBER_FIELD_ID = "{B6F15528-21DE-4FAA-801E-634DDDAF4B2B}"


def rgb(hex_color: str) -> RGBColor:
    return RGBColor.from_string(hex_color)


def set_fill_opacity(shape, opacity: int) -> None:
    """
    Make the solid fill of ``shape`` translucent.

    python-pptx has no API for fill transparency, so the ``a:alpha`` child is
    written on the fill colour directly. ``opacity`` is in percent.
    """
    solid_fill = shape._element.spPr.find(qn("a:solidFill"))
    if solid_fill is None or len(solid_fill) == 0:
        raise ValueError("Shape has no solid fill to make translucent")
    color = solid_fill[0]
    for old in color.findall(qn("a:alpha")):
        color.remove(old)
    etree.SubElement(color, qn("a:alpha"), val=str(int(opacity * 1000)))


def fill_opacity(shape) -> Optional[int]:
    """Read back the fill opacity in percent, ``None`` when fully opaque."""
    alpha = shape._element.spPr.find(f"{qn('a:solidFill')}/*/{qn('a:alpha')}")
    if alpha is None:
        return None
    return int(alpha.get("val")) // 1000


def _solid_fill(shape, color: str, opacity: Optional[int] = None) -> None:
    shape.fill.solid()
    shape.fill.fore_color.rgb = rgb(color)
    if opacity is not None and opacity < 100:
        set_fill_opacity(shape, opacity)


def add_rect(slide, frame: Frame, color: str, opacity: Optional[int] = None):
    """Add a borderless filled rectangle."""
    shape = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, *frame.to_emu())
    _solid_fill(shape, color, opacity)
    shape.line.fill.background()
    return shape


def add_background_picture(slide, image: ImagePayload, page_width: int, page_height: int):
    """
    Stretch ``image`` over the whole page.

    Must be called before any other shape is added so the picture sits at the
    back of the z-order.

    Raises:
        EncodingFailed: if the image bytes cannot be embedded
    """
    try:
        return slide.shapes.add_picture(BytesIO(image.data), 0, 0, page_width, page_height)
    except Exception as e:
        raise EncodingFailed(f"Could not embed {image.media_type} background image: {e}") from e


def _style_run(run, size: int, color: str, font: str, bold: bool = False) -> None:
    run.font.size = Pt(size)
    run.font.color.rgb = rgb(color)
    run.font.name = font
    run.font.bold = bold


def add_text(
    slide,
    text: str,
    frame: Frame,
    *,
    size: int,
    color: str,
    font: str,
    bold: bool = False,
    align=PP_ALIGN.LEFT,
    anchor=MSO_ANCHOR.TOP,
    fill: Optional[str] = None,
    fill_opacity: Optional[int] = None,
):
    """
    Add a text box; newlines in ``text`` start new paragraphs.

    Text is written as given, without trimming or re-indenting. CRLF and CR
    line endings become paragraph breaks like LF.
    """
    box = slide.shapes.add_textbox(*frame.to_emu())
    tf = box.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = anchor
    tf.text = text.replace("\r\n", "\n").replace("\r", "\n")
    for p in tf.paragraphs:
        p.alignment = align
        for run in p.runs:
            _style_run(run, size, color, font, bold)
    if fill is not None:
        _solid_fill(box, fill, fill_opacity)
    return box


def _add_bullet(paragraph) -> None:
    pPr = paragraph._p.get_or_add_pPr()
    pPr.set("marL", str(Emu(Inches(0.3))))
    pPr.set("indent", str(Emu(Inches(-0.25))))
    bullet = OxmlElement("a:buChar")
    bullet.set("char", BULLET_CHAR)
    pPr.insert_element_before(bullet, "a:tabLst", "a:defRPr", "a:extLst")


def add_bullets(
    slide,
    items: Iterable[str],
    frame: Frame,
    *,
    size: int,
    color: str,
    font: str,
    line_spacing: int,
    fill: Optional[str] = None,
    fill_opacity: Optional[int] = None,
):
    """Add a bulleted list, one paragraph per item."""
    box = slide.shapes.add_textbox(*frame.to_emu())
    tf = box.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = MSO_ANCHOR.TOP
    for i, item in enumerate(items):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.line_spacing = Pt(line_spacing)
        run = p.add_run()
        run.text = item
        _style_run(run, size, color, font)
        _add_bullet(p)
    if fill is not None:
        _solid_fill(box, fill, fill_opacity)
    return box


def add_slide_number(slide, position: int, frame: Frame, *, size: int, color: str, font: str):
    """
    Add a native slide-number field.

    PowerPoint recomputes the field on display; the cached text is the
    page's 1-based position so readers that do not evaluate fields agree.
    """
    box = slide.shapes.add_textbox(*frame.to_emu())
    tf = box.text_frame
    tf.vertical_anchor = MSO_ANCHOR.MIDDLE
    p = tf.paragraphs[0]
    p.alignment = PP_ALIGN.RIGHT

    field = OxmlElement("a:fld")
    field.set("id", SLIDE_NUMBER_FIELD_ID)
    field.set("type", "slidenum")

    rPr = OxmlElement("a:rPr")
    rPr.set("lang", "en-US")
    rPr.set("sz", str(size * 100))
    solid_fill = etree.SubElement(rPr, qn("a:solidFill"))
    etree.SubElement(solid_fill, qn("a:srgbClr"), val=color)
    etree.SubElement(rPr, qn("a:latin"), typeface=font)
    field.append(rPr)

    t = OxmlElement("a:t")
    t.text = str(position)
    field.append(t)

    p._p.insert_element_before(field, "a:endParaRPr")
    return box


def set_notes(slide, notes: str) -> None:
    """Attach presenter notes; they never appear on the canvas."""
    notes_frame = slide.notes_slide.notes_text_frame
    notes_frame.text = notes


def full_page_rect(slide, color: str, opacity: Optional[int] = None):
    return add_rect(slide, FULL_PAGE, color, opacity)
