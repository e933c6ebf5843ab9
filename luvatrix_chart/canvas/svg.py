from __future__ import annotations

from pathlib import Path
import xml.etree.ElementTree as ET

from luvatrix_chart.canvas.commands import (
    CubicTo,
    DrawCircle,
    DrawCommand,
    DrawLine,
    DrawPath,
    DrawRect,
    DrawText,
    LineTo,
    MoveTo,
    PathOp,
)
from luvatrix_chart.color import RGBA
from luvatrix_chart.layout import PlotRect


SVG_NS = "http://www.w3.org/2000/svg"
SUPERSCRIPT_DY = "-0.4em"
SUPERSCRIPT_DX = "-0.2em"


class SvgCanvas:
    """Serializes draw commands into a standalone SVG document."""

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self._root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _num(self.width),
                "height": _num(self.height),
                "viewBox": f"0 0 {_num(self.width)} {_num(self.height)}",
            },
        )
        self._defs = ET.SubElement(self._root, "defs")
        self._clips: dict[PlotRect, str] = {}

    def draw(self, command: DrawCommand) -> None:
        if isinstance(command, DrawRect):
            elem = self._rect(command)
        elif isinstance(command, DrawLine):
            elem = self._line(command)
        elif isinstance(command, DrawPath):
            elem = self._path(command)
        elif isinstance(command, DrawCircle):
            elem = self._circle(command)
        elif isinstance(command, DrawText):
            elem = self._text(command)
        else:
            raise TypeError(f"unsupported draw command: {type(command).__name__}")
        clip = getattr(command, "clip", None)
        if clip is not None:
            elem.set("clip-path", f"url(#{self._clip_id(clip)})")
        self._root.append(elem)

    def to_markup(self) -> str:
        return ET.tostring(self._root, encoding="unicode")

    def save(self, path: str | Path) -> Path:
        out = Path(path)
        out.write_text(self.to_markup(), encoding="utf-8")
        return out

    def _clip_id(self, rect: PlotRect) -> str:
        clip_id = self._clips.get(rect)
        if clip_id is None:
            clip_id = f"clip{len(self._clips)}"
            self._clips[rect] = clip_id
            clip = ET.SubElement(self._defs, "clipPath", {"id": clip_id})
            ET.SubElement(
                clip,
                "rect",
                {"x": _num(rect.x), "y": _num(rect.y), "width": _num(rect.width), "height": _num(rect.height)},
            )
        return clip_id

    def _rect(self, cmd: DrawRect) -> ET.Element:
        elem = ET.Element(
            "rect",
            {"x": _num(cmd.x), "y": _num(cmd.y), "width": _num(cmd.width), "height": _num(cmd.height)},
        )
        _paint(elem, "fill", cmd.fill)
        if cmd.stroke is not None:
            _paint(elem, "stroke", cmd.stroke)
            elem.set("stroke-width", _num(cmd.stroke_width))
        return elem

    def _line(self, cmd: DrawLine) -> ET.Element:
        elem = ET.Element(
            "line",
            {"x1": _num(cmd.x1), "y1": _num(cmd.y1), "x2": _num(cmd.x2), "y2": _num(cmd.y2)},
        )
        _paint(elem, "stroke", cmd.stroke)
        elem.set("stroke-width", _num(cmd.width))
        if cmd.dash:
            elem.set("stroke-dasharray", cmd.dash)
        return elem

    def _path(self, cmd: DrawPath) -> ET.Element:
        elem = ET.Element("path", {"d": path_data(cmd.ops)})
        _paint(elem, "fill", cmd.fill)
        _paint(elem, "stroke", cmd.stroke)
        if cmd.stroke is not None:
            elem.set("stroke-width", _num(cmd.width))
        if cmd.dash:
            elem.set("stroke-dasharray", cmd.dash)
        return elem

    def _circle(self, cmd: DrawCircle) -> ET.Element:
        elem = ET.Element("circle", {"cx": _num(cmd.cx), "cy": _num(cmd.cy), "r": _num(cmd.r)})
        _paint(elem, "fill", cmd.fill)
        if cmd.stroke is not None:
            _paint(elem, "stroke", cmd.stroke)
            elem.set("stroke-width", _num(cmd.stroke_width))
        return elem

    def _text(self, cmd: DrawText) -> ET.Element:
        elem = ET.Element(
            "text",
            {
                "x": _num(cmd.x),
                "y": _num(cmd.y),
                "font-family": cmd.font,
                "font-size": _num(cmd.size),
                "text-anchor": cmd.anchor,
                "dominant-baseline": cmd.baseline,
            },
        )
        _paint(elem, "fill", cmd.color)
        if cmd.rotation:
            elem.set("transform", f"rotate({_num(cmd.rotation)}, {_num(cmd.x)}, {_num(cmd.y)})")
        elem.text = cmd.text
        if cmd.superscript is not None:
            sup = ET.SubElement(elem, "tspan", {"dy": SUPERSCRIPT_DY, "dx": SUPERSCRIPT_DX})
            sup.text = cmd.superscript
        return elem


def path_data(ops: tuple[PathOp, ...] | list[PathOp]) -> str:
    parts: list[str] = []
    for op in ops:
        if isinstance(op, MoveTo):
            parts.append(f"M {_num(op.x)} {_num(op.y)}")
        elif isinstance(op, LineTo):
            parts.append(f"L {_num(op.x)} {_num(op.y)}")
        elif isinstance(op, CubicTo):
            parts.append(
                f"C {_num(op.c1x)} {_num(op.c1y)} {_num(op.c2x)} {_num(op.c2y)} {_num(op.x)} {_num(op.y)}"
            )
        else:
            raise TypeError(f"unsupported path op: {type(op).__name__}")
    return " ".join(parts)


def _paint(elem: ET.Element, attr: str, color: RGBA | None) -> None:
    if color is None:
        elem.set(attr, "none")
        return
    elem.set(attr, "#{:02x}{:02x}{:02x}".format(*color[:3]))
    if color[3] < 255:
        elem.set(f"{attr}-opacity", _num(color[3] / 255.0))


def _num(value: float) -> str:
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        return "0"
    return text
