"""Standalone SVG sparkline with path and polyline geometry."""

from tagloom import Page, PathDef, Points

values = [3, 7, 4, 9, 6, 11, 8]
width, height = 120, 40
step = width / (len(values) - 1)
top = max(values)
coords = [(i * step, height - v / top * height) for i, v in enumerate(values)]

page = Page(xml_compatible=True)
svg = page.frag("svg").xmlns("http://www.w3.org/2000/svg").view_box(f"0 0 {width} {height}")

area = PathDef().move_to((0, height))
for point in coords:
    area.line(point)
area.line((width, height)).close()
svg.path().d(area).fill("#def").stroke("none")

svg.polyline().points(Points(coords, precision=1)).fill("none").stroke("#36c")
print(page.finalize())
