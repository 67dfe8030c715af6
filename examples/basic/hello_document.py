"""Render a ProseMirror document with zero config."""

from prosemirror_html import render

payload = '{"type":"doc","content":[{"type":"paragraph","content":[{"type":"text","text":"Hello "},{"type":"text","text":"World","marks":[{"type":"bold"}]}]}]}'
html = render(payload)
print(html)
