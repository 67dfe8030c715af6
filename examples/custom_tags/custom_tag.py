"""Add your own node type: implement render_opening/render_closing."""

from prosemirror_html import Renderer, SimpleTag


class CalloutTag:
    """Render callout nodes as a styled aside, tone taken from attrs."""

    def render_opening(self, attrs):
        return f'<aside class="callout callout-{attrs.get("tone", "info")}">'

    def render_closing(self, attrs):
        return "</aside>"


renderer = Renderer()
renderer.register_node("callout", CalloutTag())
renderer.register_node("horizontal_rule", SimpleTag("hr", self_closing=True))

doc = {
    "type": "doc",
    "content": [
        {"type": "callout", "attrs": {"tone": "warning"}, "content": [{"type": "text", "text": "Mind the gap"}]},
        {"type": "horizontal_rule"},
    ],
}

html = renderer.render(doc)
print(html)
