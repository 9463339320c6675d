"""Card markup for index pages (Mintlify ``<Card>`` components)."""

from blog_organizer.config import Settings
from blog_organizer.models.post import Post
from blog_organizer.utils.text_utils import escape_attribute, indent


class CardRenderer:
    """Renders posts as card markup."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def href(self, post: Post) -> str:
        return f"{self.settings.link_prefix}{post.url}"

    def featured(self, post: Post) -> str:
        """Large card for the newest post."""
        attributes = [
            ("title", post.title),
            ("icon", self.settings.featured_icon),
            ("href", self.href(post)),
        ]
        if post.image:
            attributes.append(("img", post.image))
        attributes.append(("cta", "Read more"))

        lines = ["<Card"]
        lines.extend(f'  {name}="{escape_attribute(value)}"' for name, value in attributes)
        lines.append(">")
        if post.description:
            lines.append(indent(post.description, "  "))
        lines.append("</Card>")
        return "\n".join(lines)

    def card(self, post: Post, icon: str) -> str:
        """Compact card used inside a card group."""
        lines = [
            f'  <Card title="{escape_attribute(post.title)}" '
            f'icon="{escape_attribute(icon)}" href="{escape_attribute(self.href(post))}">'
        ]
        if post.description:
            lines.append(indent(post.description, "    "))
        lines.append("  </Card>")
        return "\n".join(lines)

    def group(self, cards: list[str], cols: int) -> str:
        return "\n".join([f"<CardGroup cols={{{cols}}}>", *cards, "</CardGroup>"])

    def latest(self, posts: list[Post]) -> str:
        """Two-column group for the posts after the featured one."""
        return self.group([self.card(post, self.settings.latest_icon) for post in posts], cols=2)

    def category(self, posts: list[Post]) -> str:
        """Single-column group listing every post in a category."""
        return self.group(
            [self.card(post, post.icon or self.settings.default_icon) for post in posts],
            cols=1,
        )
