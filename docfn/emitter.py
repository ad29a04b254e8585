
import html
from typing import Optional

from .config import DocConfig


def render_declaration(signature: str, identifier: Optional[str] = None, description: Optional[str] = None,
                       config: Optional[DocConfig] = None) -> str:
    """Inline markup for one declaration.

    ``<icode id="doc-fn-{id}" title="{description}">{signature}</icode>``, each
    attribute left out when its value is missing. The signature is shown as is.
    """
    config = config or DocConfig()
    attrs = []
    if identifier:
        attrs.append(f'id="{config.anchor_prefix}{identifier}"')
    if description:
        title = html.escape(description, quote=True) if config.escape_title else description
        attrs.append(f'title="{title}"')
    opening = " ".join([config.tag] + attrs)
    return f"<{opening}>{signature}</{config.tag}>"
