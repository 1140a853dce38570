"""Per-build options and state."""

from __future__ import annotations

from dataclasses import dataclass, field

from apimenu.config import APIMENU_MAX_HEADING_LEVEL

DEFAULT_SECURITY_SCHEME_PREFIX = "section/Authentication/"


@dataclass
class BuildOptions:
    """Options for building a content tree.

    Attributes:
        max_heading_level: Deepest markdown heading level that becomes a
            section node.
        show_extensions: If True, operation nodes carry the operation's
            ``x-*`` vendor extensions.
    """

    max_heading_level: int = APIMENU_MAX_HEADING_LEVEL
    show_extensions: bool = False


@dataclass
class BuildContext:
    """State threaded through a single build.

    ``security_scheme_prefix`` is updated when a narrative section embeds the
    security definitions; the last such section wins. Each build gets its own
    context, so builds running side by side never see each other's prefix.
    ``grouped`` records whether the tree was built from ``x-tagGroups``.
    """

    options: BuildOptions = field(default_factory=BuildOptions)
    security_scheme_prefix: str = DEFAULT_SECURITY_SCHEME_PREFIX
    grouped: bool = False

    def security_scheme_id(self, scheme_name: str) -> str:
        """Anchor id of a security scheme rendered inside the security section."""
        return f"{self.security_scheme_prefix}{scheme_name}"
