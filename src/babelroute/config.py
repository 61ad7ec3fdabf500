"""Router configuration.

RouterConfig is frozen. The base URI is normalized once at construction
so matching never has to re-trim it.
"""

from dataclasses import dataclass

from babelroute.errors import ConfigurationError


def normalize_base_uri(base_uri: str) -> str:
    """Return *base_uri* with exactly one leading slash and no trailing slash.

    The application root normalizes to ``"/"``::

        >>> normalize_base_uri("app/")
        '/app'
        >>> normalize_base_uri("")
        '/'
    """
    return "/" + base_uri.strip("/")


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(default_lang="es", base_uri="/shop")
    """

    # Languages
    default_lang: str = "en"
    default_lang_in_uri: bool = False  # Prefix default-language routes with "/en" too

    # Directory of the app relative to the server root
    base_uri: str = "/"

    # Matching
    case_sensitive: bool = True
    redirect_status: int = 301

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_uri", normalize_base_uri(self.base_uri))
        if not self.default_lang:
            msg = "default_lang must be a non-empty language code"
            raise ConfigurationError(msg)
        if self.redirect_status not in (301, 302, 307, 308):
            msg = f"redirect_status must be a redirect code, got {self.redirect_status}"
            raise ConfigurationError(msg)
