from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original long URL that the shortcode redirects to.
        shortcode (str):
            The unique short identifier derived from the target URL.

    Example:
        >>> url = ShortURLModel(
        ...     target="https://example.com/page",
        ...     shortcode="a9f2b1c044",
        ... )
        >>> url.target
        'https://example.com/page'
        >>> url.shortcode
        'a9f2b1c044'
    """
    target: str
    shortcode: str
