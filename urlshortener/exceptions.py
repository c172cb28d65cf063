class URLShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:urlshortener_error'


class ShortcodeCollisionError(URLShortenerError):
    """Raised when two different URLs hash to the same shortcode."""

    error_code = 'app:shortcode_collision_error'

    def __init__(self, shortcode: str, existing_target: str, target: str):
        self.shortcode = shortcode
        self.existing_target = existing_target
        self.target = target
        super().__init__(f"Shortcode '{shortcode}' already maps to a different URL.")


class ConfigurationError(URLShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
