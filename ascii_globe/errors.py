#
# PROJECT: ascii-globe
# MODULE: ascii_globe/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class GlobeError(Exception):
    """Base class for configuration-time failures."""


class MissingTexture(GlobeError):
    """No day texture could be resolved for the globe."""


class TextureNotFound(MissingTexture):
    """A texture file does not exist or cannot be read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f"Could not load texture '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidConfig(GlobeError, ValueError):
    """A configuration value is out of range or malformed."""
