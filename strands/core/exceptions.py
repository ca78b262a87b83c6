"""Custom exception hierarchy for the strands layout editor.

Placement policy never raises: rejected clicks and empty word texts simply
leave state unchanged. These exceptions cover IO and malformed input only.
"""


class StrandsError(Exception):
    """Base exception for editor failures."""


class LayoutExportError(StrandsError):
    """Raised when the layout file cannot be written."""


class CommandError(StrandsError):
    """Raised when a session command cannot be parsed or resolved."""


class LayoutValidationError(StrandsError):
    """Raised internally when a grid integrity check fails."""
