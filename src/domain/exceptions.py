class VPNPanelError(Exception):
    """Base class for errors raised by the domain and application layers."""


class NotFoundError(VPNPanelError):
    """A lookup by id matched no record."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message
