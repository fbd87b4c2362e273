"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class DeliveryError(AdapterError):
    """Exported content could not be delivered."""

    pass
