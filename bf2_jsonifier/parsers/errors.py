"""Typed failures raised while translating an ASPX payload."""


class AspxError(Exception):
    """Base error for ASPX translation failures."""

    default_message = "Source query failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class PlayerNotFoundError(AspxError):
    """Upstream reported that the requested player does not exist."""

    default_message = "Player not found"


class SourceError(AspxError):
    """Upstream reported a failure, or could not be queried at all."""

    default_message = "Source query resulted in an error"


class StructureError(AspxError):
    """A data or continuation line appeared before any header line."""

    default_message = "Source returned malformed dataset structure"


class MalformedResponseError(AspxError):
    """Dataset layout does not match what the source schema expects."""

    default_message = "Source returned invalid response"
