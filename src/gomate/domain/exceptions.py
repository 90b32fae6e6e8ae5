"""Exceptions shared across layers."""


class UpstreamApiError(RuntimeError):
    """An external API call failed.

    The message carries the HTTP status as ``(NNN)`` when one was received so
    that callers can extract it without depending on a specific adapter.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        upstream_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.upstream_message = upstream_message
