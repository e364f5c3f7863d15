"""Exception types surfaced by the core."""


class TermchatError(Exception):
    """Base class for termchat errors."""


class GatewayError(TermchatError):
    """The completion gateway failed to produce a reply.

    Covers network, authentication, rate-limit and malformed-response
    failures. The provider exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class GatewayTimeoutError(GatewayError):
    """The gateway did not answer within the configured timeout."""
