from __future__ import annotations


class SumoPostError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BuildingClientError(SumoPostError):
    """The endpoint URL could not be parsed."""


class ParsingLogsError(SumoPostError):
    """A record could not be turned into a line of the request body."""


class PostingLogsError(SumoPostError):
    """The HTTP exchange failed or the endpoint answered with something other than 200."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
