"""Errors raised while talking to the SwitchBot API."""


class SwitchBotError(Exception):
    """Base error for a failed run."""

    pass


class ConfigError(SwitchBotError):
    """Required credentials are missing from the environment."""

    pass


class RequestError(SwitchBotError):
    """The HTTP request could not be built or sent."""

    pass


class APIError(SwitchBotError):
    """The API answered with a non-200 status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"error: API request failed with status code {status_code}")


class ReadError(SwitchBotError):
    """The response body could not be fully read."""

    pass


class DecodeError(SwitchBotError):
    """The response body is not valid JSON."""

    pass


class ShapeError(SwitchBotError):
    """A mandatory part of the JSON response is missing or has the wrong type."""

    pass
