"""Custom exceptions for apimenu."""


class ApimenuError(Exception):
    """Base exception for apimenu operations."""


class FetchError(ApimenuError):
    """Error during description fetching."""


class DescriptionNotFoundError(FetchError):
    """The remote API description does not exist."""


class ParseError(ApimenuError):
    """Error while decoding an API description document."""
