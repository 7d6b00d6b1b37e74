"""
Errors raised while serving a search request.

All of them are fatal to the request they occur in and are turned into a
500 response by the pipeline. Decoding of request parameters never raises.
"""


class MirrorfindError(Exception):
    """Base class for request-scoped failures."""


class SearchBackendError(MirrorfindError):
    """The search backend call failed."""


class SerializationError(MirrorfindError):
    """Raw hits could not be encoded as JSON."""


class ResultDecodeError(MirrorfindError):
    """A hit payload could not be decoded into a Result."""


class RenderError(MirrorfindError):
    """Template execution failed."""
