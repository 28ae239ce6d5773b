from __future__ import annotations


class TerminologyRegistryError(Exception):
    pass


class RegistryUnavailableError(TerminologyRegistryError):
    """Timeout, transport failure or non-2xx status from the registry."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RegistryResponseError(TerminologyRegistryError):
    """The registry answered, but not with the body we expect."""
