"""Errors raised while resolving the terminal adapter."""


class ResolverError(Exception):
    """Base exception for adapter resolution failures."""

    pass


class UnknownAdapterError(ResolverError, ValueError):
    """An adapter override does not name a constructible adapter variant."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Cannot find console adapter class "{identifier}"')


class UnknownCharsetError(ResolverError, ValueError):
    """A charset override does not name a constructible charset variant."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Cannot find charset class "{identifier}"')


class NoAdapterAvailableError(ResolverError, RuntimeError):
    """Environment probing found no sensible adapter and no override was given."""

    def __init__(self, message: str = "Cannot create console adapter - am I running in a console?"):
        super().__init__(message)
