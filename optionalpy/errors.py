from __future__ import annotations


class OptionalError(ValueError):
    pass


class NullArgumentError(OptionalError):
    pass


class NoValuePresentError(OptionalError):
    pass
