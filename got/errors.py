from __future__ import annotations


class GotError(Exception):
    pass


class InvalidAddress(GotError):
    pass


class ObjectNotFound(GotError):
    pass


class CorruptObject(GotError):
    pass


class IOFailure(GotError):
    pass
