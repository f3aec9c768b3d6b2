from __future__ import annotations

"""Layered invocation operations: executor -> proxy -> service.

Two structurally identical three-layer chains. In the throwing chain the
service raises OperationFailed and the proxy lets it travel up to the
executor. In the checking chain every layer returns a bool and the caller
checks it before going on.

A request fails when its value is negative.
"""

__all__ = [
    "OperationFailed",
    "ThrowingService",
    "ThrowingProxy",
    "ThrowingExecutor",
    "CheckingService",
    "CheckingProxy",
    "CheckingExecutor",
]


class OperationFailed(Exception):
    pass


class ThrowingService:
    def __init__(self) -> None:
        self.accepted = 0

    def execute(self, value: int) -> None:
        if value < 0:
            raise OperationFailed(f"rejected value: {value}")
        self.accepted += 1


class ThrowingProxy:
    def __init__(self, service: ThrowingService) -> None:
        self._service = service

    def execute(self, value: int) -> None:
        self._service.execute(value)


class ThrowingExecutor:
    """Top layer; the only place OperationFailed is caught."""

    def __init__(self, proxy: ThrowingProxy | None = None) -> None:
        self._proxy = proxy if proxy is not None else ThrowingProxy(ThrowingService())

    def execute(self, value: int) -> None:
        self._proxy.execute(value)

    def try_execute(self, value: int) -> bool:
        try:
            self._proxy.execute(value)
        except OperationFailed:
            return False
        return True


class CheckingService:
    def __init__(self) -> None:
        self.accepted = 0

    def execute(self, value: int) -> bool:
        if value < 0:
            return False
        self.accepted += 1
        return True


class CheckingProxy:
    def __init__(self, service: CheckingService) -> None:
        self._service = service

    def execute(self, value: int) -> bool:
        if not self._service.execute(value):
            return False
        return True


class CheckingExecutor:
    def __init__(self, proxy: CheckingProxy | None = None) -> None:
        self._proxy = proxy if proxy is not None else CheckingProxy(CheckingService())

    def execute(self, value: int) -> bool:
        if not self._proxy.execute(value):
            return False
        return True
