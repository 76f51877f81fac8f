"""Core building blocks shared by every pallet: blocks, extrinsics and dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

F = TypeVar("F", bound=Callable[..., Any])
H = TypeVar("H")
X = TypeVar("X")

_CALLER_NAMES = ("caller", "_caller")
_MARKER = "__dispatchable__"

# Code-object flags for ``*args`` and ``**kwargs``.
_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


class DispatchError(Exception):
    """A state transition was rejected; the message says why."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Header:
    """A minimal block header holding only the block number."""

    block_number: int


@dataclass(frozen=True)
class Extrinsic(Generic[X]):
    """An external message: who is calling, and which call they make."""

    caller: Any
    call: X


@dataclass
class Block(Generic[H, X]):
    """A header together with the extrinsics to execute."""

    header: H
    extrinsics: list[X] = field(default_factory=list)


@dataclass(frozen=True)
class Call:
    """A request to run the named dispatchable method with the given arguments.

    The caller is not part of the call; it is supplied at dispatch time.
    """

    name: str
    args: dict[str, Any] = field(default_factory=dict)


def dispatchable(func: F) -> F:
    """Mark a pallet method as callable through :meth:`Pallet.dispatch`.

    The method must take ``self`` first and ``caller`` (or ``_caller``) second.
    """
    code = func.__code__
    positional_count = code.co_argcount
    if positional_count < 1:
        raise TypeError("Invalid call, first argument must be a variant of self")
    if positional_count < 2:
        raise TypeError("Invalid call, second argument should be `caller`")
    if code.co_varnames[1] not in _CALLER_NAMES:
        raise TypeError("Invalid name for second parameter: expected `caller`")
    if code.co_flags & (_CO_VARARGS | _CO_VARKEYWORDS):
        raise TypeError("Invalid call, every argument must be named")
    setattr(func, _MARKER, True)
    return func


class Pallet:
    """Base class for pallets whose ``@dispatchable`` methods can be dispatched."""

    _calls: dict[str, Callable[..., Any]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        calls: dict[str, Callable[..., Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if getattr(value, _MARKER, False):
                    calls[name] = value
                elif name in calls:
                    del calls[name]
        cls._calls = calls

    @classmethod
    def call_names(cls) -> tuple[str, ...]:
        """Names of the dispatchable calls, in definition order."""
        return tuple(cls._calls)

    def dispatch(self, caller: Any, call: Call) -> None:
        """Route ``call`` to its method, passing ``caller`` first.

        Raises :class:`DispatchError` if the call is unknown or the method rejects it.
        """
        if call.name not in self._calls:
            raise DispatchError(f"unknown call: {call.name}")
        getattr(self, call.name)(caller, **call.args)