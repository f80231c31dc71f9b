from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TypeVar, Generic, Callable, Iterable, Optional

from expenses.domain import Category, Expense

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')
R = TypeVar('R')


class Maybe(Generic[T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        pass

    @abstractmethod
    def bind(self, f: Callable[[T], 'Maybe[U]']) -> 'Maybe[U]':
        pass

    @abstractmethod
    def filter(self, pred: Callable[[T], bool]) -> 'Maybe[T]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def match(self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        pass

    @abstractmethod
    def is_some(self) -> bool:
        pass

    def is_none(self) -> bool:
        return not self.is_some()

    @staticmethod
    def of(value: Optional[T]) -> 'Maybe[T]':
        """Lift a plain optional value: ``None`` becomes ``Nothing()``."""
        return Nothing() if value is None else Some(value)


class Some(Maybe[T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Some(f(self._value))

    def bind(self, f: Callable[[T], 'Maybe[U]']) -> 'Maybe[U]':
        return f(self._value)

    def filter(self, pred: Callable[[T], bool]) -> 'Maybe[T]':
        return self if pred(self._value) else Nothing()

    def get_or_else(self, default: T) -> T:
        return self._value

    def match(self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        return some(self._value)

    def is_some(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))


class Nothing(Maybe[T]):

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Nothing()

    def bind(self, f: Callable[[T], 'Maybe[U]']) -> 'Maybe[U]':
        return Nothing()

    def filter(self, pred: Callable[[T], bool]) -> 'Maybe[T]':
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def match(self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        return none()

    def is_some(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash("Nothing")


class Either(Generic[E, T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        pass

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def match(self, right: Callable[[T], R], left: Callable[[E], R]) -> R:
        pass

    @abstractmethod
    def is_right(self) -> bool:
        pass

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def get(self) -> T:
        pass

    @abstractmethod
    def get_error(self) -> E:
        pass


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Right(f(self._value))

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def match(self, right: Callable[[T], R], left: Callable[[E], R]) -> R:
        return right(self._value)

    def is_right(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def get_error(self) -> E:
        raise ValueError("Cannot get error from Right")

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Right", self._value))


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Left(self._error)

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return Left(self._error)

    def get_or_else(self, default: T) -> T:
        return default

    def match(self, right: Callable[[T], R], left: Callable[[E], R]) -> R:
        return left(self._error)

    def is_right(self) -> bool:
        return False

    def get(self) -> T:
        raise ValueError("Cannot get value from Left")

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error

    def __hash__(self) -> int:
        return hash(("Left", self._error))


def find_first(items: Iterable[T], pred: Callable[[T], bool]) -> Maybe[T]:
    for item in items:
        if pred(item):
            return Some(item)
    return Nothing()


def find_expensive(expenses: Iterable[Expense], threshold: Decimal) -> Maybe[Expense]:
    return find_first(expenses, lambda e: e.amount > threshold)


def find_category(cats: Iterable[Category], name: str) -> Maybe[Category]:
    return find_first(cats, lambda c: c.name == name)


def pipe(x, *funcs):
    """Thread ``x`` through ``funcs`` left to right: ``pipe(x, f, g) == g(f(x))``."""
    res = x
    for f in funcs:
        res = f(res)
    return res
