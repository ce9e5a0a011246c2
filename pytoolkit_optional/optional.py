"""
値の有無を表すコンテナ型を提供するモジュール。

Optionalは値が存在するかどうかを構造的に表し、値がある場合のみ実行される
変換や、値がない場合の代替値の取得をメソッドチェーンで記述できる。
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from .exceptions import NoSuchElementException
from .function_types import Consumer, Func, Predicate, Runnable, Supplier
from .objects import require_non_null

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, repr=False)
class Optional(Generic[T]):
    """
    Noneでない値を0個または1個保持する不変コンテナ。

    インスタンスはファクトリメソッド(empty, of, of_nullable)で生成する。
    値がない状態はすべて共有の空インスタンスで表される。
    値ベースの型であり、同一性の比較は空インスタンスの判定以外に意味を持たない。
    """

    _value: T | None

    _EMPTY: ClassVar["Optional[Any]"]

    def __new__(cls, _value: T | None = None) -> "Optional[T]":
        # 空の状態は常に共有インスタンスに集約する
        if _value is None and "_EMPTY" in Optional.__dict__:
            return Optional._EMPTY
        return super().__new__(cls)

    @classmethod
    def empty(cls) -> "Optional[T]":
        return Optional._EMPTY

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        値を保持するOptionalを返す。

        Raises:
            NullPointerException: valueがNoneの場合
        """
        return Optional(require_non_null(value))

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        return Optional.empty() if value is None else Optional.of(value)

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise NoSuchElementException("No value present.")
        return self._value

    def or_else_throw(self) -> T:
        if self._value is None:
            raise NoSuchElementException("No value present")
        return self._value

    def or_else_throw_specified(self, supplier: Supplier[E]) -> T:
        """値があれば返し、なければsupplierが生成した例外を送出する。"""
        if self._value is None:
            raise supplier()
        return self._value

    def if_present(self, action: Consumer[T]) -> None:
        if self._value is not None:
            action(self._value)

    def if_present_or_else(self, action: Consumer[T], empty_action: Runnable) -> None:
        if self._value is not None:
            action(self._value)
        else:
            empty_action()

    def filter(self, predicate: Predicate[T]) -> "Optional[T]":
        """
        値があり、predicateを満たす場合は自身を、満たさない場合は空を返す。

        空の場合はpredicateを呼び出さずに自身を返す。
        """
        require_non_null(predicate)
        if self._value is None:
            return self
        return self if predicate(self._value) else Optional.empty()

    def map(self, callback: Func[T, U | None]) -> "Optional[U]":
        """
        値があればcallbackを適用した結果をOptionalで包んで返す。

        callbackがNoneを返した場合は空になる。
        """
        if self._value is None:
            return Optional.empty()
        return Optional.of_nullable(callback(self._value))

    def flat_map(self, mapper: "Func[T, Optional[U]]") -> "Optional[U]":
        require_non_null(mapper)
        if self._value is None:
            return Optional.empty()
        return require_non_null(mapper(self._value))

    def or_(self, supplier: "Supplier[Optional[T]]") -> "Optional[T]":
        require_non_null(supplier)
        if self._value is not None:
            return self
        return require_non_null(supplier())

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Supplier[T]) -> T:
        if self._value is not None:
            return self._value
        return require_non_null(supplier())

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional({self._value!r})"


Optional._EMPTY = Optional(None)
