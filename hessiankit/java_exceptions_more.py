"""More Java exception types, plus the fallback for unknown Java throwables."""

from __future__ import annotations

import re
import threading
from typing import Any, Dict, Iterable, Optional, Type

from hessiankit.java_exceptions import JavaThrowable

_THROWABLE_FIELDS = frozenset(
    {"detailMessage", "suppressedExceptions", "stackTrace", "cause"}
)

_registry: Dict[str, Type["UnknownException"]] = {}
_registry_lock = threading.Lock()


class UnmodifiableClassException(
    JavaThrowable, java_name="java.lang.instrument.UnmodifiableClassException"
):
    """java.lang.instrument.UnmodifiableClassException"""


class UnsupportedOperationException(
    JavaThrowable, java_name="java.lang.UnsupportedOperationException"
):
    """java.lang.UnsupportedOperationException"""


class UnsupportedTemporalTypeException(
    JavaThrowable, java_name="java.time.temporal.UnsupportedTemporalTypeException"
):
    """java.time.temporal.UnsupportedTemporalTypeException"""


class UTFDataFormatException(JavaThrowable, java_name="java.io.UTFDataFormatException"):
    """java.io.UTFDataFormatException"""


class WriteAbortedException(JavaThrowable, java_name="java.io.WriteAbortedException"):
    """java.io.WriteAbortedException, carrying the throwable that aborted the write."""

    def __init__(
        self,
        detail_message: str = "",
        detail: Optional[JavaThrowable] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(detail_message, **kwargs)
        self.detail = detail


class WrongMethodTypeException(
    JavaThrowable, java_name="java.lang.invoke.WrongMethodTypeException"
):
    """java.lang.invoke.WrongMethodTypeException"""


class ZipException(JavaThrowable, java_name="java.util.zip.ZipException"):
    """java.util.zip.ZipException"""


class ZoneRulesException(JavaThrowable, java_name="java.time.zone.ZoneRulesException"):
    """java.time.zone.ZoneRulesException"""


class UnknownException(JavaThrowable, java_name=""):
    """A Java throwable whose class has no dedicated Python type."""

    def __init__(self, name: Optional[str] = None, detail_message: str = "", **kwargs: Any) -> None:
        super().__init__(detail_message, **kwargs)
        self.java_class_name = name if name is not None else type(self).java_class_name

    @property
    def name(self) -> str:
        return self.java_class_name

    def __str__(self) -> str:
        return f"throw {self.java_class_name} : {self.detail_message}"


def is_throwable_fields(field_names: Iterable[str]) -> bool:
    """Tell whether a class definition's fields are those of a Java throwable."""
    names = list(field_names)
    if len(names) < 4:
        return False
    return sum(1 for item in names if item in _THROWABLE_FIELDS) == 4


def _python_name(java_name: str) -> str:
    simple = java_name.rsplit(".", 1)[-1]
    cleaned = re.sub(r"\W", "_", simple)
    return cleaned or "UnknownJavaException"


def check_and_get_exception(
    java_name: str, field_names: Iterable[str]
) -> Optional[Type[UnknownException]]:
    """Return the exception type registered for a throwable class definition.

    A type is created and registered on first sight of ``java_name``. When the
    fields are not those of a throwable, ``None`` is returned.
    """
    if not is_throwable_fields(field_names):
        return None
    with _registry_lock:
        existing = _registry.get(java_name)
        if existing is not None:
            return existing
        created = type(
            _python_name(java_name),
            (UnknownException,),
            {
                "java_class_name": java_name,
                "__doc__": f"Throwable of unknown Java class {java_name}.",
                "__module__": __name__,
            },
        )
        _registry[java_name] = created
        return created