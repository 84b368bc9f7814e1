"""Java exception types that travel over the Hessian wire format."""

from __future__ import annotations

from typing import Any, ClassVar, List, Optional


class JavaThrowable(Exception):
    """Base for Java throwables: carries the fields of ``java.lang.Throwable``."""

    java_class_name: ClassVar[str] = "java.lang.Throwable"

    def __init__(
        self,
        detail_message: str = "",
        *,
        cause: Optional["JavaThrowable"] = None,
        stack_trace: Optional[List[Any]] = None,
        suppressed_exceptions: Optional[List["JavaThrowable"]] = None,
        serial_version_uid: int = 0,
    ) -> None:
        super().__init__(detail_message)
        self.serial_version_uid = serial_version_uid
        self.detail_message = detail_message
        self.stack_trace: List[Any] = list(stack_trace) if stack_trace else []
        self.suppressed_exceptions: List[JavaThrowable] = (
            list(suppressed_exceptions) if suppressed_exceptions else []
        )
        self.cause = cause

    def __init_subclass__(cls, java_name: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if java_name is not None:
            cls.java_class_name = java_name

    def __str__(self) -> str:
        return self.detail_message

    def get_stack_trace(self) -> List[Any]:
        """Return the stack trace elements, as Java's ``getStackTrace`` does."""
        return self.stack_trace


class StreamCorruptedException(JavaThrowable, java_name="java.io.StreamCorruptedException"):
    """java.io.StreamCorruptedException"""


class StringIndexOutOfBoundsException(
    JavaThrowable, java_name="java.lang.StringIndexOutOfBoundsException"
):
    """java.lang.StringIndexOutOfBoundsException"""


class SyncFailedException(JavaThrowable, java_name="java.io.SyncFailedException"):
    """java.io.SyncFailedException"""


class TimeoutException(JavaThrowable, java_name="java.util.concurrent.TimeoutException"):
    """java.util.concurrent.TimeoutException"""


class TooManyListenersException(
    JavaThrowable, java_name="java.util.TooManyListenersException"
):
    """java.util.TooManyListenersException"""


class TypeNotPresentException(JavaThrowable, java_name="java.lang.TypeNotPresentException"):
    """java.lang.TypeNotPresentException, naming the type that was missing."""

    def __init__(self, type_name: str = "", detail_message: str = "", **kwargs: Any) -> None:
        super().__init__(detail_message, **kwargs)
        self.type_name = type_name


class UncheckedIOException(JavaThrowable, java_name="java.io.UncheckedIOException"):
    """java.io.UncheckedIOException; a cause is mandatory."""

    def __init__(self, detail_message: str, cause: Optional[JavaThrowable], **kwargs: Any) -> None:
        if cause is None:
            raise ValueError("UncheckedIOException requires a cause")
        super().__init__(detail_message, cause=cause, **kwargs)


class UndeclaredThrowableException(
    JavaThrowable, java_name="java.lang.reflect.UndeclaredThrowableException"
):
    """java.lang.reflect.UndeclaredThrowableException wrapping another throwable."""

    def __init__(
        self,
        detail_message: str = "",
        undeclared_throwable: Optional[JavaThrowable] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(detail_message, **kwargs)
        self.undeclared_throwable = (
            undeclared_throwable if undeclared_throwable is not None else JavaThrowable()
        )


class UnknownFormatConversionException(
    JavaThrowable, java_name="java.util.UnknownFormatConversionException"
):
    """java.util.UnknownFormatConversionException for an unknown conversion."""

    def __init__(self, conversion: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.conversion = conversion

    def __str__(self) -> str:
        return f"Conversion = '{self.conversion}'"


class UnknownFormatFlagsException(
    JavaThrowable, java_name="java.util.UnknownFormatFlagsException"
):
    """java.util.UnknownFormatFlagsException for unknown format flags."""

    def __init__(self, flags: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.flags = flags

    def __str__(self) -> str:
        return "Flags = " + self.flags