"""
In-memory JSON document builder and text serializer.

Provides fluent JsonArray and JsonObject containers that render themselves as
compact JSON text to any writable text stream, with an escaping policy that
keeps every string literal safe to embed between double quotes.
"""

import io
import math
import os
import reprlib
import time
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import IO
from typing import Any
from typing import Final

from jsonkit._hex import to_hex

__version__ = "0.1.0"

# Type aliases for domain concepts - recursive through the containers
type JsonValue = (
    str | int | float | Decimal | bool | None | JsonArray | JsonObject
)
type JsonNumber = int | float | Decimal

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONKIT_PROFILE" in os.environ

# Code units passed through by the escaper, besides everything >= 0x5D
_SPACE: Final = 0x20
_EXCLAMATION: Final = 0x21
_RANGE_START: Final = 0x23
_RANGE_END: Final = 0x5B
_UPPER_START: Final = 0x5D
_LINE_FEED: Final = 0x0A
_CARRIAGE_RETURN: Final = 0x0D
_ESCAPE_WIDTH: Final = 4


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during writing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class UnsupportedValueError(TypeError):
    """
    Signals a value whose runtime type has no JSON representation.

    Raised when inserting such a value into a container and, in strict mode,
    when the formatter meets one. The offending value is kept for callers.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )


class CircularReferenceError(ValueError):
    """
    Signals a container that contains itself, directly or transitively.

    Writing such a tree would otherwise recurse until the interpreter's
    recursion limit is exhausted.
    """

    def __init__(self, container: "JsonArray | JsonObject") -> None:
        self.container = container
        super().__init__("Circular reference detected")


@dataclass(frozen=True)
class FormatConfig:
    """
    Configures JSON writing behavior with immutable settings.

    strict=False restores the legacy output for values the formatter cannot
    represent: unsupported kinds become the empty string and non-finite
    numbers are written as NaN, Infinity or -Infinity.
    """

    strict: bool = True
    check_circular: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if not isinstance(self.check_circular, bool):
            raise TypeError("check_circular must be a boolean")


_DEFAULT_CONFIG: Final = FormatConfig()


def escape(text: str) -> str:
    """
    Escapes text for use inside a JSON string literal.

    Space, '!', 0x23-0x5B and everything from 0x5D upwards pass through
    unchanged. Line feed and carriage return become \\n and \\r; every other
    character, the quote and the backslash included, becomes a \\uXXXX
    sequence with four lowercase hex digits.
    """
    if not isinstance(text, str):
        msg = f"text must be str, not {type(text).__name__}"
        raise TypeError(msg)

    with ProfileContext("escape", len(text)):
        escaped: list[str] = []
        for char in text:
            code = ord(char)
            if (
                code in (_SPACE, _EXCLAMATION)
                or _RANGE_START <= code <= _RANGE_END
                or code >= _UPPER_START
            ):
                escaped.append(char)
            elif code == _LINE_FEED:
                escaped.append("\\n")
            elif code == _CARRIAGE_RETURN:
                escaped.append("\\r")
            else:
                escaped.append("\\u" + to_hex(code, _ESCAPE_WIDTH))
        return "".join(escaped)


def _encode_string(s: str) -> str:
    """Quote an escaped string."""
    return '"' + escape(s) + '"'


def _encode_number(n: JsonNumber, config: FormatConfig) -> str:
    """Encode numeric values using the default text conversion."""
    if isinstance(n, Decimal):
        finite = n.is_finite()
        is_nan = n.is_nan()
    elif isinstance(n, float):
        finite = math.isfinite(n)
        is_nan = math.isnan(n)
    else:
        return str(n)

    if finite:
        return str(n)
    if config.strict:
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    if is_nan:
        return "NaN"
    return "-Infinity" if n < 0 else "Infinity"


def _is_json_value(value: Any) -> bool:
    return value is None or isinstance(
        value, str | int | float | Decimal | JsonArray | JsonObject
    )


def _format(value: Any, config: FormatConfig, markers: set[int]) -> str:
    """Format one value, tracking the containers currently being written."""
    if value is None:
        return "null"
    elif value is True:
        return "true"
    elif value is False:
        return "false"
    elif isinstance(value, str):
        return _encode_string(value)
    elif isinstance(value, int | float | Decimal):
        return _encode_number(value, config)
    elif isinstance(value, JsonArray | JsonObject):
        return value._render(config, markers)
    elif config.strict:
        raise UnsupportedValueError(value)
    else:
        return ""


def format_value(value: Any, config: FormatConfig | None = None) -> str:
    """
    Formats a value as JSON text.

    None, strings, numbers, booleans and the JsonArray/JsonObject containers
    are supported. Anything else raises UnsupportedValueError, unless the
    config disables strict mode, in which case it formats as "".
    """
    return _format(value, config or _DEFAULT_CONFIG, set())


def _check_writer(fp: Any) -> None:
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")


@contextmanager
def _circular_guard(
    container: "JsonArray | JsonObject",
    config: FormatConfig,
    markers: set[int],
) -> Iterator[None]:
    """Marks a container as in progress for the duration of its write."""
    if not config.check_circular:
        yield
        return

    marker = id(container)
    if marker in markers:
        raise CircularReferenceError(container)
    markers.add(marker)
    try:
        yield
    finally:
        markers.discard(marker)


class JsonArray:
    """
    Ordered, append-only JSON array.

    Holds strings, numbers, booleans, None and other JSON arrays or objects,
    written out in insertion order. Adding an array to itself is accepted
    but cannot be written: the writer raises CircularReferenceError.

    Each nesting level costs three interpreter stack frames and one private
    buffer copy, so trees deeper than about 300 levels raise RecursionError
    at the default recursion limit.

    Instances are not thread-safe; callers sharing one across threads must
    synchronize externally.
    """

    def __init__(self, values: Iterable[JsonValue] = ()) -> None:
        if isinstance(values, str | bytes):
            msg = (
                "values must be an iterable of JSON values, "
                f"not {type(values).__name__}"
            )
            raise TypeError(msg)
        self._values: list[JsonValue] = []
        for value in values:
            self.add(value)

    def add(self, value: JsonValue) -> "JsonArray":
        """
        Appends a value to this array.

        Returns this array for method chaining.
        """
        if not _is_json_value(value):
            raise UnsupportedValueError(value)
        self._values.append(value)
        return self

    def write(self, fp: IO[str], config: FormatConfig | None = None) -> None:
        """
        Writes this array to the given text stream.

        The stream is borrowed and never closed. Errors raised by
        fp.write() propagate unchanged and leave partial output behind.
        """
        _check_writer(fp)
        self._write(fp, config or _DEFAULT_CONFIG, set())

    def _write(
        self, fp: IO[str], config: FormatConfig, markers: set[int]
    ) -> None:
        with (
            ProfileContext("JsonArray.write", len(self._values)),
            _circular_guard(self, config, markers),
        ):
            fp.write("[")
            first = True
            for value in self._values:
                if first:
                    first = False
                else:
                    fp.write(",")
                fp.write(_format(value, config, markers))
            fp.write("]")

    def _render(self, config: FormatConfig, markers: set[int]) -> str:
        buffer = io.StringIO()
        self._write(buffer, config, markers)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self._render(_DEFAULT_CONFIG, set())

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"JsonArray({self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._values)


class JsonObject:
    """
    Mapping from string keys to JSON values.

    Putting a key twice keeps only the last value. Keys are written in the
    order they were first put, but callers should not depend on key order.

    Each nesting level costs three interpreter stack frames and one private
    buffer copy, so trees deeper than about 300 levels raise RecursionError
    at the default recursion limit.

    Instances are not thread-safe; callers sharing one across threads must
    synchronize externally.
    """

    def __init__(self, mapping: Mapping[str, JsonValue] | None = None) -> None:
        self._values: dict[str, JsonValue] = {}
        if mapping is not None:
            for key, value in mapping.items():
                self.put(key, value)

    def put(self, key: str, value: JsonValue) -> "JsonObject":
        """
        Stores a value under the given key, replacing any previous value.

        Returns this object for method chaining.
        """
        if not isinstance(key, str):
            msg = f"keys must be strings, not {type(key).__name__}"
            raise TypeError(msg)
        if not _is_json_value(value):
            raise UnsupportedValueError(value)
        self._values[key] = value
        return self

    def write(self, fp: IO[str], config: FormatConfig | None = None) -> None:
        """
        Writes this object to the given text stream.

        The stream is borrowed and never closed. Errors raised by
        fp.write() propagate unchanged and leave partial output behind.
        """
        _check_writer(fp)
        self._write(fp, config or _DEFAULT_CONFIG, set())

    def _write(
        self, fp: IO[str], config: FormatConfig, markers: set[int]
    ) -> None:
        with (
            ProfileContext("JsonObject.write", len(self._values)),
            _circular_guard(self, config, markers),
        ):
            fp.write("{")
            first = True
            for key, value in self._values.items():
                if first:
                    first = False
                else:
                    fp.write(",")
                fp.write(_encode_string(key))
                fp.write(":")
                fp.write(_format(value, config, markers))
            fp.write("}")

    def _render(self, config: FormatConfig, markers: set[int]) -> str:
        buffer = io.StringIO()
        self._write(buffer, config, markers)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self._render(_DEFAULT_CONFIG, set())

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"JsonObject({self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes a JSON value to a string.

    Keyword arguments are FormatConfig fields.
    """
    config = FormatConfig(**kwargs)
    return _format(obj, config, set())


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes a JSON value to a text stream.

    Containers stream element by element; partial output is left behind if
    the stream fails part way.
    """
    _check_writer(fp)

    config = FormatConfig(**kwargs)
    if isinstance(obj, JsonArray | JsonObject):
        obj._write(fp, config, set())
    else:
        fp.write(_format(obj, config, set()))


__all__ = [
    "CircularReferenceError",
    "FormatConfig",
    "HotPathStats",
    "JsonArray",
    "JsonObject",
    "JsonValue",
    "UnsupportedValueError",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "escape",
    "format_value",
    "get_hot_path_stats",
]
