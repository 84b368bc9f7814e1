# hessiankit

Building blocks for the Hessian 2 binary serialization format, with Python
models of Java types that often travel in it. The package has no dependencies
outside the standard library.

## Installation

```
pip install hessiankit
```

## Modules

### `hessiankit.longs`

This module handles 64-bit longs and null.

- `encode_long(value)` returns the shortest Hessian encoding of a signed
  64-bit integer. The forms are:
  - one byte for -8..15
  - two bytes for -0x800..0x7ff
  - three bytes for -0x40000..0x3ffff
  - `x59` plus four bytes for the 32-bit range
  - `'L'` plus eight bytes otherwise

  A value outside the 64-bit range raises `ValueError`.
- `encode_null()` returns `b"N"`.
- `read_long(stream, tag=None)` reads a long from a binary stream. If `tag` is
  given, it is taken as the leading byte, already consumed. The reader also
  accepts these forms and converts them:
  - null and the booleans
  - the compact int forms
  - `'I'`
  - the compact double forms zero, one, byte, short and mill
- `decode_long(data)` decodes the long at the start of a bytes object.
- `HessianDecodeError` is raised on an unknown tag or on truncated data. It is a
  subclass of `ValueError`.

### `hessiankit.listtypes`

This module covers list tags and list type names.

- `is_typed_list_tag(tag)` recognises the typed list tags `x55`, `'V'` and
  `x70`–`x77`.
- `is_untyped_list_tag(tag)` recognises the untyped list tags `x57`, `x58` and
  `x78`–`x7f`.
- `fixed_list_length(tag)` returns the length carried by a compact list tag.
  - It returns `None` for other list tags.
  - It raises `HessianDecodeError` for a byte that starts no list.
- `get_list_type_name(type_name)` maps an element type name to the Java list
  type name, for example `"int32"` → `"[int"` and `"[][]int32"` → `"[[[int"`.
  - A leading `*` on the base name is ignored.
  - Unknown names give `None`.
- `register_type_name(type_name, java_type)` adds or replaces a mapping.

### `hessiankit.java_exceptions` and `hessiankit.java_exceptions_more`

These modules hold Java exception classes. All of them derive from
`JavaThrowable`, which is a Python `Exception`.

Every exception has the following members:

- `detail_message`
- `cause`
- `stack_trace`
- `suppressed_exceptions`
- `serial_version_uid`
- a `java_class_name`
- `get_stack_trace()`

The exception classes are:

- `StreamCorruptedException`
- `StringIndexOutOfBoundsException`
- `SyncFailedException`
- `TimeoutException`
- `TooManyListenersException`
- `TypeNotPresentException`
- `UncheckedIOException`, which raises `ValueError` when it has no cause
- `UndeclaredThrowableException`
- `UnknownFormatConversionException`
- `UnknownFormatFlagsException`
- `UnmodifiableClassException`
- `UnsupportedOperationException`
- `UnsupportedTemporalTypeException`
- `UTFDataFormatException`
- `WriteAbortedException`
- `WrongMethodTypeException`
- `ZipException`
- `ZoneRulesException`

`UnknownException` stands in for a Java throwable with no dedicated class. Its
string form is `throw <java class> : <message>`.

Two functions recognise throwables by their fields:

- `is_throwable_fields(field_names)` tells whether a class definition's fields
  include all of `detailMessage`, `suppressedExceptions`, `stackTrace` and
  `cause`.
- `check_and_get_exception(java_name, field_names)` returns the
  `UnknownException` subclass registered for that Java name. The subclass is
  created on first sight. The function returns `None` when the fields are not
  those of a throwable.

### `hessiankit.locale`

This module models `java.util.Locale`.

- `LocaleEnum` lists the `java.util.Locale` constants.
- `Locale` is a frozen value with `lang` and `country`. Its string form is, for
  example, `en_US`.
- `LocaleHandle(value=...)` is the serialised form.
- `to_locale(e)` returns the locale for a constant.
- `locale_from_handle(handle)` returns the locale whose string form equals the
  handle's value. It raises `KeyError` for an unknown value.

### `hessiankit.java_uuid`

`JavaUUID(most_sig_bits, least_sig_bits)` models `java.util.UUID`. Its string
form is the canonical lower-case `8-4-4-4-12` hex form.

### `hessiankit.sqltime`

`SqlDate` and `SqlTime` model `java.sql.Date` and `java.sql.Time` around a
`datetime`.

- `value_of` parses `YYYY-MM-DD` for a date and `HH:MM:SS` for a time.
- `millis` gives milliseconds since the Unix epoch. A naive time is taken as
  local time.
- `from_millis` builds a value in UTC.
- Dates expose `year`, `month` and `day`.
- Times expose `hour`, `minute` and `second`.

## Example

```python
from hessiankit.longs import encode_long, decode_long, encode_null
from hessiankit.java_uuid import JavaUUID
from hessiankit.locale import LocaleEnum, to_locale

data = encode_long(0x800)
assert decode_long(data) == 0x800
assert encode_null() == b"N"

print(to_locale(LocaleEnum.US))  # en_US
print(JavaUUID(most_sig_bits=0, least_sig_bits=1))  # 00000000-0000-0000-0000-000000000001
```

## What it does not do

This package is not a complete Hessian serializer. It encodes and decodes
longs and null only. It has no general encoder or decoder for the following:

- strings, doubles, binary data or dates
- lists and maps (only the list tag helpers above)
- class definitions and objects
- references

The Java type models are plain Python values. Nothing here writes them to the
wire or reads them back.

## Running the tests

```
pip install -e .[test]
pytest
```