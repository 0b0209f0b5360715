# robutils

A small library of general-purpose helpers. It has no dependencies outside the standard library.

## Modules

- `robutils.errors` holds the `ReturnCode` enum (`OK`, `WARN`, `ERROR`, `BAD_ALLOC`, `INVALID_ARGUMENT`, and others) and an exception hierarchy rooted at `RobutilsError`. Each exception carries a `code` and a `message`. The hierarchy includes `BadAllocError`, `InvalidArgumentError`, `NotEnoughSpaceError`, `NotInitializedError`, `NotFoundError`, `StringMapAlreadyInitError`, `StringMapInvalidError` and `StringKeyNotFoundError`.
  - `error_for_code(code, message)` returns the exception that matches a failing code. It raises `ValueError` for `OK` and for numbers that are not codes.
- `robutils.error_handling` keeps one error state per thread.
  - `set_error_msg(message)` records the message together with the caller's file and line.
  - `set_error_state(message, file, line_number)` sets all three explicitly. If the message or the file is `None`, it writes a complaint to stderr and leaves the state unchanged.
  - `error_is_set()` reports whether a state is set, `get_error_state()` returns the `ErrorState` (or `None`), and `reset_error()` clears it.
  - `get_error_string()` returns `"<message>, at <file>:<line>"`, or `"error not set"` when nothing is set.
  - Messages, file names and the formatted string are truncated to fixed maximum lengths.
- `robutils.string_map.StringMap(capacity=0)` maps strings to strings, held in a fixed number of slots.
  - `set` doubles the capacity when the map is full; an empty map grows to 1.
  - `set_no_resize` raises `NotEnoughSpaceError` instead of growing.
  - `unset` raises `StringKeyNotFoundError` for a missing key.
  - `get` returns `None` for a missing key, while `map[key]` raises.
  - `reserve(capacity)` never shrinks below the number of stored pairs, and `clear()` keeps the capacity.
  - `get_next_key(key)` walks the keys in slot order. Removing a key leaves a gap that the next new key fills.
  - `copy_into(other)` copies every pair into another map, overwriting existing keys.
  - `len()`, `in`, iteration and the `capacity` property are supported.
- `robutils.uint8_array.Uint8Array(capacity=0)` is a byte buffer with a used length and a capacity.
  - `write(data)` appends and raises `NotEnoughSpaceError` when the data does not fit.
  - `resize(new_size)` requires a positive size and truncates the used length if needed.
  - `clear()` drops all storage, and `to_bytes()` returns the bytes in use.
- `robutils.array_list.ArrayList(initial_capacity=0)` stores shallow copies of items through `add`, `set`, `remove` and `get`.
  - The capacity doubles when full and never shrinks.
  - An index that is out of range raises `InvalidArgumentError`.
- `robutils.find` provides `find(string, delimiter, length=None)` and `find_last(...)`. Each returns an index, or `-1` when the delimiter is absent or the string is `None`.
- `robutils.cmdline` checks an argument list.
  - `cli_option_exist(args, option)` reports whether the option is present.
  - `cli_get_option(args, option)` returns the argument that follows the option, or `None`.
- `robutils.filesystem` covers path checks and path building.
  - `get_cwd`, `is_directory`, `is_file`, `exists`, `is_readable`, `is_writable` and `is_readable_and_writable` each return `False` for `None`.
  - `join_path(left, right)` joins with the platform separator.
  - `to_native_path(path)` replaces `/` with the platform separator.
- `robutils.env` reads the environment.
  - `get_env(name)` returns `""` for an unset variable.
  - `get_home_dir()` returns `HOME` or else `USERPROFILE` when non-empty, and otherwise `None`.
- `robutils.format_string` does `%`-style formatting.
  - `format_string_limit(limit, fmt, *args)` keeps at most `limit - 1` characters.
  - `format_string(fmt, *args)` uses a limit of 2048.
  - A formatting failure raises `InvalidArgumentError`.
- `robutils.chars.isalnum_no_locale(c)` reports whether a single character is an ASCII digit or letter.

## Example

```python
from robutils.string_map import StringMap
from robutils.error_handling import set_error_msg, get_error_string, reset_error

m = StringMap(1)
m.set("key1", "value1")
m.set("key2", "value2")   # capacity grows to 2
print(m.get("key2"), len(m), m.capacity)   # value2 2 2

set_error_msg("something went wrong")
print(get_error_string())  # "something went wrong, at <file>:<line>"
reset_error()
print(get_error_string())  # "error not set"
```

## What it does not do

It is a library only, with no command-line program. It has no logging facility: the error state records one message per thread and does not print or store log records.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```