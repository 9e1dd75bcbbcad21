# boogakit

A small collection of general-purpose helpers:

- `boogakit.strings`: `string_view`, `find_from_left`, `find_from_right`,
  `string_replace_all` and `trim`/`trim_left`/`trim_right` for `str` or
  `bytes`, plus a text `StringBuilder` with `reserve`, `append`, `getvalue`
  and a `capacity` that grows geometrically.
- `boogakit.formatting`: `format_string` and `format_truncated`, printf-style
  formatting that also understands `%s`, `%cs` (NUL-terminated string), `%b`
  (bool) and `%v2`/`%v3`/`%v4` (float vectors); `prints` to standard output;
  `builder_print` to append to a builder; and a pluggable logger
  (`set_logger`, `log_message`, `log_verbose`, `log_info`, `log_warning`,
  `log_error`) with `LogLevel`.
- `boogakit.unicode`: `utf16_to_utf32`, `utf8_to_utf32` (lenient or strict,
  returning a `Utf8Decode`), `iter_utf8`, `utf8_index_to_byte_index` and
  `utf8_slice`.
- `boogakit.paths`: `get_file_extension`, `get_file_name_including_extension`,
  `get_file_name_excluding_extension` and `get_directory_of`; `/`, `\` and `:`
  all count as separators.
- `boogakit.lcg`: a 64-bit linear congruential generator `Lcg` and a
  per-thread default generator (`set_seed`, `get_random`, `peek_random`).
- `boogakit.utility`: in-place `radix_sort` and `merge_sort`, `clamp`,
  `lerp`, `lerpi`, `smerp`, `smerpi`, `to_radians`, `to_degrees` and
  `sine_oscillate_n_waves_normalized`.
- `boogakit.fastmath`: `ln`, a fast natural logarithm approximation.
- `boogakit.profiling`: a `Profiler` that records timed scopes and writes them
  as Chrome trace JSON.
- `boogakit.simd_float`: lane-wise float32 `add`/`sub`/`mul`/`div`/`sqrt`/`rsqrt`
  over 64 to 512 bits, returning numpy arrays.
- `boogakit.simd_int`: wrapping int32 `add_int32`, `sub_int32`, `mul_int32`
  and `dot_product_float32`.
- `boogakit.fileio`: `file_open` with `OpenFlags`, whole-file read and write,
  copy, delete, directory creation and removal, path queries and `fprint`.

## Install

```
pip install .
```

## Examples

```python
from boogakit.strings import StringBuilder, string_replace_all
from boogakit.formatting import format_string, builder_print
from boogakit.lcg import Lcg
from boogakit.utility import radix_sort
from boogakit.unicode import utf8_slice
from boogakit.paths import get_file_extension

print(string_replace_all(b"HeCHEESEllo", b"CHEESE", b""))  # b'Hello'

builder = StringBuilder()
builder.append("Hello, ")
builder_print(builder, "%s! Number: %d", "World", 42)
print(builder.getvalue())  # Hello, World! Number: 42

print(format_string("%b and %.2f", 1, 3.14159))  # true and 3.14

rng = Lcg(seed=1)
print(rng.int_in_range(1, 6))

items = [5, -3, 9, 0]
radix_sort(items, number_of_bits=8)
print(items)  # [-3, 0, 5, 9]

print(utf8_slice("héllo".encode(), 1, 3))  # b'\xc3\xa9ll'
print(get_file_extension("dir/file.ext"))  # .ext
```

```python
from boogakit.profiling import Profiler

profiler = Profiler()
with profiler.scope("work"):
    sum(range(1000))
profiler.dump("trace.json")
```

## What it does not do

boogakit is a library of helpers only. It opens no windows, draws nothing,
and does not manage threads, mutexes, semaphores, dynamic libraries or raw
memory. `MousePointerKind` in `boogakit.fileio` is just an enumeration of
pointer kinds; nothing in the package changes the mouse pointer. There is no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```