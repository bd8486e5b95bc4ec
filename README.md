# calcemu

Building blocks for a scientific calculator emulator and its debugger:
the timing of each hardware generation, typed access to a model
description table, and the state behind the debugging tools (code
breakpoints over a disassembly listing, memory watchpoints, register
editing, input injection into RAM and a hex memory view).

The package has no runtime dependencies.

## Installing

```
pip install .
```

The tests use pytest, available through the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `calcemu.hardware`: `HardwareId` (`ES_PLUS`, `CLASSWIZ`, `CLASSWIZ_II`),
  `EventCode` (`FRAME_REQUEST`, `EMU_STOPPED`), and `cycles_per_second()`
  and `timer_interval()` for a hardware id. An unknown id raises
  `ValueError`.
- `calcemu.cycles`: `Cycles` tells how many CPU cycles to emulate on each
  timer callback. `get_delta()` advances one timer period; `reset()` starts
  over.
- `calcemu.logger`: `info(fmt, *args)` writes a printf-style message to
  standard output. No newline is added.
- `calcemu.model_info`: `ModelInfo` wraps a model table and reads values
  with `get_string()`, `get_int()`, `get_sprite()` (a `SpriteInfo` of two
  `Rect`s, built from six numbers) and `get_colour()` (a `ColourInfo` built
  from three numbers). A missing key, or one of the wrong type, raises
  `ModelError`.
- `calcemu.code_viewer`: `parse_disassembly()` turns listing lines into
  `CodeElem`s. It reads the segment digit at column 1, the hex offset at
  columns 2–5 and the instruction text from column 28, and stops at the
  first empty line. `CodeViewer` (or `CodeViewer.from_file()`) provides:
  - `lookup()`, which returns the first instruction at or after an
    address, together with its index;
  - `toggle_breakpoint()`;
  - `try_trigger()`, which honours breakpoints and the `DebugFlag.STEP`
    and `DebugFlag.RET_TRACE` modes in `debug_flags`;
  - `jump_to()` and `resume()`.

  `real_pc()` joins a segment and an offset into one address.
- `calcemu.mem_breakpoint`: `MemBreakpointList` holds `MemBreakpoint`s and
  provides `add()`, `remove()` and `watch()`. `watch()` listens for reads,
  or for writes, of one address. `try_trigger(addr, write, pc)` records the
  program counter of each matching access in the watched breakpoint's
  `records`. `clear_records()` empties them.
- `calcemu.injector`: `Injector` writes into a RAM image that starts at
  `MEM_EDIT_BASE_ADDR` (0xD000). It provides:
  - `set_math_io()`;
  - `enter_an(offset)`, which fills the input buffer at `LABEL_INPUT_BUF`
    with digits and an end marker;
  - `load(data)` and `load_hex_string(text)`.

  `parse_hex_string()` decodes hex digit pairs and skips other characters.
  A `;` comment runs to the end of its line. A write outside the RAM image
  raises `IndexError`.
- `calcemu.watch`: `RegisterView` keeps the CPU registers as hex text.
  `prepare(cpu)` fills it from a CPU object that has `reg_r`, `reg_pc`,
  `reg_lr`, `reg_sp`, `reg_ea` and `reg_psw`. `update(cpu)` writes the
  edited text back. `er_values()` forms the eight 16-bit ERn pairs.
- `calcemu.memory_view`: `MemoryView` holds the hex editor state:
  - `write_input()` writes hex text into memory;
  - `goto()` moves to an address typed in hex;
  - `move_cursor()` takes `"up"`, `"down"`, `"left"` or `"right"`;
  - `line_spans()` and `describe()` work with `MarkedSpan`s.

  The helpers `addr_digits()`, `intersect_range()` and
  `span_description()` are also exported.

## Examples

```python
from calcemu.hardware import HardwareId, cycles_per_second, timer_interval
from calcemu.cycles import Cycles

hw = HardwareId.CLASSWIZ
cycles = Cycles(cycles_per_second(hw), timer_interval(hw))
cycles.get_delta()  # 41943 cycles for the first 20 ms period
```

```python
from calcemu.code_viewer import CodeElem, CodeViewer

viewer = CodeViewer([CodeElem(0, 0x1000, "mov r0, #1"), CodeElem(0, 0x1002, "rt")])
viewer.toggle_breakpoint(0, 0x1002)  # True
viewer.try_trigger(0, 0x1002)        # True: execution stops here
viewer.is_breaked                    # True
viewer.resume()                      # the breakpoint is armed again
```

```python
from calcemu.injector import Injector, parse_hex_string

parse_hex_string("31 32 ; two digits\n33")  # b"123"
ram = bytearray(0x2800)
Injector(ram).load_hex_string("31 32 33")
```

## What the package does not do

calcemu does not emulate the CPU, memory map or peripherals, and it does
not run a tick loop. A caller drives the emulation and calls `Cycles`,
`CodeViewer.try_trigger()` and `MemBreakpointList.try_trigger()` from its
own loop.

It does not load or run model scripts. `ModelInfo` reads a table that the
caller has already built.

It has no windows, rendering or input handling. The debugger classes hold
state only, for a user interface to display and change. It also has no
locking for use across threads, and no decoding of memory as typed
numbers.