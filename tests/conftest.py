"""Shared fixtures: small modules assembled from WebAssembly text."""

import pytest
import wasmtime

from wasmrun.utils.logger import log


SEVEN = """
(module
  (func (export "main") (result i32)
    i32.const 7))
"""

NEGATE_I32 = """
(module
  (import "env" "negate" (func $negate (param i32) (result i32)))
  (func (export "main") (result i32)
    i32.const 5
    call $negate))
"""

NEGATE_F32 = """
(module
  (import "env" "negate" (func $negate (param f32) (result f32)))
  (func (export "main") (result f32)
    f32.const 42
    call $negate))
"""

NEGATE_MIN_I32 = """
(module
  (import "env" "negate" (func $negate (param i32) (result i32)))
  (func (export "main") (result i32)
    i32.const -2147483648
    call $negate))
"""

NEGATE_TWO_PARAMS = """
(module
  (import "env" "negate" (func $negate (param i32 i32) (result i32)))
  (func (export "main") (result i32)
    i32.const 1
    i32.const 2
    call $negate))
"""

UNKNOWN_IMPORT = """
(module
  (import "env" "sqrt" (func $sqrt (param f64) (result f64)))
  (func (export "main") (result f64)
    f64.const 25
    call $sqrt))
"""

NO_MAIN = """
(module
  (func (export "other") (result i32)
    i32.const 1))
"""

MAIN_IS_MEMORY = """
(module
  (memory (export "main") 1))
"""

HELLO_MEMORY = """
(module
  (memory (export "memory") 1)
  (data (i32.const 0) "hello")
  (func (export "main") (result i32)
    i32.const 5))
"""

TRAPS = """
(module
  (func (export "main") (result i32)
    unreachable))
"""

START_TRAPS = """
(module
  (func $start unreachable)
  (start $start)
  (func (export "main")))
"""

SPINS = """
(module
  (func (export "main")
    (loop $forever
      br $forever)))
"""

NEGATE_ZERO_F32 = """
(module
  (import "env" "negate" (func $negate (param f32) (result f32)))
  (func (export "main") (result f32)
    f32.const 0
    call $negate))
"""

NEGATE_LOOP = """
(module
  (import "env" "negate" (func $negate (param i32) (result i32)))
  (func (export "main") (result i32)
    (local $i i32)
    (local $acc i32)
    (loop $again
      (local.set $acc (call $negate (local.get $i)))
      (local.set $i (i32.add (local.get $i) (i32.const 1)))
      (br_if $again (i32.lt_u (local.get $i) (i32.const 5000))))
    (local.get $acc)))
"""

NO_RESULT = """
(module
  (func (export "main")))
"""

TWO_RESULTS = """
(module
  (func (export "main") (result i32 i32)
    i32.const 1
    i32.const 2))
"""


@pytest.fixture(autouse=True)
def quiet_logger():
    """Reset the class-level verbosity between tests."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def wasm_file(tmp_path):
    """Assemble WebAssembly text into a binary .wasm file and return its path."""
    def make(source, name="out.wasm"):
        path = tmp_path / name
        path.write_bytes(bytes(wasmtime.wat2wasm(source)))
        return str(path)
    return make


@pytest.fixture
def wat_file(tmp_path):
    """Write WebAssembly text as-is and return its path."""
    def make(source, name="module.wat"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return make
