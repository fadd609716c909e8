"""
Run a WebAssembly module's entry point and print its result.

With no arguments this loads ./out.wasm, links env.negate, calls
`main` and prints `main: <value>`.
"""

import argparse
import sys

from .core import WasmRunner, RunnerError
from .utils.constants import DEFAULT_PATH, ENTRY_POINT
from .utils.logger import log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wasmrun",
        description="Instantiate a WebAssembly module with env.negate and call an export.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH,
                        help=f"Path to the .wasm or .wat module (default: {DEFAULT_PATH})")
    parser.add_argument("--export", default=ENTRY_POINT,
                        help=f"Export to call with no arguments (default: {ENTRY_POINT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--dump-memory", action="store_true",
                        help="Print the exported memory decoded as UTF-8 after the call")
    parser.add_argument("--fuel", type=int, default=None,
                        help="Fuel budget; execution traps when it runs out")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    runner = WasmRunner(args.path, verbose=args.verbose, fuel=args.fuel)
    try:
        runner.run(args.export)
        if args.dump_memory:
            print(f"memory: {runner.text()}")
    except RunnerError as e:
        log.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
