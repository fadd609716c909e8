"""Factory for creating module loaders based on file format."""
from __future__ import annotations
from typing import Optional, Literal
from ..core.exceptions import ModuleReadError
from ..utils.constants import WASM_MAGIC, WAT_PREFIX
from ..utils.logger import log
from .base import Loader


class Factory:
    """Factory for automatic module format detection and loader creation.

    Detects binary/text format and instantiates the appropriate loader.
    """

    @staticmethod
    def read(path: str) -> bytes:
        """Read the whole module image.

        Raises:
            ModuleReadError: If the path does not exist or cannot be read
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            raise ModuleReadError(path, "not found") from e
        except OSError as e:
            raise ModuleReadError(path, e.strerror or str(e)) from e
        log.debug(f"Factory.read: {path} ({len(data)} bytes)")
        return data

    @staticmethod
    def create(path: str) -> Loader:
        """Read a module image and create the appropriate loader.

        Unrecognised contents go to the binary loader so the engine
        reports the exact validation failure.

        Args:
            path: Path to module image

        Returns:
            Parsed loader instance

        Raises:
            ModuleReadError: If file can't be read
            ModuleInstantiationError: If a text module fails to assemble
        """
        data = Factory.read(path)
        fmt = Factory.detect(data)

        if fmt == "WAT":
            from .wasm import WAT
            loader = WAT(path, data)
        else:
            if fmt is None:
                log.warning(f"Unknown module format for file: {path}")
            from .wasm import WASM
            loader = WASM(path, data)

        loader.parse()
        return loader

    @staticmethod
    def detect(data: bytes) -> Optional[Literal["WASM", "WAT"]]:
        """Detect module format from file contents.

        Returns:
            "WASM" or "WAT" if recognized, None if unknown
        """
        if data[:4] == WASM_MAGIC:
            return "WASM"

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            return None

        # Skip leading whitespace and ;; line comments
        text = text.lstrip("\ufeff")
        while True:
            text = text.lstrip()
            if text.startswith(";;"):
                _, _, text = text.partition("\n")
                continue
            break

        if text.startswith(WAT_PREFIX):
            return "WAT"
        return None
