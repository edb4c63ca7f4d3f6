"""Protected code reference datasets.

One exact-match set of normalized codes per coding system. A
``ProtectedCodeSet`` is built once, handed to the matcher and never
mutated afterwards.
"""

from __future__ import annotations

import csv
import logging
import threading
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from samhsamatcher.codes.normalize import normalize_code
from samhsamatcher.config.settings import DEFAULT_CODE_FILES, Settings
from samhsamatcher.core.errors import CodeSetError
from samhsamatcher.core.types import CodingSystem


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from importlib.abc import Traversable

logger = logging.getLogger(__name__)

_default_code_set: ProtectedCodeSet | None = None
_default_lock = threading.Lock()


class ProtectedCodeSet:
    """Read-only mapping from coding system to protected codes."""

    __slots__ = ("_codes",)

    def __init__(self, codes: Mapping[CodingSystem, Iterable[str]]) -> None:
        normalized = {system: frozenset() for system in CodingSystem}
        for system, values in codes.items():
            system = CodingSystem(system)
            normalized[system] = frozenset(
                code for code in (normalize_code(system, v) for v in values) if code
            )
        self._codes: Mapping[CodingSystem, frozenset[str]] = MappingProxyType(normalized)

    @classmethod
    def from_mapping(cls, codes: Mapping[CodingSystem, Iterable[str]]) -> ProtectedCodeSet:
        return cls(codes)

    @classmethod
    def from_directory(
        cls, data_dir: str | Path, files: Mapping[CodingSystem, str] | None = None
    ) -> ProtectedCodeSet:
        """Load one CSV file per coding system from ``data_dir``.

        Raises:
            CodeSetError: If a file is missing or unreadable.
        """
        return cls._load(Path(data_dir), files or DEFAULT_CODE_FILES)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ProtectedCodeSet:
        if settings is None:
            settings = Settings()
        if settings.codes.data_dir is not None:
            return cls.from_directory(settings.codes.data_dir, settings.codes.files)
        return cls.packaged(settings.codes.files)

    @classmethod
    def packaged(cls, files: Mapping[CodingSystem, str] | None = None) -> ProtectedCodeSet:
        """Load the reference data shipped with the package."""
        data_dir = resources.files("samhsamatcher.codes") / "data"
        return cls._load(data_dir, files or DEFAULT_CODE_FILES)

    @classmethod
    def _load(
        cls, data_dir: Path | Traversable, files: Mapping[CodingSystem, str]
    ) -> ProtectedCodeSet:
        codes: dict[CodingSystem, list[str]] = {}
        for system in CodingSystem:
            filename = files.get(system)
            if filename is None:
                raise CodeSetError(f"No reference file configured for {system.value}")
            codes[system] = list(read_code_file(data_dir / filename))
        code_set = cls(codes)
        logger.info("Loaded %d protected codes from %s", len(code_set), data_dir)
        return code_set

    def contains(self, system: CodingSystem, code: str | None) -> bool:
        """Check whether ``code`` is protected under ``system``."""
        normalized = normalize_code(system, code)
        return bool(normalized) and normalized in self._codes[system]

    def codes_for(self, system: CodingSystem) -> frozenset[str]:
        return self._codes[system]

    def counts(self) -> dict[CodingSystem, int]:
        return {system: len(codes) for system, codes in self._codes.items()}

    def __len__(self) -> int:
        return sum(len(codes) for codes in self._codes.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{s.value}={n}" for s, n in self.counts().items())
        return f"ProtectedCodeSet({counts})"


def read_code_file(path: Path | Traversable) -> Iterator[str]:
    """Yield raw codes from a ``code,description`` CSV file.

    Blank codes are skipped.

    Raises:
        CodeSetError: If the file cannot be read or has no ``code`` column.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or "code" not in reader.fieldnames:
                raise CodeSetError(f"Missing 'code' column in {path}")
            rows = list(reader)
    except (OSError, csv.Error) as e:
        raise CodeSetError(f"Cannot read protected code file {path}: {e}") from e

    for row in rows:
        code = (row.get("code") or "").strip()
        if code:
            yield code


def load_default_code_set() -> ProtectedCodeSet:
    """Return the process-wide code set, loading it on first use.

    Loading happens at most once, even with concurrent first callers.
    """
    global _default_code_set
    if _default_code_set is None:
        with _default_lock:
            if _default_code_set is None:
                _default_code_set = ProtectedCodeSet.from_settings()
    return _default_code_set
