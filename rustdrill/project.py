"""Builds a rust-project.json description of the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets the language server work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of the rust-project.json file."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str) -> None:
        """Add a crate when the text after the first dot is exactly 'rs'."""
        _, dot, extension = path.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = ".") -> None:
        """Add every file under root/exercises, with paths relative to root."""
        base = Path(root)
        for entry in sorted((base / "exercises").glob("**/*")):
            self.add_path(entry.relative_to(base).as_posix())

    def get_sysroot_src(self) -> None:
        """Ask rustc for the sysroot and derive the library source path."""
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = result.stdout.decode("utf-8", errors="replace")
        words = text.split()
        toolchain = words[0] if words else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = os.path.join(
            toolchain, "lib", "rustlib", "src", "rust", "library"
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        Path(path).write_text(self.to_json(), encoding="utf-8")