"""Storage of the licence record written after a successful login."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LICENSE_PATH = "./license.json"

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class LicenseData:
    """A user's licence record."""

    name: str
    email: str
    license: str

    def to_json(self) -> str:
        """Return the record as indented JSON."""
        text = json.dumps(
            {"username": self.name, "email": self.email, "license": self.license},
            indent=2,
            ensure_ascii=False,
        )
        for char, escape in _ESCAPES.items():
            text = text.replace(char, escape)
        return text


def save_credentials(
    name: str, email: str, license: str, path: str | Path = DEFAULT_LICENSE_PATH
) -> Path:
    """Write the licence record as JSON to *path* and return the path."""
    target = Path(path)
    target.write_text(LicenseData(name, email, license).to_json(), encoding="utf-8")
    target.chmod(0o644)
    print("✅ JSON file saved successfully at", path)
    return target