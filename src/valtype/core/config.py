"""
Configuration for spec serialization and error messages.

Defines SpecOptions, the merge-able per-call serialization options, and SpecSettings,
a frozen dataclass carrying process-wide defaults loaded with precedence
env > TOML > defaults.

Source of truth
- Wire keys live in valtype.core.constants.
- Default message templates live in valtype.core.messages.

Notes
- Loading settings is the only place in valtype.core that touches the filesystem
  or environment; value construction and serialization never do.
- Unparseable entries are skipped so a bad key cannot take down the defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .messages import MessageBundle, default_bundle

__all__ = [
    "SpecOptions",
    "SpecSettings",
]

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return False


@dataclass(frozen=True)
class SpecOptions:
    """
    Per-call serialization options.

    Attributes:
        omit_formatted (bool): If True, never emit the formatted text.

    Examples:
        >>> SpecOptions().merge(omit_formatted=True)
        SpecOptions(omit_formatted=True)
    """

    omit_formatted: bool = False

    def merge(self, **overrides: Any) -> SpecOptions:
        """Return a copy with the given non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class SpecSettings:
    """
    Process-wide defaults for spec rendering and error wording.

    Attributes:
        omit_formatted (bool): Default for SpecOptions.omit_formatted.
        require_type (bool): Whether specs embed the type reference by default.
        messages (dict[str, str]): Message template overrides keyed by message id.

    Examples:
        >>> SpecSettings(require_type=True).spec_options()
        SpecOptions(omit_formatted=False)
    """

    omit_formatted: bool = False
    require_type: bool = False
    messages: dict[str, str] = field(default_factory=dict)

    def spec_options(self) -> SpecOptions:
        return SpecOptions(omit_formatted=self.omit_formatted)

    def bundle(self) -> MessageBundle:
        """Default bundle with this settings' message overrides applied."""
        return default_bundle().with_overrides(self.messages)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: SpecSettings, cfg: dict[str, Any] | None) -> SpecSettings:
        """Apply a loose config mapping onto SpecSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        if "omit_formatted" in cfg:
            s = replace(s, omit_formatted=_bool(cfg["omit_formatted"]))
        if "require_type" in cfg:
            s = replace(s, require_type=_bool(cfg["require_type"]))
        if "messages" in cfg and isinstance(cfg["messages"], dict):
            merged = dict(s.messages)
            merged.update({str(k): str(v) for k, v in cfg["messages"].items()})
            s = replace(s, messages=merged)
        return s

    @classmethod
    def from_env(cls, base: SpecSettings | None = None, prefix: str = "VALTYPE_") -> SpecSettings:
        """
        Build SpecSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - VALTYPE_OMIT_FORMATTED (1/0/true/false/yes/no/on/off)
            - VALTYPE_REQUIRE_TYPE
            - VALTYPE_MESSAGE_<ID> (e.g. VALTYPE_MESSAGE_CANNOT_CHANGE_VALUE)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        v = os.getenv(prefix + "OMIT_FORMATTED")
        if v:
            mapping["omit_formatted"] = v
        v = os.getenv(prefix + "REQUIRE_TYPE")
        if v:
            mapping["require_type"] = v

        message_prefix = prefix + "MESSAGE_"
        for name, value in os.environ.items():
            if name.startswith(message_prefix) and value:
                mapping.setdefault("messages", {})[name[len(message_prefix) :].lower()] = value

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> SpecSettings:
        """
        Build SpecSettings from a TOML file.

        Search order when `path` is None:
            1) ./valtype.toml (with either a top-level [spec] table or direct keys)
            2) ./pyproject.toml under [tool.valtype.spec]

        Returns defaults if no file is present or readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                logger.debug("Ignoring unreadable settings file %s", p)
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "valtype.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                section = tool.get("valtype", {}) if isinstance(tool, dict) else None
                cfg = section.get("spec", {}) if isinstance(section, dict) else None
            elif isinstance(data.get("spec"), dict):
                cfg = data["spec"]
            else:
                cfg = data
            if cfg:
                logger.debug("Loaded settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> SpecSettings:
        """
        Load SpecSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (valtype.toml, pyproject.toml).

        Returns:
            SpecSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
