from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import importlib
import logging
import pkgutil


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Error-detection stage config.

    module: detection module name (e.g. "crc", "checksum")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "crc"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available detection modules under detect/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_detect_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_detect_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"detect module '{cfg.module}' missing Config")
    for fn in ("compute", "tx", "rx"):
        if not hasattr(mod, fn):
            raise AttributeError(f"detect module '{cfg.module}' missing {fn}")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    log.debug("detect: module=%s cfg=%r", cfg.module, module_cfg)
    return mod, module_cfg


def compute(data: bytes, *, cfg: Config) -> int:
    """
    Check value of `data` under the selected module.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("compute: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.compute(bytes(data), cfg=module_cfg)


def tx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage TX: payload bytes -> payload + check trailer.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.tx(bytes(data), cfg=module_cfg)


def rx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage RX: payload + check trailer -> payload, raising CheckMismatch on a bad trailer.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.rx(bytes(data), cfg=module_cfg)
