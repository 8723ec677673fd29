"""
Parser for Proxmox property strings.

VM config values such as ``net0`` or ``scsi0`` are encoded as
``token[,key=value]*``, e.g.::

    virtio=BC:24:11:2E:C8:9F,bridge=vmbr0,firewall=1
    local-lvm:vm-100-disk-0,iothread=1,size=32G

Rules:

- tokens are separated by ``,``; empty tokens are skipped
- ``key=value`` splits on the first ``=``; the last occurrence of a key wins
- bare tokens (no ``=``) are kept under ``default_key`` when one is given
  and dropped otherwise
- unknown keys are kept as-is; callers pick what they need
"""
from __future__ import annotations

from typing import Any, Dict, Optional


def parse_property_string(value: Any, default_key: Optional[str] = None) -> Dict[str, str]:
    if value is None:
        return {}

    options: Dict[str, str] = {}
    for token in str(value).split(","):
        token = token.strip()
        if not token:
            continue
        key, sep, val = token.partition("=")
        if sep:
            options[key.strip()] = val.strip()
        elif default_key is not None:
            options[default_key] = token
    return options


def split_volume(volume: Optional[str]) -> Optional[tuple]:
    """Split ``storage:volume`` into its parts, or ``None`` if not a volume."""
    if not volume:
        return None
    storage, sep, name = volume.partition(":")
    if not sep or not storage or not name:
        return None
    return storage, name


def is_enabled(value: Any, default_key: str = "enabled") -> bool:
    """Interpret flag-style properties like ``1`` or ``enabled=1,fstrim=1``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return parse_property_string(value, default_key).get(default_key) == "1"
