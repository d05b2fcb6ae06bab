"""File output for exports and YAML input for configs.

Exports (G-code programs, ``spiral.v1`` documents) are written through
:func:`atomic_write`: the payload goes to a hidden ``.part`` file next to
the target, is fsynced, then renamed over the target.  A reader sees the
previous file or the complete new one, never a truncated program.

Usage:
    from fib_spiral.utils import fs
    fs.atomic_write("out/spiral.gcode", program)
    fs.dump_yaml(document, "out/spiral.yaml")
    cfg = fs.read_yaml("spiral.yaml")
"""

import os
import tempfile
from pathlib import Path
from typing import Any, Union

import yaml


PathLike = Union[str, Path]


def atomic_write(
    path: PathLike,
    payload: Union[str, bytes],
    encoding: str = 'utf-8'
) -> Path:
    """Replace *path* with *payload* in one rename.

    Parameters
    ----------
    path : PathLike
        Target; missing parent directories are created
    payload : str or bytes
        ``str`` is encoded with *encoding*
    encoding : str
        Text encoding, default "utf-8"

    Returns
    -------
    Path
        The written path

    Raises
    ------
    RuntimeError
        If the write or the rename fails.  No ``.part`` file is left behind.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = payload.encode(encoding) if isinstance(payload, str) else payload

    fd, part_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".part"
    )
    part = Path(part_name)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        part.replace(target)
    except OSError as e:
        part.unlink(missing_ok=True)
        raise RuntimeError(f"Could not write {target}: {e}") from e
    return target


def dump_yaml(obj: Any, path: PathLike) -> Path:
    """Write *obj* as block-style YAML via :func:`atomic_write`.

    Keys keep insertion order.  Floats are emitted with ``repr`` so they
    read back bit-identical.
    """
    text = yaml.safe_dump(obj, sort_keys=False, default_flow_style=False)
    return atomic_write(path, text)


def read_yaml(path: PathLike) -> Any:
    """``yaml.safe_load`` of *path*; ``None`` for an empty file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist
    yaml.YAMLError
        On malformed YAML; the message names *path*
    """
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"YAML file not found: {source}")
    with open(source, 'r', encoding='utf-8') as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"{source}: {e}") from e
