"""
TOML Document Codec
====================

Reads and writes ManagerConfig documents. The process boundary is two calls:

    read_config(path) -> ManagerConfig
    generate_config(path, config) -> Path

Everything that goes wrong on the way in or out is turned into one of the
configuranator error types so the caller can report it once and exit.
"""

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import click
import pydantic
import toml

from configuranator.config.schemas import ManagerConfig
from configuranator.core.exceptions import ConfigIOError, DecodeError, EncodeError, ErrorCode
from configuranator.core.structured_logger import get_logger

logger = get_logger("Codec")

SUCCESS_MESSAGE = "Configuration file generation: SUCCESS"


# Escapes with a short form in TOML basic strings
_BASIC_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\b': '\\b',
    '\t': '\\t',
    '\n': '\\n',
    '\f': '\\f',
    '\r': '\\r',
}


def _dump_basic_string(value: str) -> str:
    """Quote a string as a TOML basic string; other control characters become \\uXXXX."""
    out = []
    for ch in value:
        if ch in _BASIC_ESCAPES:
            out.append(_BASIC_ESCAPES[ch])
        elif ch < ' ' or ch == '\x7f':
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return '"' + ''.join(out) + '"'


class ConfigEncoder(toml.TomlEncoder):
    """TomlEncoder whose strings only use escapes TOML defines"""

    def __init__(self, _dict=dict, preserve=False):
        super().__init__(_dict, preserve)
        self.dump_funcs[str] = _dump_basic_string


def dumps_config(config: ManagerConfig) -> str:
    """
    Encode a configuration as TOML text.

    The text is decoded again before it is returned, so whatever is written
    loads back as the same configuration.

    Raises:
        EncodeError: If the TOML encoder rejects the data or its output
            does not decode to the same configuration
    """
    # mode="json" turns tuples into lists so areas become arrays of tables
    data = config.model_dump(mode="json")
    try:
        text = toml.dumps(data, encoder=ConfigEncoder())
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Could not encode configuration: {e}") from e

    try:
        decoded = loads_config(text)
    except DecodeError as e:
        raise EncodeError(f"Encoded configuration does not decode: {e.message}") from e
    if decoded != config:
        raise EncodeError("Encoded configuration does not decode to the same values")
    return text


def loads_config(text: str, source: str | Path | None = None) -> ManagerConfig:
    """
    Decode TOML text into a validated configuration.

    Args:
        text: TOML document
        source: Where the text came from, used in error messages

    Raises:
        DecodeError: On TOML syntax errors or schema mismatch
    """
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise DecodeError(source, f"Invalid TOML: {e}") from e

    try:
        return ManagerConfig.model_validate(data)
    except pydantic.ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise DecodeError(
            source,
            "Document does not match the configuration schema:\n"
            + "\n".join(f"  - {p}" for p in problems),
            details={'errors': problems},
        ) from e


def read_config(path: str | Path) -> ManagerConfig:
    """
    Load a configuration document.

    Args:
        path: Path to a .toml configuration file

    Returns:
        Validated ManagerConfig

    Raises:
        ConfigIOError: If the file cannot be read
        DecodeError: If the content is not a valid configuration
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        logger.error("Failed to read configuration", path=path, error=str(e))
        raise ConfigIOError(path, e.strerror or str(e), ErrorCode.RESOURCE_UNREADABLE) from e
    except UnicodeDecodeError as e:
        raise DecodeError(path, f"File is not UTF-8 text: {e}") from e

    config = loads_config(content, source=path)
    logger.info("Configuration loaded", path=path)
    return config


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def generate_config(
    path: str | Path,
    config: ManagerConfig,
    echo: Callable[[str], None] = click.echo,
) -> Path:
    """
    Write a configuration document, replacing any existing file.

    The document is written to a temporary file beside the target and moved
    into place, so a failed save never leaves a partial document behind. The
    saved file gets the usual umask-based permissions.

    Args:
        path: Destination .toml file
        config: Configuration to persist
        echo: Where the success confirmation is printed

    Returns:
        The path written

    Raises:
        EncodeError: If the configuration cannot be serialized
        ConfigIOError: If the file cannot be written
    """
    path = Path(path)
    content = dumps_config(config)

    try:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        logger.error("Failed to write configuration", path=path, error=str(e))
        raise ConfigIOError(path, e.strerror or str(e), ErrorCode.RESOURCE_UNWRITABLE) from e

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        # mkstemp creates the file 0600; other processes read the config
        os.chmod(temp_path, 0o666 & ~_current_umask())

        # Atomic rename; fails if the target is a directory
        os.replace(temp_path, path)
    except OSError as e:
        if Path(temp_path).exists():
            Path(temp_path).unlink()
        logger.error("Failed to write configuration", path=path, error=str(e))
        raise ConfigIOError(path, e.strerror or str(e), ErrorCode.RESOURCE_UNWRITABLE) from e

    logger.info("Configuration written", path=path, bytes=len(content))
    echo(SUCCESS_MESSAGE)
    return path
