"""Address string utilities."""

from pathlib import Path


def extract_component_dir_name(address: str) -> str | None:
    """Extract directory name from a component address.

    The directory name is the last path segment of the address, so a
    component hosted at ``https://github.com/org/my-component`` lands in
    ``my-component``.

    Args:
        address: Component address (URL or path)

    Returns:
        Last path segment, or None if the address has no usable segment

    Examples:
        >>> extract_component_dir_name("https://github.com/org/my-component")
        'my-component'
        >>> extract_component_dir_name("https://github.com/org/my-component/")
        'my-component'
        >>> extract_component_dir_name("") is None
        True
    """
    name = address.rstrip("/").rpartition("/")[2]
    return name or None


def component_dir_path(specs_root: Path, address: str) -> Path | None:
    """Join the component directory name onto the specifications root.

    Args:
        specs_root: Root directory holding component specifications
        address: Component address

    Returns:
        Component directory path, or None if the address has no usable segment
    """
    name = extract_component_dir_name(address)
    if name is None:
        return None
    return specs_root / name
