_UNITS = ["B", "KB", "MB", "GB"]


def format_file_size(size_bytes: int) -> str:
    """Renders a byte count as a short human readable string, e.g. '25.0 MB'."""
    if size_bytes == 0:
        return "0 B"

    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(_UNITS) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.1f} {_UNITS[unit_index]}"
