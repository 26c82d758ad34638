BYTE_UNITS = ['B', 'K', 'M', 'G', 'T', 'P', 'E']


def format_bytes_short(bytes_value: int) -> str:
    """Convert bytes to short IEC format (e.g., 512 -> '512B', 1536 -> '1.5K')"""
    if bytes_value < 1024:
        return f"{bytes_value}B"

    size = float(bytes_value)
    unit_index = 0

    while size >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.1f}{BYTE_UNITS[unit_index]}"
