ONE_KILOBYTE = 1024

SUFFIXES = ("bytes", "kilobytes", "megabytes")


def format_size(num_bytes: int) -> str:
    """
    Human readable size, e.g. 1536 -> '1.50 kilobytes'.
    Plain bytes are printed without decimals.
    """
    count = float(num_bytes)
    suffix = 0
    while count >= ONE_KILOBYTE and suffix < len(SUFFIXES) - 1:
        count /= ONE_KILOBYTE
        suffix += 1

    if suffix == 0:
        return f"{count:.0f} {SUFFIXES[suffix]}"
    return f"{count:.2f} {SUFFIXES[suffix]}"
