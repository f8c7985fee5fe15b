class ImageOverlapError(ValueError):
    pass


def compose_image(prog: bytes, fs: bytes, offset: int, fill: int = 0) -> bytearray:
    """
    Build the merged flash image:
      [prog][fill ... fill][fs]
      0     len(prog)     offset   offset+len(fs)
    """
    if offset < 0:
        raise ValueError(f"Negative offset: {offset}")
    if not 0 <= fill <= 0xFF:
        raise ValueError(f"Fill value 0x{fill:X} does not fit in a byte")
    if len(prog) > offset:
        raise ImageOverlapError(
            f"Program image ({len(prog)} bytes) does not fit below the filesystem "
            f"offset {offset} / 0x{offset:x}"
        )

    image = bytearray([fill]) * (offset + len(fs))
    image[0:len(prog)] = prog
    image[offset:offset + len(fs)] = fs
    return image
