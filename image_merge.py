#!/usr/bin/env python3
"""
image_merge.py

Merge a program (firmware) image and a filesystem image into one flash image,
so both can be written in a single pass:

  [firmware.bin][fill ... fill][littlefs.bin]
  0                            offset * 1024

Usage example:
  python3 image_merge.py -prog firmware.bin -fs littlefs.bin -image everything.bin -offset 1024 -v

Then upload everything.bin to the board at 0x0, e.g.:
  esptool.py --baud 115200 --after no_reset write_flash --flash_size detect --flash_mode qio 0x0 everything.bin

Notes:
- The correct offset depends on the board's flash layout (ESP8266: see the
  arduino-esp8266 filesystem docs). flash_mode must match the build.
- Exit status is 0 on success and whenever the help text is shown, -1 on
  invalid values or unreadable inputs.
"""
from __future__ import annotations

import sys
from typing import List, Optional

from imagemerge.binfile import file_size, read_binary_file, write_binary_file
from imagemerge.compose import compose_image
from imagemerge.options import Config, UsageError, parse_options
from imagemerge.sizefmt import format_size

VERSION = "ImageMerge 1.00"

HELP_TEXT = f"""{VERSION}
Usage:
 -prog <file_name>               Program image file
 -fs <file_name>                 Filesystem image file name
 -image <file_name>              Resulting image
 [-offset <512, 1024 ... 32768>] Offset to FS start in kilobytes, default 1024
 [-fillchar <value>]             Fill character between program image and FS, default 0
                                 (a character, or a hex byte such as 0xFF)
 [-v]                            Verbose
 [-h]                            This help
Usage example:
image_merge.py -prog firmware.bin -fs littlefs.bin -image everything.bin -offset 512 -v
"""


def print_help():
    print(HELP_TEXT, end="")


def read_image(path: Optional[str], verbose: bool) -> bytes:
    data = read_binary_file(path)
    if not data:
        raise RuntimeError(f"Cannot read {path or '(no file given)'}")
    if verbose:
        print(f"{path}, size {format_size(len(data))}")
    return data


def merge(cfg: Config) -> int:
    """Read both inputs, write the merged image. Returns the image size."""
    if cfg.verbose:
        print(f"Offset {cfg.offset} / 0x{cfg.offset:x}")

    prog = read_image(cfg.prog, cfg.verbose)
    fs = read_image(cfg.fs, cfg.verbose)

    image = compose_image(prog, fs, cfg.offset, cfg.fill)
    write_binary_file(cfg.image, image)

    # advisory only, exit status is unaffected
    if file_size(cfg.image) != len(image):
        print(f"Error writing to {cfg.image}")

    if cfg.verbose:
        print(f"{cfg.image}, size {format_size(len(image))}")
    return len(image)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        cfg = parse_options(argv)
    except UsageError as e:
        if e.message:
            print(e.message)
        print_help()
        return 0
    except ValueError as e:
        print(e)
        return -1

    try:
        merge(cfg)
    except (RuntimeError, ValueError) as e:
        print(e)
        return -1
    except OSError as e:
        print(f"{e.filename}: {e.strerror}")
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
