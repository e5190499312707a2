#!/usr/bin/env python3
"""
GBA Palette Tools - Palette Dumper

Reads every character palette listed in a roster file from the ROM and
saves them as a human-editable JSON file, or prints them.
"""

import argparse
import sys
from pathlib import Path

from gbapal.core.characters import load_roster
from gbapal.core.palette_manager import PaletteManager
from gbapal.core.rom_file import RomFile, RomIOError
from gbapal.formats.palette_json import dump_palettes


def dump(rom_path: str, roster_path: str, output_path: str | None, show: bool) -> int:
    """
    Dump roster palettes from a ROM.

    Args:
        rom_path: ROM file to read
        roster_path: Roster JSON file
        output_path: Palette JSON to write (skipped if None)
        show: Print decoded palettes to stdout

    Returns:
        Number of palettes read
    """
    roster = load_roster(roster_path)
    print(f"Roster: {len(roster)} characters from {roster_path}")

    with RomFile.open(rom_path) as rom:
        manager = PaletteManager(rom)
        manager.read_all_palettes(roster)

    if show:
        for character in roster:
            manager.print_palette(character)

    if output_path is not None:
        count = dump_palettes(manager, roster, output_path)
        print(f"Wrote {count} palettes to: {output_path}")

    return len(roster)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Dump character palettes from a GBA ROM to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump all palettes to palettes.json
  python tools/dump.py game.gba roster.json

  # Print decoded colors without writing a file
  python tools/dump.py game.gba roster.json --print --no-output
""",
    )
    parser.add_argument("rom", help="ROM file to read")
    parser.add_argument("roster", help="Roster JSON listing characters and offsets")
    parser.add_argument(
        "-o", "--output", default="palettes.json", help="Output JSON (default: palettes.json)"
    )
    parser.add_argument(
        "--no-output", action="store_true", help="Do not write a JSON file"
    )
    parser.add_argument(
        "--print", dest="show", action="store_true", help="Print decoded palettes"
    )
    args = parser.parse_args(argv)

    rom_path = Path(args.rom)
    if not rom_path.is_file():
        print(f"Error: ROM file not found: {rom_path}")
        return 1

    output_path = None if args.no_output else args.output

    try:
        dump(str(rom_path), args.roster, output_path, args.show)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except RomIOError as e:
        print(f"ROM read error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
