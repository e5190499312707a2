#!/usr/bin/env python3
"""
GBA Palette Tools - Palette Writer

Writes palettes from a JSON file (as produced by dump.py) back into a copy
of the ROM. The source ROM is never modified.

Characters present in the roster but missing from the JSON file keep their
current palette, so a partial palette file only changes what it lists.
"""

import argparse
import shutil
import sys
from pathlib import Path

from gbapal.core.characters import Character, load_roster
from gbapal.core.palette_manager import PaletteManager, PaletteNotFoundError
from gbapal.core.rom_file import RomFile, RomIOError
from gbapal.formats.palette_json import load_palettes


def select_characters(roster: list[Character], only: list[str] | None) -> list[Character]:
    """
    Restrict the roster to the named characters.

    Raises:
        ValueError: If a name is not in the roster
    """
    if not only:
        return list(roster)

    by_name = {c.name: c for c in roster}
    unknown = [name for name in only if name not in by_name]
    if unknown:
        raise ValueError(f"Unknown character(s): {', '.join(unknown)}")
    return [by_name[name] for name in only]


def write(
    rom_path: str,
    roster_path: str,
    palettes_path: str,
    output_path: str,
    only: list[str] | None = None,
) -> list[str]:
    """
    Write JSON palettes into a copy of the ROM.

    Args:
        rom_path: Source ROM file (read-only)
        roster_path: Roster JSON file
        palettes_path: Palette JSON file
        output_path: Output ROM file (created/overwritten)
        only: Character names to write (default: whole roster)

    Returns:
        Names of the characters written
    """
    roster = load_roster(roster_path)
    targets = select_characters(roster, only)

    shutil.copyfile(rom_path, output_path)
    print(f"Copied {rom_path} -> {output_path}")

    with RomFile.open(output_path, writable=True) as rom:
        manager = PaletteManager(rom)
        manager.read_all_palettes(targets)

        loaded = load_palettes(manager, palettes_path)
        print(f"Loaded {len(loaded)} palettes from {palettes_path}")

        known = {c.name for c in roster}
        for name in loaded:
            if name not in known:
                print(f"Warning: palette '{name}' is not in the roster, skipped")

        manager.write_all_palettes(targets)

    for character in targets:
        print(f"  {character.name:<16} @ 0x{character.palette_offset:X}")

    return [c.name for c in targets]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write character palettes from JSON back to a GBA ROM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write all palettes to game.modified.gba
  python tools/write.py game.gba roster.json palettes.json

  # Write only two characters to a chosen output file
  python tools/write.py game.gba roster.json palettes.json -o out.gba --only Hero Rival
""",
    )
    parser.add_argument("rom", help="Source ROM file")
    parser.add_argument("roster", help="Roster JSON listing characters and offsets")
    parser.add_argument("palettes", help="Palette JSON file")
    parser.add_argument(
        "-o", "--output", help="Output ROM (default: <rom>.modified.gba)"
    )
    parser.add_argument(
        "--only", nargs="+", metavar="NAME", help="Only write these characters"
    )
    args = parser.parse_args(argv)

    rom_path = Path(args.rom)
    if not rom_path.is_file():
        print(f"Error: ROM file not found: {rom_path}")
        return 1

    if args.output:
        output_path = args.output
    else:
        output_path = str(rom_path.with_suffix("")) + ".modified.gba"

    if Path(output_path).resolve() == rom_path.resolve():
        print("Error: output ROM must differ from the source ROM")
        return 1

    try:
        written = write(str(rom_path), args.roster, args.palettes, output_path, args.only)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except PaletteNotFoundError as e:
        print(f"Error: no palette stored for {e}")
        return 1
    except RomIOError as e:
        print(f"ROM I/O error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Wrote {len(written)} palettes")
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
