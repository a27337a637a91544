#!/usr/bin/env python3
"""Organize a folder of chord samples into canonical chord folders.

This script parses every audio filename in a directory, works out the
canonical filename and chord folder for it, and prints the plan as JSON.
With --apply the files are moved: parsed samples go to
``<output>/Processed/<chord folder>/<canonical name>`` and samples that
could not be parsed go to ``<output>/Filename mismatch/``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from chord_normalizer import ChordParser, generate_sample_filename, get_chord_folder_name
from chord_normalizer.filenames import FAILED_PREFIX, create_unique_filename, get_all_audio_files

logger = logging.getLogger("organize_samples")

PROCESSED_FOLDER = "Processed"
MISMATCH_FOLDER = "Filename mismatch"


def plan_sample(parser: ChordParser, path: Path, output_dir: Path) -> dict:
    """Work out where a single sample should go.

    Parameters
    ----------
    parser
        Parser used for the filename.
    path
        Path to the sample.
    output_dir
        Root of the organized library.

    Returns
    -------
    dict
        Source, destination folder and filename, parsed chord and issues.
    """
    chord = parser.parse(path.name)

    if path.name.startswith(("5_", "5 ")) and chord.standardized_quality.startswith("interval_"):
        logger.warning("Power chord name parsed as interval: %s -> %s", path.name, chord)
    if "interval" in path.name.lower() and not chord.standardized_quality.startswith("interval_"):
        logger.warning(
            "Interval name not parsed as interval: %s -> %s", path.name, chord.standardized_quality
        )

    new_name = generate_sample_filename(chord, path.suffix)
    if new_name.startswith(FAILED_PREFIX):
        folder = output_dir / MISMATCH_FOLDER
        new_name = path.name
    else:
        folder = output_dir / PROCESSED_FOLDER / get_chord_folder_name(chord.standardized_quality)

    return {
        "source": str(path),
        "folder": str(folder),
        "filename": new_name,
        "valid": chord.is_valid(),
        "chord": chord.to_dict(),
        "issues": list(chord.issues),
    }


def apply_plan(entry: dict) -> Path:
    """Move a sample to its planned destination, avoiding collisions.

    Returns
    -------
    Path
        The final destination.
    """
    folder = Path(entry["folder"])
    folder.mkdir(parents=True, exist_ok=True)
    destination = folder / create_unique_filename(folder, entry["filename"])
    Path(entry["source"]).rename(destination)
    logger.info("Moved %s -> %s", entry["source"], destination)
    return destination


def main() -> None:
    """Run the sample organizer."""
    parser = argparse.ArgumentParser(description="Organize chord samples by parsed filename")
    parser.add_argument("source", type=Path, help="Directory containing audio samples")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Root of the organized library (defaults to the source directory)",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Also scan subdirectories",
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Move files instead of only printing the plan",
    )
    parser.add_argument(
        "--flag-default-quality",
        action="store_true",
        help="Send chords without a recognizable quality to manual review",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser decisions",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.source.is_dir():
        print(f"Error: {args.source} is not a directory", file=sys.stderr)
        sys.exit(1)

    output_dir = args.output_dir or args.source
    chord_parser = ChordParser(flag_default_quality=args.flag_default_quality)
    files = get_all_audio_files(args.source, recursive=args.recursive)
    plan = [plan_sample(chord_parser, path, output_dir) for path in files]

    if args.apply:
        for entry in plan:
            entry["destination"] = str(apply_plan(entry))

    json.dump(plan, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")

    valid_count = sum(entry["valid"] for entry in plan)
    print(
        f"{len(plan)} samples: {valid_count} parsed, {len(plan) - valid_count} for manual review",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
