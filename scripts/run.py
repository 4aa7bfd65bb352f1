#!/usr/bin/env python
"""CLI for step-align."""

import argparse
import json
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from step_align import TutorialProcessor, StepAlignError, find_closest_segment, load_config
from step_align.utils import setup_logging


def _read_json(path):
    with open(path) as f:
        return json.load(f)


def cmd_align(args, config):
    """Align step rows with a transcription and print the step updates."""
    if args.closest_fallback:
        config.alignment.closest_fallback = True

    rows = _read_json(args.steps)
    if isinstance(rows, dict):
        rows = rows.get("steps", [])

    processor = TutorialProcessor(config)
    result = processor.process(
        tutorial_id=args.tutorial_id,
        step_rows=rows,
        transcription=_read_json(args.transcription),
    )

    output = result.to_dict()
    output["steps"] = [
        {"id": update.step_id, **update.to_record()} for update in result.updates
    ]
    print(json.dumps(output, indent=2, ensure_ascii=False))


def cmd_closest(args, config):
    """Print the segment nearest to a timestamp."""
    processor = TutorialProcessor(config)
    segments = processor.load_segments(_read_json(args.transcription))
    segment = find_closest_segment(args.timestamp, segments)
    print(json.dumps(segment.to_dict() if segment else None, indent=2, ensure_ascii=False))


def cmd_options(args, config):
    """Print the options a transcription request is sent with."""
    payload = {
        "provider": config.transcription.provider,
        "options": config.transcription.to_options(),
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="step-align - attribute narration to tutorial steps",
    )
    parser.add_argument("--env", "-e", default=None, help="Environment")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--log-level", "-l", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Align
    p = subparsers.add_parser("align", help="Align steps with a transcription")
    p.add_argument("steps", help="JSON file with step rows")
    p.add_argument("transcription", help="JSON file with provider response or segments")
    p.add_argument("--tutorial-id", "-t", default="local", help="Tutorial id")
    p.add_argument("--closest-fallback", action="store_true", help="Fill silent steps")
    p.set_defaults(func=cmd_align)

    # Closest
    p = subparsers.add_parser("closest", help="Find the segment nearest a timestamp")
    p.add_argument("timestamp", type=float, help="Timestamp in seconds")
    p.add_argument("transcription", help="JSON file with provider response or segments")
    p.set_defaults(func=cmd_closest)

    # Options
    p = subparsers.add_parser("options", help="Show transcription request options")
    p.set_defaults(func=cmd_options)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(env=args.env, config_dir=args.config_dir)
        setup_logging(args.log_level or config.log_level, config.log_format)
        args.func(args, config)
    except (StepAlignError, OSError, json.JSONDecodeError) as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
