"""Command line interface for lyric rhyme extraction."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

from tabulate import tabulate
from tqdm import tqdm

from .config import load_config
from .models import ExtractionResult, Track
from .phonetics import analyze
from .rhymes import extract_rhymes
from .segmenter import parse_full_text
from .similarity import compare_texts

LOGGER = logging.getLogger("lyric_rhymes")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Phonetic rhyme detection for song lyrics")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser("extract", help="Find rhyme families in a lyrics file")
    extract_parser.add_argument("path", help="Text file with '## Title' tracks")
    extract_parser.add_argument("--window", type=int, help="Look-back window in lines")
    extract_parser.add_argument("--min-similarity", type=float, help="Similarity needed for a link (0-1)")
    extract_parser.add_argument("--track", help="Only process tracks whose title contains this text")
    extract_parser.add_argument("--json", action="store_true", help="Print raw results as JSON")

    compare_parser = subparsers.add_parser("compare", help="Compare the endings of two phrases")
    compare_parser.add_argument("text_a")
    compare_parser.add_argument("text_b")

    analyze_parser = subparsers.add_parser("analyze", help="Show the phonetic transcription of a phrase")
    analyze_parser.add_argument("text")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "extract":
        try:
            config = load_config()
            overrides = {}
            if args.window is not None:
                overrides["window_size"] = args.window
            if args.min_similarity is not None:
                overrides["min_similarity"] = args.min_similarity
            config = config.replace(**overrides)
        except ValueError as exc:
            parser.error(str(exc))
        path = Path(args.path)
        if not path.is_file():
            parser.error(f"Lyrics file {path} does not exist.")
        tracks = parse_full_text(path.read_text(encoding="utf8"), config.tail_words)
        if args.track:
            needle = args.track.lower()
            tracks = [track for track in tracks if needle in track.title.lower()]
        LOGGER.info("Parsed %d track(s) from %s", len(tracks), path)
        results = [(track, extract_rhymes(track, config)) for track in tqdm(tracks, desc="Tracks", disable=args.json)]
        if args.json:
            _print_json(results)
        else:
            _print_families(results)
    elif args.command == "compare":
        comparison = compare_texts(args.text_a, args.text_b)
        rows = [
            [args.text_a, comparison.analysis_a.phonetic_tail],
            [args.text_b, comparison.analysis_b.phonetic_tail],
        ]
        print(tabulate(rows, headers=["Text", "Phonetic tail"]))
        print(f"Similarity: {comparison.similarity}")
        print(f"Match type: {comparison.match_type or 'none'}")
        print(f"Rhyme: {'yes' if comparison.is_rhyme else 'no'}")
    elif args.command == "analyze":
        analysis = analyze(args.text)
        print(f"Phonetic: {analysis.phonetic_full}")
        print(f"Simplified: {analysis.simplified}")
        print(f"Tail: {analysis.phonetic_tail}")
        print(f"Syllables: {analysis.syllable_count}")


def _print_families(results: List[Tuple[Track, ExtractionResult]]) -> None:
    if not results:
        print("No tracks found")
        return
    for track, result in results:
        print(f"## {track.title}  ({len(result.units)} units, {len(result.links)} links)")
        if not result.families:
            print("  (no rhyme families)")
            continue
        rows = []
        for family in result.families:
            spans = " / ".join(unit.text_span for unit in family.units)
            rows.append([family.phonetic_tail, family.complexity, len(family.units), spans])
        print(tabulate(rows, headers=["Tail", "Complexity", "Units", "Spans"]))
        print()


def _print_json(results: List[Tuple[Track, ExtractionResult]]) -> None:
    payload = [dict(title=track.title, **asdict(result)) for track, result in results]
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
