"""Batch collection utility for the phishing content detector."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from api.api import analyze, summarize
from config import clip, configure_logging, get_settings
from models import ContentType

logger = logging.getLogger(__name__)

CONTENT_KEYS = ("content", "text", "url", "URL")
INPUT_SUFFIXES = {".txt": "txt", ".list": "txt", ".jsonl": "jsonl", ".ndjson": "jsonl"}
OUTPUT_SUFFIXES = {".csv": "csv"}


def _detect_format(path: Path, explicit: Optional[str], suffixes: Dict[str, str], default: str) -> str:
    if explicit:
        return explicit.lower()
    return suffixes.get(path.suffix.lower(), default)


def input_format_for(path: Path, explicit: Optional[str] = None) -> str:
    return _detect_format(path, explicit, INPUT_SUFFIXES, "csv")


def output_format_for(path: Path, explicit: Optional[str] = None) -> str:
    return _detect_format(path, explicit, OUTPUT_SUFFIXES, "jsonl")


def _pick_content(row: Dict) -> str:
    for key in CONTENT_KEYS:
        value = row.get(key)
        if value is not None and str(value).strip():
            return str(value)
    return ""


def _entry(row: Dict, default_type: str) -> Dict:
    entry = {"content": _pick_content(row), "type": (row.get("type") or default_type)}
    label = row.get("label")
    if label is not None and str(label).strip() != "":
        entry["label"] = label
    return entry


def _read_txt(path: Path, default_type: str) -> Iterator[Dict]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            content = line.strip()
            if not content or content.startswith("#"):
                continue
            yield {"content": content, "type": default_type}


def _read_csv(path: Path, default_type: str) -> Iterator[Dict]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            if not row:
                continue
            yield _entry(row, default_type)


def _read_jsonl(path: Path, default_type: str) -> Iterator[Dict]:
    with path.open("r", encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, 1):
            raw = line.strip()
            if not raw or raw.startswith("#"):
                continue
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("line %d: invalid JSON, skipped", lineno)
                continue
            if isinstance(data, str):
                data = {"content": data}
            if not isinstance(data, dict):
                logger.warning("line %d: expected an object or string, skipped", lineno)
                continue
            yield _entry(data, default_type)


def _iter_inputs(path: Path, input_format: str, default_type: str) -> Iterator[Dict]:
    if input_format == "txt":
        return _read_txt(path, default_type)
    if input_format == "jsonl":
        return _read_jsonl(path, default_type)
    return _read_csv(path, default_type)


def _summarize_result(content: str, content_type: ContentType, verdict, label) -> Dict:
    summary = summarize(verdict)
    return {
        "content": content,
        "type": content_type.value,
        "label": label,
        "risk_level": summary["risk_level"],
        "phishing_score": verdict.phishing_score,
        "confidence": summary["confidence"],
        "threat_category": verdict.threat_category,
        "attack_vectors": summary["details"]["attack_vectors"],
        "explanations": summary["threats"],
        "sophistication_level": summary["details"]["sophistication_level"],
        "features": verdict.features.to_dict(),
    }


JSON_COLUMNS = ("attack_vectors", "explanations", "features")


def _write_jsonl(rows: Iterable[Dict], path: Path) -> None:
    lines = (json.dumps(row, ensure_ascii=False) + "\n" for row in rows)
    path.write_text("".join(lines), encoding="utf-8")


def _write_csv(rows: Iterable[Dict], path: Path) -> None:
    rows = list(rows)
    if not rows:
        return
    fieldnames = list(rows[0].keys())
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            row = dict(row)
            for column in JSON_COLUMNS:
                if column in row:
                    row[column] = json.dumps(row[column], ensure_ascii=False)
            writer.writerow(row)


def run_collect(
    input_path: Path,
    output_path: Path,
    input_format: str,
    output_format: str,
    default_type: str = ContentType.EMAIL.value,
    max_content_length: int = 0,
) -> int:
    """Analyze every entry of input_path, write the summaries, return the row count."""
    outputs = []
    for entry in _iter_inputs(input_path, input_format, default_type):
        content = entry.get("content")
        if not content:
            logger.warning("entry without content skipped")
            continue
        try:
            content_type = ContentType.parse(entry["type"])
        except ValueError as exc:
            logger.warning("%s, skipped", exc)
            continue
        content = clip(content, max_content_length)
        verdict = analyze(content, content_type)
        outputs.append(_summarize_result(content, content_type, verdict, entry.get("label")))

    if output_format == "csv":
        _write_csv(outputs, output_path)
    else:
        _write_jsonl(outputs, output_path)
    logger.info("wrote %d results to %s", len(outputs), output_path)
    return len(outputs)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Collect phishing analysis results for a batch of messages.")
    parser.add_argument("input", help="Path to input list (.txt, .csv, .jsonl)")
    parser.add_argument("output", help="Path to output file (.jsonl or .csv)")
    parser.add_argument(
        "--input-format",
        choices=["txt", "csv", "jsonl"],
        help="Override input format detection",
    )
    parser.add_argument(
        "--output-format",
        choices=["jsonl", "csv"],
        help="Override output format detection",
    )
    parser.add_argument(
        "--type",
        default=ContentType.EMAIL.value,
        choices=[t.value for t in ContentType],
        help="Content type for entries that do not carry one",
    )
    return parser


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    parser = build_parser()
    args = parser.parse_args()
    input_path = Path(args.input)
    output_path = Path(args.output)

    if not input_path.exists():
        print(f"Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    input_format = input_format_for(input_path, args.input_format)
    output_format = output_format_for(output_path, args.output_format)

    run_collect(input_path, output_path, input_format, output_format, args.type, settings.max_content_length)


if __name__ == "__main__":
    main()
