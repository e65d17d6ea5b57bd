"""CLI batch annotation runner.

Adds interlinear glosses to every document in a folder, reading annotation
files from the same folder, and writes the results to an output folder.
Emits JSONL progress events to stdout.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from interlinear._logging import configure_logging
from interlinear.adapter import AnnotationHook
from interlinear.config import configure
from interlinear.core.paths import is_annotation_path
from interlinear.fetch import FileFetcher


def emit(event: dict) -> None:
    print(json.dumps(event, ensure_ascii=False))
    sys.stdout.flush()


def list_documents(docs_dir: Path, extension: str, suffix: str) -> list[Path]:
    """Primary documents under docs_dir, annotation files excluded."""
    if not docs_dir.exists():
        return []

    files: list[Path] = []
    for entry in docs_dir.rglob("*"):
        if not entry.is_file():
            continue
        if entry.suffix.lower() != extension.lower():
            continue
        if is_annotation_path(entry.name, suffix, extension):
            continue
        files.append(entry)

    return sorted(files)


async def annotate_documents(
    hook: AnnotationHook,
    docs_dir: Path,
    output_dir: Path,
    documents: list[Path],
    overwrite: bool = False,
) -> tuple[int, int, int]:
    processed = 0
    changed = 0
    failed = 0

    for doc_path in documents:
        relative = doc_path.relative_to(docs_dir)
        output_path = output_dir / relative

        if output_path.exists() and not overwrite:
            emit({"type": "doc_skipped", "file": relative.as_posix()})
            continue

        emit({"type": "doc_start", "file": relative.as_posix()})

        try:
            content = doc_path.read_text(encoding="utf-8")
            merged = await hook(content, relative.as_posix())

            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(merged, encoding="utf-8")

            processed += 1
            if merged != content:
                changed += 1

            emit({
                "type": "doc_done",
                "file": relative.as_posix(),
                "annotated": merged != content,
                "output": str(output_path),
            })
        except Exception as exc:
            failed += 1
            emit({"type": "doc_error", "file": relative.as_posix(), "message": str(exc)})

    return processed, changed, failed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Add interlinear glosses to a folder of documents")
    parser.add_argument("--docs-dir", required=True, help="Folder with primary and annotation documents")
    parser.add_argument("--output-dir", required=True, help="Output folder for annotated documents")
    parser.add_argument("--base-path", default="", help="Base path of annotation files, relative to docs dir")
    parser.add_argument("--suffix", default="_en", help="Language suffix of annotation files")
    parser.add_argument("--extension", default=".md", help="Extension of primary documents")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite existing output files")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages to stderr")

    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    docs_dir = Path(args.docs_dir)
    output_dir = Path(args.output_dir)

    settings = configure(
        base_path=args.base_path,
        annotation_suffix=args.suffix,
        source_extension=args.extension,
    )

    documents = list_documents(docs_dir, settings.source_extension, settings.annotation_suffix)
    emit({"type": "job_start", "total": len(documents)})

    hook = AnnotationHook(settings=settings, fetcher=FileFetcher(docs_dir))
    processed, changed, failed = asyncio.run(
        annotate_documents(hook, docs_dir, output_dir, documents, overwrite=args.overwrite)
    )

    emit({"type": "job_done", "processed": processed, "annotated": changed, "failed": failed})
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
