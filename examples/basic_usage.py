"""
Basic usage example for the interlinear library.

This example demonstrates the core workflow:
1. Merge annotation text into a document directly
2. Run the pipeline hook against a folder of documents
"""

import asyncio
from pathlib import Path

from interlinear import AnnotationHook, configure
from interlinear.core import merge_annotations
from interlinear.fetch import FileFetcher


DOCUMENT = """# Capítulo uno

Era una noche oscura y tormentosa.

```python
print("sin glosa")
```

La lluvia caía a torrentes."""

ANNOTATION = """It was a dark and stormy night.

The rain fell in torrents."""


def merge_directly():
    result = merge_annotations(DOCUMENT, ANNOTATION)
    print(result)
    print(result.content)


async def run_hook(docs_dir: str):
    settings = configure(base_path="")
    hook = AnnotationHook(settings=settings, fetcher=FileFetcher(docs_dir))

    for doc_path in sorted(Path(docs_dir).glob("*.md")):
        if doc_path.stem.endswith(settings.annotation_suffix):
            continue
        content = doc_path.read_text(encoding="utf-8")
        merged = await hook(content, doc_path.name)
        status = "annotated" if merged != content else "unchanged"
        print(f"{doc_path.name}: {status}")


if __name__ == "__main__":
    import sys

    merge_directly()

    if len(sys.argv) > 1:
        asyncio.run(run_hook(sys.argv[1]))
