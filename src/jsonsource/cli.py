#!/usr/bin/env python3
"""
jsonsource - genera modelli pydantic da campioni JSON / JSON-LD.

Usage:
    jsonsource examples/sources.yml --out generated/
    jsonsource examples/sources.yml --collision-policy merge -v
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import Settings
from .errors import JsonSourceError
from .generator import generate
from .sources.loader import describe, load_sources, read_sample

logger = logging.getLogger("jsonsource.cli")


def output_path(out_dir: Path, namespace: str, file_name: str) -> Path:
    """`library.models` + `book.py` -> out_dir/library/models/book.py"""
    parts = [p for p in namespace.split(".") if p]
    return Path(out_dir, *parts, file_name)


def run(manifest: Path, settings: Settings) -> List[Path]:
    sources = load_sources(manifest)
    written: List[Path] = []

    for source in sources:
        info = describe(source)
        logger.info(f"[{source.class_name}] origin: {info['origin']}")

        json_text = read_sample(source, base_dir=manifest.parent, timeout_s=settings.fetch_timeout_s)
        generated = generate(source.namespace, source.class_name, json_text, settings=settings)

        target = output_path(settings.output_dir, source.namespace, generated.file_name)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.text, encoding="utf-8")
        written.append(target)
        logger.info(f"[{source.class_name}] wrote {target} ({', '.join(generated.declarations)})")

    return written


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate pydantic models from sample JSON documents")
    ap.add_argument("manifest", type=Path, help="YAML manifest with a 'models' list")
    ap.add_argument("--out", type=Path, default=None, help="output directory (default: Settings.output_dir)")
    ap.add_argument("--collision-policy", choices=["reject", "merge"], default=None)
    ap.add_argument("--max-depth", type=int, default=None)
    ap.add_argument("--discriminator", default=None, help="discriminator key (default: @type)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        logger.error(f"invalid JSONSOURCE_* environment settings: {e}")
        return 1
    overrides = {
        "output_dir": args.out,
        "collision_policy": args.collision_policy,
        "max_depth": args.max_depth,
        "discriminator_key": args.discriminator,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        written = run(args.manifest, settings)
    except JsonSourceError as e:
        logger.error(f"generation failed: {type(e).__name__}: {e}")
        return 1

    print(f"✓ {len(written)} file(s) generated in {settings.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
