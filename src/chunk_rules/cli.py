"""CLI for writing the tagged-phrase and NP-phrase corpora of a treebank."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chunk_rules.api import create_corpus
from chunk_rules.errors import RuleExtractionError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunk-rules",
        description="Extract NP chunking rules from an AD treebank file.",
    )
    parser.add_argument("source", type=Path, help="AD corpus file to read")
    parser.add_argument(
        "tagged_output", type=Path, help="Where to write the tagged-phrase corpus"
    )
    parser.add_argument(
        "np_output", type=Path, help="Where to write the NP-phrase corpus"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the extraction.  Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)-5.5s [%(name)s] %(message)s",
    )

    try:
        result = create_corpus(args.source, args.np_output, args.tagged_output)
    except RuleExtractionError as exc:
        logger.error(f"Malformed corpus {args.source}: {exc}")
        return 1
    except OSError as exc:
        logger.error(f"I/O failure: {exc}")
        return 1
    except UnicodeDecodeError as exc:
        logger.error(f"Cannot decode {args.source} as {exc.encoding}: {exc.reason}")
        return 1

    logger.info(
        f"{len(result.rules)} rules written to {args.tagged_output} "
        f"and {args.np_output}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
