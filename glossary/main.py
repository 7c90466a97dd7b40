"""Command-line entrypoint for the glossary builder."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from models import GlossaryConfig
from services import GlossaryService
from storage import PageStorage


def _prompt(ask: Callable[[str], str], message: str, current: Optional[str]) -> str:
    if current:
        return current
    return ask(message).strip()


def run(config: GlossaryConfig) -> int:
    if not config.input_path or not config.output_dir:
        print("Glossary build failed: input file and output folder are required", file=sys.stderr)
        return 1

    try:
        storage = PageStorage(config.output_dir, encoding=config.encoding)
        service = GlossaryService(config=config, storage=storage)
        summary = service.build_from_file(config.input_path)
    except (OSError, ValueError) as exc:
        print(f"Glossary build failed: {exc}", file=sys.stderr)
        return 1

    print(f"Glossary index: {summary.index_path}")
    return 0


def main(ask: Callable[[str], str] = input) -> int:
    config = GlossaryConfig.from_env()
    input_path = _prompt(ask, "Enter input file (.txt): ", config.input_path)
    output_dir = _prompt(ask, "Enter folder name for save: ", config.output_dir)
    config = config.model_copy(update={"input_path": input_path, "output_dir": output_dir})
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
