# Copyright (c) Meta Platforms, Inc. and affiliates.
import logging
import xml.etree.ElementTree as ET
from typing import Optional

import typer
from pydantic import ValidationError

from seqcursor import SeqCursorError
from seqcursor.args import WalkArgs, load_config
from seqcursor.iterators.tree_iterator import TreeIterator
from seqcursor.logger import init_logger

logger = logging.getLogger(__name__)

app = typer.Typer()


def _element_depths(root: ET.Element) -> dict[ET.Element, int]:
    depths = {root: 0}
    # iter() is document order, so a parent is always seen before its children
    for parent in root.iter():
        for child in parent:
            depths[child] = depths[parent] + 1
    return depths


def walk(args: WalkArgs) -> list[str]:
    iterator = args.build()
    lines = []
    depths = None
    if isinstance(iterator, TreeIterator) and len(iterator) > 0:
        depths = _element_depths(iterator.peek())
    for loop in range(args.loops):
        if loop > 0:
            iterator.reset()
        while iterator.has_next():
            item = iterator.next()
            if depths is None:
                lines.append(str(item))
            elif args.tag is None or item.tag == args.tag:
                lines.append("  " * depths[item] + item.tag)
    logger.info(f"Visited {len(iterator)} items {args.loops} time(s)")
    return lines


def _build_args(source: str, **kwargs) -> WalkArgs:
    try:
        return WalkArgs(**kwargs)
    except ValidationError as e:
        typer.echo(f"Invalid config {source}:\n{e}", err=True)
        raise typer.Exit(code=1)


def _run(args: WalkArgs):
    init_logger(args.log_level)
    try:
        lines = walk(args)
    except SeqCursorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for line in lines:
        typer.echo(line)


@app.command()
def drain(items: list[str], loops: int = 1, log_level: str = "WARNING"):
    _run(_build_args("drain", items=items, loops=loops, log_level=log_level))


@app.command()
def tree(
    xml_path: str,
    tag: Optional[str] = None,
    loops: int = 1,
    log_level: str = "WARNING",
):
    _run(
        _build_args(
            xml_path, xml_path=xml_path, tag=tag, loops=loops, log_level=log_level
        )
    )


@app.command()
def run(config_path: str, overrides: Optional[list[str]] = typer.Argument(None)):
    try:
        conf_dict = load_config(config_path, overrides)
    except SeqCursorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _run(_build_args(config_path, **conf_dict))


def main():
    app()


if __name__ == "__main__":
    main()
