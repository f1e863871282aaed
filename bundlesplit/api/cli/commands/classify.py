"""Classify and plan commands - run module identifiers through the chunk policy."""

import argparse

from loguru import logger

from bundlesplit.chunking import ChunkClassifier
from ..utils.config_helpers import args_to_config
from ..utils.output import OutputFormatter, format_chunk, format_plan, print_section
from ..utils.validation import read_module_ids


def classify_command(args: argparse.Namespace) -> None:
    """Print the chunk assigned to each module identifier.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)
    config = args_to_config(args)
    classifier = ChunkClassifier.from_config(config.chunking)

    module_ids = read_module_ids(args.ids)
    logger.debug(f"Classifying {len(module_ids)} module identifiers")

    if args.json:
        formatter.json_output({module_id: classifier.classify(module_id) for module_id in module_ids})
        return

    for module_id in module_ids:
        print(f"{module_id}\t{format_chunk(classifier.classify(module_id))}")


def plan_command(args: argparse.Namespace) -> None:
    """Group module identifiers by chunk and print a summary.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)
    config = args_to_config(args)
    classifier = ChunkClassifier.from_config(config.chunking)

    module_ids = read_module_ids(None, input_file=args.input)
    plan = classifier.plan(module_ids)
    summary = format_plan(plan)

    if args.json:
        formatter.json_output(summary)
        return

    widths = [max([len("Chunk")] + [len(name) for name in summary]), 7]
    formatter.table_header(["Chunk", "Modules"], widths)
    for name, group in summary.items():
        formatter.table_row([name, str(group["count"])], widths)

    if args.verbose:
        for name, group in summary.items():
            print_section(name)
            for module_id in group["modules"]:
                print(module_id)


__all__: list[str] = ["classify_command", "plan_command"]
