"""Command line entry point for the MagicQuill client."""

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from magicquill_client import config
from magicquill_client.client import MagicQuillClient
from magicquill_client.errors import MagicQuillError
from magicquill_client.services.checklist import run_checklist
from magicquill_client.services.images import (data_uri_to_image,
                                               file_to_data_uri, load_image)

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="magicquill-client", description="Call a MagicQuill backend over HTTP.")
    parser.add_argument(
        "--server",
        default=config.MAGICQUILL_SERVER,
        help="Base URL of the MagicQuill backend.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.REQUEST_TIMEOUT,
        help="Request timeout in seconds.",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    guess = subparsers.add_parser("guess-prompt", help="Infer a prompt for a drawing.")
    guess.add_argument("image", type=Path)
    guess.add_argument("--color", type=Path, help="Image with the added color strokes.")
    guess.add_argument("--edge", type=Path, help="Mask with the added edge strokes.")

    background = subparsers.add_parser("process-background", help="Resize a background image.")
    background.add_argument("image", type=Path)
    background.add_argument("-o", "--output", type=Path, help="Write the resized image here instead of printing the data URI.")

    checklist = subparsers.add_parser("checklist", help="Run the endpoint checklist against the backend.")
    checklist.add_argument("image", type=Path)
    checklist.add_argument("--resolutions", type=int, nargs="+", default=config.CHECKLIST_RESOLUTIONS)
    checklist.add_argument("--target-resolution", type=int, default=config.BACKGROUND_RESOLUTION)
    checklist.add_argument("--generate", action="store_true", help="Also check the proposed generate endpoint.")
    checklist.add_argument("--prompt", default="")

    return parser


def run(args, client: MagicQuillClient) -> int:
    if args.command == "guess-prompt":
        prompt = client.guess_prompt(
            file_to_data_uri(args.image),
            add_color_image=file_to_data_uri(args.color) if args.color else None,
            add_edge_image=file_to_data_uri(args.edge) if args.edge else None,
        )
        print(prompt)
        return 0

    if args.command == "process-background":
        result = client.process_background_img(file_to_data_uri(args.image))
        if args.output:
            data_uri_to_image(result).save(args.output)
            print(f"Saved resized background to {args.output}")
        else:
            print(result)
        return 0

    if args.command == "checklist":
        results = run_checklist(
            client,
            load_image(args.image),
            input_resolutions=args.resolutions,
            target_resolution=args.target_resolution,
            include_generate=args.generate,
            prompt=args.prompt,
        )
        for result in results:
            print(f"[{'PASS' if result.passed else 'FAIL'}] {result.name}: {result.detail}")
        return 0 if all(result.passed for result in results) else 1

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    with MagicQuillClient(args.server, timeout=args.timeout) as client:
        try:
            return run(args, client)
        except MagicQuillError as e:
            logger.error(str(e))
            return 2


if __name__ == "__main__":
    sys.exit(main())
