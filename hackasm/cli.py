# hackasm/cli.py
import argparse
import logging
import sys

from hackasm.hack_assembler import AssemblerFileError, HackAssembler

logger = logging.getLogger(__name__)


def _build_parser():
    parser = argparse.ArgumentParser(prog="hackasm", description="Assemble Hack .asm source into .hack binary text.")
    parser.add_argument("input", nargs="?", help="source .asm file (prompted for if omitted)")
    parser.add_argument("output", nargs="?", help="destination .hack file (prompted for if omitted)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None):
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR,
                        format="%(levelname)s %(name)s: %(message)s")

    input_path = args.input
    if not input_path:
        print("Enter the input file name")
        input_path = input().strip()
    output_path = args.output
    if not output_path:
        print("Enter the output file name")
        output_path = input().strip()

    try:
        result = HackAssembler().assemble_file(input_path, output_path)
    except AssemblerFileError as e:
        logger.debug(f"File error: {e}")
        print("Error handling files", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    for err in result["errors"]:
        print(f"line {err['line']}: {err['message']}", file=sys.stderr)
    for warning in result["warnings"]:
        print(f"line {warning['line']}: warning: {warning['message']}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
