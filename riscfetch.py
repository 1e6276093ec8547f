import argparse
import logging
import os
import sys

from rich.console import Console

from rvisa import __version__
from rvisa.benchmark import run_benchmarks
from rvisa.hardware import DEFAULT_CPUINFO, HostReader
from rvisa.logos import STYLE_ALIASES, normalize_style
from rvisa.renderers import RenderOptions, renderer_registry
from rvisa.renderers.json import not_riscv_error
from rvisa.vendors import vendor_aliases

logger = logging.getLogger("riscfetch")


def cmd_show(args: argparse.Namespace) -> int:
    """Collect host information and print it in the selected format.

    The ISA string comes from ``--isa`` when given, otherwise from the
    cpuinfo file.  Without ``--isa`` the host must be RISC-V; on other
    machines an error is printed and 1 is returned.
    """
    if args.cpuinfo != DEFAULT_CPUINFO and not os.path.isfile(args.cpuinfo):
        sys.exit(f"Error: File not found: {args.cpuinfo}")

    fmt = "json" if args.json else args.format
    console = Console(no_color=args.no_color, highlight=False, emoji=False)

    reader = HostReader(cpuinfo=args.cpuinfo)
    if args.isa is None and not reader.is_riscv():
        logger.debug("Host architecture is not RISC-V")
        if fmt == "json":
            print(not_riscv_error())
        else:
            console.print("\n[bold red]Sorry, not RISC-V[/]\n")
        return 1

    report = reader.collect(isa=args.isa, riscv_only=args.riscv_only)
    options = RenderOptions(
        explain=args.explain,
        show_all=args.all,
        riscv_only=args.riscv_only,
        vendor=args.logo,
        style=normalize_style(args.style),
    )
    renderer = renderer_registry.create(fmt)
    output = renderer.render(report, options)

    if fmt != "text":
        print(output)
        if args.benchmark:
            logger.debug("Benchmarks only run with text output")
        return 0

    console.print(output, soft_wrap=True)
    if args.benchmark:
        console.print(renderer.render_benchmarks(run_benchmarks()), soft_wrap=True)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riscfetch",
        description="RISC-V architecture information display tool.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"riscfetch {__version__}",
    )
    parser.add_argument(
        "-l", "--logo",
        default="default",
        help="Vendor logo (%s)." % ", ".join(vendor_aliases()),
    )
    parser.add_argument(
        "--style",
        choices=list(STYLE_ALIASES),
        default="normal",
        help="Logo style: normal, small (compact) or none (off).",
    )
    parser.add_argument(
        "-e", "--explain",
        action="store_true",
        help="Show detailed explanation of each ISA extension.",
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Show all known extensions with marks for supported ones.",
    )
    parser.add_argument(
        "-b", "--benchmark",
        action="store_true",
        help="Run simple benchmarks after the text report.",
    )
    parser.add_argument(
        "-r", "--riscv-only",
        action="store_true",
        help="Show only RISC-V specific info (exclude OS, memory, uptime).",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output in JSON format (same as --format json).",
    )
    parser.add_argument(
        "-f", "--format",
        choices=renderer_registry.keys(),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--isa",
        metavar="STRING",
        help="Describe this ISA string instead of the host's; skips the architecture check.",
    )
    parser.add_argument(
        "--cpuinfo",
        metavar="FILE",
        default=DEFAULT_CPUINFO,
        help="Read this file instead of %s." % DEFAULT_CPUINFO,
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.set_defaults(func=cmd_show)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
