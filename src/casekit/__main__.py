# casekit/__main__.py
import argparse
import logging
import sys

from casekit.cases import convert
from casekit.entities import CaseStyle, WordOptions
from casekit.functions import normalize_whitespace
from casekit.prompts import get_prompt, list_prompts, render_prompt

logger = logging.getLogger('casekit')


def _read_input(args, stdin=None):
    """read from --text, --file, or STDIN"""
    if args.text is not None:
        return args.text
    if args.file is not None:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    return (stdin or sys.stdin).read()


def _convert(args, out, stdin=None):
    style = CaseStyle.parse(args.style)
    options = WordOptions(
        unicode=not args.ascii,
        split_camel=args.split_camel,
        strip_accents=args.strip_accents,
    )
    lines = [line for line in _read_input(args, stdin).splitlines() if line.strip()]
    logger.debug("converting %d line(s) to %s", len(lines), style.label)
    for line in lines:
        print(convert(line, style, options), file=out)


def _prompt(args, out, stdin=None):
    out.write(render_prompt(args.name, language=args.language))


def _prompts(args, out, stdin=None):
    for name in list_prompts():
        print(f"{name:<10} {normalize_whitespace(get_prompt(name).description)}", file=out)


def build_parser():
    parser = argparse.ArgumentParser(prog="casekit", description="convert strings between case styles")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("convert", help="convert each input line to a case style")
    p.add_argument("style", help="camel, kebab or dot")
    p.add_argument("-t", "--text", help="raw text to convert")
    p.add_argument("-f", "--file", help="path to a text file")
    p.add_argument("--ascii", action="store_true", help="only ASCII letters and digits form words")
    p.add_argument("--split-camel", action="store_true", help="split camelCase and acronym boundaries")
    p.add_argument("--strip-accents", action="store_true", help="remove diacritics before converting")
    p.set_defaults(handler=_convert)

    p = commands.add_parser("prompt", help="print a prompt describing a converter")
    p.add_argument("name", help="prompt name, see `casekit prompts`")
    p.add_argument("--language", default="JavaScript", help="language the function should be written in")
    p.set_defaults(handler=_prompt)

    p = commands.add_parser("prompts", help="list available prompts")
    p.set_defaults(handler=_prompts)
    return parser


def main(argv=None, out=None, stdin=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.handler(args, out or sys.stdout, stdin)
    except (KeyError, ValueError, OSError) as err:
        # KeyError repr-quotes its message
        message = err.args[0] if isinstance(err, KeyError) and err.args else err
        print(f"casekit: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
