"""
Command-line front end for arithparse.

    arithparse [--tokens] [-v] GRAMMAR EXPRESSION...

Prints the parsed tree in parenthesized prefix notation. Everything after
GRAMMAR is the expression, so one starting with '-' needs no quoting tricks.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import format_tokens, tokenize_string, LexerError
from .parser import PARSERS, ParseError, get_parser

logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2


def _grammar_help() -> str:
    lines = []
    for key, cls in sorted(PARSERS.items()):
        if key == cls.name:
            aliases = ", ".join(cls.aliases)
            lines.append(f"    {key:<18} {cls.description}" + (f" (aliases: {aliases})" if aliases else ""))
    return "\n".join(lines)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithparse",
        description="Parse an arithmetic expression and print its syntax tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Grammars:
{_grammar_help()}

Examples:
    arithparse prefix "+ 1 * 2 3"          # (+ 1 (* 2 3))
    arithparse post "1 2 3 * +"            # (+ 1 (* 2 3))
    arithparse in "1^-2^3*4 + -5*6*-7"     # precedence climbing
    arithparse in "-2^2"                   # (^ (- 2) 2)
    arithparse post 1 2 +                  # words are joined with spaces
        """
    )

    parser.add_argument('grammar', help='Grammar name or alias (case-insensitive)')
    parser.add_argument('expression', nargs=argparse.REMAINDER,
                        help='Expression to parse; options go before GRAMMAR')

    parser.add_argument('--tokens', action='store_true',
                        help='Print the token listing before the tree')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def _join_expression(words: List[str]) -> str:
    """Rejoin the expression words; a leading '--' separator is dropped."""
    if words and words[0] == "--":
        words = words[1:]
    return " ".join(words).strip()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    expression = _join_expression(args.expression)
    if not expression:
        arg_parser.error("the following arguments are required: expression")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        parser_class = get_parser(args.grammar)
    except KeyError as e:
        arg_parser.print_usage(sys.stderr)
        print(f"arithparse: error: {e.args[0]}", file=sys.stderr)
        return EXIT_USAGE

    try:
        if args.tokens:
            print(format_tokens(tokenize_string(expression)))
        ast = parser_class().parse(expression)
    except ParseError as e:
        logger.debug("parse failed", exc_info=True)
        print(f"error: {e.kind.value}: {e.detail}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except LexerError as e:
        print(f"error: InvalidToken: {e.diagnostic.message}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(ast.to_sexpr())
    return 0


if __name__ == "__main__":
    sys.exit(main())
