"""
arithexpr command-line shell.

    arithexpr "1 + 2 * 3"          # evaluate and print 7
    arithexpr --ast "-2^2"         # print (MINUS, (2, POW, 2))
    arithexpr -f expr.txt          # read the expression from a file
    arithexpr                      # interactive prompt

Author: arithexpr developers
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import FrontendConfig
from .lexer import Lexer, LexError
from .parser import Parser, ParseError
from .interpreter import Interpreter, EvaluationError

logger = logging.getLogger(__name__)

PROMPT = "arithexpr > "
FRONTEND_ERRORS = (LexError, ParseError, EvaluationError)


def run_source(source: str, config: FrontendConfig, mode: str, out: TextIO) -> None:
    """
    Lex, parse and evaluate one expression and print the requested view.

    Raises:
        LexError, ParseError, EvaluationError
    """
    tokens = Lexer(source, config.filename).tokenize()
    if mode == "tokens":
        print(" ".join(token.represent() for token in tokens), file=out)
        return

    node = Parser(tokens, config.max_depth).parse()
    if mode == "ast":
        print(node.represent(), file=out)
        return

    print(Interpreter(config.max_int_exponent).evaluate(node), file=out)


def repl(config: FrontendConfig, mode: str, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    """Read expressions line by line until EOF or `exit`; errors do not end the session."""
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return 0

        source = line.strip()
        if not source:
            continue
        if source in ("exit", "quit"):
            return 0

        try:
            run_source(source, config, mode, out)
        except FRONTEND_ERRORS as e:
            err.write(str(e))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithexpr",
        description="Parse and evaluate arithmetic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    arithexpr "2 + 3 * 4"        # Evaluate an expression
    arithexpr --ast "2^3^2"      # Show the parsed tree
    arithexpr --tokens "1.5*2"   # Show the token list
    arithexpr -f input.txt       # Evaluate the contents of a file
    arithexpr                    # Start the interactive prompt
        """
    )

    parser.add_argument('expression', nargs='?',
                        help='Expression to evaluate (omit to start the prompt)')
    parser.add_argument('-f', '--file',
                        help='Read the expression from a file')

    view = parser.add_mutually_exclusive_group()
    view.add_argument('--ast', action='store_true',
                      help='Print the parsed tree instead of the value')
    view.add_argument('--tokens', action='store_true',
                      help='Print the token list instead of the value')

    parser.add_argument('--max-depth', type=int,
                        help='Maximum nesting depth accepted by the parser')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Main entry point; returns the process exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.expression is not None and args.file:
        parser.error("give either an expression or --file, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    filename = args.file or ("<argv>" if args.expression is not None else "<stdin>")
    try:
        config = FrontendConfig.from_env(filename=filename, max_depth=args.max_depth)
    except ValueError as e:
        parser.error(str(e))

    mode = "ast" if args.ast else "tokens" if args.tokens else "value"

    if args.expression is None and not args.file:
        return repl(config, mode, stdin, stdout, stderr)

    try:
        if args.file:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        else:
            source = args.expression
    except OSError as e:
        stderr.write(f"arithexpr: cannot read {args.file}: {e.strerror}\n")
        return 2

    try:
        run_source(source, config, mode, stdout)
    except FRONTEND_ERRORS as e:
        logger.debug("%s raised for %s", type(e).__name__, filename)
        stderr.write(str(e))
        return 1

    return 0
