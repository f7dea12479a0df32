"""Command-line interface for llmcompare."""
import sys
import logging

import click

from . import __version__
from .ai.session import CompareSession
from .core.exceptions import InitializationError
from .core.models import Config
from .utils.console_base import ConsoleManager, THEMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging and show tracebacks on errors')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.version_option(version=__version__, prog_name='llmcompare')
@click.pass_context
def main(ctx: click.Context, debug: bool, theme: str) -> None:
    """Compare two files with an LLM from the terminal."""
    setup_logging(debug)
    ctx.obj = Config(debug=debug, theme=theme)


@main.command()
@click.pass_obj
def compare(config: Config) -> None:
    """Compare two files and get streaming LLM output."""
    console = ConsoleManager(theme=config.theme)

    try:
        CompareSession(config, ui=console).run()

    except KeyboardInterrupt:
        console.print_error("PROCESS TERMINATED BY USER")
        sys.exit(1)

    except InitializationError as e:
        console.print_error(str(e))
        sys.exit(1)

    except Exception as e:
        console.print_error(f"> CRITICAL ERROR: {e}")
        if config.debug:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
