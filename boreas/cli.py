"""Command-line entry points: `boreas` invalidates a CloudFront distribution
and `boreas-find` looks up distribution IDs by CNAME.

Commands never exit the process by themselves: run() turns errors raised
while parsing arguments or executing a command into an exit code, and only
the *_main() functions call sys.exit().
"""

import botocore.exceptions
import click
import contextlib
import datetime
import sys
from .context import Context, pass_context
from .dispatcher import INVALIDATION_PENDING, INVALIDATION_SUBMITTED, INVALIDATION_WAIT_ENDED, INVALIDATION_WAIT_STARTED
from .durations import DURATION
from .exceptions import BoreasError, ConfigurationError
from .finder import find_by_name
from .invalidator import Invalidator
from typing import Any, List, Optional


@contextlib.contextmanager
def api_errors():
    """Convert errors raised by boto3 into errors the CLI knows how to show."""
    try:
        yield
    except (botocore.exceptions.ClientError,
            botocore.exceptions.BotoCoreError) as err:
        raise BoreasError(str(err)) from err


def report_progress(bctx: Context):
    """Print invalidation progress events on stderr."""
    def on_submitted(invalidation_id: str) -> bool:
        bctx.info('Invalidation ID: "%s"' % (invalidation_id))
        return True

    def on_wait_started(invalidation_id: str,
                        wait: datetime.timedelta) -> bool:
        bctx.progress('Invalidation in progress')
        return True

    def on_pending(invalidation_id: str) -> bool:
        bctx.progress('.')
        return True

    def on_wait_ended(invalidation_id: str, state) -> bool:
        bctx.progress('\n')
        return True

    bctx.dispatcher.on(INVALIDATION_SUBMITTED, on_submitted)
    bctx.dispatcher.on(INVALIDATION_WAIT_STARTED, on_wait_started)
    bctx.dispatcher.on(INVALIDATION_PENDING, on_pending)
    bctx.dispatcher.on(INVALIDATION_WAIT_ENDED, on_wait_ended)


@click.command(name='boreas')
@click.option('-dist',
              '--dist',
              'distribution_id',
              type=str,
              default='',
              envvar='BOREAS_DIST',
              help='CloudFront distribution ID')
@click.option(
    '-ref',
    '--ref',
    'caller_reference',
    type=str,
    default='',
    envvar='BOREAS_REF',
    help=("CloudFront 'CallerReference', a unique identifier for this " +
          "invalidation request. (default: Unix timestamp)"))
@click.option(
    '-wait',
    '--wait',
    type=DURATION,
    default='15m',
    envvar='BOREAS_WAIT',
    show_default=True,
    help=("Time out for waiting on invalidation to complete. Set to 0 to " +
          "exit without waiting."))
@click.argument('paths', nargs=-1, type=str)
@pass_context
def invalidate(bctx: Context, distribution_id: str, caller_reference: str,
               wait: datetime.timedelta, paths: List[str]):
    """Invalidate the given paths of a CloudFront distribution.

    Invalidation path defaults to '/*'.

    AWS credentials taken from ~/.aws/ or from "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY", and other AWS configuration environment
    variables.
    """
    if not distribution_id:
        raise ConfigurationError("distribution must be set")
    if wait < datetime.timedelta(0):
        bctx.warning("Negative wait duration, not waiting for completion.")

    report_progress(bctx)

    with api_errors():
        invalidator = Invalidator(bctx.api,
                                  distribution_id,
                                  paths=paths,
                                  caller_reference=caller_reference or None,
                                  wait=wait,
                                  dispatcher=bctx.dispatcher)
        invalidator.execute()


@click.command(name='boreas-find')
@click.argument('cname', nargs=1, type=str)
@pass_context
def find(bctx: Context, cname: str):
    """Prints the IDs of CloudFront distributions with matching CNAME aliases
    to standard out.
    """
    if cname == '':
        raise click.UsageError('A CNAME must be provided.',
                               ctx=click.get_current_context())

    with api_errors():
        ids = find_by_name(bctx.api, cname)

    for dist_id in ids:
        bctx.echo(dist_id)


def run(cmd: click.Command,
        args: Optional[List[str]] = None,
        obj: Optional[Context] = None) -> int:
    """Run a command and return the exit code the process should use.

    Args:
        cmd (click.Command): The command to run.
        args (Optional[List[str]]):
            Command-line arguments, sys.argv[1:] when not provided.
        obj (Optional[Context]):
            The boreas Context to use, a default one is created if empty.

    Returns:
        int: 0 on success, the exit code of the error otherwise.
    """
    extra: Any = {'obj': obj} if obj is not None else {}

    try:
        cmd.main(args=args,
                 prog_name=cmd.name,
                 standalone_mode=False,
                 **extra)
    except click.ClickException as err:
        err.show()
        return err.exit_code
    except click.Abort:
        click.echo('Aborted!', err=True)
        return 1

    return 0


def invalidate_main():
    sys.exit(run(invalidate))


def find_main():
    sys.exit(run(find))
