import click
from .cloudfront import CloudFrontAPI, new_api
from .dispatcher import Dispatcher
from typing import Optional


class Context(object):
    """Boreas context is the object carrying the CloudFront API used by the
    commands, as well as the dispatcher used to update the CLI based on
    invalidation events.

    It's attached to the click Context as its obj, such that commands don't
    need to build their API client by themselves and tests can inject a fake
    one.
    """
    def __init__(self,
                 api: Optional[CloudFrontAPI] = None,
                 dispatcher: Optional[Dispatcher] = None):
        """
        Args:
            api (Optional[CloudFrontAPI]):
                The CloudFront API. When it's not provided, a boto3-backed
                one is lazily created using the default AWS configuration.
            dispatcher (Optional[Dispatcher]):
                The event dispatcher used to report invalidation progress.
        """
        self._api = api
        self.dispatcher = dispatcher if dispatcher is not None else Dispatcher(
        )

    @property
    def api(self) -> CloudFrontAPI:
        if self._api is None:
            self._api = new_api()
        return self._api

    def echo(self, *args, **kwargs):
        """Call :func:`click.echo`."""
        return click.echo(*args, **kwargs)

    def info(self, message: str):
        """Output a colored info message (black on cyan) on stderr using :func:`click.secho`."""
        return click.secho('INFO: ' + message,
                           bg='cyan',
                           fg='black',
                           bold=True,
                           err=True)

    def warning(self, message: str):
        """Output a colored warning message (black on yellow) on stderr, using :func:`click.secho`."""
        return click.secho('WARNING: ' + message,
                           bg='yellow',
                           fg='black',
                           bold=True,
                           err=True)

    def progress(self, message: str):
        """Output a message on stderr without trailing newline."""
        return click.echo(message, nl=False, err=True)


pass_context = click.make_pass_decorator(Context, ensure=True)
