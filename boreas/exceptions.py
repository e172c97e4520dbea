import click
import datetime
from .durations import format_duration
from typing import Optional


class BoreasError(click.ClickException):
    def __init__(self,
                 message: str,
                 click_ctx: Optional[click.Context] = None,
                 exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code
        self.click_ctx = click_ctx

    def show(self, file=None):
        color = self.click_ctx.color if self.click_ctx else None
        msg = click.style('Error: %s' % self.format_message(),
                          fg='bright_white',
                          bg='red')
        click.echo(msg, file=file, color=color, err=file is None)


class ConfigurationError(BoreasError):
    """ConfigurationError is raised when an invalidation request can't be
    submitted because of its settings (e.g. no distribution ID).
    """
    def __init__(self, message: str,
                 click_ctx: Optional[click.Context] = None):
        super().__init__(message, click_ctx=click_ctx, exit_code=3)


class InvalidationTimeoutError(BoreasError):
    """InvalidationTimeoutError is raised when an invalidation hasn't
    completed before the configured wait duration elapsed.
    """
    def __init__(self, wait: datetime.timedelta, invalidation_id: str):
        super().__init__("wait timeout of %s exceeded" %
                         (format_duration(wait)))
        self.wait = wait
        self.invalidation_id = invalidation_id
