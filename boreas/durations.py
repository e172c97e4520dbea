"""Helpers to read and write durations the way Go does (e.g. "1h30m",
"15m0s"), as that is the format users of the -wait option are used to.
"""

import click
import datetime
import decimal
import re
from typing import Optional

# Unit sizes in nanoseconds.
_units = {
    'ns': 1,
    'us': 10**3,
    'µs': 10**3,
    'μs': 10**3,
    'ms': 10**6,
    's': 10**9,
    'm': 60 * 10**9,
    'h': 3600 * 10**9,
}

_component = re.compile(r'(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)')
_number = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)$')


def parse_duration(value: str) -> datetime.timedelta:
    """Parse a duration string like "300ms", "1.5h" or "2h45m".

    A bare number is interpreted as a number of seconds. Components are
    summed in nanoseconds, the result is rounded to the microsecond.

    Args:
        value (str): The duration to parse.

    Returns:
        datetime.timedelta: The parsed duration.

    Raises:
        ValueError: When the value isn't a valid duration.
    """
    raw = value.strip()
    sign = 1
    if raw[:1] in ('-', '+'):
        sign = -1 if raw[0] == '-' else 1
        raw = raw[1:]

    if raw == '':
        raise ValueError("invalid duration %r" % (value))

    if _number.match(raw):
        return _from_nanoseconds(sign * decimal.Decimal(raw) * _units['s'])

    total = decimal.Decimal(0)
    pos = 0
    while pos < len(raw):
        match = _component.match(raw, pos)
        if match is None:
            raise ValueError("invalid duration %r" % (value))
        total += decimal.Decimal(match.group(1)) * _units[match.group(2)]
        pos = match.end()

    return _from_nanoseconds(sign * total)


def _from_nanoseconds(nanoseconds: decimal.Decimal) -> datetime.timedelta:
    return datetime.timedelta(microseconds=float(nanoseconds / 1000))


def format_duration(duration: datetime.timedelta) -> str:
    """Format a duration like Go does (e.g. "15m0s", "1h0m0s", "500ms",
    "500µs")."""
    total = duration.total_seconds()
    if total == 0:
        return '0s'

    sign = '-' if total < 0 else ''
    total = abs(total)

    if total < 0.001:
        return '%s%gµs' % (sign, round(total * 10**6, 3))

    if total < 1:
        return '%s%gms' % (sign, round(total * 1000, 6))

    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    seconds_str = '%gs' % (round(seconds, 6))

    if hours:
        return '%s%dh%dm%s' % (sign, hours, minutes, seconds_str)
    if minutes:
        return '%s%dm%s' % (sign, minutes, seconds_str)
    return sign + seconds_str


class Duration(click.ParamType):
    name = 'duration'

    def convert(self, value, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> datetime.timedelta:
        if isinstance(value, datetime.timedelta):
            return value

        try:
            return parse_duration(str(value))
        except ValueError:
            self.fail(
                '%r is not a valid duration (e.g. "90s", "15m", "1h30m").' %
                (value), param, ctx)


DURATION = Duration()
