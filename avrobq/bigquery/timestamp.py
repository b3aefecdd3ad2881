# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MICROS_PER_SECOND = 1_000_000


def format_timestamp(micros: int) -> str:
    """
    Formats microseconds since the Unix epoch the way BigQuery's JSON export does.

    The fraction has up to six digits with trailing zeros dropped, and is omitted
    entirely on a whole second::

        >>> format_timestamp(1452062291123456)
        '2016-01-06 06:38:11.123456 UTC'
        >>> format_timestamp(1_500_000)
        '1970-01-01 00:00:01.5 UTC'
        >>> format_timestamp(-1)
        '1969-12-31 23:59:59.999999 UTC'

    :raises OverflowError: If the instant falls outside years 0001 to 9999.
    """
    seconds, subsecond = divmod(micros, MICROS_PER_SECOND)
    dt = EPOCH + timedelta(seconds=seconds)
    day_and_time = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if subsecond == 0:
        return f"{day_and_time} UTC"
    fraction = f"{subsecond:06d}".rstrip("0")
    return f"{day_and_time}.{fraction} UTC"


def datetime_to_micros(value: datetime) -> int:
    """
    Converts a datetime to microseconds since the Unix epoch; naive values are UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - EPOCH
    return (delta.days * 86400 + delta.seconds) * MICROS_PER_SECOND + delta.microseconds
