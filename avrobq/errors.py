# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class AvroBigQueryError(ValueError):
    """
    Base class for errors raised while reading Avro headers or converting records.
    """


class InvalidFormatError(AvroBigQueryError):
    """
    The bytes of an Avro container file header do not conform to the format.
    """


class FieldError(AvroBigQueryError):
    """
    An error tied to a single BigQuery field.
    """

    def __init__(
        self,
        message: str,
        field_name: str,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.expected = expected
        self.actual = actual


class SchemaMismatchError(FieldError):
    pass


class NullInRequiredError(FieldError):
    pass


class BadUnionError(FieldError):
    pass


class UnsupportedTypeError(FieldError):
    pass


class UnsupportedModeError(FieldError):
    pass
