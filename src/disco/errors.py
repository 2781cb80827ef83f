# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for disco."""


class DiscoError(Exception):
    """The base class for disco errors."""


class ConfigurationError(DiscoError):
    """Happens when there is an error in the configuration (.ini) file."""


class UnknownDistributionError(DiscoError):
    """Happens when no source adapter is registered for a distribution name."""


class InvalidPayloadError(DiscoError):
    """Happens when a payload cannot be decoded into JSON or text."""


class PayloadEntryError(DiscoError):
    """Happens when one entry of a vendor payload misses a field or has a field of the wrong type."""


class InvalidHTTPResponseError(DiscoError):
    """Happens when the HTTP response is invalid or unexpected."""
