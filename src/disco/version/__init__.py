# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This package contains the version number model and the vendor remap rules."""

from disco.version.remap import RemapRule, apply_remap
from disco.version.version_number import OutputFormat, VersionNumber, parse_raw

__all__ = ["OutputFormat", "RemapRule", "VersionNumber", "apply_remap", "parse_raw"]
