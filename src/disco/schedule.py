# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the release schedule facts the classification depends on.

The engine itself does not know which feature versions are released. The facts are supplied by
the caller or read from the ``[schedule]`` section of ``defaults.ini``.
"""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass, field

from disco.classification.dimensions import TermOfSupport
from disco.config.defaults import defaults
from disco.errors import ConfigurationError

logger: logging.Logger = logging.getLogger(__name__)

#: The feature versions with long term support published so far.
KNOWN_LTS_FEATURES = frozenset({8, 11, 17, 21, 25})

#: The number of feature versions between two long term support releases after the last known one.
LTS_CADENCE = 4


@dataclass(frozen=True)
class ScheduleFacts:
    """The schedule facts of the runtime platform at the time of a parse call."""

    #: The newest feature version that reached general availability.
    latest_ga_feature: int

    #: The feature version in early access, defaults to ``latest_ga_feature + 1``.
    next_ea_feature: int | None = None

    #: The feature version after the next one, defaults to ``latest_ga_feature + 2``.
    next_but_one_ea_feature: int | None = None

    lts_features: frozenset[int] = field(default=KNOWN_LTS_FEATURES)
    lts_cadence: int = LTS_CADENCE

    @classmethod
    def from_defaults(cls) -> ScheduleFacts:
        """Create the schedule facts from the ``[schedule]`` section of ``defaults.ini``.

        Raises
        ------
        ConfigurationError
            If a value in the section is not a positive integer.
        """
        section_name = "schedule"
        if not defaults.has_section(section_name):
            logger.debug("No [%s] section found, using the built-in schedule.", section_name)
            return cls(latest_ga_feature=max(KNOWN_LTS_FEATURES))

        try:
            latest = defaults.getint(section_name, "latest_ga_feature")
            next_ea = _optional_int(defaults.get(section_name, "next_ea_feature", fallback=""))
            next_but_one = _optional_int(defaults.get(section_name, "next_but_one_ea_feature", fallback=""))
            lts_features = frozenset(
                defaults.get_int_list(section_name, "lts_features", fallback=sorted(KNOWN_LTS_FEATURES))
            )
        except (ValueError, configparser.Error) as error:
            raise ConfigurationError(
                f"Invalid value in section [{section_name}] of the .ini configuration file."
            ) from error

        if latest < 1:
            raise ConfigurationError(f'The "latest_ga_feature" in section [{section_name}] must be positive.')
        return cls(
            latest_ga_feature=latest,
            next_ea_feature=next_ea,
            next_but_one_ea_feature=next_but_one,
            lts_features=lts_features,
        )

    @property
    def ea_features(self) -> tuple[int, int]:
        """Return the next and the next-but-one early access feature versions."""
        next_ea = self.next_ea_feature or self.latest_ga_feature + 1
        next_but_one = self.next_but_one_ea_feature or next_ea + 1
        return next_ea, next_but_one

    def is_upcoming(self, feature: int | None) -> bool:
        """Return True if ``feature`` is the next or the next-but-one unreleased feature version."""
        return feature is not None and feature in self.ea_features

    def is_lts(self, feature: int) -> bool:
        """Return True if ``feature`` has long term support.

        Every feature up to 8 is a long term release. After the last known long term release
        the cadence is extrapolated.
        """
        if feature <= 8 or feature in self.lts_features:
            return True
        last_known = max(self.lts_features, default=8)
        return feature > last_known and (feature - last_known) % self.lts_cadence == 0

    def is_mts(self, feature: int) -> bool:
        """Return True if ``feature`` had medium term support, i.e. an odd non-LTS feature from 13 on."""
        return feature >= 13 and not self.is_lts(feature) and feature % 2 != 0

    def is_sts(self, feature: int) -> bool:
        """Return True if ``feature`` has short term support."""
        return feature >= 9 and not self.is_lts(feature)

    def term_of_support(self, feature: int | None) -> TermOfSupport:
        """Return the raw term of support including MTS, or NOT_FOUND for an unusable feature."""
        if feature is None or feature < 1:
            return TermOfSupport.NOT_FOUND
        if self.is_lts(feature):
            return TermOfSupport.LTS
        if self.is_mts(feature):
            return TermOfSupport.MTS
        return TermOfSupport.STS


def _optional_int(value: str) -> int | None:
    value = value.strip()
    return int(value) if value else None
