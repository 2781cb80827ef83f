# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides functions to manage default values."""

import configparser
import logging
import os
import pathlib
import shutil

logger: logging.Logger = logging.getLogger(__name__)


class ConfigParser(configparser.ConfigParser):
    """This class extends ConfigParser with useful methods."""

    def get_list(
        self,
        section: str,
        item: str,
        delimiter: str | None = None,
        fallback: list | None = None,
        duplicated_ok: bool = False,
    ) -> list:
        """Parse and return a list of strings from an item in ``defaults.ini``.

        If ``delimiter`` is not set, the strings are split on any whitespace character and empty
        strings are discarded. Unless ``duplicated_ok`` is True, duplicated values are removed while
        the order of first appearance is kept.

        Parameters
        ----------
        section : str
            The section in ``defaults.ini``.
        item : str
            The item to parse the list.
        delimiter : str | None
            The delimiter used to split the strings.
        fallback : list | None
            The fallback value in case of errors.
        duplicated_ok : bool
            If True allow duplicate values.

        Returns
        -------
        list
            The result list of strings or the fallback if errors.

        Examples
        --------
        Given the following ``defaults.ini``

        .. code-block::

            [schedule]
            lts_features =
                8 11 17
                21

        >>> config_parser.get_list("schedule", "lts_features")
        ['8', '11', '17', '21']
        """
        try:
            value = self.get(section, item)
        except (configparser.NoOptionError, configparser.NoSectionError) as error:
            logger.debug(error)
            return fallback or []

        content = [part.strip() for part in value.split(sep=delimiter)]
        content = [part for part in content if part]
        if duplicated_ok:
            return content
        return list(dict.fromkeys(content))

    def get_int_list(self, section: str, item: str, fallback: list[int] | None = None) -> list[int]:
        """Parse and return a list of integers from an item in ``defaults.ini``.

        Raises
        ------
        ValueError
            If one of the values is not an integer.
        """
        values = self.get_list(section, item)
        if not values:
            return fallback or []
        return [int(value) for value in values]


defaults = ConfigParser()


def load_defaults(user_config_path: str) -> bool:
    """Read the default values from ``defaults.ini`` file and store them in the defaults global object.

    Parameters
    ----------
    user_config_path : str
        The path to the user's defaults configuration file.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    curr_dir = pathlib.Path(__file__).parent.absolute()
    config_files = [os.path.join(curr_dir, "defaults.ini")]
    if user_config_path and os.path.isfile(user_config_path):
        config_files.append(user_config_path)

    try:
        defaults.read(config_files, encoding="utf8")
        return True
    except (configparser.Error, ValueError) as error:
        logger.error("Failed to read the defaults.ini files.")
        logger.error(error)
        return False


def create_defaults(output_path: str, cwd_path: str) -> bool:
    """Create the ``defaults.ini`` file in the output directory for end users.

    Parameters
    ----------
    output_path : str
        The path where the ``defaults.ini`` will be created.
    cwd_path : str
        The path to the current working directory.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    src_path = os.path.join(pathlib.Path(__file__).parent.absolute(), "defaults.ini")
    dest_path = os.path.join(output_path, "defaults.ini")

    # ConfigParser.write does not preserve the comments, so the file is copied directly.
    try:
        shutil.copy2(src_path, dest_path)
    except (OSError, shutil.Error) as error:
        logger.error("Failed to create %s: %s.", os.path.relpath(dest_path, cwd_path), error)
        return False

    logger.info("Dumped the default values in %s.", os.path.relpath(dest_path, cwd_path))
    return True
