# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""The adapters package contains the supported distribution source adapters."""

from disco.classification.dimensions import Distro
from disco.errors import UnknownDistributionError

from .base import SourceAdapter
from .bisheng import BiShengAdapter
from .corretto import CorrettoAdapter
from .debian import DebianAdapter
from .dragonwell import DragonwellAdapter
from .graalvm_ce import GraalVmCe8Adapter, GraalVmCe11Adapter, GraalVmCe17Adapter
from .graalvm_community import GraalVmCommunityAdapter
from .jetbrains import JetBrainsAdapter
from .kona import KonaAdapter
from .liberica import LibericaAdapter
from .liberica_native import LibericaNativeAdapter
from .mandrel import MandrelAdapter
from .microsoft import MicrosoftAdapter
from .ojdk_build import OjdkBuildAdapter
from .oracle import OracleAdapter
from .oracle_open_jdk import OracleOpenJdkAdapter
from .redhat import RedHatAdapter
from .sap_machine import SapMachineAdapter
from .semeru_certified import SemeruCertifiedAdapter
from .temurin import AojOpenJ9Adapter, TemurinAdapter
from .trava import TravaAdapter
from .zulu import ZuluAdapter
from .zulu_prime import ZuluPrimeAdapter

# The list of supported distributions. The order of the list determines the order
# in which the adapters are listed and their records are reported.
SOURCE_ADAPTERS: list[SourceAdapter] = [
    ZuluAdapter(),
    ZuluPrimeAdapter(),
    TemurinAdapter(),
    AojOpenJ9Adapter(),
    SemeruCertifiedAdapter(),
    CorrettoAdapter(),
    OracleOpenJdkAdapter(),
    OracleAdapter(),
    SapMachineAdapter(),
    LibericaAdapter(),
    LibericaNativeAdapter(),
    MicrosoftAdapter(),
    DragonwellAdapter(),
    GraalVmCommunityAdapter(),
    GraalVmCe17Adapter(),
    GraalVmCe11Adapter(),
    GraalVmCe8Adapter(),
    MandrelAdapter(),
    KonaAdapter(),
    OjdkBuildAdapter(),
    TravaAdapter(),
    JetBrainsAdapter(),
    RedHatAdapter(),
    DebianAdapter(),
    BiShengAdapter(),
]


def get_adapter(name: str) -> SourceAdapter:
    """Return the registered adapter of a distribution name or one of its synonyms.

    Raises
    ------
    UnknownDistributionError
        If no adapter is registered for ``name``.
    """
    distro = Distro.from_text(name)
    for adapter in SOURCE_ADAPTERS:
        if adapter.distro is distro:
            return adapter
    raise UnknownDistributionError(f"No source adapter is registered for the distribution {name!r}.")


def load_adapter_defaults() -> None:
    """Load the .ini configuration of every registered adapter.

    Raises
    ------
    ConfigurationError
        If the section of an adapter is invalid.
    """
    for adapter in SOURCE_ADAPTERS:
        adapter.load_defaults()
