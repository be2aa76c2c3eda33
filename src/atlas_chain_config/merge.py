"""
Merge engine: layer a batch of full or partial updates over a baseline registry.

The baseline is never mutated. Networks touched by the batch get fresh version
maps in the result; untouched networks are shared with the baseline, which is
safe because version maps are read-only views and records are frozen.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .codec import update_from_json
from .errors import IncompleteNewEntryError
from .models import NetworkId, PartialVersionRecord, RecordUpdate, Version, VersionRecord
from .validation import coerce_network_id

logger = logging.getLogger(__name__)

RegistryData = Mapping[NetworkId, Mapping[Version, VersionRecord]]
UpdateBatch = Mapping[NetworkId | str, Mapping[Version, RecordUpdate | Mapping[str, object]]]


def _as_update(value: RecordUpdate | Mapping[str, object]) -> RecordUpdate:
    if isinstance(value, (VersionRecord, PartialVersionRecord)):
        return value
    return update_from_json(value)


def merge_chain_configs(baseline: RegistryData, updates: UpdateBatch) -> RegistryData:
    """
    Return a new `network_id -> version -> record` mapping with `updates` applied.

    Per (network_id, version) in `updates`:
    - a VersionRecord replaces an existing entry wholesale, or creates a new one
      (the network is created implicitly);
    - a PartialVersionRecord is merged field by field into an existing entry,
      `contracts` and `eip712_domain` independently;
    - a PartialVersionRecord for a missing entry raises IncompleteNewEntryError.

    Raw JSON-shaped records are accepted and classified by structural completeness.
    Baseline and update network ids may be ints or decimal strings; the result is
    keyed by int. Empty partial updates of existing entries leave them untouched.
    The batch is all-or-nothing: on the first error nothing is returned and the
    baseline is untouched.
    """
    result: dict[NetworkId, Mapping[Version, VersionRecord]] = {
        coerce_network_id(network_id): versions for network_id, versions in baseline.items()
    }
    known_networks = frozenset(result)
    touched: dict[NetworkId, dict[Version, VersionRecord]] = {}

    for raw_network_id, versions in updates.items():
        network_id = coerce_network_id(raw_network_id)
        for version, raw_update in versions.items():
            version = str(version)
            update = _as_update(raw_update)
            existing = touched.get(network_id, result.get(network_id, {})).get(version)

            if isinstance(update, PartialVersionRecord) and update.is_empty:
                if existing is None:
                    raise IncompleteNewEntryError(
                        network_id, version, new_network=network_id not in known_networks
                    )
                logger.debug(
                    "Skipping empty partial update for chainId %s version %s",
                    network_id,
                    version,
                )
                continue

            if network_id not in touched:
                touched[network_id] = dict(result.get(network_id, {}))
            target = touched[network_id]

            if isinstance(update, VersionRecord):
                logger.debug(
                    "%s chainId %s version %s",
                    "Replacing" if existing is not None else "Adding",
                    network_id,
                    version,
                )
                target[version] = update
            elif existing is not None:
                logger.debug(
                    "Merging partial update into chainId %s version %s", network_id, version
                )
                target[version] = existing.merged(update)
            else:
                raise IncompleteNewEntryError(
                    network_id, version, new_network=network_id not in known_networks
                )

    for network_id, versions in touched.items():
        if versions:
            result[network_id] = MappingProxyType(versions)

    return MappingProxyType(result)
