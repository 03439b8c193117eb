#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

from dataclasses import dataclass
from typing import Optional

from hst_utils.constants import DEFAULT_NAMESPACE


@dataclass
class VmSpec:
    name: str
    cpu: str
    memory: str
    image: str
    namespace: str = DEFAULT_NAMESPACE


@dataclass
class VolumeSpec:
    name: str
    size: str
    image: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE


@dataclass
class ImageSpec:
    name: str
    size: Optional[str] = None
    url: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE
