#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import os

import pytest


@pytest.fixture(scope="session")
def artifacts_dir(root_dir):
    path = os.environ.get('HST_ARTIFACTS_DIR', os.path.join(root_dir, "exported-artifacts"))
    os.makedirs(path, exist_ok=True)
    return path
