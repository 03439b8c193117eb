#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import os

import pytest


def harvester_configured():
    return bool(os.environ.get('HST_HARVESTER_URL'))


def needs_harvester(item):
    # offline unit tests collected in the same run never reach the cluster fixtures
    return 'harvester_url' in getattr(item, 'fixturenames', ())


def pytest_collection_modifyitems(session, config, items):
    if harvester_configured():
        return

    skip_live = pytest.mark.skip(reason='HST_HARVESTER_URL is not set, no Harvester cluster to test against')
    for item in items:
        if needs_harvester(item):
            item.add_marker(skip_live)
